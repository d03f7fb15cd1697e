"""Tests for the key-value stores."""

import sqlite3
import pytest
from pathlib import Path
from unittest.mock import patch

from catalog_search.errors import PersistenceError
from catalog_search.persistence.kv_store import InMemoryStore, SQLiteStore, create_store


class TestInMemoryStore:
    """Test InMemoryStore."""

    def test_get_missing_key(self):
        assert InMemoryStore().get("absent") is None

    def test_set_then_get(self):
        store = InMemoryStore()
        store.set("k", "v")
        assert store.get("k") == "v"

    def test_set_overwrites(self):
        store = InMemoryStore({"k": "old"})
        store.set("k", "new")
        assert store.get("k") == "new"
        assert len(store) == 1

    def test_keys_with_prefix(self):
        store = InMemoryStore({"a_1": "x", "a_2": "y", "b_1": "z"})
        assert sorted(store.keys("a_")) == ["a_1", "a_2"]


class TestSQLiteStore:
    """Test SQLiteStore."""

    @pytest.fixture
    def db_path(self, tmp_path: Path) -> str:
        return str(tmp_path / "cache.db")

    def test_init_creates_table(self, db_path):
        store = SQLiteStore(db_path)

        assert Path(db_path).exists()
        with store._get_connection() as conn:
            tables = [row[0] for row in conn.execute(
                "SELECT name FROM sqlite_master WHERE type='table'"
            )]
        assert "kv" in tables

    def test_get_missing_key(self, db_path):
        assert SQLiteStore(db_path).get("absent") is None

    def test_set_then_get(self, db_path):
        store = SQLiteStore(db_path)
        store.set("searchCache", "[]")
        assert store.get("searchCache") == "[]"

    def test_set_overwrites(self, db_path):
        store = SQLiteStore(db_path)
        store.set("k", "1")
        store.set("k", "2")

        assert store.get("k") == "2"
        assert store.keys() == ["k"]

    def test_values_survive_reopen(self, db_path):
        SQLiteStore(db_path).set("k", "persisted")
        assert SQLiteStore(db_path).get("k") == "persisted"

    def test_keys_with_prefix(self, db_path):
        store = SQLiteStore(db_path)
        for key in ("searchResultsCache_go", "searchResultsCache_si", "searchCache"):
            store.set(key, "[]")

        assert store.keys("searchResultsCache_") == ["searchResultsCache_go", "searchResultsCache_si"]
        assert len(store.keys()) == 3

    def test_sqlite_error_raises_persistence_error(self, db_path):
        store = SQLiteStore(db_path)
        with patch("catalog_search.persistence.kv_store.sqlite3.connect",
                   side_effect=sqlite3.OperationalError("disk I/O error")):
            with pytest.raises(PersistenceError) as exc_info:
                store.get("k")

        assert exc_info.value.target == db_path
        assert exc_info.value.recoverable is False


class TestCreateStore:
    """Test store factory."""

    def test_memory_backend(self):
        assert isinstance(create_store("memory"), InMemoryStore)

    def test_sqlite_backend(self, tmp_path: Path):
        store = create_store("sqlite", str(tmp_path / "x.db"))
        assert isinstance(store, SQLiteStore)

    def test_unknown_backend(self):
        with pytest.raises(ValueError):
            create_store("redis")
