"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

STORE_BACKENDS = ("sqlite", "memory")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_cache_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate cache parameters."""
        errors = []

        if "ttl_ms" in params:
            value = params["ttl_ms"]
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                errors.append(ValidationError(
                    field="ttl_ms",
                    message="Must be a positive integer",
                    value=value
                ))

        for key_field in ("dataset_key", "results_prefix", "timestamp_suffix"):
            if key_field in params:
                value = params[key_field]
                if not isinstance(value, str) or not value:
                    errors.append(ValidationError(
                        field=key_field,
                        message="Must be a non-empty string",
                        value=value
                    ))

        if (
            isinstance(params.get("dataset_key"), str)
            and params.get("dataset_key") == params.get("results_prefix")
        ):
            errors.append(ValidationError(
                field="results_prefix",
                message="Must differ from dataset_key",
                value=params.get("results_prefix")
            ))

        return errors

    @staticmethod
    def validate_search_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate search parameters."""
        errors = []

        if "min_term_length" in params:
            value = params["min_term_length"]
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                errors.append(ValidationError(
                    field="min_term_length",
                    message="Must be an integer >= 1",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_pagination_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate pagination parameters."""
        errors = []

        if "page_size" in params:
            value = params["page_size"]
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                errors.append(ValidationError(
                    field="page_size",
                    message="Must be a positive integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_store_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate key-value store parameters."""
        errors = []

        if "backend" in params:
            value = params["backend"]
            if value not in STORE_BACKENDS:
                errors.append(ValidationError(
                    field="backend",
                    message=f"Must be one of {', '.join(STORE_BACKENDS)}",
                    value=value
                ))

        if "db_path" in params:
            value = params["db_path"]
            if not isinstance(value, str) or not value:
                errors.append(ValidationError(
                    field="db_path",
                    message="Must be a non-empty string",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "cache" in config:
            errors.extend(ConfigValidator.validate_cache_params(config["cache"]))

        if "search" in config:
            errors.extend(ConfigValidator.validate_search_params(config["search"]))

        if "pagination" in config:
            errors.extend(ConfigValidator.validate_pagination_params(config["pagination"]))

        if "store" in config:
            errors.extend(ConfigValidator.validate_store_params(config["store"]))

        return errors
