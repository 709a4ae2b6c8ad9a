"""Configuration management using Pydantic Settings.

This module provides type-safe configuration management with automatic
environment variable loading and validation using Pydantic Settings v2.

The configuration is organized into logical groups:
- LoggingConfig: Logging levels, files, and debugging options
- CirculationConfig: Catalog capacity, borrow limits and loan period
"""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingConfig(BaseModel):
    """Logging configuration for console and file output."""

    console_level: str = "INFO"
    file_level: str = "DEBUG"
    log_file: Path = Path("circulation.log")
    file_logging: bool = False
    real_time_debug: bool = True


class CirculationConfig(BaseModel):
    """Circulation rule limits applied by the library service."""

    min_title_length: int = Field(default=3, ge=1)
    min_copies_per_addition: int = Field(default=1, ge=1)
    max_copies_per_addition: int = Field(default=100, ge=1)
    max_total_copies: int = Field(default=500, ge=1)  # Whole-catalog capacity
    max_active_borrows: int = Field(default=5, ge=1)
    loan_period_days: int = Field(default=14, ge=1)

    @model_validator(mode="after")
    def check_copy_range(self) -> "CirculationConfig":
        """Reject an empty per-addition copy range."""
        if self.min_copies_per_addition > self.max_copies_per_addition:
            raise ValueError(
                "min_copies_per_addition cannot exceed max_copies_per_addition"
            )
        return self


class Settings(BaseSettings):
    """Main application settings with environment variable support.

    Environment variables use nested naming, e.g. LOGGING__CONSOLE_LEVEL or
    CIRCULATION__MAX_ACTIVE_BORROWS. Keyword overrides additionally accept the
    flat names, e.g. max_active_borrows=3 or library_capacity=800.

    The .env file is automatically loaded for development convenience.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    # Nested configuration groups
    logging: LoggingConfig = LoggingConfig()
    circulation: CirculationConfig = CirculationConfig()

    @model_validator(mode="before")
    @classmethod
    def transform_flat_keys(cls, data: Any) -> Any:
        """Transform flat settings keys to the nested structure.

        Handles flat names (MAX_ACTIVE_BORROWS) and maps them to the
        nested structure expected by the models (circulation.max_active_borrows).
        """
        if not isinstance(data, dict):
            return data

        transformed: dict[str, dict[str, Any]] = {}

        log_mapping = {
            "console_log_level": "console_level",
            "file_log_level": "file_level",
            "log_file": "log_file",
            "file_logging": "file_logging",
            "log_real_time_debug": "real_time_debug",
        }
        for env_key, field_key in log_mapping.items():
            if env_key in data:
                transformed.setdefault("logging", {})[field_key] = data.pop(env_key)

        circulation_mapping = {
            "min_title_length": "min_title_length",
            "min_copies_per_addition": "min_copies_per_addition",
            "max_copies_per_addition": "max_copies_per_addition",
            "library_capacity": "max_total_copies",
            "max_total_copies": "max_total_copies",
            "max_active_borrows": "max_active_borrows",
            "loan_period_days": "loan_period_days",
        }
        for env_key, field_key in circulation_mapping.items():
            if env_key in data:
                transformed.setdefault("circulation", {})[field_key] = data.pop(
                    env_key
                )

        # Flat keys win over values already present in the nested group
        for section, values in transformed.items():
            existing = data.get(section)
            if isinstance(existing, BaseModel):
                existing = existing.model_dump()
            data[section] = {**(existing or {}), **values}

        return data


# Singleton instance for application use
settings = Settings()


# =============================================================================
# FLAT KEY ACCESS
# =============================================================================

_FLAT_KEY_MAP = {
    # Logging settings
    "CONSOLE_LOG_LEVEL": lambda: settings.logging.console_level,
    "FILE_LOG_LEVEL": lambda: settings.logging.file_level,
    "LOG_FILE": lambda: settings.logging.log_file,
    "FILE_LOGGING": lambda: settings.logging.file_logging,
    "LOG_REAL_TIME_DEBUG": lambda: settings.logging.real_time_debug,
    # Circulation rules
    "MIN_TITLE_LENGTH": lambda: settings.circulation.min_title_length,
    "MIN_COPIES_PER_ADDITION": lambda: settings.circulation.min_copies_per_addition,
    "MAX_COPIES_PER_ADDITION": lambda: settings.circulation.max_copies_per_addition,
    "LIBRARY_CAPACITY": lambda: settings.circulation.max_total_copies,
    "MAX_TOTAL_COPIES": lambda: settings.circulation.max_total_copies,
    "MAX_ACTIVE_BORROWS": lambda: settings.circulation.max_active_borrows,
    "LOAN_PERIOD_DAYS": lambda: settings.circulation.loan_period_days,
}


def get_config(key: str, default: Any = None) -> Any:
    """Configuration access by flat key name.

    Args:
        key: Flat configuration key, e.g. "MAX_ACTIVE_BORROWS"
        default: Value returned when the key is unknown

    Returns:
        The configured value, or ``default`` for unknown keys
    """
    getter = _FLAT_KEY_MAP.get(key.upper())
    if getter is None:
        return default
    return getter()
