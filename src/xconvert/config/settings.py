# src/xconvert/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Supports environment variables with validation.

Files that USE this module:
- xconvert.adapters.providers.currency_api (endpoint URLs and HTTP timeout)
- xconvert.application.converter_state (default selection policy)
- xconvert.shared.logging_conf (logging defaults)

Files that this module USES:
- xconvert.shared.validators (validation functions for settings)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from decimal import Decimal  # Exact decimal type for the default amount
from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from xconvert.shared.validators import normalize_currency_code  # Validate and upper-case codes

_API_ROOT = "https://cdn.jsdelivr.net/npm/@fawazahmed0/currency-api@latest/v1"


class Settings(BaseSettings):
    """Converter settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # --- API Endpoints ---
    currencies_url: str = Field(
        default=f"{_API_ROOT}/currencies.json", alias="XCONVERT_CURRENCIES_URL"
    )
    rates_url_template: str = Field(
        default=f"{_API_ROOT}/currencies/{{base}}.json", alias="XCONVERT_RATES_URL_TEMPLATE"
    )

    # --- HTTP Settings ---
    http_timeout_seconds: int = Field(default=10, alias="HTTP_TIMEOUT_SECONDS", ge=1, le=60)

    # --- Default Selection ---
    default_source_currency: str = Field(default="EUR", alias="DEFAULT_SOURCE_CURRENCY")
    default_target_currency: str = Field(default="USD", alias="DEFAULT_TARGET_CURRENCY")
    default_amount: Decimal = Field(default=Decimal(1), alias="DEFAULT_AMOUNT")

    # --- Logging ---
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=True, alias="XCONVERT_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @field_validator("rates_url_template")
    @classmethod
    def validate_rates_url_template(cls, v: str) -> str:
        """Require the {base} placeholder."""
        if "{base}" not in v:
            raise ValueError("XCONVERT_RATES_URL_TEMPLATE must contain '{base}'")
        return v

    @field_validator("currencies_url", "rates_url_template")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Only http(s) endpoints are supported."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("API URLs must start with http:// or https://")
        return v

    @field_validator("default_source_currency", "default_target_currency")
    @classmethod
    def validate_currency(cls, v: str) -> str:
        """Validate and upper-case the default currency codes."""
        return normalize_currency_code(v)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        v = v.upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("LOG_LEVEL must be DEBUG, INFO, WARNING, ERROR or CRITICAL")
        return v


# Global settings instance
settings = Settings()
