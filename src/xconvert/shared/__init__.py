# src/xconvert/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation and normalization
- Logging configuration (xconvert.shared.logging_conf)
"""

from xconvert.shared.validators import (
    normalize_currency_code,
    to_decimal,
    validate_currency_code,
)

__all__ = [
    "normalize_currency_code",
    "validate_currency_code",
    "to_decimal",
]
