# src/xconvert/domain/__init__.py
"""
Domain Layer - Pure Business Objects

This package contains domain models and errors.
No dependencies on infrastructure or external systems.
"""

from xconvert.domain.models import (
    CurrencyEntry,
    RateTable,
)
from xconvert.domain.errors import (
    ConverterError,
    FetchError,
    MissingRateError,
    ParseError,
)

__all__ = [
    "CurrencyEntry",
    "RateTable",
    "ConverterError",
    "FetchError",
    "ParseError",
    "MissingRateError",
]
