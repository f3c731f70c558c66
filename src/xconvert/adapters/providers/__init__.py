# src/xconvert/adapters/providers/__init__.py
"""
Provider Adapters - External API Clients

This package contains adapters for external exchange rate APIs.
All providers implement the RateProvider interface.
"""

from xconvert.adapters.providers.base import RateProvider
from xconvert.adapters.providers.currency_api import CurrencyApiProvider

__all__ = [
    "RateProvider",
    "CurrencyApiProvider",
]
