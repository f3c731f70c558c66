# src/xconvert/adapters/providers/base.py
"""
Base Provider Interface for Currency and Exchange Rate Providers

This module defines the abstract base class for all rate providers.
It establishes the contract that all provider implementations must follow.

Files that USE this module:
- xconvert.adapters.providers.currency_api (CurrencyApiProvider implements RateProvider)
- xconvert.application.converter_state (ConverterState depends on RateProvider)
- tests.* (fake providers for unit tests)

Files that this module USES:
- xconvert.domain.models (CurrencyEntry, RateTable)
"""
from abc import ABC, abstractmethod
from typing import Sequence

from xconvert.domain.models import CurrencyEntry, RateTable


class RateProvider(ABC):
    @abstractmethod
    def list_currencies(self) -> Sequence[CurrencyEntry]:
        """
        Return all supported currencies, ordered by ascending code.

        Codes are uppercase. Raises FetchError (or a subclass) on failure.
        """
        raise NotImplementedError

    @abstractmethod
    def get_rates(self, base_code: str) -> RateTable:
        """
        Return the rate table for ``base_code`` (case-insensitive).

        Keys are uppercase. Raises FetchError (or a subclass) on failure,
        MissingRateError when the response has no rates for the base.
        """
        raise NotImplementedError
