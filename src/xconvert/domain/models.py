# src/xconvert/domain/models.py
"""
Domain Models - Pure Business Objects

This module contains domain models representing core converter concepts:
- Currency entries (code + display name)
- Rate tables (rates for one base currency)

Files that USE this module:
- xconvert.adapters.providers.* (providers build entries and rate tables)
- xconvert.application.* (converter state holds and derives from them)
- tests.* (tests use domain models for test data)

Files that this module USES:
- None (pure domain layer, no external dependencies)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass  # Decorator for creating data classes
from decimal import Decimal  # Exact decimal arithmetic for rates and amounts
from types import MappingProxyType  # Read-only view over the rates dict
from typing import Iterator, Mapping, Optional  # Type hints


@dataclass(frozen=True)
class CurrencyEntry:
    """
    A currency the provider supports.

    Attributes:
        code: Uppercase currency code, unique within a loaded set (e.g. "EUR")
        display_name: English display name (e.g. "Euro")
    """
    code: str
    display_name: str

    def __str__(self) -> str:
        return f"{self.code} - {self.display_name}"


class RateTable(Mapping[str, Decimal]):
    """
    Immutable mapping of target currency code to rate against one base.

    1 unit of ``base`` equals ``table[code]`` units of ``code``.
    An empty table (``base`` is None) means no rates are available.
    """

    def __init__(self, base: Optional[str], rates: Optional[Mapping[str, Decimal]] = None):
        self._base = base
        self._rates = MappingProxyType(dict(rates or {}))

    @classmethod
    def empty(cls) -> RateTable:
        return cls(None)

    @property
    def base(self) -> Optional[str]:
        """Code of the base currency these rates are expressed against."""
        return self._base

    def __getitem__(self, code: str) -> Decimal:
        return self._rates[code]

    def __iter__(self) -> Iterator[str]:
        return iter(self._rates)

    def __len__(self) -> int:
        return len(self._rates)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, RateTable):
            return self._base == other._base and dict(self._rates) == dict(other._rates)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._base, frozenset(self._rates.items())))

    def __repr__(self) -> str:
        return f"RateTable(base={self._base!r}, rates={len(self._rates)})"

