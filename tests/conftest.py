# tests/conftest.py
"""
Shared Test Fixtures - Fake Provider and Converter State

Provides an in-memory RateProvider whose fetches can be held open with
threading.Event gates, so tests can control the order in which rate
fetches resolve.

Files that USE this module:
- tests.test_converter_state (fake_provider and state fixtures)

Files that this module USES:
- xconvert.adapters.providers.base (RateProvider interface)
- xconvert.application.converter_state (ConverterState under test)
- xconvert.domain (CurrencyEntry, RateTable, MissingRateError)
"""
import asyncio  # Polling for provider calls from async tests
import threading  # Gates that hold provider calls open
from decimal import Decimal  # Exact rate values

import pytest  # Testing framework

from xconvert.adapters.providers.base import RateProvider
from xconvert.application.converter_state import ConverterState
from xconvert.domain.errors import MissingRateError
from xconvert.domain.models import CurrencyEntry, RateTable


class FakeProvider(RateProvider):
    def __init__(self, currencies=None, rates=None):
        self.currencies = currencies if currencies is not None else [
            CurrencyEntry("EUR", "Euro"),
            CurrencyEntry("JPY", "Yen"),
            CurrencyEntry("USD", "US Dollar"),
        ]
        self.rates = rates if rates is not None else {
            "EUR": {"USD": "1.08", "JPY": "160.0"},
            "JPY": {"EUR": "0.00625", "USD": "0.00675", "JPY": "1"},
        }
        self.rate_calls = []
        self.currency_calls = 0
        self.gates = {}
        self.fail_currencies = None
        self.fail_rates = {}

    def gate(self, code):
        """Hold the next get_rates(code) call open until the returned event is set."""
        event = threading.Event()
        self.gates[code] = event
        return event

    def list_currencies(self):
        self.currency_calls += 1
        if self.fail_currencies is not None:
            raise self.fail_currencies
        return list(self.currencies)

    def get_rates(self, base_code):
        code = base_code.upper()
        # Gates hold one call only; rates are read before waiting.
        gate = self.gates.pop(code, None)
        rates = self.rates.get(code)
        self.rate_calls.append(code)
        if gate is not None:
            gate.wait(timeout=5)
        if code in self.fail_rates:
            raise self.fail_rates[code]
        if rates is None:
            raise MissingRateError(code)
        return RateTable(code, {k: Decimal(v) for k, v in rates.items()})

    async def wait_for_calls(self, count, timeout=5.0):
        """Wait until get_rates has been entered ``count`` times."""
        loop = asyncio.get_running_loop()
        deadline = loop.time() + timeout
        while len(self.rate_calls) < count:
            if loop.time() > deadline:
                raise AssertionError(f"expected {count} rate calls, got {self.rate_calls}")
            await asyncio.sleep(0.01)


@pytest.fixture
def fake_provider():
    return FakeProvider()


@pytest.fixture
def state(fake_provider):
    return ConverterState(fake_provider, default_source="EUR", default_target="USD", default_amount=1)
