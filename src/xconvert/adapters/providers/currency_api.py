# src/xconvert/adapters/providers/currency_api.py
"""
Currency API Provider for Currency Lists and Exchange Rates

This module implements the client for the free jsDelivr-hosted currency API
(fawazahmed0/currency-api). Two endpoints are used:

- currencies.json: {"eur": "Euro", "usd": "US Dollar", ...}
- currencies/{base}.json: {"date": "...", "{base}": {"usd": 1.08, ...}}

Files that USE this module:
- xconvert.application.converter_state (default provider for ConverterState)
- tests.test_providers (unit tests)

Files that this module USES:
- xconvert.adapters.providers.base (RateProvider interface)
- xconvert.config (settings for API configuration)
- xconvert.domain (CurrencyEntry, RateTable, error types)
- xconvert.shared.validators (code normalization)
"""
import logging
from decimal import Decimal
from typing import Any, List, Optional

import requests

from xconvert.adapters.providers.base import RateProvider
from xconvert.config import settings
from xconvert.domain.errors import FetchError, MissingRateError, ParseError
from xconvert.domain.models import CurrencyEntry, RateTable
from xconvert.shared.validators import normalize_currency_code

log = logging.getLogger(__name__)


class CurrencyApiProvider(RateProvider):
    def __init__(
        self,
        currencies_url: Optional[str] = None,
        rates_url_template: Optional[str] = None,
        timeout: Optional[int] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the currency API provider.

        Args:
            currencies_url: Optional currency-list URL (defaults to settings.currencies_url)
            rates_url_template: Optional rate URL with a {base} placeholder
                (defaults to settings.rates_url_template)
            timeout: Optional HTTP timeout in seconds (defaults to settings.http_timeout_seconds)
            session: Optional requests.Session to reuse connections
        """
        self.currencies_url = currencies_url or settings.currencies_url
        self.rates_url_template = rates_url_template or settings.rates_url_template
        if "{base}" not in self.rates_url_template:
            raise ValueError("rates_url_template must contain '{base}'")
        self.timeout = timeout or settings.http_timeout_seconds
        self.session = session

    def _get_json(self, url: str) -> Any:
        """
        GET a URL and decode its JSON body with floats parsed as Decimal.

        Raises:
            FetchError: On timeout, HTTP error status or connection failure
            ParseError: If the body is not valid JSON
        """
        getter = self.session.get if self.session is not None else requests.get
        try:
            resp = getter(url, timeout=self.timeout)
            resp.raise_for_status()
        except requests.exceptions.Timeout as e:
            log.warning("Currency API timeout after %d seconds: %s", self.timeout, url)
            raise FetchError(f"Currency API timeout after {self.timeout}s") from e
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else "?"
            log.warning("Currency API HTTP error %s for %s", status, url)
            raise FetchError(f"Currency API HTTP error {status}: {e}") from e
        except requests.exceptions.RequestException as e:
            log.warning("Currency API request failed: %s", e)
            raise FetchError(f"Currency API request failed: {e}") from e

        # requests' JSONDecodeError is both a RequestException and a ValueError
        try:
            return resp.json(parse_float=Decimal)
        except ValueError as e:
            log.error("Currency API returned invalid JSON from %s: %s", url, e)
            raise ParseError(f"Currency API returned invalid JSON: {e}") from e

    @staticmethod
    def _parse_rate(code: str, raw: Any) -> Decimal:
        """
        Convert a raw JSON rate to a non-negative finite Decimal.

        Raises:
            ParseError: If the value is not a number, is negative or not finite
        """
        if isinstance(raw, bool) or not isinstance(raw, (int, Decimal)):
            raise ParseError(f"Rate for {code} is not a number: {raw!r}")
        rate = Decimal(raw) if isinstance(raw, int) else raw
        if not rate.is_finite() or rate < 0:
            raise ParseError(f"Rate for {code} is not a non-negative finite number: {raw!r}")
        return rate

    def list_currencies(self) -> List[CurrencyEntry]:
        """
        Get all supported currencies from the API.

        Returns:
            CurrencyEntry list sorted by ascending uppercase code

        Raises:
            FetchError: If the request fails
            ParseError: If the response is not an object of code -> name strings
        """
        log.info("Fetching currency list from %s", self.currencies_url)
        data = self._get_json(self.currencies_url)

        if not isinstance(data, dict):
            log.error("Currency list response is not an object: %s", type(data).__name__)
            raise ParseError("Currency list response is not a JSON object")

        entries = []
        for code, name in data.items():
            if not isinstance(name, str):
                log.error("Currency list entry %r has non-string name: %r", code, name)
                raise ParseError(f"Currency {code!r} has a non-string display name")
            try:
                code = normalize_currency_code(code)
            except ValueError as e:
                raise ParseError(str(e)) from e
            entries.append(CurrencyEntry(code=code, display_name=name))

        entries.sort(key=lambda entry: entry.code)
        log.info("Currency list loaded: %d currencies", len(entries))
        return entries

    def get_rates(self, base_code: str) -> RateTable:
        """
        Get exchange rates for a base currency.

        Args:
            base_code: Base currency code, any case (e.g. "eur")

        Returns:
            RateTable keyed by uppercase code, with ``base`` set to the uppercase base

        Raises:
            FetchError: If the request fails
            ParseError: If the response or any rate has the wrong shape
            MissingRateError: If the response has no rate object for the base
        """
        base = normalize_currency_code(base_code)
        key = base.lower()
        url = self.rates_url_template.format(base=key)

        log.info("Fetching %s rates from %s", base, url)
        data = self._get_json(url)

        if not isinstance(data, dict):
            log.error("Rate response for %s is not an object: %s", base, type(data).__name__)
            raise ParseError(f"Rate response for {base} is not a JSON object")
        if key not in data:
            log.error("Rate response for %s has no %r key: %s", base, key, list(data))
            raise MissingRateError(base)

        raw_rates = data[key]
        if not isinstance(raw_rates, dict):
            log.error("Rate object for %s is not an object: %r", base, raw_rates)
            raise ParseError(f"Rate object for {base} is not a JSON object")

        rates = {}
        for code, raw in raw_rates.items():
            try:
                code = normalize_currency_code(code)
            except ValueError as e:
                raise ParseError(str(e)) from e
            rates[code] = self._parse_rate(code, raw)

        log.info("Rates loaded for %s: %d targets (date=%s)", base, len(rates), data.get("date"))
        return RateTable(base, rates)
