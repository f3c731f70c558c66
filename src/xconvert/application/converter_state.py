# src/xconvert/application/converter_state.py
"""
Converter State - Reactive Currency Conversion

This module holds the converter's session state: the loaded currency set,
the selected source and target currencies, the input amount, the rate table
for the current source, and the converted amount derived from them.

Every input change re-derives the converted amount. A source change also
starts a background rate fetch; when it resolves, the new table replaces the
old one and the amount is recomputed against the values current at that time.
Overlapping fetches are tagged with a request number; a result is applied
only if it is for the current source and newer than the last applied one.

Files that USE this module:
- Embedding UI layers (bind to ConverterState and subscribe to its changes)
- tests.test_converter_state (unit tests)

Files that this module USES:
- xconvert.adapters.providers (RateProvider interface, CurrencyApiProvider default)
- xconvert.application.events (ChangeNotifier for change events)
- xconvert.config (default selection policy)
- xconvert.domain.models (CurrencyEntry, RateTable)
- xconvert.shared.validators (amount and code normalization)
"""
from __future__ import annotations

import asyncio
import logging
from concurrent.futures import Executor
from decimal import Decimal
from typing import Any, Callable, Optional, Set, Tuple, Union

from xconvert.adapters.providers.base import RateProvider
from xconvert.adapters.providers.currency_api import CurrencyApiProvider
from xconvert.application.events import ChangeNotifier
from xconvert.config import settings
from xconvert.domain.models import CurrencyEntry, RateTable
from xconvert.shared.validators import normalize_currency_code, to_decimal

logger = logging.getLogger(__name__)

ZERO = Decimal(0)


def convert(amount: Decimal, rate_table: RateTable, target: Optional[CurrencyEntry]) -> Decimal:
    """
    Derive the converted amount.

    Returns amount * rate_table[target.code], or 0 when the table is empty,
    the target is unset, or the table has no rate for the target.
    """
    if not rate_table or target is None:
        return ZERO
    rate = rate_table.get(target.code)
    if rate is None:
        return ZERO
    return amount * rate


class ConverterState:
    """
    Reactive converter session.

    Setters must be called from inside a running event loop, since a source
    change spawns an asyncio task for the rate fetch.
    """

    def __init__(
        self,
        provider: Optional[RateProvider] = None,
        *,
        default_source: Optional[str] = None,
        default_target: Optional[str] = None,
        default_amount: Optional[Union[Decimal, int, str]] = None,
        executor: Optional[Executor] = None,
    ):
        """
        Initialize an empty converter session. Nothing is fetched until
        load_currencies() is awaited; use create() to start loading right away.

        Args:
            provider: RateProvider to fetch from (defaults to CurrencyApiProvider)
            default_source: Code selected as source after loading (defaults to settings)
            default_target: Code selected as target after loading (defaults to settings)
            default_amount: Amount set after loading (defaults to settings)
            executor: Executor for blocking provider calls (defaults to the loop's)
        """
        self.provider = provider or CurrencyApiProvider()
        self.default_source = normalize_currency_code(default_source or settings.default_source_currency)
        self.default_target = normalize_currency_code(default_target or settings.default_target_currency)
        self.default_amount = to_decimal(
            default_amount if default_amount is not None else settings.default_amount
        )
        self._executor = executor

        self._notifier = ChangeNotifier()
        self._currencies: Tuple[CurrencyEntry, ...] = ()
        self._source: Optional[CurrencyEntry] = None
        self._target: Optional[CurrencyEntry] = None
        self._amount: Decimal = self.default_amount
        self._rate_table: RateTable = RateTable.empty()
        self._converted: Decimal = ZERO
        self._last_error: Optional[BaseException] = None

        self._request_seq = 0
        self._applied_seq = 0
        self._pending: Set[asyncio.Task] = set()
        self.load_task: Optional[asyncio.Task] = None

    @classmethod
    async def create(cls, provider: Optional[RateProvider] = None, **kwargs: Any) -> ConverterState:
        """
        Build a session and start loading currencies in the background.

        The load task is kept as ``load_task``; its failure is recorded in
        ``last_error`` and is raised only if the task is awaited.
        """
        state = cls(provider, **kwargs)
        loop = asyncio.get_running_loop()
        state.load_task = state._track(loop.create_task(state.load_currencies()))
        return state

    # --- Read-only state ---

    @property
    def currencies(self) -> Tuple[CurrencyEntry, ...]:
        return self._currencies

    @property
    def source_currency(self) -> Optional[CurrencyEntry]:
        return self._source

    @property
    def target_currency(self) -> Optional[CurrencyEntry]:
        return self._target

    @property
    def amount(self) -> Decimal:
        return self._amount

    @property
    def rate_table(self) -> RateTable:
        return self._rate_table

    @property
    def converted_amount(self) -> Decimal:
        return self._converted

    @property
    def last_error(self) -> Optional[BaseException]:
        """Error from the most recent failed load or current-source rate fetch, if any."""
        return self._last_error

    @property
    def is_fetching(self) -> bool:
        return any(not task.done() for task in self._pending)

    # --- Change notification ---

    def subscribe(self, callback: Callable[[str, Any], None], field: Optional[str] = None) -> Callable[[], None]:
        """Register callback(field, value) for changes; returns an unsubscribe function."""
        return self._notifier.subscribe(callback, field)

    def _emit(self, field: str, value: Any) -> None:
        logger.debug("State change: %s=%r", field, value)
        self._notifier.emit(field, value)

    # --- Inputs ---

    def set_amount(self, value: Union[Decimal, int, float, str]) -> None:
        """
        Set the input amount and recompute. Never fetches.

        Raises:
            ValueError: If value is not numeric (state is left unchanged)
        """
        value = to_decimal(value)
        if value == self._amount:
            return
        self._amount = value
        self._emit("amount", value)
        self._recompute()

    def set_target_currency(self, entry: Optional[CurrencyEntry]) -> None:
        """Select the target currency and recompute. Never fetches."""
        if entry == self._target:
            return
        self._target = entry
        self._emit("target_currency", entry)
        self._recompute()

    def set_source_currency(self, entry: Optional[CurrencyEntry]) -> Optional[asyncio.Task]:
        """
        Select the source currency.

        Clears the rate table, recomputes immediately (yielding 0), and
        starts a background fetch of the rates for ``entry``. The returned
        task resolves to the fetched RateTable or raises the fetch error.

        Returns:
            The fetch task, or None if nothing changed or entry is None
        """
        if entry == self._source:
            return None
        if entry is not None:
            # Fail before mutating anything when called outside an event loop.
            asyncio.get_running_loop()
        self._source = entry
        self._emit("source_currency", entry)
        self._replace_table(RateTable.empty())
        self._recompute()

        if entry is None:
            return None
        return self._spawn_rate_fetch(entry.code)

    def refresh_rates(self) -> Optional[asyncio.Task]:
        """
        Re-fetch rates for the current source without clearing the table.

        If the fetch fails, the existing table stays in place.

        Returns:
            The fetch task, or None if no source is selected
        """
        if self._source is None:
            return None
        return self._spawn_rate_fetch(self._source.code)

    def find_currency(self, code: str) -> Optional[CurrencyEntry]:
        """Look up a loaded currency by code (case-insensitive)."""
        code = code.strip().upper()
        for entry in self._currencies:
            if entry.code == code:
                return entry
        return None

    # --- Fetching ---

    async def load_currencies(self) -> Tuple[CurrencyEntry, ...]:
        """
        Load the currency set and apply the default selection.

        Source and target become the entries matching the default codes
        (unset if absent) and the amount is reset to the default amount.
        Selecting the source starts its rate fetch; this coroutine does not
        wait for it (see wait_for_rates()).

        Raises:
            FetchError: If the currency list cannot be fetched; the currency
                set and selections are left untouched
        """
        loop = asyncio.get_running_loop()
        logger.info("Loading currency list")
        try:
            entries = await loop.run_in_executor(self._executor, self.provider.list_currencies)
        except Exception as e:
            logger.warning("Currency list load failed: %s", e)
            self._set_error(e)
            raise

        self._currencies = tuple(entries)
        self._emit("currencies", self._currencies)
        self._set_error(None)
        logger.info("Loaded %d currencies", len(self._currencies))

        self.set_source_currency(self.find_currency(self.default_source))
        self.set_target_currency(self.find_currency(self.default_target))
        self.set_amount(self.default_amount)
        return self._currencies

    async def wait_for_rates(self) -> None:
        """Wait until no currency load or rate fetch is in flight. Fetch errors are not raised here."""
        while True:
            pending = [task for task in self._pending if not task.done()]
            if not pending:
                return
            await asyncio.gather(*pending, return_exceptions=True)

    def _track(self, task: asyncio.Task) -> asyncio.Task:
        self._pending.add(task)
        task.add_done_callback(self._on_fetch_done)
        return task

    def _spawn_rate_fetch(self, code: str) -> asyncio.Task:
        loop = asyncio.get_running_loop()
        self._request_seq += 1
        seq = self._request_seq
        logger.debug("Starting rate fetch #%d for %s", seq, code)
        return self._track(loop.create_task(self._fetch_rates(code, seq)))

    def _is_current(self, code: str, seq: int) -> bool:
        """A result applies if it is for the current source and newer than the last applied one."""
        return seq > self._applied_seq and self._source is not None and self._source.code == code

    async def _fetch_rates(self, code: str, seq: int) -> RateTable:
        loop = asyncio.get_running_loop()
        try:
            table = await loop.run_in_executor(self._executor, self.provider.get_rates, code)
        except Exception as e:
            if self._is_current(code, seq):
                self._set_error(e)
            raise

        if not self._is_current(code, seq):
            logger.debug(
                "Discarding stale rates for %s (request #%d, last applied #%d)",
                code, seq, self._applied_seq,
            )
            return table

        self._applied_seq = seq
        self._replace_table(table)
        self._set_error(None)
        self._recompute()
        return table

    def _on_fetch_done(self, task: asyncio.Task) -> None:
        self._pending.discard(task)
        if task.cancelled():
            return
        # Retrieving the exception keeps un-awaited tasks from warning at shutdown.
        exc = task.exception()
        if exc is not None:
            logger.warning("Background fetch failed: %s", exc)

    # --- Derived state ---

    def _replace_table(self, table: RateTable) -> None:
        if table == self._rate_table:
            return
        self._rate_table = table
        self._emit("rate_table", table)

    def _set_error(self, error: Optional[BaseException]) -> None:
        if error is self._last_error:
            return
        self._last_error = error
        self._emit("last_error", error)

    def _recompute(self) -> None:
        converted = convert(self._amount, self._rate_table, self._target)
        if converted == self._converted:
            return
        self._converted = converted
        self._emit("converted_amount", converted)
