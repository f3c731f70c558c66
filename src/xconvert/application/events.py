# src/xconvert/application/events.py
"""
Change Notification - Field-level Publish/Subscribe

This module provides the publish/subscribe helper the converter state uses
to announce field changes as (field, value) pairs, so a UI layer can
re-render without polling.

Files that USE this module:
- xconvert.application.converter_state (ConverterState emits through ChangeNotifier)
- tests.test_events (unit tests)

Files that this module USES:
- None
"""
from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional, Tuple

logger = logging.getLogger(__name__)

Subscriber = Callable[[str, Any], None]


class ChangeNotifier:
    """Delivers (field, value) change events to subscribed callbacks."""

    def __init__(self):
        self._subscribers: List[Tuple[Optional[str], Subscriber]] = []

    def subscribe(self, callback: Subscriber, field: Optional[str] = None) -> Callable[[], None]:
        """
        Register a callback for change events.

        Args:
            callback: Called as callback(field, value) for every change
            field: Optional field name; when given, only that field's changes are delivered

        Returns:
            A function that removes this subscription (safe to call twice)
        """
        entry = (field, callback)
        self._subscribers.append(entry)

        def unsubscribe() -> None:
            if entry in self._subscribers:
                self._subscribers.remove(entry)

        return unsubscribe

    def emit(self, field: str, value: Any) -> None:
        """
        Deliver a change event to all matching subscribers.

        A subscriber that raises is logged and skipped; the remaining
        subscribers still receive the event.
        """
        for wanted, callback in list(self._subscribers):
            if wanted is not None and wanted != field:
                continue
            try:
                callback(field, value)
            except Exception:
                logger.exception("Change subscriber %r failed for field %s", callback, field)

    def __len__(self) -> int:
        return len(self._subscribers)
