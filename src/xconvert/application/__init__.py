# src/xconvert/application/__init__.py
"""
Application Layer - Converter State and Change Notification

This package contains the reactive converter state that orchestrates
provider fetches and recomputation. Providers are reached only through
the RateProvider interface.
"""

from xconvert.application.converter_state import ConverterState, convert
from xconvert.application.events import ChangeNotifier

__all__ = [
    "ConverterState",
    "convert",
    "ChangeNotifier",
]
