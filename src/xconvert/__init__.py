# src/xconvert/__init__.py
"""
XConvert - Reactive Currency Converter Core

A small client-side currency converter: fetches the supported currency list
and per-base exchange rates from a public JSON API and keeps a converted
amount up to date as the amount, source currency or target currency change.
"""

__version__ = "1.0.0"
