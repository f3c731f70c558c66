# src/xconvert/domain/errors.py
"""
Domain Errors - Fetch and Parse Exceptions

This module defines the exceptions raised when currency or rate data
cannot be obtained from a provider.

ParseError and MissingRateError subclass FetchError, so callers that only
care about "the fetch did not produce usable data" can catch FetchError.
"""


class ConverterError(Exception):
    """Base exception for converter errors."""
    pass


class FetchError(ConverterError):
    """Raised when a provider request fails (network, timeout, HTTP status)."""
    pass


class ParseError(FetchError):
    """Raised when a provider response does not have the expected JSON shape."""
    pass


class MissingRateError(ParseError):
    """Raised when a rate response has no rate object for the requested base."""

    def __init__(self, base_code: str):
        super().__init__(f"Rate response has no rates for base currency {base_code!r}")
        self.base_code = base_code
