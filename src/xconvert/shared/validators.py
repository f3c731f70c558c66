# src/xconvert/shared/validators.py
"""
Input Validation Utilities - Currency Codes and Amounts

This module normalizes and validates the two kinds of input the converter
accepts from outside: currency codes (from the provider and from settings)
and amounts (from whatever input surface drives the converter).

Files that USE this module:
- xconvert.config.settings (validates default currency codes)
- xconvert.adapters.providers.currency_api (normalizes provider codes)
- xconvert.application.converter_state (converts amounts)

Files that this module USES:
- None (pure utility functions)
"""
import re
from decimal import Decimal, InvalidOperation
from typing import Union

# Provider codes include crypto tokens such as "1inch", so digits are allowed.
_CODE_PATTERN = re.compile(r"^[A-Za-z0-9]{1,16}$")


def validate_currency_code(code: str) -> bool:
    """
    Validate currency code format.

    Args:
        code: Currency code to validate (any case)

    Returns:
        True if valid, False otherwise
    """
    if not code or not isinstance(code, str):
        return False
    return bool(_CODE_PATTERN.match(code.strip()))


def normalize_currency_code(code: str) -> str:
    """
    Strip and upper-case a currency code.

    Args:
        code: Currency code in any case (e.g. "eur", " Usd ")

    Returns:
        Uppercase code (e.g. "EUR")

    Raises:
        ValueError: If code is not a valid currency code
    """
    if not validate_currency_code(code):
        raise ValueError(f"Invalid currency code: {code!r}")
    return code.strip().upper()


def to_decimal(value: Union[Decimal, int, float, str]) -> Decimal:
    """
    Convert an amount to Decimal.

    Floats go through ``str`` so 0.1 becomes Decimal("0.1") and not its
    binary expansion. Booleans, NaN and infinities are rejected.

    Raises:
        ValueError: If value is not numeric
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid amount: {value!r}")
    try:
        amount = Decimal(str(value).strip())
    except (InvalidOperation, TypeError) as e:
        raise ValueError(f"Invalid amount: {value!r}") from e
    if not amount.is_finite():
        raise ValueError(f"Invalid amount: {value!r}")
    return amount
