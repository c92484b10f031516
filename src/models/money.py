"""Decimal helpers for monetary values.

All balances and amounts are ``Decimal``; binary floats are only accepted
by going through ``str`` first so that ``0.1`` becomes ``Decimal("0.1")``.
"""

import re
from contextlib import contextmanager
from decimal import Decimal, DecimalException, InvalidOperation

from .exceptions import InvalidAmountError

ZERO = Decimal("0")

# Amounts, rates and limits must stay strictly below this magnitude.
MAX_AMOUNT = Decimal("1e15")

_GROUPED = re.compile(r"[+-]?\d{1,3}(,\d{3})+(\.\d*)?")


def _in_range(value: Decimal) -> bool:
    return abs(value) < MAX_AMOUNT


def as_decimal(value) -> Decimal:
    """
    Convert a numeric value to Decimal.

    Args:
        value: An int, str, float or Decimal

    Returns:
        The value as a finite Decimal

    Raises:
        InvalidAmountError: If the value cannot be parsed, is not finite,
            or its magnitude is not below MAX_AMOUNT
    """
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            raise InvalidAmountError(f"Not a valid amount: {value!r}")
    if not result.is_finite():
        raise InvalidAmountError(f"Amount must be finite: {value!r}")
    if not _in_range(result):
        raise InvalidAmountError(f"Amount must be below {MAX_AMOUNT:,f} in magnitude: {value!r}")
    return result


def ensure_non_negative(value, what: str = "Amount") -> Decimal:
    """Return value as Decimal, raising InvalidAmountError if it is negative."""
    amount = as_decimal(value)
    if amount < ZERO:
        raise InvalidAmountError(f"{what} cannot be negative: {amount}")
    return amount


@contextmanager
def guarded_arithmetic():
    """Turn decimal signals (overflow, invalid operation) into InvalidAmountError."""
    try:
        yield
    except DecimalException as err:
        raise InvalidAmountError(f"Amount out of range: {type(err).__name__}")


def parse_amount(text: str) -> Decimal | None:
    """
    Parse user input into a Decimal.

    Surrounding whitespace is accepted, and so are ``,`` thousands
    separators when they group digits in threes (``1,250.75``).

    Args:
        text: Raw user input

    Returns:
        The parsed Decimal, or None if the text is not a finite number
        below MAX_AMOUNT in magnitude
    """
    if text is None:
        return None
    cleaned = text.strip()
    if "," in cleaned:
        if not _GROUPED.fullmatch(cleaned):
            return None
        cleaned = cleaned.replace(",", "")
    if not cleaned:
        return None
    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        return None
    if not value.is_finite() or not _in_range(value):
        return None
    return value
