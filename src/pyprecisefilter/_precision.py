"""Conversion between decimal input and scaled integers."""

from __future__ import annotations

import math
import re
from decimal import MAX_EMAX, MIN_EMIN, ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Any

from pyprecisefilter._constants import (
    DEFAULT_PRECISION,
    MAX_PRECISION,
    MAX_SCALED_DIGITS,
    MAX_SCALED_VALUE,
)
from pyprecisefilter._errors import (
    ERR_MSG_INVALID_PRECISION,
    InvalidPrecisionError,
    NotNumericError,
    ValueOutOfRangeError,
)

# Optional sign, digits with optional fraction (or a bare fraction), optional exponent.
NUMERIC_RE = re.compile(r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*$")


def is_numeric(value: Any) -> bool:
    """Return True if value can be read as a finite decimal number."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, str):
        return NUMERIC_RE.match(value) is not None
    return False


def validate_precision(precision: Any) -> None:
    if isinstance(precision, bool) or not isinstance(precision, int):
        raise InvalidPrecisionError(
            ERR_MSG_INVALID_PRECISION,
            f"precision must be an integer, got {type(precision).__name__}",
        )
    if precision < 0 or precision > MAX_PRECISION:
        raise InvalidPrecisionError(
            ERR_MSG_INVALID_PRECISION,
            f"precision {precision} outside 0..{MAX_PRECISION}",
        )


def to_decimal(value: Any) -> Decimal:
    """Read a numeric value as an exact Decimal.

    Floats go through ``str()`` so 99.99 is read as written rather than
    as its binary expansion.
    """
    if not is_numeric(value):
        raise NotNumericError(value)
    if isinstance(value, Decimal):
        return value
    if isinstance(value, str):
        value = value.strip()
    elif isinstance(value, float):
        value = str(value)
    try:
        return Decimal(value)
    except InvalidOperation as e:
        raise NotNumericError(value, f"decimal conversion failed for {value!r}", e) from e


def _exact_context(amount: Decimal, precision: int):
    return localcontext(
        prec=len(amount.as_tuple().digits) + precision + 1,
        Emax=MAX_EMAX,
        Emin=MIN_EMIN,
    )


def normalize(value: Any, precision: int = DEFAULT_PRECISION) -> int:
    """Convert a decimal amount to its scaled integer representation.

    The amount is multiplied by ``10 ** precision`` and rounded half away
    from zero, so ``"12.345"`` becomes 1235 and ``"-12.345"`` becomes -1235.

    Args:
        value: Numeric string, int, float or Decimal.
        precision: Number of decimal places stored in the integer.

    Returns:
        The scaled integer.

    Raises:
        NotNumericError: If value is not numeric.
        InvalidPrecisionError: If precision is out of range.
        ValueOutOfRangeError: If the scaled value does not fit a signed 64-bit integer.
    """
    validate_precision(precision)
    amount = to_decimal(value)
    # "0e999999999" is zero whatever its exponent
    if amount.is_zero():
        return 0
    if amount.adjusted() + precision > MAX_SCALED_DIGITS:
        raise ValueOutOfRangeError(value, f"value {value!r} exceeds 10**{MAX_SCALED_DIGITS} once scaled")

    # Enough digits that scaling never rounds before ROUND_HALF_UP does
    with _exact_context(amount, precision):
        scaled = amount.scaleb(precision).to_integral_value(rounding=ROUND_HALF_UP)
    result = int(scaled)
    if abs(result) > MAX_SCALED_VALUE:
        raise ValueOutOfRangeError(value, f"scaled value {result} exceeds {MAX_SCALED_VALUE}")
    return result


def denormalize(value: int, precision: int = DEFAULT_PRECISION) -> Decimal:
    """Convert a scaled integer back to its decimal amount (1234 -> 12.34)."""
    validate_precision(precision)
    if isinstance(value, bool) or not isinstance(value, int):
        raise NotNumericError(value, f"expected a scaled integer, got {value!r}")
    amount = Decimal(value)
    with _exact_context(amount, precision):
        return amount.scaleb(-precision)
