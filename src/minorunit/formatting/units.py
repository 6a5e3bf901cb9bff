"""Conversion between decimal amounts and integer minor units.

Payment APIs take amounts as integers in the currency's smallest unit
(1999 cents for $19.99, 500 for ¥500, 9999 fils for KD 9.999). The
exponent comes from the registry; unknown codes use DEFAULT_DECIMALS.

Rounding is ROUND_HALF_UP (ties away from zero) applied to the shortest
decimal representation of the input, so float artifacts such as
19.99 * 100 == 1998.9999999999998 never leak into the result.

Arithmetic runs in a local decimal context sized to the operand, so
amounts beyond the default 28-digit precision keep every digit.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from decimal import ROUND_DOWN, ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

from minorunit.constants import MAX_AMOUNT_DIGITS
from minorunit.registry import get_decimals

__all__ = [
    "as_decimal",
    "coerce_minor_units",
    "from_minor_units",
    "minor_to_decimal",
    "to_minor_units",
]

_ONE = Decimal(1)


def as_decimal(value: int | float | Decimal | str) -> Decimal:
    """Convert a numeric value to a finite Decimal without float noise.

    Floats go through repr(), which yields the shortest string that
    round-trips, so 19.99 becomes Decimal('19.99') rather than
    Decimal('19.989999999999998436805981327779591083526611328125').

    Raises:
        ValueError: If value is not numeric, not finite, or has more than
            MAX_AMOUNT_DIGITS integer digits.
    """
    if isinstance(value, bool):
        msg = f"Expected a numeric amount, got bool {value!r}"
        raise ValueError(msg)
    try:
        if isinstance(value, Decimal):
            result = value
        elif isinstance(value, float):
            result = Decimal(repr(value))
        elif isinstance(value, str):
            result = Decimal(value.strip())
        else:
            result = Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as e:
        msg = f"Expected a numeric amount, got {value!r}"
        raise ValueError(msg) from e
    if not result.is_finite():
        msg = f"Amount must be finite, got {value!r}"
        raise ValueError(msg)
    if result.adjusted() >= MAX_AMOUNT_DIGITS:
        msg = f"Amount exceeds {MAX_AMOUNT_DIGITS} digits"
        raise ValueError(msg)
    return result


def _precision_for(value: Decimal, shift: int) -> int:
    """Digits needed to scale value by 10**shift and round it without loss."""
    return max(28, value.adjusted() + shift + 2, len(value.as_tuple().digits))


def coerce_minor_units(value: int | float | Decimal | str) -> int:
    """Truncate a loosely typed amount to an integer count of minor units.

    Fractional parts are dropped toward zero ("19.9" -> 19, -2.7 -> -2).

    Raises:
        ValueError: If value is not numeric or not finite.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    number = as_decimal(value)
    with localcontext() as ctx:
        ctx.prec = _precision_for(number, 0)
        return int(number.to_integral_value(rounding=ROUND_DOWN))


def to_minor_units(amount: int | float | Decimal, code: str) -> int:
    """Convert a decimal amount to minor units for a payment API.

    Args:
        amount: Decimal amount in major units (e.g., 19.99).
        code: Currency code. Unknown codes are treated as two-decimal.

    Returns:
        Signed integer amount in the smallest unit.

    Raises:
        ValueError: If amount is not a finite number or exceeds
            MAX_AMOUNT_DIGITS digits.

    Examples:
        >>> to_minor_units(19.99, "USD")
        1999
        >>> to_minor_units(9.999, "KWD")
        9999
        >>> to_minor_units(100, "JPY")
        100
        >>> to_minor_units(1.005, "usd")
        101
    """
    value = as_decimal(amount)
    exponent = get_decimals(code)
    with localcontext() as ctx:
        ctx.prec = _precision_for(value, exponent)
        return int(value.scaleb(exponent).quantize(_ONE, rounding=ROUND_HALF_UP))


def minor_to_decimal(minor: int, code: str) -> Decimal:
    """Convert minor units to an exact Decimal amount in major units.

    >>> minor_to_decimal(1999, "USD")
    Decimal('19.99')
    """
    exponent = get_decimals(code)
    # bit_length() // 3 + 1 bounds the decimal digit count from above
    with localcontext() as ctx:
        ctx.prec = max(28, minor.bit_length() // 3 + 1)
        return Decimal(minor).scaleb(-exponent)


def from_minor_units(minor: int, code: str) -> float:
    """Convert minor units back to a decimal amount.

    Inverse of to_minor_units() for amounts it produced, within float
    precision. Use minor_to_decimal() when exactness matters.

    Args:
        minor: Amount in the smallest unit.
        code: Currency code. Unknown codes are treated as two-decimal.

    Returns:
        Amount in major units as a float.

    Examples:
        >>> from_minor_units(1999, "USD")
        19.99
        >>> from_minor_units(9999, "KWD")
        9.999
        >>> from_minor_units(500, "JPY")
        500.0
    """
    decimals = get_decimals(code)
    if decimals == 0:
        return float(minor)
    return minor / 10**decimals
