"""Convenience helpers with loosely typed inputs.

Thin wrappers over the formatting engine for templates and request
handlers that receive amounts as strings or floats. Amounts in minor
units are truncated to integers first; decimal amounts are parsed
exactly (no float round-trip for strings).

Example:
    >>> format_currency("1999", "usd")
    '$19.99'
    >>> to_currency_cents("19.99", "USD")
    1999

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal

from minorunit.enums import Interval
from minorunit.formatting import (
    Priced,
    as_decimal,
    coerce_minor_units,
    format_amount,
    format_localized,
    format_plain,
    format_with_interval,
    from_minor_units,
    render,
    to_minor_units,
)
from minorunit.registry import CurrencyConfig, all_currencies

__all__ = [
    "format_currency",
    "format_currency_localized",
    "format_price_interval",
    "from_currency_cents",
    "get_currency_options",
    "render_currency",
    "to_currency_cents",
]

type LooseAmount = int | float | Decimal | str


def format_currency(amount: LooseAmount, currency: str, plain: bool = False) -> str:
    """Format an amount in minor units, with or without the symbol.

    Raises:
        ValueError: If amount is not numeric.
    """
    minor = coerce_minor_units(amount)
    if plain:
        return format_plain(minor, currency)
    return format_amount(minor, currency)


def format_currency_localized(
    amount: LooseAmount, currency: str, locale: str | None = None
) -> str:
    """Format an amount in minor units with locale-aware conventions."""
    return format_localized(coerce_minor_units(amount), currency, locale)


def format_price_interval(
    amount: LooseAmount,
    currency: str,
    interval: Interval | str | None = None,
    interval_count: int = 1,
) -> str:
    """Format an amount in minor units with its recurring interval."""
    return format_with_interval(coerce_minor_units(amount), currency, interval, interval_count)


def render_currency(
    value: object, item: Priced | object | None = None, currency: str = ""
) -> str | None:
    """Render an HTML price fragment; None when value is not numeric."""
    return render(value, item, currency)


def to_currency_cents(amount: LooseAmount, currency: str) -> int:
    """Convert a decimal amount (e.g., "19.99") to minor units."""
    return to_minor_units(as_decimal(amount), currency)


def from_currency_cents(amount: LooseAmount, currency: str) -> float:
    """Convert an amount in minor units to a decimal amount."""
    return from_minor_units(coerce_minor_units(amount), currency)


def get_currency_options() -> Mapping[str, CurrencyConfig]:
    """Return all supported currencies as code -> configuration."""
    return all_currencies()
