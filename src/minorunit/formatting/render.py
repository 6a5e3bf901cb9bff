"""HTML price rendering with currency and interval resolution.

render() turns a raw amount plus an optional priced item (a product,
price or subscription record) into a small inline HTML fragment. Currency
and billing interval come from explicit arguments first and from the item
second.

Items are matched structurally: any object exposing the Priced accessors,
or plain ``currency`` / ``recurring_interval`` / ``recurring_interval_count``
attributes, works. PriceItem is a ready-made carrier for callers that have
no model class of their own.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import html
from dataclasses import dataclass
from decimal import Decimal
from typing import NamedTuple, Protocol, runtime_checkable

from minorunit.constants import DEFAULT_CURRENCY, PRICE_CSS_CLASS, PRICE_MARKUP
from minorunit.enums import Interval

from .formatters import format_with_interval
from .units import as_decimal, coerce_minor_units

__all__ = [
    "PriceItem",
    "Priced",
    "ResolvedInterval",
    "is_numeric",
    "render",
    "resolve_currency",
    "resolve_interval",
]


@runtime_checkable
class Priced(Protocol):
    """Accessor interface of an item that carries pricing metadata.

    Each accessor may return an empty value to defer to the matching
    attribute (``currency``, ``recurring_interval``,
    ``recurring_interval_count``) and then to the default.
    """

    def get_currency(self) -> str | None:
        """Currency code of the item's price."""
        ...

    def get_recurring_interval(self) -> str | None:
        """Billing interval ("day", "week", "month", "year") or None for one-time."""
        ...

    def get_recurring_interval_count(self) -> int | None:
        """Number of intervals between charges."""
        ...


@dataclass(frozen=True, slots=True)
class PriceItem:
    """Minimal pricing record resolvable by render().

    Attributes:
        currency: Currency code; empty means "use the default".
        recurring_interval: Billing interval or None for one-time prices.
        recurring_interval_count: Intervals between charges.
    """

    currency: str = ""
    recurring_interval: Interval | str | None = None
    recurring_interval_count: int = 1


class ResolvedInterval(NamedTuple):
    """Billing interval resolved from an item."""

    interval: str | None
    interval_count: int


def _probe(item: Priced | object | None, accessor: str, attribute: str) -> object | None:
    """Return the accessor result if non-empty, else the attribute if non-empty."""
    if item is None:
        return None
    getter = getattr(item, accessor, None)
    if callable(getter):
        value = getter()
        if value:
            return value
    value = getattr(item, attribute, None)
    if value and not callable(value):
        return value
    return None


def resolve_currency(item: Priced | object | None, default: str = DEFAULT_CURRENCY) -> str:
    """Resolve an upper-case currency code from an item.

    Order: ``item.get_currency()``, ``item.currency``, then ``default``.

    >>> resolve_currency(PriceItem(currency="eur"))
    'EUR'
    >>> resolve_currency(None)
    'USD'
    """
    currency = _probe(item, "get_currency", "currency")
    return str(currency or default).upper()


def resolve_interval(item: Priced | object | None) -> ResolvedInterval:
    """Resolve the billing interval and count from an item.

    The count is only consulted when an interval was found; an empty,
    zero or non-numeric count resolves to 1.

    >>> resolve_interval(PriceItem(recurring_interval="month", recurring_interval_count=3))
    ResolvedInterval(interval='month', interval_count=3)
    >>> resolve_interval(None)
    ResolvedInterval(interval=None, interval_count=1)
    """
    interval = _probe(item, "get_recurring_interval", "recurring_interval")
    if not interval:
        return ResolvedInterval(None, 1)
    count = _probe(item, "get_recurring_interval_count", "recurring_interval_count")
    if not is_numeric(count):
        return ResolvedInterval(str(interval), 1)
    return ResolvedInterval(str(interval), coerce_minor_units(count) or 1)  # type: ignore[arg-type]


def is_numeric(value: object) -> bool:
    """Check whether value is a number or a numeric string.

    Booleans, None, non-finite numbers and amounts with more than
    MAX_AMOUNT_DIGITS integer digits are not numeric.

    >>> is_numeric("19.99"), is_numeric(1999), is_numeric("abc"), is_numeric(True)
    (True, True, False, False)
    """
    if isinstance(value, bool) or not isinstance(value, int | float | Decimal | str):
        return False
    try:
        as_decimal(value)
    except ValueError:
        return False
    return True


def render(
    value: object,
    item: Priced | object | None = None,
    currency: str = "",
    interval: Interval | str | None = None,
    interval_count: int | None = None,
) -> str | None:
    """Render an amount in minor units as an HTML price fragment.

    Args:
        value: Amount in the smallest unit; numeric strings are accepted
            and truncated to an integer.
        item: Optional priced item consulted for currency and interval.
        currency: Currency code override. Empty resolves from the item.
        interval: Interval override. When both interval and interval_count
            are None, the interval is resolved from the item.
        interval_count: Interval count override.

    Returns:
        ``<span class="price">...</span>`` with the formatted price
        HTML-escaped, or None when value is not numeric.

    Examples:
        >>> render(9999, currency="USD")
        '<span class="price">$99.99</span>'
        >>> render(2500, PriceItem(currency="gbp", recurring_interval="month"))
        '<span class="price">£25.00 per month</span>'
        >>> render("n/a") is None
        True
    """
    if not is_numeric(value):
        return None

    if not currency:
        currency = resolve_currency(item)

    if interval is None and interval_count is None:
        interval, interval_count = resolve_interval(item)

    formatted = format_with_interval(
        coerce_minor_units(value),  # type: ignore[arg-type]
        currency,
        interval,
        1 if interval_count is None else interval_count,
    )
    return PRICE_MARKUP.format(css_class=PRICE_CSS_CLASS, text=html.escape(formatted))
