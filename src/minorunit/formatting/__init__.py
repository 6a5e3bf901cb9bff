"""Conversion and formatting engine over the currency registry.

Modules:
    units: decimal <-> minor-unit conversion
    formatters: plain, symbol, code, interval and locale-aware formatting
    intervals: recurrence phrases ("per month", "every 3 months")
    render: HTML price fragments and item resolution

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from .formatters import (
    format_amount,
    format_localized,
    format_localized_with_interval,
    format_plain,
    format_with_code,
    format_with_interval,
)
from .intervals import interval_text
from .render import (
    PriceItem,
    Priced,
    ResolvedInterval,
    is_numeric,
    render,
    resolve_currency,
    resolve_interval,
)
from .units import (
    as_decimal,
    coerce_minor_units,
    from_minor_units,
    minor_to_decimal,
    to_minor_units,
)

__all__ = [
    # Unit conversion
    "to_minor_units",
    "from_minor_units",
    "minor_to_decimal",
    "as_decimal",
    "coerce_minor_units",
    # Formatting
    "format_plain",
    "format_amount",
    "format_with_code",
    "format_localized",
    "format_with_interval",
    "format_localized_with_interval",
    "interval_text",
    # Rendering
    "render",
    "is_numeric",
    "resolve_currency",
    "resolve_interval",
    "Priced",
    "PriceItem",
    "ResolvedInterval",
]
