"""Price formatting from integer minor units.

Two families of formatters:

- Plain formatters (format_plain, format_amount, format_with_code,
  format_with_interval) use a fixed, locale-neutral convention: comma
  thousands separator, period decimal separator, exactly as many fraction
  digits as the currency's minor-unit exponent. They never need Babel.

- Localized formatters (format_localized, format_localized_with_interval)
  delegate to Babel's CLDR data for symbol placement, spacing and
  separators. They fall back to format_amount() whenever the currency is
  unknown, Babel is missing, the locale is unknown, or Babel fails.

None of these functions raise for unknown currency codes.

Python 3.13+. Babel is used lazily by the localized formatters only.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from minorunit.core.babel_compat import is_babel_available
from minorunit.core.errors import FormattingError
from minorunit.registry import get_config

from .intervals import interval_text
from .units import minor_to_decimal

if TYPE_CHECKING:
    from minorunit.enums import Interval
    from minorunit.runtime.locale_context import CurrencyDisplay

__all__ = [
    "format_amount",
    "format_localized",
    "format_localized_with_interval",
    "format_plain",
    "format_with_code",
    "format_with_interval",
]

logger = logging.getLogger(__name__)


def format_plain(minor: int, code: str) -> str:
    """Format minor units as a grouped decimal number without a symbol.

    Unknown codes return the raw integer unchanged.

    Examples:
        >>> format_plain(9999, "USD")
        '99.99'
        >>> format_plain(123456789, "JPY")
        '123,456,789'
        >>> format_plain(1000, "ZZZ")
        '1000'
    """
    config = get_config(code)
    if config is None:
        return str(minor)
    sign = "-" if minor < 0 else ""
    if config.decimals == 0:
        return f"{sign}{abs(minor):,}"
    # Integer split keeps every digit regardless of magnitude
    whole, fraction = divmod(abs(minor), config.multiplier)
    return f"{sign}{whole:,}.{fraction:0{config.decimals}d}"


def format_amount(minor: int, code: str) -> str:
    """Format minor units with the currency symbol prefixed.

    The sign precedes the symbol ("-$5.00"). Unknown codes use the
    upper-cased code as symbol and the raw integer ("ZZZ1000").

    Examples:
        >>> format_amount(9999, "USD")
        '$99.99'
        >>> format_amount(9999, "JPY")
        '¥9,999'
        >>> format_amount(9999, "KWD")
        'KD9.999'
        >>> format_amount(-500, "usd")
        '-$5.00'
    """
    sign = "-" if minor < 0 else ""
    config = get_config(code)
    if config is None:
        return f"{sign}{code.upper()}{abs(minor)}"
    return f"{sign}{config.symbol}{format_plain(abs(minor), config.code)}"


def format_with_code(minor: int, code: str) -> str:
    """Format minor units followed by the currency code.

    >>> format_with_code(9999, "usd")
    '99.99 USD'
    """
    return f"{format_plain(minor, code)} {code.upper()}"


def format_localized(
    minor: int,
    code: str,
    locale: str | None = None,
    *,
    currency_display: CurrencyDisplay = "symbol",
) -> str:
    """Format minor units following a locale's currency conventions.

    The amount is converted to major units before delegation, so Babel
    sees 99.99 rather than 9999.

    Args:
        minor: Amount in the smallest unit.
        code: Currency code (case-insensitive).
        locale: BCP-47 or POSIX locale override. Defaults to the
            currency's registry locale (de_DE for EUR, ja_JP for JPY, ...).
        currency_display: "symbol" (default), "code" or "name".

    Returns:
        Locale-formatted price, or format_amount() output when localized
        formatting is not possible.

    Examples:
        >>> format_localized(123456, "EUR")
        '1.234,56\\xa0€'
        >>> format_localized(123456, "EUR", "en-US")
        '€1,234.56'
    """
    config = get_config(code)
    if config is None:
        return format_amount(minor, code)

    if not is_babel_available():
        logger.debug("Babel not installed; formatting %s without locale data", config.code)
        return format_amount(minor, code)

    # Babel is importable at this point
    from minorunit.runtime.locale_context import LocaleContext  # noqa: PLC0415

    ctx = LocaleContext.create(locale or config.locale)
    if ctx.is_fallback:
        logger.debug(
            "Locale %r unavailable; formatting %s without locale data",
            ctx.locale_code,
            config.code,
        )
        return format_amount(minor, code)

    try:
        return ctx.format_currency(
            minor_to_decimal(minor, config.code),
            currency=config.code,
            currency_display=currency_display,
        )
    except FormattingError as e:
        logger.debug("Localized formatting failed, using plain format: %s", e)
        return format_amount(minor, code)


def _append_interval(price: str, interval: Interval | str | None, interval_count: int) -> str:
    if not interval:
        return price
    return f"{price} {interval_text(interval, interval_count)}"


def format_with_interval(
    minor: int,
    code: str,
    interval: Interval | str | None = None,
    interval_count: int = 1,
) -> str:
    """Format a price with its recurring interval.

    Examples:
        >>> format_with_interval(9999, "USD", "month")
        '$99.99 per month'
        >>> format_with_interval(9999, "USD", "month", 3)
        '$99.99 every 3 months'
        >>> format_with_interval(9999, "USD")
        '$99.99'

    An unrecognized interval appends an empty phrase, leaving a trailing
    space ("$99.99 ").
    """
    return _append_interval(format_amount(minor, code), interval, interval_count)


def format_localized_with_interval(
    minor: int,
    code: str,
    interval: Interval | str | None = None,
    interval_count: int = 1,
    locale: str | None = None,
) -> str:
    """Locale-aware variant of format_with_interval()."""
    return _append_interval(format_localized(minor, code, locale), interval, interval_count)
