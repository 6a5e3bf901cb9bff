"""Locale context for thread-safe currency formatting.

This module provides locale-aware formatting without global state mutation.
Uses Babel for CLDR-compliant currency formatting.

Architecture:
    - LocaleContext: Immutable locale configuration container
    - Formatters use Babel (thread-safe, CLDR-based)
    - No dependency on Python's locale module (avoids global state)
    - Instances are cached per normalized locale code (bounded LRU)

Python 3.13+. Uses Babel for i18n.
"""

import logging
from collections import OrderedDict
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from threading import RLock
from typing import ClassVar, Literal

from babel import Locale, UnknownLocaleError
from babel import numbers as babel_numbers

from minorunit.constants import DEFAULT_LOCALE, MAX_LOCALE_CACHE_SIZE
from minorunit.core.errors import FormattingError
from minorunit.locale_utils import normalize_locale

__all__ = ["CurrencyDisplay", "LocaleContext"]

logger = logging.getLogger(__name__)

type CurrencyDisplay = Literal["symbol", "code", "name"]


@dataclass(frozen=True, slots=True)
class LocaleContext:
    """Immutable locale configuration for currency formatting.

    Use LocaleContext.create() factory to construct instances with proper
    validation. Direct construction via __init__ bypasses validation.

    Examples:
        >>> ctx = LocaleContext.create('en-US')
        >>> ctx.format_currency(Decimal('1234.5'), currency='USD')
        '$1,234.50'

        >>> ctx = LocaleContext.create('de_DE')
        >>> ctx.format_currency(Decimal('1234.5'), currency='EUR')
        '1.234,50\\xa0€'

        >>> # Invalid locales fall back to en_US with warning logged
        >>> ctx = LocaleContext.create('invalid-locale')
        >>> ctx.is_fallback
        True

    Thread Safety:
        LocaleContext is immutable and thread-safe. Cache operations
        are protected by RLock.
    """

    # Class-level cache for LocaleContext instances (identity caching)
    _cache: ClassVar[OrderedDict[str, "LocaleContext"]] = OrderedDict()
    _cache_lock: ClassVar[RLock] = RLock()

    locale_code: str
    _babel_locale: Locale
    is_fallback: bool = False

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the locale context cache. Thread-safe via RLock."""
        with cls._cache_lock:
            cls._cache.clear()

    @classmethod
    def cache_size(cls) -> int:
        """Get current number of cached LocaleContext instances."""
        with cls._cache_lock:
            return len(cls._cache)

    @classmethod
    def cache_info(cls) -> dict[str, int | tuple[str, ...]]:
        """Get detailed cache statistics.

        Returns:
            Dictionary with cache statistics:
            - size: Current number of cached instances
            - max_size: Maximum cache size
            - locales: Tuple of cached locale codes (LRU order)
        """
        with cls._cache_lock:
            return {
                "size": len(cls._cache),
                "max_size": MAX_LOCALE_CACHE_SIZE,
                "locales": tuple(cls._cache.keys()),
            }

    @classmethod
    def create(cls, locale_code: str) -> "LocaleContext":
        """Create LocaleContext with graceful fallback for invalid locales.

        For unknown or invalid locales, logs a warning and falls back to
        DEFAULT_LOCALE. This method always succeeds; use create_or_raise()
        for strict validation.

        Args:
            locale_code: BCP 47 or POSIX locale identifier (e.g., 'en-US', 'de_CH')

        Returns:
            LocaleContext instance. For unknown/invalid locales, uses the
            en_US fallback while preserving the original locale_code.
        """
        # "en-US" and "en_US" share one cache entry
        cache_key = normalize_locale(locale_code)

        with cls._cache_lock:
            if cache_key in cls._cache:
                cls._cache.move_to_end(cache_key)
                return cls._cache[cache_key]

        used_fallback = False
        try:
            babel_locale = Locale.parse(cache_key)
        except UnknownLocaleError as e:
            logger.warning(
                "Unknown locale '%s': %s. Falling back to %s", locale_code, e, DEFAULT_LOCALE
            )
            babel_locale = Locale.parse(DEFAULT_LOCALE)
            used_fallback = True
        except (ValueError, TypeError) as e:
            logger.warning(
                "Invalid locale format '%s': %s. Falling back to %s",
                locale_code,
                e,
                DEFAULT_LOCALE,
            )
            babel_locale = Locale.parse(DEFAULT_LOCALE)
            used_fallback = True

        ctx = cls(locale_code=locale_code, _babel_locale=babel_locale, is_fallback=used_fallback)

        with cls._cache_lock:
            if cache_key in cls._cache:
                return cls._cache[cache_key]

            if len(cls._cache) >= MAX_LOCALE_CACHE_SIZE:
                cls._cache.popitem(last=False)

            cls._cache[cache_key] = ctx
            return ctx

    @classmethod
    def create_or_raise(cls, locale_code: str) -> "LocaleContext":
        """Create LocaleContext or raise on validation failure.

        Args:
            locale_code: BCP 47 or POSIX locale identifier

        Returns:
            LocaleContext instance with valid locale

        Raises:
            ValueError: If locale code is invalid or unknown
        """
        try:
            babel_locale = Locale.parse(normalize_locale(locale_code))
        except UnknownLocaleError as e:
            msg = f"Unknown locale identifier '{locale_code}': {e}"
            raise ValueError(msg) from None
        except (ValueError, TypeError) as e:
            msg = f"Invalid locale format '{locale_code}': {e}"
            raise ValueError(msg) from None
        return cls(locale_code=locale_code, _babel_locale=babel_locale)

    @property
    def babel_locale(self) -> Locale:
        """Pre-validated Babel Locale object for this context."""
        return self._babel_locale

    def format_currency(
        self,
        value: int | float | Decimal,
        *,
        currency: str,
        currency_display: CurrencyDisplay = "symbol",
    ) -> str:
        """Format a major-unit amount with locale-specific rules.

        Symbol placement, spacing, grouping and decimal separators follow
        the locale's CLDR data; fraction digits follow the currency's CLDR
        precision (JPY: 0, KWD: 3, most others: 2).

        Args:
            value: Monetary amount in major units (19.99, not 1999)
            currency: Currency code (EUR, USD, JPY, BHD, etc.)
            currency_display: Display style for currency
                - "symbol": Use currency symbol (default)
                - "code": Use currency code (EUR, USD, JPY)
                - "name": Use currency name (euros, US dollars)

        Returns:
            Formatted currency string according to locale rules

        Raises:
            FormattingError: If Babel cannot format the value. The error's
                fallback_value holds "<CODE> <value>".

        Examples:
            >>> ctx = LocaleContext.create('en-US')
            >>> ctx.format_currency(12345, currency='JPY')
            '¥12,345'

            >>> ctx.format_currency(Decimal('9.999'), currency='KWD', currency_display='name')
            '9.999 Kuwaiti dinars'
        """
        try:
            if currency_display == "name":
                return str(
                    babel_numbers.format_currency(
                        value,
                        currency,
                        locale=self.babel_locale,
                        currency_digits=True,
                        format_type="name",
                    )
                )

            if currency_display == "code":
                # Single U+00A4 = symbol, double U+00A4 U+00A4 = ISO code per CLDR
                standard_pattern = self.babel_locale.currency_formats.get("standard")
                raw_pattern = getattr(standard_pattern, "pattern", None)
                if raw_pattern and "\xa4" in raw_pattern:
                    return str(
                        babel_numbers.format_currency(
                            value,
                            currency,
                            format=raw_pattern.replace("\xa4", "\xa4\xa4"),
                            locale=self.babel_locale,
                            currency_digits=True,
                        )
                    )
                logger.debug(
                    "Currency pattern for locale %s lacks placeholder", self.locale_code
                )

            return str(
                babel_numbers.format_currency(
                    value,
                    currency,
                    locale=self.babel_locale,
                    currency_digits=True,
                    format_type="standard",
                )
            )

        except (ValueError, TypeError, InvalidOperation, AttributeError, KeyError) as e:
            fallback = f"{currency} {value}"
            msg = f"Currency formatting failed for '{currency} {value}': {e}"
            raise FormattingError(msg, fallback_value=fallback) from e
