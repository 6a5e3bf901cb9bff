"""Shared constants for minorunit.

This module provides centralized configuration constants used across the
registry, formatting, and runtime packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Registry fallbacks: Values used when a currency code is unknown
- Amount limits: Magnitude bound for untrusted numeric input
- Cache limits: Memory bounds for locale caching
- Rendering: Markup emitted by render()

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Registry fallbacks
    "DEFAULT_DECIMALS",
    "DEFAULT_LOCALE",
    "DEFAULT_CURRENCY",
    # Amount limits
    "MAX_AMOUNT_DIGITS",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Rendering
    "PRICE_CSS_CLASS",
    "PRICE_MARKUP",
]

# ============================================================================
# REGISTRY FALLBACKS
# ============================================================================

# Minor-unit exponent assumed for codes missing from the registry.
# Two decimals is by far the most common case (cents, pence, ...).
DEFAULT_DECIMALS: int = 2

# Locale reported for codes missing from the registry.
DEFAULT_LOCALE: str = "en_US"

# Currency assumed by resolve_currency() when an item carries none.
DEFAULT_CURRENCY: str = "USD"

# ============================================================================
# AMOUNT LIMITS
# ============================================================================

# Input amounts with more integer digits than this are rejected.
# Keeps integer conversion well under the interpreter's 4300-digit
# int/str conversion limit and rejects "1e99999999" before expansion.
MAX_AMOUNT_DIGITS: int = 1000

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached LocaleContext instances.
# The registry references 137 distinct default locales; the bound leaves
# room for caller overrides on top of a full registry sweep.
MAX_LOCALE_CACHE_SIZE: int = 256

# ============================================================================
# RENDERING
# ============================================================================

PRICE_CSS_CLASS: str = "price"

# Format string - use .format(css_class=..., text=...)
PRICE_MARKUP: str = '<span class="{css_class}">{text}</span>'
