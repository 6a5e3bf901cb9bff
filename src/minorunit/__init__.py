"""minorunit - currency registry and minor-unit price formatting.

A fixed table of payment-processor currencies (symbol, name, minor-unit
exponent, default locale) with pure conversion and formatting functions
for amounts expressed as integers in the currency's smallest unit.

Public API:
    to_minor_units / from_minor_units - Decimal <-> minor-unit conversion
    format_plain, format_amount, format_with_code - Locale-neutral formatting
    format_localized - CLDR locale-aware formatting via Babel
    format_with_interval - Recurring prices ("$9.99 per month")
    render - HTML price fragment
    get_config, list_currencies - Registry access

Submodules:
    minorunit.registry - Currency table and lookups
    minorunit.formatting - Conversion, formatting and rendering
    minorunit.functions - Loosely typed convenience wrappers
    minorunit.runtime.locale_context - Babel-backed LocaleContext
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from .core import BabelImportError, CurrencyError, FormattingError
from .enums import Interval
from .formatting import (
    PriceItem,
    Priced,
    format_amount,
    format_localized,
    format_localized_with_interval,
    format_plain,
    format_with_code,
    format_with_interval,
    from_minor_units,
    interval_text,
    render,
    resolve_currency,
    resolve_interval,
    to_minor_units,
)
from .registry import (
    CurrencyCode,
    CurrencyConfig,
    all_currencies,
    get_config,
    get_decimals,
    get_locale,
    get_name,
    get_symbol,
    is_supported,
    is_valid_currency_code,
    is_zero_decimal,
    list_currencies,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("minorunit")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    # Errors
    "CurrencyError",
    "FormattingError",
    "BabelImportError",
    # Registry
    "CurrencyCode",
    "CurrencyConfig",
    "get_config",
    "all_currencies",
    "list_currencies",
    "get_symbol",
    "get_decimals",
    "get_locale",
    "get_name",
    "is_supported",
    "is_zero_decimal",
    "is_valid_currency_code",
    # Conversion
    "to_minor_units",
    "from_minor_units",
    # Formatting
    "Interval",
    "format_plain",
    "format_amount",
    "format_with_code",
    "format_localized",
    "format_with_interval",
    "format_localized_with_interval",
    "interval_text",
    # Rendering
    "Priced",
    "PriceItem",
    "render",
    "resolve_currency",
    "resolve_interval",
    "__version__",
]
