"""Currency registry: the fixed code -> configuration table.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from .lookup import (
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

__all__ = [
    # Type aliases
    "CurrencyCode",
    # Data classes
    "CurrencyConfig",
    # Lookup functions
    "get_config",
    "all_currencies",
    "list_currencies",
    "get_symbol",
    "get_decimals",
    "get_locale",
    "get_name",
    # Predicates
    "is_supported",
    "is_zero_decimal",
    # Type guards
    "is_valid_currency_code",
]
