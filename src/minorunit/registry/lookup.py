"""Currency registry lookup API.

Provides type-safe access to the payment-processor currency table.
All types are immutable, hashable, and thread-safe. The registry is built
once at import time and never mutated.

Lookups are case-insensitive and never raise for unknown codes: callers
get None from get_config() and documented fallbacks from the accessors.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TypeIs

from minorunit.constants import DEFAULT_DECIMALS, DEFAULT_LOCALE

from .data import CURRENCY_ROWS

# ruff: noqa: RUF022 - __all__ organized by category for readability
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


# ============================================================================
# TYPE ALIASES (PEP 695)
# ============================================================================

type CurrencyCode = str
"""Upper-case ISO 4217 style currency code (e.g., 'USD', 'EUR', 'JPY')."""


# ============================================================================
# DATA CLASSES
# ============================================================================


@dataclass(frozen=True, slots=True)
class CurrencyConfig:
    """Registry entry for one supported currency.

    Immutable, thread-safe, hashable. Safe for use as dict key or set member.

    Attributes:
        code: Upper-case currency code (e.g., 'USD').
        name: English display name (e.g., 'US Dollar').
        symbol: Display symbol (e.g., '$'). Not unique across codes.
        decimals: Minor-unit exponent expected by the payment API (0, 2 or 3).
        locale: Default POSIX locale for localized formatting (e.g., 'en_US').
    """

    code: CurrencyCode
    name: str
    symbol: str
    decimals: int
    locale: str

    @property
    def is_zero_decimal(self) -> bool:
        """True when the major unit is also the minor unit (e.g., JPY)."""
        return self.decimals == 0

    @property
    def multiplier(self) -> int:
        """Minor units per major unit (10 ** decimals)."""
        return 10**self.decimals


# ============================================================================
# REGISTRY
# ============================================================================

_REGISTRY: Mapping[CurrencyCode, CurrencyConfig] = MappingProxyType(
    {
        code: CurrencyConfig(code=code, name=name, symbol=symbol, decimals=decimals, locale=locale)
        for code, name, symbol, decimals, locale in CURRENCY_ROWS
    }
)


def get_config(code: str) -> CurrencyConfig | None:
    """Look up a currency by code.

    Args:
        code: Currency code (e.g., 'usd', 'EUR'). Case-insensitive.

    Returns:
        CurrencyConfig if supported, None for unknown codes.
    """
    return _REGISTRY.get(code.upper())


def all_currencies() -> Mapping[CurrencyCode, CurrencyConfig]:
    """Return the whole registry as a read-only code -> config mapping.

    Iteration follows the table order (grouped by region). Callers must
    not rely on that order for anything beyond deterministic display.
    """
    return _REGISTRY


def list_currencies() -> tuple[CurrencyConfig, ...]:
    """Return all currency configurations in table order."""
    return tuple(_REGISTRY.values())


def get_symbol(code: str) -> str:
    """Return the display symbol, or the upper-cased code if unknown."""
    config = get_config(code)
    return config.symbol if config is not None else code.upper()


def get_decimals(code: str) -> int:
    """Return the minor-unit exponent, or DEFAULT_DECIMALS if unknown."""
    config = get_config(code)
    return config.decimals if config is not None else DEFAULT_DECIMALS


def get_locale(code: str) -> str:
    """Return the default locale, or DEFAULT_LOCALE if unknown."""
    config = get_config(code)
    return config.locale if config is not None else DEFAULT_LOCALE


def get_name(code: str) -> str:
    """Return the display name, or the upper-cased code if unknown."""
    config = get_config(code)
    return config.name if config is not None else code.upper()


def is_supported(code: str) -> bool:
    """Check whether the code is in the registry (case-insensitive)."""
    return code.upper() in _REGISTRY


def is_zero_decimal(code: str) -> bool:
    """Check whether the currency is zero-decimal.

    Unknown codes are not zero-decimal (they default to two decimals).
    """
    config = get_config(code)
    return config is not None and config.is_zero_decimal


# ============================================================================
# TYPE GUARDS (PEP 742)
# ============================================================================


def is_valid_currency_code(value: object) -> TypeIs[CurrencyCode]:
    """Check if value is a supported currency code.

    Unlike is_supported(), accepts any object and requires the canonical
    upper-case form.

    Args:
        value: Object to check.

    Returns:
        True if value is an upper-case code present in the registry.
    """
    return isinstance(value, str) and value in _REGISTRY
