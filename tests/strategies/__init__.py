"""Hypothesis strategies for minorunit property-based testing.

Usage:
    from tests.strategies import registry_codes, minor_amounts
"""

from .currency import (
    currency_by_decimals,
    minor_amounts,
    mixed_case_codes,
    registry_codes,
    unknown_codes,
)

__all__ = [
    "currency_by_decimals",
    "minor_amounts",
    "mixed_case_codes",
    "registry_codes",
    "unknown_codes",
]
