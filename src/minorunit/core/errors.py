"""Core error types shared across registry, formatting and runtime layers.

Lookups never raise for unknown currency codes; these errors only surface
from the locale-aware formatting layer, where they are caught and replaced
by a plain fallback rendering.

Python 3.13+.
"""

__all__ = ["CurrencyError", "FormattingError"]


class CurrencyError(Exception):
    """Base exception for all minorunit errors."""


class FormattingError(CurrencyError):
    """Raised when locale-aware formatting fails.

    The error carries a fallback_value that should be used in the output
    when the formatting fails, so callers that catch it can still display
    a usable price.

    Attributes:
        fallback_value: String to use in output when formatting fails
    """

    def __init__(self, message: str, fallback_value: str) -> None:
        """Initialize FormattingError.

        Args:
            message: Error message string
            fallback_value: Value to use in output when formatting fails
        """
        super().__init__(message)
        self.fallback_value = fallback_value
