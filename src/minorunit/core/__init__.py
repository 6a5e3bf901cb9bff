"""Core utilities shared across registry, formatting and runtime layers.

Exports:
    CurrencyError: Base exception for the package
    FormattingError: Exception raised when locale formatting fails
    BabelImportError: Raised when a Babel-only feature runs without Babel
    is_babel_available: Non-raising Babel probe

Python 3.13+.
"""

from .babel_compat import BabelImportError, is_babel_available
from .errors import CurrencyError, FormattingError

__all__ = ["BabelImportError", "CurrencyError", "FormattingError", "is_babel_available"]
