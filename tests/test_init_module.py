"""Tests for the minorunit package entry point.

Covers:
- __all__ integrity: every exported name is accessible
- Re-exports are the same objects as their defining modules
- Fallback version when package metadata is unavailable
"""

from __future__ import annotations

import importlib
import sys
from importlib.metadata import PackageNotFoundError
from unittest.mock import patch

import minorunit


class TestPublicApi:
    """Top-level exports."""

    def test_all_names_resolve(self) -> None:
        for name in minorunit.__all__:
            assert hasattr(minorunit, name), name

    def test_all_has_no_duplicates(self) -> None:
        assert len(minorunit.__all__) == len(set(minorunit.__all__))

    def test_reexports_are_identical(self) -> None:
        from minorunit.formatting.formatters import format_amount
        from minorunit.registry.lookup import get_config

        assert minorunit.format_amount is format_amount
        assert minorunit.get_config is get_config

    def test_quick_round_trip(self) -> None:
        minor = minorunit.to_minor_units(19.99, "USD")
        assert minorunit.format_amount(minor, "USD") == "$19.99"


class TestVersion:
    """__version__ resolution."""

    def test_version_is_string(self) -> None:
        assert isinstance(minorunit.__version__, str)
        assert minorunit.__version__

    def test_fallback_version_without_metadata(self) -> None:
        with patch("importlib.metadata.version", side_effect=PackageNotFoundError("minorunit")):
            saved = sys.modules.pop("minorunit")
            try:
                fresh = importlib.import_module("minorunit")
                assert fresh.__version__ == "0.0.0+dev"
            finally:
                sys.modules["minorunit"] = saved
