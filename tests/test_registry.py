"""Tests for the currency registry.

Tests cover:
- CurrencyConfig data class (immutability, hashing, derived properties)
- Table integrity (unique codes, exponents, locale format)
- Lookup functions and their unknown-code fallbacks
- Payment-API special cases (ISK, HUF, TWD, UGX)
"""

import re

import pytest
from hypothesis import given

from minorunit.registry import (
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
from minorunit.registry.data import CURRENCY_ROWS
from tests.strategies import mixed_case_codes, registry_codes, unknown_codes


class TestCurrencyConfig:
    """Tests for CurrencyConfig dataclass."""

    def test_immutable(self) -> None:
        """CurrencyConfig is immutable (frozen)."""
        config = CurrencyConfig(code="USD", name="US Dollar", symbol="$", decimals=2, locale="en_US")
        with pytest.raises(AttributeError):
            config.symbol = "US$"  # type: ignore[misc]

    def test_hashable(self) -> None:
        """CurrencyConfig can be used in sets."""
        config = CurrencyConfig(code="USD", name="US Dollar", symbol="$", decimals=2, locale="en_US")
        assert len({config, config}) == 1

    def test_slots(self) -> None:
        """CurrencyConfig uses __slots__."""
        config = CurrencyConfig(code="USD", name="US Dollar", symbol="$", decimals=2, locale="en_US")
        assert not hasattr(config, "__dict__")

    def test_multiplier(self) -> None:
        """multiplier is 10 ** decimals."""
        assert get_config("JPY").multiplier == 1  # type: ignore[union-attr]
        assert get_config("USD").multiplier == 100  # type: ignore[union-attr]
        assert get_config("KWD").multiplier == 1000  # type: ignore[union-attr]

    def test_is_zero_decimal_property(self) -> None:
        """is_zero_decimal property mirrors decimals == 0."""
        assert get_config("JPY").is_zero_decimal is True  # type: ignore[union-attr]
        assert get_config("EUR").is_zero_decimal is False  # type: ignore[union-attr]


class TestTableIntegrity:
    """Structural checks over the whole table."""

    def test_codes_are_unique(self) -> None:
        """No code appears twice in the source rows."""
        codes = [row[0] for row in CURRENCY_ROWS]
        assert len(codes) == len(set(codes))

    def test_registry_matches_rows(self) -> None:
        """Every row becomes exactly one registry entry."""
        assert len(all_currencies()) == len(CURRENCY_ROWS) == 137

    def test_codes_are_three_uppercase_letters(self) -> None:
        """Registry keys are canonical ISO-style codes."""
        for code, config in all_currencies().items():
            assert re.fullmatch(r"[A-Z]{3}", code)
            assert config.code == code

    def test_exponents_are_known_values(self) -> None:
        """Exponents are drawn from {0, 2, 3}."""
        assert {c.decimals for c in list_currencies()} == {0, 2, 3}

    def test_locales_are_posix(self) -> None:
        """Default locales use POSIX underscores (ll_CC)."""
        for config in list_currencies():
            assert re.fullmatch(r"[a-z]{2,3}_[A-Z]{2}", config.locale), config

    def test_every_entry_has_name_and_symbol(self) -> None:
        """No blank display fields."""
        for config in list_currencies():
            assert config.name.strip()
            assert config.symbol.strip()

    def test_three_decimal_currencies(self) -> None:
        """The dinar/rial group uses three decimals."""
        three = {c.code for c in list_currencies() if c.decimals == 3}
        assert three == {"BHD", "JOD", "KWD", "OMR", "TND"}

    def test_mapping_is_read_only(self) -> None:
        """all_currencies() cannot be mutated."""
        with pytest.raises(TypeError):
            all_currencies()["ZZZ"] = get_config("USD")  # type: ignore[index]

    def test_list_follows_table_order(self) -> None:
        """list_currencies() preserves table order."""
        assert [c.code for c in list_currencies()] == [row[0] for row in CURRENCY_ROWS]


class TestSpecialCases:
    """Currencies whose API exponent differs from everyday usage."""

    @pytest.mark.parametrize("code", ["ISK", "HUF", "TWD", "UGX"])
    def test_contractual_two_decimal(self, code: str) -> None:
        """Stored as two-decimal for the payment API."""
        assert get_decimals(code) == 2
        assert is_zero_decimal(code) is False

    @pytest.mark.parametrize("code", ["JPY", "KRW", "VND", "CLP", "XAF", "XOF", "XPF"])
    def test_zero_decimal(self, code: str) -> None:
        """Zero-decimal currencies."""
        assert is_zero_decimal(code) is True


class TestLookups:
    """Tests for lookup functions."""

    def test_get_config_known(self) -> None:
        """get_config returns the full record."""
        config = get_config("EUR")
        assert config == CurrencyConfig(
            code="EUR", name="Euro", symbol="€", decimals=2, locale="de_DE"
        )

    def test_get_config_unknown(self) -> None:
        """Unknown codes return None."""
        assert get_config("ZZZ") is None
        assert get_config("") is None

    def test_get_symbol_case_insensitive(self) -> None:
        """getSymbol("usd") == getSymbol("USD")."""
        assert get_symbol("usd") == get_symbol("USD") == "$"

    def test_get_symbol_unknown_returns_code(self) -> None:
        """Unknown codes use the upper-cased code as symbol."""
        assert get_symbol("zzz") == "ZZZ"

    def test_get_decimals_unknown_defaults_to_two(self) -> None:
        """Unknown codes default to two decimals."""
        assert get_decimals("ZZZ") == 2

    def test_get_locale(self) -> None:
        """Locale lookup with en_US fallback."""
        assert get_locale("jpy") == "ja_JP"
        assert get_locale("ZZZ") == "en_US"

    def test_get_name(self) -> None:
        """Name lookup with code fallback."""
        assert get_name("gbp") == "British Pound"
        assert get_name("zzz") == "ZZZ"

    def test_is_supported(self) -> None:
        """Membership is case-insensitive."""
        assert is_supported("usd") is True
        assert is_supported("ZZZ") is False

    def test_is_zero_decimal_examples(self) -> None:
        """isZeroDecimal examples."""
        assert is_zero_decimal("JPY") is True
        assert is_zero_decimal("USD") is False
        assert is_zero_decimal("ZZZ") is False

    def test_shared_symbols(self) -> None:
        """Symbols are not unique across codes."""
        dollar_codes = {c.code for c in list_currencies() if c.symbol == "$"}
        assert {"USD", "MXN", "ARS"} <= dollar_codes


class TestIsValidCurrencyCode:
    """Tests for the is_valid_currency_code type guard."""

    def test_accepts_registry_code(self) -> None:
        assert is_valid_currency_code("USD") is True

    def test_requires_canonical_case(self) -> None:
        assert is_valid_currency_code("usd") is False

    @pytest.mark.parametrize("value", [None, 840, b"USD", "US", "USDX"])
    def test_rejects_non_codes(self, value: object) -> None:
        assert is_valid_currency_code(value) is False


class TestLookupProperties:
    """Property-based checks over arbitrary codes."""

    @given(code=mixed_case_codes())
    def test_lookup_ignores_case(self, code: str) -> None:
        """Any casing resolves to the canonical entry."""
        config = get_config(code)
        assert config is not None
        assert config.code == code.upper()
        assert get_symbol(code) == config.symbol

    @given(code=registry_codes)
    def test_supported_codes_are_valid(self, code: str) -> None:
        """Registry codes pass both membership checks."""
        assert is_supported(code)
        assert is_valid_currency_code(code)

    @given(code=unknown_codes)
    def test_unknown_codes_fall_back(self, code: str) -> None:
        """Unknown codes get documented fallbacks, never errors."""
        assert get_config(code) is None
        assert get_symbol(code) == code
        assert get_decimals(code) == 2
        assert is_zero_decimal(code) is False
