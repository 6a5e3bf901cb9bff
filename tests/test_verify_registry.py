"""Tests for the registry verification maintenance script."""

from __future__ import annotations

import pytest

from scripts import verify_registry


class TestChecks:
    """Individual report sections."""

    def test_unrecognized_codes(self) -> None:
        lines = verify_registry._check_unrecognized(["USD", "ZZZ"], {"USD", "EUR"})
        assert len(lines) == 1
        assert "ZZZ" in lines[0]

    def test_unknown_locale_reported(self) -> None:
        lines = verify_registry._check_locales({"USD": "en_US", "ZZZ": "xx_INVALID"})
        assert len(lines) == 1
        assert "xx_INVALID" in lines[0]

    def test_contractual_exponents_separated(self) -> None:
        unexpected, contractual = verify_registry._check_exponents(
            {"USD": 2, "ISK": 2, "JPY": 2}
        )
        assert [line.split(":")[0].strip() for line in contractual] == ["ISK"]
        assert [line.split(":")[0].strip() for line in unexpected] == ["JPY"]

    def test_matching_exponents_not_reported(self) -> None:
        assert verify_registry._check_exponents({"KWD": 3, "JPY": 0}) == ([], [])


class TestMain:
    """End-to-end report."""

    def test_report_header_and_exit_code(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = verify_registry.main(["--verbose"])
        out = capsys.readouterr().out
        assert "Currency Registry Verification" in out
        assert f"[EXIT-CODE] {code}" in out
        assert "ISK" in out
