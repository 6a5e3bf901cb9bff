#!/usr/bin/env python3
"""Verify the currency registry against Babel CLDR data.

Compares each registry entry's minor-unit exponent with
babel.numbers.get_currency_precision() and checks that every default
locale parses. The registry follows the payment API, so some exponents
differ from CLDR on purpose (ISK, HUF, TWD and UGX are sent as
two-decimal amounts); those are reported as contractual, not as drift.

Checks:
    1. Structural: Registry codes not recognized by Babel.
    2. Structural: Registry locales Babel cannot parse.
    3. Discrepancies: Registry exponent differs from Babel precision and
       the currency is not a known contractual exception.
    4. Contractual: Expected differences. Shown only with --verbose.

Exit codes:
    0: All checks passed (discrepancies are warnings, not failures).
    1: Structural errors (unknown codes or locales, import failures).

Usage:
    verify_registry.py [--verbose]

Python 3.13+. Requires Babel.
"""

from __future__ import annotations

import argparse
import sys

# Sent to the payment API as two-decimal amounts; some are zero-decimal in CLDR
_CONTRACTUAL_TWO_DECIMAL = frozenset({"HUF", "ISK", "TWD", "UGX"})


def _check_unrecognized(codes: list[str], babel_currencies: set[str]) -> list[str]:
    """Check registry codes not recognized by Babel."""
    return [
        f"  {code}: In registry but not recognized by Babel"
        for code in codes
        if code not in babel_currencies
    ]


def _check_locales(locales: dict[str, str]) -> list[str]:
    """Check that every registry locale parses."""
    from babel import UnknownLocaleError  # noqa: PLC0415

    from minorunit.locale_utils import get_babel_locale  # noqa: PLC0415

    result: list[str] = []
    for code, locale_code in locales.items():
        try:
            get_babel_locale(locale_code)
        except (UnknownLocaleError, ValueError) as e:
            result.append(f"  {code}: locale {locale_code!r} rejected by Babel ({e})")
    return result


def _check_exponents(decimals: dict[str, int]) -> tuple[list[str], list[str]]:
    """Compare registry exponents against Babel precision.

    Returns:
        Tuple of (unexpected discrepancies, contractual differences).
    """
    from minorunit.core.babel_compat import get_babel_numbers  # noqa: PLC0415

    numbers = get_babel_numbers()
    unexpected: list[str] = []
    contractual: list[str] = []
    for code, ours in sorted(decimals.items()):
        babel_val = numbers.get_currency_precision(code)
        if ours == babel_val:
            continue
        line = f"  {code}: registry={ours}, Babel CLDR={babel_val}"
        if code in _CONTRACTUAL_TWO_DECIMAL and ours == 2:
            contractual.append(line)
        else:
            unexpected.append(line)
    return unexpected, contractual


def _print_section(header: str, explanation: str, lines: list[str]) -> None:
    """Print a report section if non-empty."""
    if not lines:
        return
    print(f"{header} ({len(lines)}):")
    print(f"  ({explanation})")
    for line in lines:
        print(line)
    print()


def _print_report(
    *,
    errors: list[str],
    discrepancies: list[str],
    contractual: list[str],
    entry_count: int,
    babel_count: int,
    verbose: bool,
) -> None:
    """Print formatted report."""
    print("Currency Registry Verification")
    print("=" * 50)
    print(f"Registry entries:  {entry_count}")
    print(f"Babel currencies:  {babel_count}")
    print()

    _print_section(
        "[ERROR] Structural errors",
        "Registry code or locale not recognized by Babel",
        errors,
    )
    _print_section(
        "[WARN] Registry vs Babel discrepancies",
        "Registry exponents follow the payment API; verify against its docs",
        discrepancies,
    )

    if contractual:
        if verbose:
            _print_section(
                "[INFO] Contractual differences",
                "Sent as two-decimal amounts by the payment API",
                contractual,
            )
        else:
            print(
                f"[INFO] {len(contractual)} contractual difference(s)"
                " from CLDR. Use --verbose to list."
            )
            print()


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Verify the currency registry against Babel CLDR data.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="List the expected contractual differences.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run registry verification checks."""
    args = _parse_args(argv)

    try:
        from babel.numbers import list_currencies  # noqa: PLC0415
    except ImportError:
        print("[ERROR] Babel not installed. Install with: pip install babel")
        return 1

    from minorunit.registry import list_currencies as registry_currencies  # noqa: PLC0415

    configs = registry_currencies()
    babel_currencies = list_currencies()

    errors = _check_unrecognized([c.code for c in configs], babel_currencies)
    errors += _check_locales({c.code: c.locale for c in configs})
    discrepancies, contractual = _check_exponents({c.code: c.decimals for c in configs})

    _print_report(
        errors=errors,
        discrepancies=discrepancies,
        contractual=contractual,
        entry_count=len(configs),
        babel_count=len(babel_currencies),
        verbose=args.verbose,
    )

    if errors:
        print(f"[FAIL] {len(errors)} structural error(s) found.")
        print("[EXIT-CODE] 1")
        return 1

    if discrepancies:
        print(f"[PASS] {len(discrepancies)} discrepancy(ies), {len(contractual)} contractual.")
    else:
        print("[PASS] All checks passed.")
    print("[EXIT-CODE] 0")
    return 0


if __name__ == "__main__":
    sys.exit(main())
