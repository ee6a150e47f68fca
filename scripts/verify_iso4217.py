#!/usr/bin/env python3
"""Verify CommonCurrency against Babel CLDR currency data.

CommonCurrency must equal the set of currencies Babel reports as legal
tender in at least one territory today (list_common_currency_codes()).

Checks:
    1. Missing: legal tender somewhere, but not a CommonCurrency member
       (actionable: add the member).
    2. Retired: CommonCurrency member Babel knows but no territory uses as
       legal tender any more (actionable: remove the member).
    3. Unknown: CommonCurrency member Babel does not recognize at all
       (actionable: probably a typo).
    4. Historical: codes Babel knows that are neither members nor legal
       tender. Expected; shown only with --verbose.

Exit codes:
    0: CommonCurrency equals the legal tender set.
    1: Missing, retired or unknown codes, or import failures.

Usage:
    verify_iso4217.py [--verbose]

Python 3.13+. Requires Babel.
"""

from __future__ import annotations

import argparse
import sys


def _describe(codes: set[str], message: str) -> list[str]:
    """Format report lines with the English currency name."""
    from babel.numbers import get_currency_name  # noqa: PLC0415

    return [
        f"  {code} ({get_currency_name(code, locale='en')}): {message}"
        for code in sorted(codes)
    ]


def _check_missing(members: set[str], tender: set[str]) -> list[str]:
    """Currencies in legal tender use that have no enum member."""
    return _describe(tender - members, "Legal tender in CLDR but not in CommonCurrency")


def _check_retired(
    members: set[str],
    tender: set[str],
    babel_currencies: set[str],
) -> list[str]:
    """Enum members Babel knows but no territory tenders today."""
    return _describe(
        (members & babel_currencies) - tender,
        "In CommonCurrency but no longer legal tender",
    )


def _check_unknown(members: set[str], babel_currencies: set[str]) -> list[str]:
    """Enum members Babel has never heard of."""
    return [
        f"  {code}: In CommonCurrency but not recognized by Babel"
        for code in sorted(members - babel_currencies)
    ]


def _check_historical(
    members: set[str],
    tender: set[str],
    babel_currencies: set[str],
) -> list[str]:
    """Codes Babel knows that are correctly left out of CommonCurrency."""
    return _describe(babel_currencies - tender - members, "Historical")


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
    missing: list[str],
    retired: list[str],
    unknown: list[str],
    historical: list[str],
    member_count: int,
    tender_count: int,
    babel_count: int,
    verbose: bool,
) -> None:
    """Print formatted report."""
    print("CommonCurrency Verification")
    print("=" * 50)
    print(f"CommonCurrency members: {member_count}")
    print(f"Babel legal tender:     {tender_count}")
    print(f"Babel currencies:       {babel_count}")
    print()

    _print_section(
        "[ERROR] Missing codes",
        "Currency is legal tender somewhere; add a CommonCurrency member",
        missing,
    )
    _print_section(
        "[ERROR] Retired codes",
        "No territory tenders this currency; remove the CommonCurrency member",
        retired,
    )
    _print_section(
        "[ERROR] Unknown codes",
        "CommonCurrency member not recognized by Babel",
        unknown,
    )

    if historical:
        if verbose:
            _print_section(
                "[INFO] Historical codes",
                "Known to Babel, not legal tender, not members",
                historical,
            )
        else:
            print(f"[INFO] {len(historical)} historical code(s) in Babel. Use --verbose to list.")
            print()

    if not (missing or retired or unknown):
        print("[OK] CommonCurrency equals the legal tender set.")


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Verify CommonCurrency against Babel CLDR currency data.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="List historical Babel codes that are correctly not members.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run CommonCurrency verification checks."""
    args = _parse_args(argv)

    try:
        from babel.numbers import list_currencies  # noqa: PLC0415
    except ImportError:
        print("[ERROR] Babel not installed. Install with: pip install babel")
        return 1

    from numericformatter.currencies import (  # noqa: PLC0415
        CommonCurrency,
        list_common_currency_codes,
    )

    members = {member.value for member in CommonCurrency}
    tender = set(list_common_currency_codes())
    babel_currencies = set(list_currencies())

    missing = _check_missing(members, tender)
    retired = _check_retired(members, tender, babel_currencies)
    unknown = _check_unknown(members, babel_currencies)
    historical = _check_historical(members, tender, babel_currencies)

    _print_report(
        missing=missing,
        retired=retired,
        unknown=unknown,
        historical=historical,
        member_count=len(members),
        tender_count=len(tender),
        babel_count=len(babel_currencies),
        verbose=args.verbose,
    )

    errors = len(missing) + len(retired) + len(unknown)
    if errors:
        print(
            f"[FAIL] {len(missing)} missing, {len(retired)} retired,"
            f" {len(unknown)} unknown."
        )
        print("[EXIT-CODE] 1")
        return 1

    print("[PASS] All checks passed.")
    print("[EXIT-CODE] 0")
    return 0


if __name__ == "__main__":
    sys.exit(main())
