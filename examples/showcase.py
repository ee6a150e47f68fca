"""Formatter showcase for numericformatter.

Prints every style for English (US) and Turkish (TR), using the
process-wide FormatterCache. Values with no displayable representation
print as "-".

Python 3.13+.
"""

from __future__ import annotations

from numericformatter import (
    CommonCurrency,
    CurrencyStyle,
    DecimalStyle,
    OrdinalStyle,
    PercentStyle,
    ScientificStyle,
    SpellOutStyle,
    format_number,
    get_default_cache,
)

LOCALES = {
    "English (US)": "en_US",
    "Turkish (TR)": "tr_TR",
}

VALUE = 1234.5678


def _show(label: str, text: str | None) -> None:
    print(f"  {label:<12} {text if text is not None else '-'}")


def showcase(name: str, locale: str) -> None:
    """Print one section per style for a locale."""
    print("=" * 50)
    print(f"{name} [{locale}]")
    print("=" * 50)

    _show("Decimal", format_number(VALUE, DecimalStyle(locale=locale)))
    _show("Currency", format_number(VALUE, CurrencyStyle(CommonCurrency.USD, locale=locale)))
    _show("", format_number(VALUE, CurrencyStyle(CommonCurrency.TRY, locale=locale)))
    _show("Percent", format_number(0.42, PercentStyle(locale=locale)))
    _show("Scientific", format_number(VALUE, ScientificStyle(locale=locale)))
    _show("Spell Out", format_number(42, SpellOutStyle(locale=locale)))
    for number in range(1, 5):
        _show("Ordinal" if number == 1 else "", format_number(number, OrdinalStyle(locale=locale)))
    print()


if __name__ == "__main__":
    for name, locale in LOCALES.items():
        showcase(name, locale)

    info = get_default_cache().cache_info()
    print(f"Cached formatters: {info['size']} (hits={info['hits']}, misses={info['misses']})")
