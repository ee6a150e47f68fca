"""Configurable number formatter handle.

A NumberFormatter is a plain, mutable bag of rendering settings. It does not
render anything itself: a Renderer reads its settings and produces text.

Handles created by FormatterCache are configured once by a style and then
only read. Handles passed through CustomStyle belong to the caller, who is
free to configure them any way the Renderer understands.

Python 3.13+.
"""

from __future__ import annotations

from enum import StrEnum

from numericformatter.locale_utils import get_system_locale

__all__ = ["FormatMode", "NumberFormatter"]


class FormatMode(StrEnum):
    """Rendering mode of a NumberFormatter.

    StrEnum provides automatic string conversion: str(FormatMode.DECIMAL) == "decimal"
    """

    NONE = "none"
    """Unconfigured: integer digits only, no grouping"""

    DECIMAL = "decimal"
    """Grouped decimal with bounded fraction digits: 1,234.57"""

    CURRENCY = "currency"
    """Locale currency pattern: $1,234.57"""

    PERCENT = "percent"
    """Value times 100 with percent sign: 25%"""

    SCIENTIFIC = "scientific"
    """Scientific notation: 1.23456E5"""

    SPELL_OUT = "spell_out"
    """Number spelled out in words: forty-two"""

    ORDINAL = "ordinal"
    """Numeric ordinal: 3rd"""


class NumberFormatter:
    """Mutable formatter settings consumed by a Renderer.

    A fresh instance is unconfigured (FormatMode.NONE) and uses the process
    locale detected at construction time.

    Attributes:
        mode: Rendering mode
        locale: POSIX locale code
        minimum_fraction_digits: Fraction digits always shown (DECIMAL)
        maximum_fraction_digits: Fraction digits shown at most (DECIMAL)
        use_grouping: Show grouping separators (DECIMAL)
        currency_code: ISO 4217 code (CURRENCY); None means the locale default
        currency_symbol: Symbol replacing the locale symbol (CURRENCY)

    Example:
        >>> handle = NumberFormatter()
        >>> handle.mode = FormatMode.CURRENCY
        >>> handle.locale = "en_US"
        >>> handle.currency_symbol = "\N{MONEY BAG}"
    """

    __slots__ = (
        "currency_code",
        "currency_symbol",
        "locale",
        "maximum_fraction_digits",
        "minimum_fraction_digits",
        "mode",
        "use_grouping",
    )

    def __init__(self) -> None:
        self.mode: FormatMode = FormatMode.NONE
        self.locale: str = get_system_locale()
        self.minimum_fraction_digits: int = 0
        self.maximum_fraction_digits: int = 3
        self.use_grouping: bool = True
        self.currency_code: str | None = None
        self.currency_symbol: str | None = None

    def __repr__(self) -> str:
        return (
            f"NumberFormatter(mode={self.mode.value!r}, locale={self.locale!r}, "
            f"fraction_digits=({self.minimum_fraction_digits}, "
            f"{self.maximum_fraction_digits}), currency_code={self.currency_code!r})"
        )
