"""Formatting style descriptors.

A style descriptor says how a number should be rendered. The set of styles
is closed:

    DecimalStyle     grouped decimal, bounded fraction digits
    CurrencyStyle    currency amount in a given ISO 4217 code
    PercentStyle     percentage
    ScientificStyle  scientific notation
    SpellOutStyle    number in words
    OrdinalStyle     numeric ordinal (1st, 2nd, 3rd)
    CustomStyle      caller-configured NumberFormatter, used verbatim

Each descriptor derives a cache key and configures a fresh NumberFormatter.
Two descriptors with the same key always configure identical handles; two
descriptors differing in any rendering parameter never share a key.

Defaults are evaluated when a descriptor is constructed, not when the module
is imported: ``CurrencyStyle()`` built after the process locale changed uses
the new locale and that locale's currency.

Python 3.13+. Uses Babel (via currencies) for default currency lookup.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from numericformatter.constants import (
    DEFAULT_MAX_FRACTION_DIGITS,
    KEY_DELIMITER,
    MAX_FRACTION_DIGITS,
)
from numericformatter.currencies import (
    CommonCurrency,
    CurrencyCode,
    currency_code,
    default_currency_for_locale,
)
from numericformatter.formatter import FormatMode, NumberFormatter
from numericformatter.locale_utils import get_system_locale, normalize_locale

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Style variants
    "DecimalStyle",
    "CurrencyStyle",
    "PercentStyle",
    "ScientificStyle",
    "SpellOutStyle",
    "OrdinalStyle",
    "CustomStyle",
    # Union
    "NumberStyle",
    # Functions
    "cache_key",
    "configure",
]

logger = logging.getLogger(__name__)


def _make_key(*segments: object) -> str:
    return KEY_DELIMITER.join(str(segment) for segment in segments)


@dataclass(frozen=True, slots=True)
class _LocaleStyle:
    """Shared locale handling for every cacheable style."""

    locale: str = field(default_factory=get_system_locale, kw_only=True)

    def __post_init__(self) -> None:
        object.__setattr__(self, "locale", normalize_locale(self.locale))

    def _configure_locale(self, handle: NumberFormatter, mode: FormatMode) -> None:
        handle.mode = mode
        handle.locale = self.locale


@dataclass(frozen=True, slots=True)
class DecimalStyle(_LocaleStyle):
    """Decimal style with configurable maximum fraction digits.

    Values outside [0, MAX_FRACTION_DIGITS] are clamped, with a warning
    logged. The clamped value is what the descriptor stores and keys on.

    Example:
        >>> DecimalStyle(max_fraction_digits=1, locale="en-US").cache_key()
        'decimal:1:en_US'
    """

    max_fraction_digits: int = DEFAULT_MAX_FRACTION_DIGITS

    def __post_init__(self) -> None:
        super(DecimalStyle, self).__post_init__()
        requested = self.max_fraction_digits
        clamped = min(max(int(requested), 0), MAX_FRACTION_DIGITS)
        if clamped != requested:
            logger.warning(
                "max_fraction_digits=%r out of range [0, %d]; clamped to %d",
                requested,
                MAX_FRACTION_DIGITS,
                clamped,
            )
        object.__setattr__(self, "max_fraction_digits", clamped)

    def cache_key(self) -> str:
        return _make_key("decimal", self.max_fraction_digits, self.locale)

    def configure(self, handle: NumberFormatter) -> None:
        self._configure_locale(handle, FormatMode.DECIMAL)
        handle.minimum_fraction_digits = 0
        handle.maximum_fraction_digits = self.max_fraction_digits


@dataclass(frozen=True, slots=True)
class CurrencyStyle(_LocaleStyle):
    """Currency style with an ISO 4217 currency code.

    ``code`` accepts a CurrencyCode, a CommonCurrency member or a plain
    string; it is stored in tagged form. When omitted, the currency of the
    descriptor's own locale is used (USD if the locale has none).

    Examples:
        >>> CurrencyStyle(CommonCurrency.USD, locale="en_US").cache_key()
        'currency:USD:en_US'
        >>> CurrencyStyle(locale="tr_TR").code.description
        'TRY'
    """

    code: CurrencyCode | CommonCurrency | str | None = None

    def __post_init__(self) -> None:
        super(CurrencyStyle, self).__post_init__()
        code = self.code
        if code is None:
            code = default_currency_for_locale(self.locale)
        object.__setattr__(self, "code", currency_code(code))

    def cache_key(self) -> str:
        return _make_key("currency", self.code.description, self.locale)  # type: ignore[union-attr]

    def configure(self, handle: NumberFormatter) -> None:
        self._configure_locale(handle, FormatMode.CURRENCY)
        handle.currency_code = self.code.description  # type: ignore[union-attr]


@dataclass(frozen=True, slots=True)
class PercentStyle(_LocaleStyle):
    """Percent style: 0.25 renders as 25%."""

    def cache_key(self) -> str:
        return _make_key("percent", self.locale)

    def configure(self, handle: NumberFormatter) -> None:
        self._configure_locale(handle, FormatMode.PERCENT)


@dataclass(frozen=True, slots=True)
class ScientificStyle(_LocaleStyle):
    """Scientific notation style: 123456 renders as 1.23456E5."""

    def cache_key(self) -> str:
        return _make_key("scientific", self.locale)

    def configure(self, handle: NumberFormatter) -> None:
        self._configure_locale(handle, FormatMode.SCIENTIFIC)


@dataclass(frozen=True, slots=True)
class SpellOutStyle(_LocaleStyle):
    """Spell-out style: 42 renders as forty-two."""

    def cache_key(self) -> str:
        return _make_key("spellOut", self.locale)

    def configure(self, handle: NumberFormatter) -> None:
        self._configure_locale(handle, FormatMode.SPELL_OUT)


@dataclass(frozen=True, slots=True)
class OrdinalStyle(_LocaleStyle):
    """Ordinal style: 3 renders as 3rd."""

    def cache_key(self) -> str:
        return _make_key("ordinal", self.locale)

    def configure(self, handle: NumberFormatter) -> None:
        self._configure_locale(handle, FormatMode.ORDINAL)


@dataclass(frozen=True, slots=True, eq=False)
class CustomStyle:
    """Externally configured NumberFormatter, used exactly as supplied.

    Custom styles have no cache key: FormatterCache neither stores nor
    reconfigures the handle. Two CustomStyle objects compare by identity.
    """

    formatter: NumberFormatter

    def cache_key(self) -> None:
        return None

    def configure(self, handle: NumberFormatter) -> None:
        """No-op: the handle is already configured by its owner."""


type NumberStyle = (
    DecimalStyle
    | CurrencyStyle
    | PercentStyle
    | ScientificStyle
    | SpellOutStyle
    | OrdinalStyle
    | CustomStyle
)


def cache_key(style: NumberStyle) -> str | None:
    """Return the cache key of a style, or None for CustomStyle."""
    return style.cache_key()


def configure(style: NumberStyle, handle: NumberFormatter) -> None:
    """Configure a fresh handle to render according to ``style``."""
    style.configure(handle)
