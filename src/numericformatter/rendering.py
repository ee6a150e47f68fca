"""Render capability: turns a configured NumberFormatter and a value into text.

Architecture:
    - Renderer: Protocol implemented by any rendering backend
    - BabelRenderer: default backend
        DECIMAL, CURRENCY, PERCENT, SCIENTIFIC, NONE -> Babel (CLDR patterns)
        SPELL_OUT, ORDINAL -> num2words (CLDR has no spell-out data in Babel)

Renderers are stateless and thread-safe. A render failure is signalled by
raising FormattingError (or returning None); FormatterCache converts both
into a None result.

Python 3.13+. Uses Babel for CLDR formatting and num2words for words.
"""

from __future__ import annotations

import logging
from typing import Protocol

from babel import UnknownLocaleError
from babel import numbers as babel_numbers
from num2words import num2words

from numericformatter.currencies import default_currency_for_locale
from numericformatter.errors import FormattingError
from numericformatter.formatter import FormatMode, NumberFormatter
from numericformatter.locale_utils import get_babel_locale
from numericformatter.values import NumericValue

__all__ = ["BabelRenderer", "Renderer"]

logger = logging.getLogger(__name__)

_CURRENCY_SIGN = "\N{CURRENCY SIGN}"

# Private-use character standing in for an overridden currency symbol.
# Babel copies it through as pattern literal text.
_SYMBOL_PLACEHOLDER = "\uE000"

# Exceptions Babel and num2words raise for unsupported data or values.
# Logic bugs (NameError, etc.) are not listed and propagate.
_BACKEND_ERRORS: tuple[type[Exception], ...] = (
    ValueError,
    TypeError,
    ArithmeticError,
    AttributeError,
    LookupError,
    NotImplementedError,
    UnknownLocaleError,
    babel_numbers.UnknownCurrencyError,
)


class Renderer(Protocol):
    """Rendering backend interface.

    Implementations return the formatted string, or signal failure by
    returning None or raising FormattingError.
    """

    def render(self, value: NumericValue, handle: NumberFormatter) -> str | None:
        """Render ``value`` according to ``handle``'s settings."""
        ...  # pylint: disable=unnecessary-ellipsis


class BabelRenderer:
    """Default Renderer backed by Babel and num2words.

    Non-finite values (NaN, infinities) are a render failure in every mode.

    Examples:
        >>> from numericformatter.values import normalize_number
        >>> handle = NumberFormatter()
        >>> handle.mode = FormatMode.PERCENT
        >>> handle.locale = "en_US"
        >>> BabelRenderer().render(normalize_number(0.25), handle)
        '25%'
    """

    __slots__ = ()

    def render(self, value: NumericValue, handle: NumberFormatter) -> str:
        """Render a value, raising FormattingError on failure.

        Raises:
            FormattingError: If the locale is unknown, the language has no
                spell-out data, the value is non-finite, an ordinal is
                requested for a non-integer, or the currency code is malformed.
        """
        if not value.is_finite:
            msg = f"Cannot render non-finite value '{value}' as {handle.mode.value}"
            raise FormattingError(msg, fallback_value=str(value))

        try:
            match handle.mode:
                case FormatMode.SPELL_OUT:
                    return self._spell_out(value, handle)
                case FormatMode.ORDINAL:
                    return self._ordinal(value, handle)
                case FormatMode.CURRENCY:
                    return self._currency(value, handle)
                case FormatMode.PERCENT:
                    return str(
                        babel_numbers.format_percent(
                            value.value, locale=get_babel_locale(handle.locale)
                        )
                    )
                case FormatMode.SCIENTIFIC:
                    return str(
                        babel_numbers.format_scientific(
                            value.value, locale=get_babel_locale(handle.locale)
                        )
                    )
                case FormatMode.DECIMAL | FormatMode.NONE:
                    return str(
                        babel_numbers.format_decimal(
                            value.value,
                            format=self._decimal_pattern(handle),
                            locale=get_babel_locale(handle.locale),
                        )
                    )
                case _ as unreachable:
                    msg = f"Unsupported format mode: {unreachable!r}"
                    raise FormattingError(msg, fallback_value=str(value))
        except FormattingError:
            raise
        except _BACKEND_ERRORS as e:
            msg = f"{handle.mode.value} formatting failed for '{value}' in '{handle.locale}': {e}"
            raise FormattingError(msg, fallback_value=str(value)) from e

    @staticmethod
    def _decimal_pattern(handle: NumberFormatter) -> str:
        """Build a CLDR number pattern from the handle's digit settings.

        '#,##0' = integer with grouping
        '#,##0.0##' = 1-3 decimal places with grouping
        '0.00' = exactly 2 decimal places, no grouping
        """
        if handle.mode is FormatMode.NONE:
            return "0"

        integer_part = "#,##0" if handle.use_grouping else "0"
        minimum = max(handle.minimum_fraction_digits, 0)
        maximum = max(handle.maximum_fraction_digits, minimum)

        if maximum == 0:
            return integer_part
        required = "0" * minimum
        optional = "#" * (maximum - minimum)
        return f"{integer_part}.{required}{optional}"

    @staticmethod
    def _currency(value: NumericValue, handle: NumberFormatter) -> str:
        code = handle.currency_code or default_currency_for_locale(handle.locale)
        if len(code) != 3 or not code.isascii() or not code.isalpha():
            msg = f"Malformed currency code '{code}'"
            raise FormattingError(msg, fallback_value=f"{code} {value}")

        babel_locale = get_babel_locale(handle.locale)
        pattern: str | None = None
        if handle.currency_symbol is not None:
            pattern = babel_locale.currency_formats["standard"].pattern
            if _CURRENCY_SIGN in pattern:
                pattern = pattern.replace(_CURRENCY_SIGN, _SYMBOL_PLACEHOLDER)
            else:
                logger.debug(
                    "Currency pattern %r of '%s' has no symbol; override %r not applied",
                    pattern,
                    handle.locale,
                    handle.currency_symbol,
                )

        text = str(
            babel_numbers.format_currency(
                value.value,
                code,
                format=pattern,
                locale=babel_locale,
                currency_digits=True,
                format_type="standard",
            )
        )
        if handle.currency_symbol is not None:
            text = text.replace(_SYMBOL_PLACEHOLDER, handle.currency_symbol)
        return text

    @staticmethod
    def _spell_out(value: NumericValue, handle: NumberFormatter) -> str:
        number = int(value.value) if value.is_integer else float(value.value)
        return str(num2words(number, lang=handle.locale))

    @staticmethod
    def _ordinal(value: NumericValue, handle: NumberFormatter) -> str:
        if not value.is_integer:
            msg = f"Ordinal requires an integral value, got '{value}'"
            raise FormattingError(msg, fallback_value=str(value))
        return str(num2words(int(value.value), lang=handle.locale, to="ordinal_num"))
