"""Exception hierarchy for numericformatter.

Python 3.13+. Zero external dependencies.
"""

__all__ = ["FormattingError", "NumericFormatterError"]


class NumericFormatterError(Exception):
    """Base exception for all numericformatter errors."""


class FormattingError(NumericFormatterError):
    """Raised by a renderer when a value cannot be rendered.

    FormatterCache.format() converts this error into a ``None`` result, so
    callers of the cache never see it. Renderer implementations and direct
    renderer users do.

    Attributes:
        fallback_value: Plain string form of the value, usable as display
            text when the formatted form is unavailable
        style_key: Cache key of the style being rendered (None for custom)
    """

    def __init__(
        self,
        message: str,
        fallback_value: str,
        *,
        style_key: str | None = None,
    ) -> None:
        """Initialize FormattingError.

        Args:
            message: Error message
            fallback_value: Value to display when formatting fails
            style_key: Cache key of the failing style, if any
        """
        super().__init__(message)
        self.fallback_value = fallback_value
        self.style_key = style_key
