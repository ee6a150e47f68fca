"""numericformatter - cached, locale-aware number formatting.

A thin facade over Babel (CLDR) and num2words: style descriptors select how
a number is rendered, and a FormatterCache reuses one configured formatter
per distinct style configuration.

Public API:
    FormatterCache - Style-keyed formatter cache (construct for isolation)
    get_default_cache - Process-wide shared FormatterCache
    format_number - Format with the process-wide cache
    DecimalStyle, CurrencyStyle, PercentStyle, ScientificStyle,
    SpellOutStyle, OrdinalStyle, CustomStyle - Style descriptors
    CommonCurrency - ISO 4217 common currency codes
    NumberFormatter - Configurable formatter handle (for CustomStyle)

Exceptions:
    NumericFormatterError - Base exception class
    FormattingError - Render failure (converted to None by FormatterCache)

Submodules:
    numericformatter.currencies - Currency codes and CLDR currency lookups
    numericformatter.rendering - Renderer protocol and BabelRenderer
    numericformatter.values - Numeric input normalization
"""

from .cache import (
    FormatterCache,
    format_decimal,
    format_float,
    format_int,
    format_number,
    get_default_cache,
)
from .currencies import CommonCurrency, CommonCurrencyCode, CurrencyCode, CustomCurrencyCode
from .errors import FormattingError, NumericFormatterError
from .formatter import FormatMode, NumberFormatter
from .styles import (
    CurrencyStyle,
    CustomStyle,
    DecimalStyle,
    NumberStyle,
    OrdinalStyle,
    PercentStyle,
    ScientificStyle,
    SpellOutStyle,
)

# Version information - Auto-populated from package metadata
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("numericformatter")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CommonCurrency",
    "CommonCurrencyCode",
    "CurrencyCode",
    "CurrencyStyle",
    "CustomCurrencyCode",
    "CustomStyle",
    "DecimalStyle",
    "FormatMode",
    "FormatterCache",
    "FormattingError",
    "NumberFormatter",
    "NumberStyle",
    "NumericFormatterError",
    "OrdinalStyle",
    "PercentStyle",
    "ScientificStyle",
    "SpellOutStyle",
    "__version__",
    "format_decimal",
    "format_float",
    "format_int",
    "format_number",
    "get_default_cache",
]
