"""Shared constants for numericformatter.

Constants are grouped by domain:
- Cache keys: Delimiter used when deriving style cache keys
- Fraction digits: Defaults and bounds for decimal formatting
- Fallbacks: Values used when locale data cannot supply one

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Cache keys
    "KEY_DELIMITER",
    # Fraction digits
    "DEFAULT_MAX_FRACTION_DIGITS",
    "MAX_FRACTION_DIGITS",
    # Fallbacks
    "FALLBACK_CURRENCY",
    "FALLBACK_LOCALE",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
]

# ============================================================================
# CACHE KEYS
# ============================================================================

# Separator between cache key segments. Never valid inside a locale identifier;
# locale identifiers containing it are rejected at style construction.
KEY_DELIMITER: str = ":"

# ============================================================================
# FRACTION DIGITS
# ============================================================================

DEFAULT_MAX_FRACTION_DIGITS: int = 2

# Upper bound for maximum fraction digits (same ceiling as Intl.NumberFormat).
# Out-of-range requests are clamped into [0, MAX_FRACTION_DIGITS].
MAX_FRACTION_DIGITS: int = 100

# ============================================================================
# FALLBACKS
# ============================================================================

# Currency used when a locale has no territory or no legal tender data.
FALLBACK_CURRENCY: str = "USD"

# Locale used when the process locale cannot be detected.
FALLBACK_LOCALE: str = "en_US"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached Babel Locale objects and territory currency lookups.
MAX_LOCALE_CACHE_SIZE: int = 128
