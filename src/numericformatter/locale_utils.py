"""Locale utilities for BCP-47 to POSIX conversion and process locale detection.

Every locale identifier entering the library is normalized here, so that
style cache keys and Babel lookups agree on one canonical spelling.

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
from typing import TYPE_CHECKING

from numericformatter.constants import FALLBACK_LOCALE, KEY_DELIMITER, MAX_LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "get_system_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert a BCP-47 locale code to the POSIX form used by Babel.

    Strips surrounding whitespace and any encoding suffix, then replaces
    hyphens with underscores.

    Args:
        locale_code: Locale code (e.g., "en-US", "pt_BR", "de_DE.UTF-8")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR", "de_DE")

    Raises:
        ValueError: If the code is empty or contains the cache key delimiter.

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("tr_TR.UTF-8")
        'tr_TR'
    """
    code = locale_code.strip().split(".")[0].replace("-", "_")
    if not code:
        msg = f"Empty locale identifier: {locale_code!r}"
        raise ValueError(msg)
    if KEY_DELIMITER in code:
        msg = f"Locale identifier must not contain {KEY_DELIMITER!r}: {locale_code!r}"
        raise ValueError(msg)
    return code


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("tr-TR")
        >>> locale.territory
        'TR'
    """
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def get_system_locale() -> str:
    """Detect the process-wide current locale.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable
    4. LANG environment variable

    "C" and "POSIX" pseudo-locales are skipped. Evaluated on every call so
    that changes to the environment are seen by the next style descriptor.

    Returns:
        Detected locale code in POSIX format, or "en_US" if undeterminable.
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
        if system_locale and system_locale not in ("C", "POSIX"):
            return normalize_locale(system_locale)
    except ValueError:
        pass

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value and value.split(".")[0] not in ("C", "POSIX", ""):
            try:
                return normalize_locale(value)
            except ValueError:
                continue

    return FALLBACK_LOCALE
