"""Style-keyed formatter cache.

FormatterCache maps style cache keys to configured NumberFormatter handles
and renders values through a Renderer.

Architecture:
    - One handle per distinct cache key per cache instance
    - Handles are configured before they are stored and never mutated after
    - CustomStyle handles bypass the cache entirely
    - No eviction: the key space is bounded by (style x locale) combinations
    - Renderer is injected (BabelRenderer by default)

Thread Safety:
    Lookup and insertion are protected by a Lock with the double-check
    pattern: a handle is built outside the lock, and if another thread stored
    one for the same key first, the stored handle wins. Rendering runs
    outside the lock.

Process-wide default:
    get_default_cache() returns a lazily created shared instance, used by the
    module-level format_number() helpers. Construct FormatterCache() directly
    for an isolated instance (tests, multi-tenant hosts).

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from decimal import Decimal
from threading import Lock

from numericformatter.errors import FormattingError
from numericformatter.formatter import NumberFormatter
from numericformatter.rendering import BabelRenderer, Renderer
from numericformatter.styles import CustomStyle, NumberStyle
from numericformatter.values import Number, normalize_number

__all__ = [
    "FormatterCache",
    "format_decimal",
    "format_float",
    "format_int",
    "format_number",
    "get_default_cache",
]

logger = logging.getLogger(__name__)


class FormatterCache:
    """Cache of configured formatter handles keyed by style.

    Example:
        >>> from numericformatter.styles import OrdinalStyle
        >>> cache = FormatterCache()
        >>> cache.format(3, OrdinalStyle(locale="en_US"))
        '3rd'
        >>> cache.format(3.0, OrdinalStyle(locale="en_US"))
        '3rd'
        >>> len(cache)
        1
    """

    __slots__ = ("_handle_factory", "_handles", "_hits", "_lock", "_misses", "_renderer")

    def __init__(
        self,
        renderer: Renderer | None = None,
        handle_factory: Callable[[], NumberFormatter] = NumberFormatter,
    ) -> None:
        """Initialize an empty, isolated cache.

        Args:
            renderer: Rendering backend (default: BabelRenderer)
            handle_factory: Builds fresh, unconfigured handles
        """
        self._renderer: Renderer = renderer if renderer is not None else BabelRenderer()
        self._handle_factory = handle_factory
        self._handles: dict[str, NumberFormatter] = {}
        self._lock = Lock()
        self._hits = 0
        self._misses = 0

    @property
    def renderer(self) -> Renderer:
        """Rendering backend used by format()."""
        return self._renderer

    def resolve(self, style: NumberStyle) -> NumberFormatter:
        """Return the handle that renders ``style``.

        CustomStyle returns its own handle untouched. Any other style returns
        the cached handle for its key, creating and configuring it on first use.

        Args:
            style: Style descriptor

        Returns:
            Configured NumberFormatter
        """
        if isinstance(style, CustomStyle):
            return style.formatter

        key = style.cache_key()

        with self._lock:
            cached = self._handles.get(key)
            if cached is not None:
                self._hits += 1
                return cached
            self._misses += 1

        handle = self._handle_factory()
        style.configure(handle)
        logger.debug("Created formatter for '%s'", key)

        with self._lock:
            # Another thread may have stored the same key meanwhile
            return self._handles.setdefault(key, handle)

    def format(self, value: Number, style: NumberStyle) -> str | None:
        """Format a number according to a style.

        Args:
            value: int, float, Decimal or other real number
            style: Style descriptor

        Returns:
            Formatted string, or None if the value has no displayable
            representation under this style (unknown locale, unsupported
            language, non-finite value, malformed currency code).

        Raises:
            TypeError: If value is not a real number (bool included)
        """
        number = normalize_number(value)
        handle = self.resolve(style)
        try:
            result = self._renderer.render(number, handle)
        except FormattingError as e:
            if e.style_key is None:
                e.style_key = style.cache_key()
            logger.debug(
                "Formatting %s with '%s' failed (fallback %r): %s",
                number,
                e.style_key,
                e.fallback_value,
                e,
            )
            return None
        if result is None:
            logger.debug("Renderer returned no result for %s with '%s'", number, style.cache_key())
        return result

    def cache_info(self) -> dict[str, int | tuple[str, ...]]:
        """Get cache statistics.

        Returns:
            Dictionary with:
            - size: Number of cached handles
            - hits: resolve() calls served from the cache
            - misses: resolve() calls that built a handle
            - keys: Cached keys in insertion order
        """
        with self._lock:
            return {
                "size": len(self._handles),
                "hits": self._hits,
                "misses": self._misses,
                "keys": tuple(self._handles),
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._handles)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._handles


_default_cache: FormatterCache | None = None
_default_cache_lock = Lock()


def get_default_cache() -> FormatterCache:
    """Return the process-wide FormatterCache, creating it on first use."""
    global _default_cache  # noqa: PLW0603  # pylint: disable=global-statement
    with _default_cache_lock:
        if _default_cache is None:
            _default_cache = FormatterCache()
        return _default_cache


def format_number(value: Number, style: NumberStyle) -> str | None:
    """Format with the process-wide cache. See FormatterCache.format()."""
    return get_default_cache().format(value, style)


def format_int(value: int, style: NumberStyle) -> str | None:
    """Format an integer with the process-wide cache."""
    return format_number(value, style)


def format_float(value: float, style: NumberStyle) -> str | None:
    """Format a float with the process-wide cache."""
    return format_number(value, style)


def format_decimal(value: Decimal, style: NumberStyle) -> str | None:
    """Format a Decimal with the process-wide cache."""
    return format_number(value, style)
