"""Thread safety tests for FormatterCache.

Validates concurrent resolve() and format() on a shared instance.
"""

import threading
from concurrent.futures import ThreadPoolExecutor, as_completed

from numericformatter import (
    CommonCurrency,
    CurrencyStyle,
    DecimalStyle,
    FormatterCache,
    NumberFormatter,
    OrdinalStyle,
    PercentStyle,
    ScientificStyle,
)


class TestCacheConcurrency:
    """Test cache thread safety."""

    def test_concurrent_resolve_single_handle(self) -> None:
        """All threads racing on one key end up with the same handle."""
        cache = FormatterCache()
        barrier = threading.Barrier(8)

        def resolve() -> NumberFormatter:
            barrier.wait()
            return cache.resolve(PercentStyle(locale="en_US"))

        with ThreadPoolExecutor(max_workers=8) as executor:
            futures = [executor.submit(resolve) for _ in range(8)]
            handles = [future.result() for future in as_completed(futures)]

        assert len({id(handle) for handle in handles}) == 1
        assert len(cache) == 1

    def test_concurrent_format_consistent(self) -> None:
        """Concurrent formatting with one style yields identical results."""
        cache = FormatterCache()
        style = CurrencyStyle(CommonCurrency.USD, locale="en_US")

        with ThreadPoolExecutor(max_workers=10) as executor:
            futures = [executor.submit(cache.format, 9876.54, style) for _ in range(100)]
            results = [future.result() for future in as_completed(futures)]

        assert all(result == "$9,876.54" for result in results)
        info = cache.cache_info()
        assert info["size"] == 1
        assert info["hits"] > 0

    def test_concurrent_mixed_styles(self) -> None:
        """Different styles formatted concurrently keep their own handles."""
        cache = FormatterCache()
        cases = [
            (DecimalStyle(1, locale="en_US"), 1234.5678, "1,234.6"),
            (PercentStyle(locale="en_US"), 0.25, "25%"),
            (OrdinalStyle(locale="en_US"), 3, "3rd"),
            (ScientificStyle(locale="en_US"), 123456.0, "1.23456E5"),
        ]

        with ThreadPoolExecutor(max_workers=10) as executor:
            futures = {}
            for i in range(100):
                style, value, expected = cases[i % len(cases)]
                futures[executor.submit(cache.format, value, style)] = expected
            for future in as_completed(futures):
                assert future.result() == futures[future]

        assert len(cache) == len(cases)

    def test_handles_not_reconfigured_under_contention(self) -> None:
        """A cached handle keeps the configuration of its key."""
        cache = FormatterCache()
        errors: list[Exception] = []

        def worker(digits: int) -> None:
            try:
                for _ in range(20):
                    handle = cache.resolve(DecimalStyle(digits, locale="en_US"))
                    assert handle.maximum_fraction_digits == digits
            except Exception as e:  # pylint: disable=broad-exception-caught
                errors.append(e)

        threads = [threading.Thread(target=worker, args=(i % 4,)) for i in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert not errors
        assert len(cache) == 4
