"""Unified numeric representation for formatting.

Every formatting entry point accepts int, float, Decimal or any other
numbers.Real (including single-precision floats such as numpy.float32) and
normalizes it once into a NumericValue. Renderers see only NumericValue, so
``42`` and ``42.0`` travel the same rendering path.

Python 3.13+.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from decimal import Decimal

__all__ = ["Number", "NumericValue", "normalize_number"]

type Number = int | float | Decimal | numbers.Real


@dataclass(frozen=True, slots=True)
class NumericValue:
    """Normalized number handed to renderers.

    Attributes:
        value: Decimal form of the input. Floats are converted through their
            shortest repr, so 0.1 becomes Decimal("0.1"), not the binary
            expansion. NaN and infinities are preserved.
        is_integer: True if the value is finite and has no fractional part.
            Spell-out and ordinal rendering rely on it to treat 42.0 as 42.
    """

    value: Decimal
    is_integer: bool

    @property
    def is_finite(self) -> bool:
        """True unless the value is NaN or infinite."""
        return self.value.is_finite()

    def as_python_number(self) -> int | Decimal:
        """Return an int for integral values, the Decimal otherwise."""
        if self.is_integer:
            return int(self.value)
        return self.value

    def __str__(self) -> str:
        return str(self.as_python_number())


def normalize_number(value: Number) -> NumericValue:
    """Normalize a numeric input into a NumericValue.

    Args:
        value: int, float, Decimal or other numbers.Real

    Returns:
        NumericValue carrying a Decimal and an integer hint

    Raises:
        TypeError: If value is a bool or not a real number

    Examples:
        >>> normalize_number(42) == normalize_number(42.0)
        True
        >>> normalize_number(0.25).value
        Decimal('0.25')
    """
    if isinstance(value, bool):
        msg = "bool is not a formattable number"
        raise TypeError(msg)

    if isinstance(value, Decimal):
        dec = value
    elif isinstance(value, int):
        dec = Decimal(value)
    elif isinstance(value, float):
        # float.__repr__: subclasses (numpy.float64) override repr
        dec = Decimal(float.__repr__(value))
    elif isinstance(value, numbers.Integral):
        dec = Decimal(int(value))
    elif isinstance(value, numbers.Real):
        dec = Decimal(repr(float(value)))
    else:
        msg = f"Expected a real number, got {type(value).__name__}"
        raise TypeError(msg)

    is_integer = dec.is_finite() and dec == dec.to_integral_value()
    return NumericValue(value=dec, is_integer=is_integer)
