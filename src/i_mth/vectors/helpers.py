"""Scalar helpers shared by the vector types."""

import math
from numbers import Real

import numpy as np


def is_scalar(value: object) -> bool:
    """Return True for real numbers usable as a scale factor (bool excluded)."""
    return isinstance(value, Real) and not isinstance(value, bool)


def to_float(value: float) -> float:
    """Convert to float, saturating ints beyond the float range to +/-inf."""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def ieee_divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE-754 semantics.

    Python floats raise ZeroDivisionError on a zero divisor; this returns
    +/-inf or NaN instead, matching native float64 hardware division.

    Example:
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(-1.0, 0.0)
        -inf
        >>> ieee_divide(1.0, 10**400)
        0.0
    """
    with np.errstate(divide="ignore", invalid="ignore", over="ignore", under="ignore"):
        return float(np.float64(to_float(numerator)) / np.float64(to_float(denominator)))
