"""Single-sequence accumulators and the aggregates derived from them.

Every function widens its input to ``numpy.longdouble`` before any arithmetic,
so integer and float samples follow one computation path and running totals
never accumulate in the narrower input type. None of these operations can
fail on numeric input: empty sequences map to the documented identities.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np

from ..result import HIGH_PRECISION, HighPrecisionFloat


def as_high_precision(values: Iterable) -> np.ndarray:
    """Widen a one-dimensional numeric sequence to the accumulator dtype.

    Args:
        values (Iterable): List, tuple, ``numpy.ndarray`` or ``pandas.Series``
            of ints or floats. The input is not modified.

    Returns:
        numpy.ndarray: 1-D ``longdouble`` copy of ``values``.

    Raises:
        ValueError: If ``values`` is not one-dimensional or is not numeric.
    """
    arr = np.asarray(values, dtype=HIGH_PRECISION)
    if arr.ndim != 1:
        raise ValueError(
            f"Expected a one-dimensional sequence, got an array with ndim={arr.ndim}."
        )
    return arr


def total(values: Iterable) -> HighPrecisionFloat:
    """Return the extended-precision sum of ``values`` (``0`` when empty)."""
    arr = as_high_precision(values)
    return HIGH_PRECISION(np.sum(arr, dtype=HIGH_PRECISION))


def sum_squared(values: Iterable) -> HighPrecisionFloat:
    """Return the sum of ``x * x`` over ``values`` (``0`` when empty)."""
    arr = as_high_precision(values)
    return HIGH_PRECISION(np.sum(arr * arr, dtype=HIGH_PRECISION))


def product(values: Iterable) -> HighPrecisionFloat:
    """Return the running product of ``values``.

    The fold is seeded with the multiplicative identity, so an empty sequence
    yields ``1`` rather than ``0``.
    """
    arr = as_high_precision(values)
    return HIGH_PRECISION(np.prod(arr, dtype=HIGH_PRECISION))


def average(values: Iterable) -> HighPrecisionFloat:
    """Return the arithmetic mean of ``values``, or ``0`` for an empty input."""
    arr = as_high_precision(values)
    n = len(arr)
    if n == 0:
        return HIGH_PRECISION(0)
    return total(arr) / HIGH_PRECISION(n)


def geometric_mean(values: Iterable) -> HighPrecisionFloat:
    """Return ``product(values) ** (1 / n)``, or ``0`` for an empty input.

    Note:
        Inputs are expected to be strictly positive. A zero or negative
        product is passed straight to ``numpy.power``; whatever it returns
        (``0``, ``nan``) is the result.
    """
    arr = as_high_precision(values)
    n = len(arr)
    if n == 0:
        return HIGH_PRECISION(0)
    return HIGH_PRECISION(np.power(product(arr), HIGH_PRECISION(1) / HIGH_PRECISION(n)))
