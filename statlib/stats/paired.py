"""Paired accumulation and the per-series factor of the correlation denominator."""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from ..result import HIGH_PRECISION, StatErrorKind, StatResult
from .accumulators import as_high_precision

logger = logging.getLogger(__name__)


def shape_mismatch(len_x: int, len_y: int) -> StatResult:
    """Build the failure reported when two series differ in length."""
    return StatResult.failure(
        StatErrorKind.SHAPE_MISMATCH,
        f"Size mismatch: x has {len_x} elements but y has {len_y} elements.",
    )


def sum_product(
    x: Sequence,
    y: Sequence,
    *,
    expect_non_negative: bool = False,
    verbose: bool = False,
) -> StatResult:
    """Accumulate ``sum(x[i] * y[i])`` in extended precision.

    Args:
        x (Sequence): First numeric series.
        y (Sequence): Second numeric series, same length as ``x``.
        expect_non_negative (bool, optional): Reject a negative total. Only
            meaningful when both series are known to be non-negatively
            related (for example, both all-positive). Defaults to ``False``.
        verbose (bool, optional): Log the accumulated total and any failure.
            Defaults to ``False``.

    Returns:
        StatResult: The total on success; ``SHAPE_MISMATCH``, ``EMPTY_INPUT``
        or (when requested) ``NEGATIVE_TOTAL`` on failure.
    """
    len_x, len_y = len(x), len(y)
    if len_x != len_y:
        result = shape_mismatch(len_x, len_y)
    elif len_x == 0:
        result = StatResult.failure(
            StatErrorKind.EMPTY_INPUT,
            "Cannot compute the sum of products of empty sequences.",
        )
    else:
        x_arr = as_high_precision(x)
        y_arr = as_high_precision(y)
        acc = np.sum(x_arr * y_arr, dtype=HIGH_PRECISION)
        if expect_non_negative and acc < 0:
            result = StatResult.failure(
                StatErrorKind.NEGATIVE_TOTAL,
                f"Sum of products is negative ({acc}) for series expected to be "
                "non-negatively correlated.",
            )
        else:
            result = StatResult.success(acc)

    if verbose:
        if result:
            logger.info("sum_product: n=%d total=%s", len_x, result.value)
        else:
            logger.info("sum_product failed: %s", result.error)
    return result


def raw_deviation_denominator_part(
    sum_x, sum_squared_x, n: int, *, verbose: bool = False
) -> StatResult:
    """Return ``sqrt(n * sum_squared_x - sum_x ** 2)``.

    The radicand equals ``n`` times the sum of squared deviations, so it is
    never negative in exact arithmetic. A negative value can only come from
    floating round-off on near-constant data and is reported, not clamped.

    Args:
        sum_x: Sum of the series.
        sum_squared_x: Sum of the squared elements of the series.
        n (int): Number of elements in the series.
        verbose (bool, optional): Log the radicand. Defaults to ``False``.

    Returns:
        StatResult: Non-negative root on success, ``NEGATIVE_RADICAND``
        otherwise.
    """
    s = HIGH_PRECISION(sum_x)
    ssq = HIGH_PRECISION(sum_squared_x)
    count = HIGH_PRECISION(n)
    radicand = count * ssq - s * s
    if verbose:
        logger.info(
            "denominator part: n=%s sum=%s sum_squared=%s radicand=%s",
            n,
            s,
            ssq,
            radicand,
        )
    if radicand < 0:
        return StatResult.failure(
            StatErrorKind.NEGATIVE_RADICAND,
            f"Negative radicand: n={n}, sum={s}, sum_squared={ssq}, "
            f"n*sum_squared - sum^2 = {radicand}.",
        )
    return StatResult.success(np.sqrt(radicand))
