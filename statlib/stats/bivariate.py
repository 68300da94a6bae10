"""Sample covariance and the Pearson correlation coefficient.

Both statistics use the raw-score (sums and sums of squares) formulation over
extended-precision accumulators. Validation happens before any element is
consumed, and a failure from a lower-level helper is returned as-is.
"""

from __future__ import annotations

import logging
from typing import Sequence

from ..result import HIGH_PRECISION, StatErrorKind, StatResult
from .accumulators import as_high_precision, sum_squared, total
from .paired import raw_deviation_denominator_part, shape_mismatch, sum_product

logger = logging.getLogger(__name__)

MIN_PAIRED_OBSERVATIONS = 2


def _insufficient_data(statistic: str, n: int) -> StatResult:
    return StatResult.failure(
        StatErrorKind.INSUFFICIENT_DATA,
        f"Not enough data points for {statistic}: need at least "
        f"{MIN_PAIRED_OBSERVATIONS}, got {n}.",
    )


def covariance(x: Sequence, y: Sequence, *, verbose: bool = False) -> StatResult:
    """Sample covariance with Bessel's correction.

    Computes ``(sum(x*y) - sum(x) * sum(y) / n) / (n - 1)``.

    Args:
        x (Sequence): First numeric series.
        y (Sequence): Second numeric series, same length as ``x``.
        verbose (bool, optional): Log intermediate sums. Defaults to ``False``.

    Returns:
        StatResult: Covariance (any real value) on success. Fails with
        ``SHAPE_MISMATCH``, then ``INSUFFICIENT_DATA`` for ``n < 2``, then
        whatever :func:`sum_product` reports.
    """
    len_x, len_y = len(x), len(y)
    if len_x != len_y:
        return shape_mismatch(len_x, len_y)
    n = len_x
    if n < MIN_PAIRED_OBSERVATIONS:
        return _insufficient_data("covariance", n)

    x_arr = as_high_precision(x)
    y_arr = as_high_precision(y)
    sxy = sum_product(x_arr, y_arr, verbose=verbose)
    if not sxy:
        return sxy

    sx = total(x_arr)
    sy = total(y_arr)
    count = HIGH_PRECISION(n)
    cov = (sxy.value - sx * sy / count) / (count - 1)
    if verbose:
        logger.info("covariance: n=%d sum_x=%s sum_y=%s cov=%s", n, sx, sy, cov)
    return StatResult.success(cov)


def coefficient_correlation(
    x: Sequence, y: Sequence, *, verbose: bool = False
) -> StatResult:
    """Pearson correlation coefficient via the raw-score formula.

    ``r = (n*Sxy - Sx*Sy) / (sqrt(n*Sxx - Sx^2) * sqrt(n*Syy - Sy^2))``

    Args:
        x (Sequence): First numeric series.
        y (Sequence): Second numeric series, same length as ``x``.
        verbose (bool, optional): Log intermediate sums. Defaults to ``False``.

    Returns:
        StatResult: ``r`` in ``[-1, 1]`` (up to round-off) on success.

    Note:
        Steps short-circuit on the first failure: ``SHAPE_MISMATCH``,
        ``INSUFFICIENT_DATA``, a :func:`sum_product` failure, a
        ``NEGATIVE_RADICAND`` from either denominator factor, and finally
        ``DEGENERATE_VARIANCE`` when a series is constant.
        Only exactly-constant data reliably reaches that last check: a
        constant float series such as ``[0.3] * 3`` can leave a round-off
        radicand that is slightly negative (``NEGATIVE_RADICAND``) or slightly
        positive (success with ``r`` near zero).
    """
    len_x, len_y = len(x), len(y)
    if len_x != len_y:
        return shape_mismatch(len_x, len_y)
    n = len_x
    if n < MIN_PAIRED_OBSERVATIONS:
        return _insufficient_data("correlation", n)

    x_arr = as_high_precision(x)
    y_arr = as_high_precision(y)
    sx = total(x_arr)
    sy = total(y_arr)
    sxx = sum_squared(x_arr)
    syy = sum_squared(y_arr)

    sxy = sum_product(x_arr, y_arr, verbose=verbose)
    if not sxy:
        return sxy

    x_part = raw_deviation_denominator_part(sx, sxx, n, verbose=verbose)
    if not x_part:
        return x_part
    y_part = raw_deviation_denominator_part(sy, syy, n, verbose=verbose)
    if not y_part:
        return y_part

    denominator = x_part.value * y_part.value
    if denominator == 0:
        result = StatResult.failure(
            StatErrorKind.DEGENERATE_VARIANCE,
            "Correlation denominator is zero: at least one series is constant.",
        )
        if verbose:
            logger.info("correlation failed: %s", result.error)
        return result

    numerator = HIGH_PRECISION(n) * sxy.value - sx * sy
    r = numerator / denominator
    if verbose:
        logger.info(
            "correlation: n=%d numerator=%s denominator=%s r=%s",
            n,
            numerator,
            denominator,
            r,
        )
    return StatResult.success(r)


correlation_coefficient = coefficient_correlation
