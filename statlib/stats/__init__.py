"""
Descriptive and bivariate statistics over finite numeric sequences.

This subpackage holds the whole numeric surface of statlib. All functions are
pure: they read their arguments, never mutate them, and keep no state between
calls.

Modules:
    accumulators:
        Extended-precision folds (sum, sum of squares, product) and the
        aggregates derived from them (average, geometric mean). These have no
        failure mode; empty input maps to a documented identity.

    paired:
        Elementwise multiply-accumulate of two series and the per-series
        square-root factor of the correlation denominator. Both return a
        StatResult.

    bivariate:
        Sample covariance and the Pearson correlation coefficient, built from
        the two modules above.

Design Principle:
    Every element is widened to numpy.longdouble before arithmetic. Validated
    statistics report failures as StatResult values instead of raising or
    returning NaN.
"""

from .accumulators import (
    as_high_precision,
    average,
    geometric_mean,
    product,
    sum_squared,
    total,
)
from .bivariate import (
    MIN_PAIRED_OBSERVATIONS,
    coefficient_correlation,
    correlation_coefficient,
    covariance,
)
from .paired import raw_deviation_denominator_part, sum_product

__all__ = [
    "as_high_precision",
    "average",
    "geometric_mean",
    "product",
    "sum_squared",
    "total",
    "MIN_PAIRED_OBSERVATIONS",
    "coefficient_correlation",
    "correlation_coefficient",
    "covariance",
    "raw_deviation_denominator_part",
    "sum_product",
]
