"""
A Python package for descriptive and bivariate statistics over numeric series.

Computes sums, averages, products, geometric means, sample covariance and the
Pearson correlation coefficient with extended-precision accumulators and
explicit failure reporting.

Modules:
    - result: Tagged success/failure values returned by validated statistics.
    - stats: The numeric core (accumulators, paired sums, covariance, correlation).
    - datasets: Reference series used by the demo and tests.
    - reporting: Report lines and result tables.
    - output: CSV export of result tables.
    - plotting: Scatter figures of paired series.
"""

__version__ = "1.0.0"

from .result import (
    HIGH_PRECISION,
    HighPrecisionFloat,
    StatErrorKind,
    StatisticsError,
    StatResult,
)
from .stats import (
    average,
    coefficient_correlation,
    correlation_coefficient,
    covariance,
    geometric_mean,
    product,
    raw_deviation_denominator_part,
    sum_product,
    sum_squared,
    total,
)

__all__ = [
    # Results
    "HIGH_PRECISION",
    "HighPrecisionFloat",
    "StatErrorKind",
    "StatisticsError",
    "StatResult",
    # Accumulators and aggregates
    "total",
    "sum_squared",
    "product",
    "average",
    "geometric_mean",
    # Bivariate statistics
    "sum_product",
    "raw_deviation_denominator_part",
    "covariance",
    "coefficient_correlation",
    "correlation_coefficient",
]
