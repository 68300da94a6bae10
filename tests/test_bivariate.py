import math

import numpy as np
import pytest

from statlib.datasets import (
    EMPLOYERS,
    MARKET_RETURNS,
    PROFITS,
    RETURNS_A,
    RETURNS_B,
    RETURNS_C,
    SECURITY_X_RETURNS,
)
from statlib.result import StatErrorKind, StatResult
from statlib.stats import bivariate
from statlib.stats.bivariate import (
    coefficient_correlation,
    correlation_coefficient,
    covariance,
)

TOL = 1e-10


@pytest.mark.parametrize(
    "x, y, expected",
    [
        (RETURNS_A, RETURNS_B, 0.21677749238102959),
        (RETURNS_A, RETURNS_C, -0.9819805060619121),
        (RETURNS_B, RETURNS_C, -0.39735970711947155),
        (PROFITS, EMPLOYERS, 0.05881462738716168),
    ],
)
def test_reference_correlations(x, y, expected):
    res = coefficient_correlation(x, y)
    assert res.ok, res.error
    assert abs(res.as_float() - expected) < TOL


def test_reference_covariance():
    res = covariance(SECURITY_X_RETURNS, MARKET_RETURNS)
    assert res.ok
    assert abs(res.as_float() - 0.022571428571428576) < TOL


def test_alias_is_same_function():
    assert correlation_coefficient is coefficient_correlation


def test_covariance_matches_numpy():
    x = [2.1, 2.5, 3.6, 4.0]
    y = [8.0, 10.0, 12.0, 14.0]
    res = covariance(x, y)
    assert math.isclose(res.as_float(), float(np.cov(x, y)[0, 1]), rel_tol=1e-12)


def test_covariance_is_symmetric_and_may_be_negative():
    x = [1, 2, 3, 4]
    y = [8, 6, 4, 2]
    xy = covariance(x, y).as_float()
    yx = covariance(y, x).as_float()
    assert xy < 0
    assert math.isclose(xy, yx)


@pytest.mark.parametrize("x, y", [([], []), ([1.0], [2.0])])
def test_covariance_insufficient_data(x, y):
    res = covariance(x, y)
    assert res.kind is StatErrorKind.INSUFFICIENT_DATA


def test_covariance_length_mismatch():
    res = covariance([1, 2, 3], [1, 2])
    assert res.kind is StatErrorKind.SHAPE_MISMATCH


def test_correlation_insufficient_data_embeds_n():
    res = coefficient_correlation([1], [1])
    assert res.kind is StatErrorKind.INSUFFICIENT_DATA
    assert "got 1" in res.error


def test_correlation_length_mismatch():
    res = coefficient_correlation([1, 2, 3], [1, 2, 3, 4])
    assert res.kind is StatErrorKind.SHAPE_MISMATCH
    assert "3" in res.error and "4" in res.error


def test_correlation_constant_series_is_degenerate():
    res = coefficient_correlation([1, 1, 1], [1, 2, 3])
    assert res.kind is StatErrorKind.DEGENERATE_VARIANCE
    assert coefficient_correlation([1, 2, 3], [5, 5, 5]).kind is (
        StatErrorKind.DEGENERATE_VARIANCE
    )


def test_correlation_symmetry_and_affine_invariance():
    rng = np.random.default_rng(7)
    x = rng.normal(size=25)
    y = 0.4 * x + rng.normal(size=25)
    r = coefficient_correlation(x, y).as_float()
    assert math.isclose(r, coefficient_correlation(y, x).as_float(), abs_tol=1e-12)
    shifted = 3.5 * x + 10.0
    assert math.isclose(r, coefficient_correlation(shifted, y).as_float(), abs_tol=1e-9)


def test_correlation_stays_within_unit_interval():
    rng = np.random.default_rng(0)
    for _ in range(20):
        x = rng.uniform(-5, 5, size=12)
        y = rng.uniform(-5, 5, size=12)
        r = coefficient_correlation(x, y).as_float()
        assert -1.0 - 1e-12 <= r <= 1.0 + 1e-12


def test_perfect_linear_relationship():
    assert math.isclose(
        coefficient_correlation([1, 2, 3, 4], [3, 5, 7, 9]).as_float(), 1.0
    )
    assert math.isclose(
        coefficient_correlation([1, 2, 3, 4], [9, 7, 5, 3]).as_float(), -1.0
    )


def test_correlation_matches_scipy():
    stats = pytest.importorskip("scipy.stats")
    expected = stats.pearsonr(PROFITS, EMPLOYERS)[0]
    res = coefficient_correlation(PROFITS, EMPLOYERS)
    assert math.isclose(res.as_float(), float(expected), abs_tol=1e-10)


def test_sum_product_failure_is_returned_unchanged(monkeypatch):
    sentinel = StatResult.failure(StatErrorKind.EMPTY_INPUT, "boom")
    monkeypatch.setattr(bivariate, "sum_product", lambda *a, **k: sentinel)
    assert coefficient_correlation([1, 2], [3, 4]) is sentinel
    assert covariance([1, 2], [3, 4]) is sentinel


def test_denominator_failure_is_returned_unchanged(monkeypatch):
    sentinel = StatResult.failure(StatErrorKind.NEGATIVE_RADICAND, "round-off")
    monkeypatch.setattr(
        bivariate, "raw_deviation_denominator_part", lambda *a, **k: sentinel
    )
    assert coefficient_correlation([1, 2, 3], [3, 1, 2]) is sentinel


def test_inputs_are_not_mutated():
    x = [0.07, 0.09, 0.10]
    y = np.array([0.085, 0.07, 0.095])
    coefficient_correlation(x, y)
    covariance(x, y)
    assert x == [0.07, 0.09, 0.10]
    assert y.tolist() == [0.085, 0.07, 0.095]


def test_verbose_correlation_logs(caplog):
    caplog.set_level("INFO", logger="statlib")
    coefficient_correlation(RETURNS_A, RETURNS_B, verbose=True)
    assert "correlation: n=3" in caplog.text


@pytest.mark.parametrize("value", [0.3, 1 / 3])
def test_constant_float_series_fails_on_round_off_or_stays_finite(value):
    res = coefficient_correlation([value] * 3, [1, 2, 3])
    if res:
        assert math.isfinite(res.as_float())
    else:
        assert res.kind in (
            StatErrorKind.NEGATIVE_RADICAND,
            StatErrorKind.DEGENERATE_VARIANCE,
        )
