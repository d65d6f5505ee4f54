"""Tests for free-standing covariance and correlation."""

import importlib.util
import math

import numpy as np
import pytest

from tally import (
    CorrelationResult,
    correlation,
    correlation_result,
    covariance,
    mean,
    standard_deviation_of,
)
from tally.errors import (
    EmptyDatasetError,
    InvalidNumberError,
    LengthMismatchError,
    NotArrayError,
    ZeroVarianceError,
)

HAVE_SCIPY = importlib.util.find_spec("scipy") is not None


def test_covariance_known_value():
    # means 2 and 4: ((-1)(-2) + 0 + (1)(2)) / 3
    assert covariance([1, 2, 3], [2, 4, 6]) == pytest.approx(4 / 3, abs=1e-10)


def test_covariance_sign():
    x = [1, 2, 3, 4, 5]
    assert covariance(x, [2, 4, 6, 8, 10]) > 0
    assert covariance(x, [10, 8, 6, 4, 2]) < 0
    assert covariance(x, [5, 5, 5, 5, 5]) == 0


def test_covariance_matches_numpy_population():
    x = [0.5, 1.7, 2.2, 3.9, 4.1, 6.0]
    y = [1.1, 0.4, 2.8, 2.9, 5.5, 4.2]
    assert covariance(x, y) == pytest.approx(np.cov(x, y, ddof=0)[0, 1])


def test_covariance_accepts_arrays():
    assert covariance(np.array([1.0, 2.0, 3.0]), (2, 4, 6)) == pytest.approx(4 / 3)


def test_correlation_known_value():
    assert correlation([1, 2, 3], [2, 4, 6]) == pytest.approx(1, abs=1e-10)


def test_correlation_zero_variance_raises():
    with pytest.raises(ZeroVarianceError, match="standard deviation is zero"):
        correlation([1, 1, 1], [2, 4, 6])
    with pytest.raises(ZeroVarianceError):
        correlation([2, 4, 6], [3, 3, 3])


def test_correlation_within_unit_interval():
    rng = np.random.default_rng(7)
    x = rng.normal(size=50).tolist()
    y = (0.3 * np.asarray(x) + rng.normal(size=50)).tolist()
    r = correlation(x, y)
    assert -1 - 1e-12 <= r <= 1 + 1e-12
    assert r == pytest.approx(np.corrcoef(x, y)[0, 1])


@pytest.mark.parametrize(
    "x, y, error",
    [
        ("abc", [1, 2, 3], NotArrayError),
        ([], [], EmptyDatasetError),
        ([1, 2], [1, 2, 3], LengthMismatchError),
        ([1, math.nan], [1, 2], InvalidNumberError),
    ],
)
def test_validation_failures_propagate(x, y, error):
    with pytest.raises(error):
        covariance(x, y)
    with pytest.raises(error):
        correlation(x, y)
    with pytest.raises(error):
        correlation_result(x, y)


class TestCorrelationResult:
    def test_defined_result(self):
        result = correlation_result([1, 2, 3], [3, 2, 1])
        assert isinstance(result, CorrelationResult)
        assert result.defined
        assert result.value == pytest.approx(-1)

    def test_constant_y_is_undefined_without_raising(self):
        result = correlation_result([1, 2, 3], [5, 5, 5])
        assert not result.defined
        assert math.isnan(result.value)
        assert result.y_std == 0
        assert result.x_std > 0

    def test_constant_x_is_undefined(self):
        result = correlation_result([4, 4, 4], [1, 2, 3])
        assert not result.defined
        assert result.x_std == 0


def test_free_standing_mean_and_standard_deviation():
    assert mean([1, 2, 3, 4, 5]) == 3
    assert mean([]) == 0
    assert standard_deviation_of([1, 2, 3, 4, 5]) == pytest.approx(math.sqrt(2), abs=1e-10)


@pytest.mark.skipif(not HAVE_SCIPY, reason="scipy not installed")
def test_correlation_matches_scipy_pearsonr():
    from scipy.stats import pearsonr

    x = [0.5, 1.7, 2.2, 3.9, 4.1, 6.0]
    y = [1.1, 0.4, 2.8, 2.9, 5.5, 4.2]
    assert correlation(x, y) == pytest.approx(pearsonr(x, y)[0])
