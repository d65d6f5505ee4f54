import dataclasses
import importlib.util
import logging
import math

import numpy as np
import pytest

from tally import RegressionResult, linear_regression
from tally.errors import DegenerateRegressionError, LengthMismatchError

HAVE_SCIPY = importlib.util.find_spec("scipy") is not None


def test_perfect_line():
    fit = linear_regression([1, 2, 3, 4, 5], [2, 4, 6, 8, 10])
    assert fit.slope == pytest.approx(2, abs=1e-10)
    assert fit.intercept == pytest.approx(0, abs=1e-10)
    assert fit.r_squared == pytest.approx(1, abs=1e-10)
    assert fit.correlation == pytest.approx(1, abs=1e-10)
    assert fit.predict(6) == pytest.approx(12, abs=1e-10)


def test_three_point_line():
    fit = linear_regression([1, 2, 3], [2, 4, 6])
    assert fit.slope == pytest.approx(2, abs=1e-10)
    assert fit.intercept == pytest.approx(0, abs=1e-10)


def test_degenerate_x_raises():
    with pytest.raises(DegenerateRegressionError, match="all x values are the same"):
        linear_regression([1, 1, 1], [2, 4, 6])


def test_constant_y_uses_sentinels():
    fit = linear_regression([1, 2, 3, 4, 5], [5, 5, 5, 5, 5])
    assert fit.slope == pytest.approx(0, abs=1e-10)
    assert fit.intercept == pytest.approx(5, abs=1e-10)
    assert fit.r_squared == 1
    assert math.isnan(fit.correlation)


def test_constant_y_fallback_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="tally.stats.regression")
    linear_regression([1, 2, 3], [4, 4, 4])
    assert "Correlation undefined" in caplog.text


def test_negative_slope_and_offset():
    x = np.linspace(-3.0, 3.0, 13)
    y = 7.5 - 0.8 * x
    fit = linear_regression(x, y)
    assert fit.slope == pytest.approx(-0.8)
    assert fit.intercept == pytest.approx(7.5)
    assert fit.correlation == pytest.approx(-1)


def test_r_squared_is_squared_correlation_for_noisy_data():
    rng = np.random.default_rng(11)
    x = np.arange(20, dtype=float)
    y = 1.5 * x + rng.normal(scale=3.0, size=20)
    fit = linear_regression(x, y)
    assert 0 <= fit.r_squared <= 1
    assert fit.r_squared == pytest.approx(fit.correlation**2)


def test_matches_numpy_polyfit():
    x = [0.5, 1.7, 2.2, 3.9, 4.1, 6.0]
    y = [1.1, 0.4, 2.8, 2.9, 5.5, 4.2]
    m, b = np.polyfit(x, y, 1)
    fit = linear_regression(x, y)
    assert fit.slope == pytest.approx(m)
    assert fit.intercept == pytest.approx(b)


@pytest.mark.skipif(not HAVE_SCIPY, reason="scipy not installed")
def test_matches_scipy_linregress():
    from scipy.stats import linregress

    x = [0.5, 1.7, 2.2, 3.9, 4.1, 6.0]
    y = [1.1, 0.4, 2.8, 2.9, 5.5, 4.2]
    ref = linregress(x, y)
    fit = linear_regression(x, y)
    assert fit.slope == pytest.approx(ref.slope)
    assert fit.intercept == pytest.approx(ref.intercept)
    assert fit.correlation == pytest.approx(ref.rvalue)
    assert fit.r_squared == pytest.approx(ref.rvalue**2)


def test_result_is_immutable_and_fresh():
    first = linear_regression([1, 2, 3], [2, 4, 7])
    second = linear_regression([1, 2, 3], [2, 4, 7])
    assert isinstance(first, RegressionResult)
    assert first == second
    assert first is not second
    with pytest.raises(dataclasses.FrozenInstanceError):
        first.slope = 0.0


def test_predict_uses_fitted_coefficients():
    fit = RegressionResult(slope=3.0, intercept=-1.0, r_squared=1.0, correlation=1.0)
    assert fit.predict(0) == -1.0
    assert fit.predict(2) == 5.0


def test_mismatched_lengths_raise():
    with pytest.raises(LengthMismatchError):
        linear_regression([1, 2], [1, 2, 3])
