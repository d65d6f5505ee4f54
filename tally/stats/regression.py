"""Provide ordinary least-squares regression of one dataset on another.

This module supports:
- closed-form slope and intercept for a single independent variable,
- the coefficient of determination with a defined value for constant ``y``, and
- a correlation field that degrades to a sentinel instead of failing the fit.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Sequence

from ..errors import DegenerateRegressionError
from ..validation import as_list, validate_two_datasets
from .bivariate import correlation_result
from .descriptive import mean

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegressionResult:
    """Fitted straight line ``y = slope * x + intercept``.

    Attributes:
        slope: Least-squares slope ``b1``.
        intercept: Least-squares intercept ``b0``.
        r_squared: Coefficient of determination; ``1.0`` when ``y`` is
            constant.
        correlation: Pearson correlation of the pair, NaN when ``y`` is
            constant, ``0.0`` for any other undefined case.
    """

    slope: float
    intercept: float
    r_squared: float
    correlation: float

    def predict(self, x_value: float) -> float:
        """Evaluate the fitted line at ``x_value``."""
        return self.slope * x_value + self.intercept


def linear_regression(x: Sequence[float], y: Sequence[float]) -> RegressionResult:
    """Fit an ordinary least-squares straight line to paired data.

    Args:
        x: Independent variable values.
        y: Dependent variable values, same length as ``x``.

    Returns:
        RegressionResult: Slope, intercept, ``r_squared`` and correlation,
        with a ``predict`` method closing over the fitted coefficients.

    Raises:
        DegenerateRegressionError: If every ``x`` value is identical, so that
            ``sum((x - mean_x)^2)`` is zero and the slope is undefined.
        NotArrayError, EmptyDatasetError, LengthMismatchError,
        InvalidNumberError: From pair validation.

    Note:
        ``r_squared`` is ``1 - SSres / SStot``. When ``SStot`` is zero (``y``
        constant) it is defined as ``1.0``: the horizontal fitted line
        explains a constant response exactly.
        The correlation fallback inspects only ``y``'s standard deviation.
        A constant ``x`` cannot reach it because it fails earlier as a
        degenerate regression.

    References:
        Ordinary least squares linear regression, closed form
        ``b1 = Sxy / Sxx``, ``b0 = mean_y - b1 * mean_x``.
    """
    validate_two_datasets(x, y)
    xs, ys = as_list(x), as_list(y)

    x_mean = mean(xs)
    y_mean = mean(ys)

    sxy = 0.0
    sxx = 0.0
    for x_value, y_value in zip(xs, ys):
        x_diff = x_value - x_mean
        sxy += x_diff * (y_value - y_mean)
        sxx += x_diff * x_diff

    if sxx == 0:
        raise DegenerateRegressionError(
            "Cannot perform linear regression: all x values are the same"
        )

    slope = sxy / sxx
    intercept = y_mean - slope * x_mean

    sst = 0.0
    sse = 0.0
    for x_value, y_value in zip(xs, ys):
        y_diff = y_value - y_mean
        resid = y_value - (slope * x_value + intercept)
        sst += y_diff * y_diff
        sse += resid * resid

    r2 = 1.0 if sst == 0 else 1.0 - sse / sst

    corr = correlation_result(xs, ys)
    if corr.defined:
        r = corr.value
    else:
        r = math.nan if corr.y_std == 0 else 0.0
        logger.debug(
            "Correlation undefined for regression (x_std=%g, y_std=%g); using %s",
            corr.x_std,
            corr.y_std,
            r,
        )

    return RegressionResult(
        slope=slope,
        intercept=intercept,
        r_squared=r2,
        correlation=r,
    )


__all__ = ["RegressionResult", "linear_regression"]
