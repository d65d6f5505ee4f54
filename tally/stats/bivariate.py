"""Pairwise relationship measures: covariance and Pearson correlation.

Both public functions validate the pair with
:func:`tally.validation.validate_two_datasets` before computing anything.
``correlation_result`` reports an undefined correlation as a value instead of
raising, so callers that need a fallback can branch on it directly.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence

from ..errors import ZeroVarianceError
from ..validation import as_list, validate_two_datasets
from .descriptive import mean, standard_deviation_of


@dataclass(frozen=True)
class CorrelationResult:
    """Outcome of a Pearson correlation computation.

    Attributes:
        value: Correlation coefficient, or NaN when undefined.
        x_std: Population standard deviation of ``x``.
        y_std: Population standard deviation of ``y``.
    """

    value: float
    x_std: float
    y_std: float

    @property
    def defined(self) -> bool:
        return self.x_std != 0 and self.y_std != 0


def _covariance(xs: List[float], ys: List[float]) -> float:
    x_mean = mean(xs)
    y_mean = mean(ys)
    acc = 0.0
    for x_value, y_value in zip(xs, ys):
        acc += (x_value - x_mean) * (y_value - y_mean)
    return acc / len(xs)


def covariance(x: Sequence[float], y: Sequence[float]) -> float:
    """Population covariance ``(1/n) * sum((x_i - mx)(y_i - my))``.

    Args:
        x: First dataset.
        y: Second dataset, same length as ``x``.

    Returns:
        float: Positive when the datasets move together, negative when they
        move oppositely, zero when there is no linear co-movement.

    Raises:
        NotArrayError, EmptyDatasetError, LengthMismatchError,
        InvalidNumberError: From pair validation.
    """
    validate_two_datasets(x, y)
    return _covariance(as_list(x), as_list(y))


def correlation_result(x: Sequence[float], y: Sequence[float]) -> CorrelationResult:
    """Compute Pearson correlation without raising on zero variance.

    Raises:
        NotArrayError, EmptyDatasetError, LengthMismatchError,
        InvalidNumberError: From pair validation.
    """
    validate_two_datasets(x, y)
    xs, ys = as_list(x), as_list(y)
    x_std = standard_deviation_of(xs)
    y_std = standard_deviation_of(ys)
    if x_std == 0 or y_std == 0:
        return CorrelationResult(value=math.nan, x_std=x_std, y_std=y_std)
    return CorrelationResult(
        value=_covariance(xs, ys) / (x_std * y_std), x_std=x_std, y_std=y_std
    )


def correlation(x: Sequence[float], y: Sequence[float]) -> float:
    """Pearson correlation ``cov(x, y) / (std(x) * std(y))``.

    The result lies in ``[-1, 1]`` up to floating-point rounding; tiny
    overshoot such as ``1.0000000000000002`` is returned as computed.

    Raises:
        ZeroVarianceError: If either dataset has zero standard deviation.
        NotArrayError, EmptyDatasetError, LengthMismatchError,
        InvalidNumberError: From pair validation.
    """
    result = correlation_result(x, y)
    if not result.defined:
        raise ZeroVarianceError(
            "Cannot calculate correlation when standard deviation is zero"
        )
    return result.value


__all__ = ["CorrelationResult", "correlation", "correlation_result", "covariance"]
