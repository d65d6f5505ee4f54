"""
Value-holding statistics engine for a single dataset.

:class:`Statistics` validates its dataset once, keeps a private copy, and
recomputes every statistic on demand from that copy. Nothing is cached.
Two-dataset operations use the stored data as ``x`` and delegate to the free
functions in :mod:`tally.stats`.
"""

from __future__ import annotations

import logging
from typing import Any, List, Sequence

import pandas as pd

from .schema import SummaryLabels
from .stats import bivariate, descriptive, regression
from .stats.descriptive import Quartiles
from .stats.regression import RegressionResult
from .validation import as_list, validate_dataset

logger = logging.getLogger(__name__)


class Statistics:
    """Descriptive and bivariate statistics over one immutable dataset.

    Args:
        data: Non-empty sequence of finite real numbers. Lists, tuples, 1-D
            numpy arrays and pandas Series are accepted. The values are
            copied; later changes to ``data`` are not seen.

    Raises:
        NotArrayError: If ``data`` is not a sequence.
        EmptyDatasetError: If ``data`` is empty.
        InvalidNumberError: If any element is not a finite real number.
    """

    def __init__(self, data: Sequence[float]) -> None:
        validate_dataset(data)
        self._data: List[float] = as_list(data)
        logger.debug("Statistics constructed over %d values", len(self._data))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n={len(self._data)})"

    def get_data(self) -> List[float]:
        """Return a fresh copy of the stored dataset."""
        return list(self._data)

    def count(self) -> int:
        return len(self._data)

    def sum(self) -> float:
        return descriptive.total(self._data)

    def mean(self) -> float:
        return descriptive.mean(self._data)

    def median(self) -> float:
        return descriptive.median(self._data)

    def mode(self) -> List[float]:
        """All most-frequent values, ascending; every value if none repeats."""
        return descriptive.mode(self._data)

    def variance(self) -> float:
        """Population variance (``n`` denominator)."""
        return descriptive.variance(self._data)

    def standard_deviation(self) -> float:
        return descriptive.standard_deviation_of(self._data)

    def min(self) -> float:
        return min(self._data)

    def max(self) -> float:
        return max(self._data)

    def range(self) -> float:
        return descriptive.value_range(self._data)

    def percentile(self, p: float) -> float:
        """Interpolated ``p``-th percentile; see :func:`tally.stats.percentile`.

        Raises:
            PercentileRangeError: If ``p`` is outside ``[0, 100]``.
        """
        return descriptive.percentile(self._data, p)

    def quartiles(self) -> Quartiles:
        return descriptive.quartiles(self._data)

    def summary(self, labels: SummaryLabels = SummaryLabels()) -> pd.Series:
        """Collect the single-dataset statistics into one labelled Series.

        Args:
            labels: Index labels for the returned Series.

        Returns:
            pandas.Series: count, sum, mean, median, variance, std, min, q1,
            q3, max and range, in that order.
        """
        quarts = self.quartiles()
        values: dict[str, Any] = {
            labels.count: self.count(),
            labels.total: self.sum(),
            labels.mean: self.mean(),
            labels.median: self.median(),
            labels.variance: self.variance(),
            labels.std: self.standard_deviation(),
            labels.minimum: self.min(),
            labels.q1: quarts.q1,
            labels.q3: quarts.q3,
            labels.maximum: self.max(),
            labels.range: self.range(),
        }
        return pd.Series(values, dtype=float)

    def covariance(self, other: Sequence[float]) -> float:
        return bivariate.covariance(self._data, other)

    def correlation(self, other: Sequence[float]) -> float:
        """Pearson correlation with ``other``.

        Raises:
            ZeroVarianceError: If either side has zero standard deviation.
        """
        return bivariate.correlation(self._data, other)

    def linear_regression(self, y: Sequence[float]) -> RegressionResult:
        """Regress ``y`` on the stored dataset.

        Raises:
            DegenerateRegressionError: If the stored values are all identical.
        """
        return regression.linear_regression(self._data, y)


__all__ = ["Statistics"]
