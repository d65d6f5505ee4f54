"""
Statistical primitives over explicit sequences.

This subpackage holds the pure functions that the
:class:`tally.statistics.Statistics` engine wraps. Each function takes its
dataset(s) as arguments and keeps no state between calls.

Modules:
    descriptive:
        Single-dataset measures: sum, mean, median, mode, population
        variance and standard deviation, range, interpolated percentiles
        and quartiles.

    bivariate:
        Population covariance and Pearson correlation, with an explicit
        ``CorrelationResult`` for callers that need to branch on zero
        variance without catching an exception.

    regression:
        Ordinary least-squares straight-line fit returning a
        ``RegressionResult`` with a ``predict`` method.

Design Principle:
    This subpackage depends only on ``tally.errors`` and ``tally.validation``.
    Two-dataset functions validate their inputs; single-dataset functions
    trust theirs.
"""

from .bivariate import CorrelationResult, correlation, correlation_result, covariance
from .descriptive import (
    Quartiles,
    mean,
    median,
    mode,
    percentile,
    quartiles,
    standard_deviation_of,
    total,
    value_range,
    variance,
)
from .regression import RegressionResult, linear_regression

__all__ = [
    "CorrelationResult",
    "correlation",
    "correlation_result",
    "covariance",
    "Quartiles",
    "mean",
    "median",
    "mode",
    "percentile",
    "quartiles",
    "standard_deviation_of",
    "total",
    "value_range",
    "variance",
    "RegressionResult",
    "linear_regression",
]
