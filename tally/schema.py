"""Define standardized labels for tabular statistic summaries."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SummaryLabels:
    """Container for standardized summary index labels.

    These labels index the :class:`pandas.Series` returned by
    :meth:`tally.statistics.Statistics.summary`, so summaries from different
    datasets line up when concatenated into one DataFrame.

    Attributes:
        count: Number of observations.
        total: Left-to-right sum of the observations.
        mean: Arithmetic mean.
        median: 50th percentile.
        variance: Population variance (``n`` denominator).
        std: Population standard deviation.
        minimum: Smallest observation.
        q1: 25th percentile by linear interpolation between closest ranks.
        q3: 75th percentile by the same method.
        maximum: Largest observation.
        range: ``maximum - minimum``.
    """

    count: str = "count"
    total: str = "sum"
    mean: str = "mean"
    median: str = "median"
    variance: str = "variance"
    std: str = "std"
    minimum: str = "min"
    q1: str = "q1"
    q3: str = "q3"
    maximum: str = "max"
    range: str = "range"
