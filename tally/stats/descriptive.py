"""Provide single-dataset descriptive statistics.

Every function here is a pure primitive over an explicit sequence. None of
them validate their input; callers either validate first (the
:class:`tally.statistics.Statistics` constructor does) or accept the
documented behaviour on raw data.

Conventions:
- Dispersion uses population (``n``) denominators throughout.
- Sums are accumulated left to right in a plain loop. Python's builtin
  ``sum`` compensates float rounding and numpy reduces pairwise, and either
  would drift from naive IEEE-754 accumulation in the last bits.
- Order statistics sort a copy; the caller's sequence is never reordered.
"""

from __future__ import annotations

import math
import numbers
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, List, Sequence

from ..errors import PercentileRangeError

PERCENTILE_MIN: float = 0.0
PERCENTILE_MAX: float = 100.0
QUARTILE_LEVELS: tuple[float, float, float] = (25.0, 50.0, 75.0)


@dataclass(frozen=True)
class Quartiles:
    """First, second and third quartiles of one dataset.

    Attributes:
        q1: 25th percentile.
        q2: 50th percentile; identical to the median.
        q3: 75th percentile.
    """

    q1: float
    q2: float
    q3: float

    @property
    def iqr(self) -> float:
        """Interquartile range ``q3 - q1``."""
        return self.q3 - self.q1


def _accumulate(values: Iterable[float]) -> float:
    total = 0
    for value in values:
        total = total + value
    return total


def total(values: Sequence[float]) -> float:
    """Left-to-right sum of ``values``."""
    return _accumulate(values)


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean, or ``0.0`` for an empty sequence.

    Args:
        values: Raw numeric sequence. Not validated.

    Returns:
        float: ``sum / count``; ``0.0`` when ``values`` is empty.
    """
    if len(values) == 0:
        return 0.0
    return _accumulate(values) / len(values)


def median(values: Sequence[float]) -> float:
    """Middle value of the sorted data, averaging the two middles for even n."""
    ordered = sorted(values)
    n = len(ordered)
    middle = n // 2
    if n % 2 == 0:
        return ordered[middle - 1] / 2 + ordered[middle] / 2
    return ordered[middle]


def mode(values: Sequence[float]) -> List[float]:
    """Return every most-frequent value in ascending order.

    When all values are equally frequent, every distinct value is returned;
    "no unique mode" is not an error.
    """
    counts = Counter(values)
    top = max(counts.values())
    return sorted(value for value, freq in counts.items() if freq == top)


def variance(values: Sequence[float]) -> float:
    """Population variance ``(1/n) * sum((x - mean)^2)``.

    Returns NaN for an empty sequence.
    """
    n = len(values)
    if n == 0:
        return math.nan
    centre = mean(values)
    return _accumulate((value - centre) ** 2 for value in values) / n


def standard_deviation_of(values: Sequence[float]) -> float:
    """Population standard deviation of a raw sequence.

    Unlike :meth:`tally.statistics.Statistics.standard_deviation`, this helper
    performs no validation: it is mean, population variance and square root
    applied directly to ``values``.

    Args:
        values: Raw numeric sequence.

    Returns:
        float: ``sqrt(variance(values))``; NaN when ``values`` is empty.
    """
    return math.sqrt(variance(values)) if len(values) else math.nan


def value_range(values: Sequence[float]) -> float:
    """Spread between the largest and smallest value."""
    return max(values) - min(values)


def _check_percentile(p: object) -> None:
    in_range = (
        isinstance(p, numbers.Real)
        and not isinstance(p, bool)
        and PERCENTILE_MIN <= p <= PERCENTILE_MAX
    )
    if not in_range:
        raise PercentileRangeError(
            f"Percentile must be between {PERCENTILE_MIN:g} and "
            f"{PERCENTILE_MAX:g}; got {p!r}"
        )


def percentile(values: Sequence[float], p: float) -> float:
    """Percentile by linear interpolation between closest ranks.

    The fractional rank is ``idx = (p / 100) * (n - 1)`` over the ascending
    data. An integral ``idx`` selects that element directly; otherwise the
    two neighbouring elements are blended with weight ``idx - floor(idx)``.

    Args:
        values: Non-empty numeric sequence.
        p: Percentile level in ``[0, 100]``.

    Returns:
        float: The interpolated order statistic. ``p=0`` gives the minimum,
        ``p=100`` the maximum and ``p=50`` the median.

    Raises:
        PercentileRangeError: If ``p`` is not a real number in ``[0, 100]``.
    """
    _check_percentile(p)
    ordered = sorted(values)
    index = (p / 100) * (len(ordered) - 1)
    if float(index).is_integer():
        return ordered[int(index)]

    lower = math.floor(index)
    upper = math.ceil(index)
    weight = index - lower
    return ordered[lower] * (1 - weight) + ordered[upper] * weight


def quartiles(values: Sequence[float]) -> Quartiles:
    """Percentiles at ``QUARTILE_LEVELS`` as a :class:`Quartiles` object."""
    q1, q2, q3 = (percentile(values, level) for level in QUARTILE_LEVELS)
    return Quartiles(q1=q1, q2=q2, q3=q3)


__all__ = [
    "PERCENTILE_MAX",
    "PERCENTILE_MIN",
    "QUARTILE_LEVELS",
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
]
