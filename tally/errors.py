"""Define the error taxonomy raised by validation and statistics routines.

Every error derives from :class:`StatisticsError` and from the builtin that
best matches its failure mode, so callers that already guard numeric code with
``except ValueError`` or ``except TypeError`` keep working.
"""

from __future__ import annotations


class StatisticsError(Exception):
    """Base class for all errors raised by this package."""


class NotArrayError(StatisticsError, TypeError):
    """Input is not a sequence of numbers."""


class EmptyDatasetError(StatisticsError, ValueError):
    """Sequence has zero elements."""


class InvalidNumberError(StatisticsError, ValueError):
    """Sequence contains a non-numeric, boolean, NaN or infinite element."""


class LengthMismatchError(StatisticsError, ValueError):
    """Paired sequences differ in length."""


class PercentileRangeError(StatisticsError, ValueError):
    """Percentile argument lies outside ``[0, 100]``."""


class ZeroVarianceError(StatisticsError, ValueError):
    """Correlation requested on a dataset with zero standard deviation."""


class DegenerateRegressionError(StatisticsError, ValueError):
    """Regression requested where every independent value is identical."""


class DivisionByZeroError(StatisticsError, ZeroDivisionError):
    """Calculator division with a zero divisor."""


class NegativeFactorialError(StatisticsError, ValueError):
    """Factorial requested for a negative integer."""


__all__ = [
    "StatisticsError",
    "NotArrayError",
    "EmptyDatasetError",
    "InvalidNumberError",
    "LengthMismatchError",
    "PercentileRangeError",
    "ZeroVarianceError",
    "DegenerateRegressionError",
    "DivisionByZeroError",
    "NegativeFactorialError",
]
