"""
A Python package for descriptive and bivariate statistics on numeric datasets.

Computes central tendency, dispersion, interpolated percentiles, covariance,
Pearson correlation and ordinary least-squares regression. All dispersion
measures use population (``n``) denominators.

Modules:
    - statistics: ``Statistics``, a value-holding engine over one dataset.
    - stats: Pure single- and two-dataset primitives the engine wraps.
    - validation: Structural and numeric checks for one or two datasets.
    - errors: Error taxonomy shared by every module.
    - arithmetic: ``Calculator`` and ``factorial`` helpers.
"""

__version__ = "1.0.0"

from .arithmetic import Calculator, factorial
from .errors import (
    DegenerateRegressionError,
    DivisionByZeroError,
    EmptyDatasetError,
    InvalidNumberError,
    LengthMismatchError,
    NegativeFactorialError,
    NotArrayError,
    PercentileRangeError,
    StatisticsError,
    ZeroVarianceError,
)
from .schema import SummaryLabels
from .statistics import Statistics
from .stats import (
    CorrelationResult,
    Quartiles,
    RegressionResult,
    correlation,
    correlation_result,
    covariance,
    linear_regression,
    mean,
    standard_deviation_of,
)
from .validation import validate_dataset, validate_two_datasets

__all__ = [
    # Engine
    "Statistics",
    "SummaryLabels",
    # Free-standing operations
    "covariance",
    "correlation",
    "correlation_result",
    "linear_regression",
    "mean",
    "standard_deviation_of",
    # Validation
    "validate_dataset",
    "validate_two_datasets",
    # Result types
    "CorrelationResult",
    "Quartiles",
    "RegressionResult",
    # Arithmetic
    "Calculator",
    "factorial",
    # Errors
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
