"""Structural and numeric validation for one or two datasets.

A dataset is a non-empty one-dimensional sequence of finite real numbers.
Lists, tuples, other non-string sequences, 1-D :class:`numpy.ndarray` objects
and :class:`pandas.Series` are accepted as containers. Booleans, NaN and
infinities are rejected as elements.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Sequence
from typing import Any, List, Optional, Tuple

import numpy as np
import pandas as pd

from .errors import (
    EmptyDatasetError,
    InvalidNumberError,
    LengthMismatchError,
    NotArrayError,
)


def is_sequence(data: Any) -> bool:
    """Return ``True`` when ``data`` is an ordered one-dimensional container."""
    if isinstance(data, np.ndarray):
        return data.ndim == 1
    if isinstance(data, pd.Series):
        return True
    return isinstance(data, Sequence) and not isinstance(data, (str, bytes, bytearray))


def is_valid_number(value: Any) -> bool:
    """Return ``True`` for finite real scalars that are not booleans."""
    if isinstance(value, (bool, np.bool_)):
        return False
    if not isinstance(value, numbers.Real):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def as_list(data: Any) -> List[Any]:
    """Copy a validated container into a plain list.

    numpy and pandas containers go through ``tolist()`` so the copy holds
    Python scalars rather than numpy scalar types.
    """
    if isinstance(data, (np.ndarray, pd.Series)):
        return data.tolist()
    return list(data)


def _first_invalid(values: List[Any]) -> Optional[Tuple[int, Any]]:
    for index, value in enumerate(values):
        if not is_valid_number(value):
            return index, value
    return None


def validate_dataset(data: Any) -> None:
    """Check that ``data`` is a usable single dataset.

    Args:
        data: Candidate dataset.

    Raises:
        NotArrayError: If ``data`` is not a sequence.
        EmptyDatasetError: If ``data`` has no elements.
        InvalidNumberError: If any element is not a finite real number.
    """
    if not is_sequence(data):
        raise NotArrayError("Input must be a sequence of numbers")
    if len(data) == 0:
        raise EmptyDatasetError("Dataset cannot be empty")
    bad = _first_invalid(as_list(data))
    if bad is not None:
        index, value = bad
        raise InvalidNumberError(
            f"All dataset elements must be valid finite numbers; "
            f"got {value!r} at index {index}"
        )


def validate_two_datasets(x: Any, y: Any) -> None:
    """Check a paired dataset before any two-dataset statistic is computed.

    Checks run in a fixed order and the first violation is raised; later
    checks are not evaluated.

    Args:
        x: Independent (first) dataset.
        y: Dependent (second) dataset.

    Raises:
        NotArrayError: If either input is not a sequence.
        EmptyDatasetError: If either input is empty.
        LengthMismatchError: If the lengths differ.
        InvalidNumberError: If an element of ``x``, then of ``y``, is not a
            finite real number. The message names the offending side.
    """
    if not is_sequence(x) or not is_sequence(y):
        raise NotArrayError("Both inputs must be sequences of numbers")
    if len(x) == 0 or len(y) == 0:
        raise EmptyDatasetError("Datasets cannot be empty")
    if len(x) != len(y):
        raise LengthMismatchError(
            f"Datasets must have the same length; got {len(x)} and {len(y)}"
        )
    for label, values in (("x", x), ("y", y)):
        bad = _first_invalid(as_list(values))
        if bad is not None:
            index, value = bad
            raise InvalidNumberError(
                f"All {label} elements must be valid finite numbers; "
                f"got {value!r} at index {index}"
            )


__all__ = [
    "as_list",
    "is_sequence",
    "is_valid_number",
    "validate_dataset",
    "validate_two_datasets",
]
