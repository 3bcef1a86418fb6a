"""
Input validation utilities for colstats.

These validators check the shape and type of caller arguments. They
raise with clear messages for API misuse (a string where numbers were
expected, a 2-D table where a column was expected). They do NOT police
data quality: empty sequences, constant columns and tiny samples are
legal and handled by the statistics themselves.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from colstats.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Empty input has no meaningful dtype; np.asarray([]) is float64 already
    if result.size and not (
        np.issubdtype(result.dtype, np.number) or result.dtype == np.bool_
    ):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result.astype(np.float64, copy=True)


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


def check_integer(value: Any, name: str) -> int:
    """
    Verify value is an integer (bool excluded).

    Args:
        value: Value to check
        name: Parameter name for error messages

    Returns:
        The value as int

    Raises:
        ValidationError: If value is not integral
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__} {value!r}"
        )
    return int(value)


def check_real(value: Any, name: str) -> float:
    """
    Verify value is a real number (bool excluded).

    Args:
        value: Value to check
        name: Parameter name for error messages

    Returns:
        The value as float

    Raises:
        ValidationError: If value is not a real number
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected a number, got {type(value).__name__} {value!r}"
        )
    return float(value)
