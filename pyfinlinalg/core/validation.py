"""
Input validation utilities for pyfinlinalg.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pyfinlinalg.core.exceptions import (
    ValidationError,
    DimensionMismatchError,
    InvalidArgumentError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to a fresh numpy array, so callers
    never alias the user's buffer. Rejects inputs that result in object
    dtype (indicating ragged nesting, mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of dtype float64 (always a copy)

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.array(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating ragged rows, "
            f"mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number) or np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: non-real dtype {result.dtype}, expected real numeric data"
        )

    return result.astype(np.float64, copy=False)


def is_finite(array: NDArray[np.floating[Any]]) -> bool:
    """True if the array contains no NaN or Inf values."""
    return bool(np.all(np.isfinite(array)))


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionMismatchError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionMismatchError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}",
            actual_shape=array.shape,
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_non_empty(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify no axis of the array has length zero.

    Raises:
        DimensionMismatchError: If any dimension is zero
    """
    if array.size == 0:
        raise DimensionMismatchError(
            f"{name}: empty array with shape {array.shape}",
            actual_shape=array.shape,
        )


def check_square(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify a 2D array is square.

    Args:
        array: 2D array to check
        name: Parameter name for error messages

    Raises:
        DimensionMismatchError: If rows != columns
    """
    n_rows, n_cols = array.shape
    if n_rows != n_cols:
        raise DimensionMismatchError(
            f"{name}: expected square matrix, got shape {array.shape}",
            expected_shape=(n_rows, n_rows),
            actual_shape=array.shape,
        )


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Args:
        *arrays: Arrays to check
        names: Parameter names for error messages (must match number of arrays)

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionMismatchError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionMismatchError(
            f"Inconsistent lengths: {details}",
            expected_shape=(lengths[0],),
            actual_shape=tuple(lengths[1:]),
        )


def check_number_of_factors(number_of_factors: Any, dimension: int, name: str) -> int:
    """
    Verify a requested factor count lies in [1, dimension].

    Accepts Python and NumPy integers; rejects bools, floats and anything
    else rather than truncating.

    Args:
        number_of_factors: Requested number of factors
        dimension: Matrix dimension n
        name: Parameter name for error messages

    Returns:
        The factor count as a plain int

    Raises:
        InvalidArgumentError: If not an integer or outside [1, dimension]
    """
    if isinstance(number_of_factors, bool) or not isinstance(number_of_factors, numbers.Integral):
        raise InvalidArgumentError(
            f"{name}: expected an integer, got {type(number_of_factors).__name__} "
            f"{number_of_factors!r}",
            argument=name,
            value=number_of_factors,
        )

    k = int(number_of_factors)
    if not 1 <= k <= dimension:
        raise InvalidArgumentError(
            f"{name}: must be between 1 and the matrix dimension {dimension}, got {k}",
            argument=name,
            value=k,
        )
    return k
