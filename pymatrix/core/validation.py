"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No truncation, padding or broadcasting to "fix" a shape
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from collections.abc import Sequence
from typing import Any
import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import (
    ValidationError,
    MalformedInputError,
    DimensionMismatchError,
    IncompatibleShapeForProductError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data)
    and complex inputs.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with dtype float64

    Raises:
        MalformedInputError: If input cannot be converted to a real numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise MalformedInputError(f"{name}: cannot convert to array: {e}") from e

    # Python ints outside the int64 range land in object dtype
    if result.dtype == object:
        result = _object_to_float(result, name)

    # Reject non-numeric dtypes (strings, bytes, bool, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise MalformedInputError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise MalformedInputError(
            f"{name}: complex dtype {result.dtype} is not supported, expected real data"
        )

    if result.dtype != np.float64:
        result = result.astype(np.float64)

    return result


def check_2d(array: NDArray[np.float64], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        MalformedInputError: If array is not 2D
    """
    if array.ndim != 2:
        raise MalformedInputError(
            f"{name}: expected 2D array (rows x cols), got {array.ndim}D with shape {array.shape}"
        )


def check_rectangular(rows: Sequence[Any], name: str) -> None:
    """
    Verify every row of a nested sequence has the length of the first row.

    An empty outer sequence is rectangular (it describes a 0x0 matrix).

    Args:
        rows: Outer sequence of rows
        name: Parameter name for error messages

    Raises:
        MalformedInputError: If a row is not a sequence, or if the rows are
            jagged. Reports the first offending row.
    """
    if len(rows) == 0:
        return

    expected = _row_length(rows[0], 0, name)
    for i in range(1, len(rows)):
        actual = _row_length(rows[i], i, name)
        if actual != expected:
            raise MalformedInputError(
                f"{name}: row {i} has length {actual}, expected {expected} "
                f"(the length of row 0)",
                row_index=i,
                expected_length=expected,
                actual_length=actual,
            )


def _object_to_float(
    array: NDArray[np.object_],
    name: str,
) -> NDArray[np.float64]:
    """Convert an object array whose every element is a real number."""
    for item in array.flat:
        if isinstance(item, bool) or not isinstance(item, numbers.Real):
            raise MalformedInputError(
                f"{name}: converted to object dtype, indicating mixed types or "
                f"non-numeric data (found {type(item).__name__} {item!r})"
            )
    try:
        return array.astype(np.float64)
    except (OverflowError, ValueError, TypeError) as e:
        raise MalformedInputError(
            f"{name}: value out of float64 range: {e}"
        ) from e


def _row_length(row: Any, index: int, name: str) -> int:
    if isinstance(row, (str, bytes)) or not hasattr(row, '__len__'):
        raise MalformedInputError(
            f"{name}: row {index} is {type(row).__name__}, expected a sequence "
            f"of numbers (data must be 2D)",
            row_index=index,
        )
    try:
        return len(row)
    except TypeError as e:
        raise MalformedInputError(
            f"{name}: row {index} is an unsized {type(row).__name__}, expected a "
            f"sequence of numbers (data must be 2D)",
            row_index=index,
        ) from e


def check_dimension(value: Any, name: str) -> int:
    """
    Verify a requested matrix dimension is a non-negative integer.

    Args:
        value: Requested row or column count
        name: Parameter name for error messages

    Returns:
        The dimension as a plain int

    Raises:
        ValidationError: If value is not an integer (bool is rejected) or is negative
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name}: expected a non-negative integer, got {type(value).__name__} {value!r}"
        )
    if value < 0:
        raise ValidationError(f"{name}: must be non-negative, got {value}")
    return int(value)


def check_same_shape(
    left: NDArray[np.float64],
    right: NDArray[np.float64],
    operation: str,
) -> None:
    """
    Verify two operands have identical shapes.

    Args:
        left: Left operand
        right: Right operand
        operation: Operation name for error messages

    Raises:
        DimensionMismatchError: If rows or cols differ
    """
    if left.shape != right.shape:
        raise DimensionMismatchError(
            f"{operation}: operands must have identical shapes, got "
            f"left {left.shape[0]}x{left.shape[1]} and right "
            f"{right.shape[0]}x{right.shape[1]}",
            operation=operation,
            left_shape=tuple(left.shape),
            right_shape=tuple(right.shape),
        )


def check_product_shapes(
    left: NDArray[np.float64],
    right: NDArray[np.float64],
) -> None:
    """
    Verify left.cols equals right.rows.

    Args:
        left: Left factor
        right: Right factor

    Raises:
        IncompatibleShapeForProductError: If the inner dimensions differ
    """
    if left.shape[1] != right.shape[0]:
        raise IncompatibleShapeForProductError(
            f"multiply: number of columns of the left matrix ({left.shape[1]}) "
            f"must equal number of rows of the right matrix ({right.shape[0]}); "
            f"got left {left.shape[0]}x{left.shape[1]} and right "
            f"{right.shape[0]}x{right.shape[1]}",
            operation='multiply',
            left_shape=tuple(left.shape),
            right_shape=tuple(right.shape),
        )
