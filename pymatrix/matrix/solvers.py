"""
Solver dispatch for matrix operations.

Provides evaluate() as the diagnostic entry point returning a full
Result[Matrix], plus individual functions returning the Matrix directly:
add(), subtract(), dot_multiply(), multiply(), transpose(), map_elements().

Shapes are validated here, before any backend is touched, so a failed
call never allocates or returns a partial result.
"""

from __future__ import annotations

from typing import Any, Callable, Literal
import warnings

from numpy.typing import ArrayLike

from pymatrix.core.result import Result
from pymatrix.core.protocols import MatrixBackend
from pymatrix.core.exceptions import ValidationError
from pymatrix.core.validation import check_same_shape, check_product_shapes
from pymatrix.matrix.matrix import Matrix
from pymatrix.matrix.backends.cpu import CPUMatrixBackend
from pymatrix.matrix.backends.loop import LoopMatrixBackend


BackendChoice = Literal['auto', 'cpu', 'loop']
Operation = Literal['add', 'subtract', 'dot_multiply', 'multiply', 'transpose', 'map']

_ELEMENTWISE = ('add', 'subtract', 'dot_multiply')
_OPERATIONS = _ELEMENTWISE + ('multiply', 'transpose', 'map')


def _ensure_matrix(value: ArrayLike | Matrix) -> Matrix:
    """Convert raw data to Matrix if needed."""
    if isinstance(value, Matrix):
        return value
    return Matrix.from_rows(value)


def _get_backend(backend: BackendChoice) -> MatrixBackend:
    """Select backend based on preference."""
    if backend in ('auto', 'cpu'):
        return CPUMatrixBackend()
    if backend == 'loop':
        return LoopMatrixBackend()
    raise ValidationError(
        f"Unknown backend: {backend!r}. Must be 'auto', 'cpu', or 'loop'."
    )


def evaluate(
    operation: Operation,
    left: ArrayLike | Matrix,
    right: ArrayLike | Matrix | None = None,
    *,
    func: Callable[[float], Any] | None = None,
    backend: BackendChoice = 'auto',
) -> Result[Matrix]:
    """
    Run one operation and return the full result envelope.

    Parameters
    ----------
    operation : str
        'add', 'subtract', 'dot_multiply', 'multiply' (binary, need right),
        'transpose' or 'map' (unary, map needs func).
    left, right : Matrix or array-like
        Operands. Raw data is passed through Matrix.from_rows.
    func : callable, optional
        Scalar function for 'map'.
    backend : str
        'auto', 'cpu', 'loop'.

    Returns
    -------
    Result[Matrix] with timing, backend_name, info and any warnings about
    non-finite values the operation introduced. Warnings are not emitted.

    Raises
    ------
    DimensionMismatchError
        Elementwise operands differ in shape.
    IncompatibleShapeForProductError
        multiply with left.cols != right.rows.
    ValidationError
        Unknown operation or backend, missing/extra operands, bad func.
    """
    if operation not in _OPERATIONS:
        raise ValidationError(
            f"Unknown operation: {operation!r}. Must be one of {list(_OPERATIONS)}"
        )

    a = _ensure_matrix(left)
    be = _get_backend(backend)

    if operation in _ELEMENTWISE or operation == 'multiply':
        if right is None:
            raise ValidationError(f"{operation}: requires a right operand")
        if func is not None:
            raise ValidationError(f"{operation}: func is only valid for 'map'")
        b = _ensure_matrix(right)
        if operation == 'multiply':
            check_product_shapes(a._data, b._data)
        else:
            check_same_shape(a._data, b._data, operation)
        raw = getattr(be, operation)(a._data, b._data)
    else:
        if right is not None:
            raise ValidationError(f"{operation}: takes a single operand")
        if operation == 'map':
            if func is None or not callable(func):
                raise ValidationError(
                    f"map: func must be callable, got {type(func).__name__}"
                )
            raw = be.map(a._data, func)
        else:
            if func is not None:
                raise ValidationError("transpose: func is only valid for 'map'")
            raw = be.transpose(a._data)

    return Result(
        params=Matrix._build(raw.params, copy=False),
        info=raw.info,
        timing=raw.timing,
        backend_name=raw.backend_name,
        warnings=raw.warnings,
        provenance=raw.provenance,
    )


def _run(
    operation: Operation,
    left: ArrayLike | Matrix,
    right: ArrayLike | Matrix | None = None,
    *,
    func: Callable[[float], Any] | None = None,
    backend: BackendChoice,
    stacklevel: int = 3,
) -> Matrix:
    # stacklevel counts frames from here to the caller's code
    result = evaluate(operation, left, right, func=func, backend=backend)
    for message in result.warnings:
        warnings.warn(message, RuntimeWarning, stacklevel=stacklevel)
    return result.params


def add(
    left: ArrayLike | Matrix,
    right: ArrayLike | Matrix,
    *,
    backend: BackendChoice = 'auto',
) -> Matrix:
    """
    Elementwise sum of two matrices of identical shape.

    Raises DimensionMismatchError if rows or cols differ.
    """
    return _run('add', left, right, backend=backend)


def subtract(
    left: ArrayLike | Matrix,
    right: ArrayLike | Matrix,
    *,
    backend: BackendChoice = 'auto',
) -> Matrix:
    """
    Elementwise difference left - right of two matrices of identical shape.

    Raises DimensionMismatchError if rows or cols differ.
    """
    return _run('subtract', left, right, backend=backend)


def dot_multiply(
    left: ArrayLike | Matrix,
    right: ArrayLike | Matrix,
    *,
    backend: BackendChoice = 'auto',
) -> Matrix:
    """
    Elementwise (Hadamard) product of two matrices of identical shape.

    Raises DimensionMismatchError if rows or cols differ.
    """
    return _run('dot_multiply', left, right, backend=backend)


def multiply(
    left: ArrayLike | Matrix,
    right: ArrayLike | Matrix,
    *,
    backend: BackendChoice = 'auto',
) -> Matrix:
    """
    Standard matrix product.

    Result has shape (left.rows, right.cols) and element (i, j) is
    sum(left[i, k] * right[k, j]) accumulated for k ascending from 0.0.
    All backends produce bit-identical results.

    Parameters
    ----------
    left : Matrix or array-like
        (n x p) factor.
    right : Matrix or array-like
        (p x m) factor.
    backend : str
        'auto', 'cpu', 'loop'.

    Raises
    ------
    IncompatibleShapeForProductError
        If left.cols != right.rows.
    """
    return _run('multiply', left, right, backend=backend)


def transpose(
    matrix: ArrayLike | Matrix,
    *,
    backend: BackendChoice = 'auto',
) -> Matrix:
    """New matrix of shape (cols, rows) with result[j][i] = matrix[i][j]."""
    return _run('transpose', matrix, backend=backend)


def map_elements(
    matrix: ArrayLike | Matrix,
    func: Callable[[float], Any],
    *,
    backend: BackendChoice = 'auto',
) -> Matrix:
    """
    Apply func to every element, row-major and left to right, once each.

    func receives a Python float; exceptions it raises propagate unchanged.
    A return value that is not a real number raises ValidationError.
    """
    return _run('map', matrix, func=func, backend=backend)
