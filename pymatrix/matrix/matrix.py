"""
Matrix: immutable dense matrix of float64 values.

Wraps a read-only (rows x cols) numpy array. Every operation returns a new
Matrix; nothing ever writes into an existing one.

Construction:
    Matrix.from_rows([[1, 2], [3, 4]])
    Matrix.zeros(2, 3)
    Matrix.random(2, 3, seed=42)
    Matrix.identity(3)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import MalformedInputError
from pymatrix.core.validation import (
    check_array,
    check_2d,
    check_rectangular,
    check_dimension,
)
from pymatrix.core.compute.precision import DEFAULT_RTOL, DEFAULT_ATOL, is_close
from pymatrix.core.compute.random import SeedLike, make_rng, uniform_unit

if TYPE_CHECKING:
    from pymatrix.matrix.solvers import BackendChoice


@dataclass(frozen=True, eq=False)
class Matrix:
    """
    Dense two-dimensional grid of float64 values.

    Immutable after construction: the backing array is flagged read-only and
    is never handed out without copying. Construct via the classmethods,
    not directly.

    Equality (==) is exact elementwise equality with matching shapes; use
    allclose() for tolerance-based comparison.
    """
    _data: NDArray[np.float64]

    # === Construction ===

    @classmethod
    def from_rows(cls, data: ArrayLike) -> Matrix:
        """
        Build a Matrix from literal rectangular data.

        Parameters
        ----------
        data : array-like
            Sequence of rows (each a sequence of numbers), a 2D numpy
            array, or any object with a .values attribute such as a pandas
            DataFrame. The data is copied.

            rows is the outer length, cols the length of the first row.
            An empty outer sequence gives a 0x0 matrix; [[]] gives 1x0.

        Raises
        ------
        MalformedInputError
            If rows have different lengths, data is not 2D, or values are
            not real numbers.
        """
        if isinstance(data, Matrix):
            return data

        if hasattr(data, 'values') and not isinstance(data, np.ndarray):
            data = data.values

        if isinstance(data, np.ndarray):
            array = check_array(data, 'data')
        else:
            rows = _as_row_list(data)
            check_rectangular(rows, 'data')
            array = check_array(rows, 'data')
            if len(rows) == 0:
                array = array.reshape(0, 0)

        check_2d(array, 'data')
        return cls._build(array)

    @classmethod
    def zeros(cls, rows: int, cols: int) -> Matrix:
        """Matrix of the given shape with every element 0.0. Either dimension may be 0."""
        rows = check_dimension(rows, 'rows')
        cols = check_dimension(cols, 'cols')
        return cls._build(np.zeros((rows, cols), dtype=np.float64), copy=False)

    @classmethod
    def random(cls, rows: int, cols: int, *, seed: SeedLike = None) -> Matrix:
        """
        Matrix of independent draws from uniform [0.0, 1.0).

        Parameters
        ----------
        rows, cols : int
            Non-negative dimensions.
        seed : int, SeedSequence, Generator or None
            None (the default) draws fresh entropy, so successive calls
            differ. Pass a seed for reproducible matrices, or a Generator to
            continue an existing stream.
        """
        rows = check_dimension(rows, 'rows')
        cols = check_dimension(cols, 'cols')
        rng = make_rng(seed)
        return cls._build(uniform_unit(rng, rows, cols), copy=False)

    @classmethod
    def identity(cls, n: int) -> Matrix:
        """n x n identity matrix."""
        n = check_dimension(n, 'n')
        return cls._build(np.eye(n, dtype=np.float64), copy=False)

    @classmethod
    def _build(cls, array: NDArray, copy: bool = True) -> Matrix:
        """Internal builder: take ownership of a 2D array and freeze it."""
        if copy:
            array = np.array(array, dtype=np.float64, order='C', copy=True)
        array.setflags(write=False)
        return cls(_data=array)

    # === Properties ===

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols)."""
        return (self._data.shape[0], self._data.shape[1])

    @property
    def size(self) -> int:
        """Total number of elements."""
        return self._data.size

    @property
    def data(self) -> list[list[float]]:
        """Row-major nested lists of Python floats (a fresh copy)."""
        return self._data.tolist()

    def to_list(self) -> list[list[float]]:
        """Same as .data."""
        return self._data.tolist()

    def to_numpy(self) -> NDArray[np.float64]:
        """Writeable float64 copy of the underlying array."""
        return self._data.copy()

    # === Element access ===

    def __getitem__(self, index):
        """m[i, j] -> float, m[i] -> row as a list."""
        if isinstance(index, tuple):
            if len(index) != 2:
                raise IndexError(f"Matrix index must be (row, col), got {index!r}")
            i, j = index
            return float(self._data[_check_index(i, self.rows, 'row'),
                                    _check_index(j, self.cols, 'column')])
        return self._data[_check_index(index, self.rows, 'row')].tolist()

    def __len__(self) -> int:
        return self.rows

    def __iter__(self) -> Iterator[list[float]]:
        return iter(self._data.tolist())

    # === Comparison ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    def allclose(
        self,
        other: Matrix,
        *,
        rtol: float = DEFAULT_RTOL,
        atol: float = DEFAULT_ATOL,
    ) -> bool:
        """
        Shapes match and every element satisfies |a - b| <= atol + rtol * |b|,
        with other as the reference. NaN is never close to anything.
        """
        if self.shape != other.shape:
            return False
        return bool(np.all(is_close(self._data, other._data, rtol=rtol, atol=atol)))

    # === Operations ===

    def add(self, other: Matrix, *, backend: BackendChoice = 'auto') -> Matrix:
        """Elementwise sum. Raises DimensionMismatchError unless shapes match."""
        return _dispatch('add', self, other, backend=backend)

    def subtract(self, other: Matrix, *, backend: BackendChoice = 'auto') -> Matrix:
        """Elementwise difference. Raises DimensionMismatchError unless shapes match."""
        return _dispatch('subtract', self, other, backend=backend)

    def dot_multiply(self, other: Matrix, *, backend: BackendChoice = 'auto') -> Matrix:
        """Elementwise product. Raises DimensionMismatchError unless shapes match."""
        return _dispatch('dot_multiply', self, other, backend=backend)

    def multiply(self, other: Matrix, *, backend: BackendChoice = 'auto') -> Matrix:
        """
        Matrix product self @ other.

        Raises IncompatibleShapeForProductError unless self.cols == other.rows.
        Also usable unbound, Matrix.multiply(m1, m2).
        """
        return _dispatch('multiply', self, other, backend=backend)

    def transpose(self, *, backend: BackendChoice = 'auto') -> Matrix:
        """New (cols x rows) matrix with rows and columns swapped."""
        return _dispatch('transpose', self, backend=backend)

    @property
    def T(self) -> Matrix:
        return _dispatch('transpose', self, backend='auto')

    def map(self, func: Callable[[float], Any], *, backend: BackendChoice = 'auto') -> Matrix:
        """
        Apply a scalar function to every element, row-major, once each.

        func receives a Python float and must return a real number.
        """
        return _dispatch('map', self, func=func, backend=backend)

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return _dispatch('add', self, other, backend='auto')

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return _dispatch('subtract', self, other, backend='auto')

    def __mul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return _dispatch('dot_multiply', self, other, backend='auto')

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return _dispatch('multiply', self, other, backend='auto')

    def __repr__(self) -> str:
        body = np.array2string(self._data, separator=', ', threshold=100)
        return f"Matrix(rows={self.rows}, cols={self.cols}, data={body})"


def _as_row_list(data: Any) -> list[Any]:
    if isinstance(data, (str, bytes)):
        raise MalformedInputError(
            f"data: expected a sequence of rows, got {type(data).__name__}"
        )
    try:
        return list(data)
    except TypeError as e:
        raise MalformedInputError(
            f"data: expected a sequence of rows, got {type(data).__name__}"
        ) from e


def _check_index(index: Any, length: int, axis: str) -> int:
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        raise TypeError(f"Matrix {axis} index must be an integer, got {type(index).__name__}")
    if not -length <= index < length:
        raise IndexError(f"Matrix {axis} index {index} out of range for length {length}")
    return int(index)


def _dispatch(
    operation: str,
    left: Matrix,
    right: Matrix | None = None,
    *,
    func: Callable[[float], Any] | None = None,
    backend: BackendChoice,
) -> Matrix:
    # One frame deeper than the free functions: _run, here, the method, caller
    from pymatrix.matrix.solvers import _run
    return _run(operation, left, right, func=func, backend=backend, stacklevel=4)
