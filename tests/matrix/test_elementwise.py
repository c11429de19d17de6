"""
Tests for add(), subtract(), dot_multiply().
"""

import numpy as np
import pytest

from pymatrix import (
    DimensionMismatchError,
    Matrix,
    add,
    dot_multiply,
    subtract,
)


A = [[1.0, 2.0], [3.0, 4.0]]
B = [[10.0, 20.0], [30.0, 40.0]]


class TestElementwiseValues:

    def test_add(self, backend):
        result = add(Matrix.from_rows(A), Matrix.from_rows(B), backend=backend)
        assert result.data == [[11.0, 22.0], [33.0, 44.0]]

    def test_subtract(self, backend):
        result = subtract(Matrix.from_rows(B), Matrix.from_rows(A), backend=backend)
        assert result.data == [[9.0, 18.0], [27.0, 36.0]]

    def test_dot_multiply(self, backend):
        result = dot_multiply(Matrix.from_rows(A), Matrix.from_rows(B), backend=backend)
        assert result.data == [[10.0, 40.0], [90.0, 160.0]]

    def test_accepts_raw_rows(self, backend):
        assert add(A, B, backend=backend) == Matrix.from_rows([[11.0, 22.0], [33.0, 44.0]])

    def test_matches_numpy(self, rng, backend):
        a = rng.standard_normal((5, 7))
        b = rng.standard_normal((5, 7))
        np.testing.assert_array_equal(add(a, b, backend=backend).to_numpy(), a + b)
        np.testing.assert_array_equal(subtract(a, b, backend=backend).to_numpy(), a - b)
        np.testing.assert_array_equal(dot_multiply(a, b, backend=backend).to_numpy(), a * b)

    @pytest.mark.parametrize("shape", [(0, 0), (0, 3), (3, 0)])
    def test_empty_shapes(self, shape, backend):
        z = Matrix.zeros(*shape)
        assert add(z, z, backend=backend).shape == shape
        assert subtract(z, z, backend=backend).shape == shape
        assert dot_multiply(z, z, backend=backend).shape == shape


class TestElementwiseMethodsAndOperators:

    def test_methods(self):
        a, b = Matrix.from_rows(A), Matrix.from_rows(B)
        assert a.add(b) == add(a, b)
        assert b.subtract(a) == subtract(b, a)
        assert a.dot_multiply(b) == dot_multiply(a, b)

    def test_operators(self):
        a, b = Matrix.from_rows(A), Matrix.from_rows(B)
        assert a + b == add(a, b)
        assert b - a == subtract(b, a)
        assert a * b == dot_multiply(a, b)

    def test_operator_with_non_matrix(self):
        with pytest.raises(TypeError):
            Matrix.from_rows(A) + 1.0


class TestDimensionMismatch:

    @pytest.mark.parametrize("func", [add, subtract, dot_multiply])
    def test_2x2_vs_2x3(self, func, backend):
        with pytest.raises(DimensionMismatchError) as exc_info:
            func(Matrix.zeros(2, 2), Matrix.zeros(2, 3), backend=backend)
        err = exc_info.value
        assert err.operation == func.__name__
        assert err.left_shape == (2, 2)
        assert err.right_shape == (2, 3)

    def test_row_mismatch(self):
        with pytest.raises(DimensionMismatchError, match="left 3x2 and right 2x2"):
            add(Matrix.zeros(3, 2), Matrix.zeros(2, 2))

    def test_no_broadcasting(self):
        """A 1xN row is never stretched to match an MxN operand."""
        with pytest.raises(DimensionMismatchError):
            add(Matrix.zeros(3, 2), Matrix.zeros(1, 2))

    def test_operands_unchanged_after_failure(self):
        a = Matrix.from_rows(A)
        b = Matrix.zeros(2, 3)
        with pytest.raises(DimensionMismatchError):
            a + b
        assert a.data == A
        assert b == Matrix.zeros(2, 3)


class TestNoAliasing:

    def test_result_is_new_matrix(self):
        a = Matrix.from_rows(A)
        z = Matrix.zeros(2, 2)
        result = add(a, z)
        assert result == a
        assert result is not a
        assert not np.shares_memory(result._data, a._data)


class TestNonFiniteWarnings:

    def test_overflow_warns(self, backend):
        big = Matrix.from_rows([[1e308, 1.0]])
        with pytest.warns(RuntimeWarning, match="1 Inf"):
            result = add(big, big, backend=backend)
        assert result[0, 0] == np.inf

    def test_existing_nan_passes_silently(self, backend, recwarn):
        a = Matrix.from_rows([[np.nan, 1.0]])
        result = add(a, a, backend=backend)
        assert np.isnan(result[0, 0])
        assert not [w for w in recwarn if issubclass(w.category, RuntimeWarning)]

    def test_free_function_warning_points_at_caller(self):
        big = Matrix.from_rows([[1e308]])
        with pytest.warns(RuntimeWarning) as record:
            add(big, big)
        assert record[0].filename == __file__

    def test_method_warning_points_at_caller(self):
        big = Matrix.from_rows([[1e308]])
        with pytest.warns(RuntimeWarning) as record:
            big.add(big)
        assert record[0].filename == __file__

    def test_operator_warning_points_at_caller(self):
        big = Matrix.from_rows([[1e308]])
        with pytest.warns(RuntimeWarning) as record:
            big * big
        assert record[0].filename == __file__

    def test_matmul_warning_points_at_caller(self):
        big = Matrix.from_rows([[1e308]])
        with pytest.warns(RuntimeWarning) as record:
            big @ big
        assert record[0].filename == __file__
