"""
Tests for multiply(), the standard matrix product.
"""

import math

import numpy as np
import pytest

from pymatrix import IncompatibleShapeForProductError, Matrix, multiply


def _triple_loop(a, b):
    """Independent k-ascending reference on plain lists."""
    n, p, m = len(a), len(b), len(b[0]) if b else 0
    out = [[0.0] * m for _ in range(n)]
    for i in range(n):
        for j in range(m):
            acc = 0.0
            for k in range(p):
                acc += a[i][k] * b[k][j]
            out[i][j] = acc
    return out


class TestMultiplyValues:

    def test_row_times_matrix(self, backend):
        """1*2+2*3=8, 1*1+2*4=9, 1*5+2*6=17."""
        m1 = Matrix.from_rows([[1, 2]])
        m2 = Matrix.from_rows([[2, 1, 5], [3, 4, 6]])
        assert multiply(m1, m2, backend=backend).data == [[8.0, 9.0, 17.0]]

    def test_result_shape(self, rng, backend):
        a = Matrix.from_rows(rng.standard_normal((3, 4)))
        b = Matrix.from_rows(rng.standard_normal((4, 6)))
        assert multiply(a, b, backend=backend).shape == (3, 6)

    def test_square(self, backend):
        a = Matrix.from_rows([[1, 2], [3, 4]])
        b = Matrix.from_rows([[5, 6], [7, 8]])
        assert multiply(a, b, backend=backend).data == [[19.0, 22.0], [43.0, 50.0]]

    def test_not_commutative(self):
        a = Matrix.from_rows([[1, 2], [3, 4]])
        b = Matrix.from_rows([[0, 1], [1, 0]])
        assert multiply(a, b) != multiply(b, a)

    def test_bitwise_equal_to_triple_loop(self, rng, backend):
        a = rng.standard_normal((6, 9)).tolist()
        b = rng.standard_normal((9, 5)).tolist()
        assert multiply(a, b, backend=backend).data == _triple_loop(a, b)

    def test_accumulation_order_is_k_ascending(self, backend):
        """
        (1e16 + 1) - 1e16 = 0 but 1e16 + (1 - 1e16) = 1: only the
        left-to-right sum gives 0.
        """
        a = Matrix.from_rows([[1e16, 1.0, -1e16]])
        b = Matrix.from_rows([[1.0], [1.0], [1.0]])
        assert multiply(a, b, backend=backend)[0, 0] == 0.0

    def test_empty_inner_dimension_gives_zeros(self, backend):
        result = multiply(Matrix.zeros(2, 0), Matrix.zeros(0, 3), backend=backend)
        assert result == Matrix.zeros(2, 3)

    def test_empty_outer_dimensions(self, backend):
        assert multiply(Matrix.zeros(0, 3), Matrix.zeros(3, 2), backend=backend).shape == (0, 2)
        assert multiply(Matrix.zeros(2, 3), Matrix.zeros(3, 0), backend=backend).shape == (2, 0)

    def test_nan_propagates(self, backend):
        a = Matrix.from_rows([[math.nan, 1.0]])
        b = Matrix.from_rows([[1.0], [1.0]])
        assert math.isnan(multiply(a, b, backend=backend)[0, 0])


class TestMultiplyEntryPoints:

    def test_method_and_unbound_call(self):
        m1 = Matrix.from_rows([[1, 2]])
        m2 = Matrix.from_rows([[2, 1, 5], [3, 4, 6]])
        assert m1.multiply(m2) == Matrix.multiply(m1, m2) == multiply(m1, m2)

    def test_matmul_operator(self):
        m1 = Matrix.from_rows([[1, 2]])
        m2 = Matrix.from_rows([[2, 1, 5], [3, 4, 6]])
        assert (m1 @ m2).data == [[8.0, 9.0, 17.0]]


class TestIncompatibleShapes:

    def test_1x2_times_3x1(self, backend):
        with pytest.raises(IncompatibleShapeForProductError) as exc_info:
            multiply(Matrix.zeros(1, 2), Matrix.zeros(3, 1), backend=backend)
        err = exc_info.value
        assert err.left_shape == (1, 2)
        assert err.right_shape == (3, 1)
        assert "columns" in str(err) and "rows" in str(err)

    def test_same_shape_non_square_is_incompatible(self):
        with pytest.raises(IncompatibleShapeForProductError):
            Matrix.zeros(2, 3) @ Matrix.zeros(2, 3)


class TestProductOverflow:

    def test_overflow_warns(self, backend):
        a = Matrix.from_rows([[1e200]])
        with pytest.warns(RuntimeWarning, match="multiply"):
            result = multiply(a, a, backend=backend)
        assert result[0, 0] == np.inf
