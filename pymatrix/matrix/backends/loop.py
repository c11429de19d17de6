"""
Reference backend: plain Python loops over nested lists.

Slow, but every cell of a product is computed exactly as written,
((0.0 + a[i][0]*b[0][j]) + a[i][1]*b[1][j]) + ..., which is the definition
the vectorised backend is checked against.
"""

from __future__ import annotations

from typing import Any, Callable
import operator

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.result import Result
from pymatrix.core.compute.timing import Timer
from pymatrix.matrix._common import apply_scalar, build_result


def _to_array(rows: list[list[float]], n_rows: int, n_cols: int) -> NDArray[np.float64]:
    # reshape keeps the column count when there are no rows
    return np.array(rows, dtype=np.float64).reshape(n_rows, n_cols)


class LoopMatrixBackend:
    """Pure-Python triple-loop backend."""

    @property
    def name(self) -> str:
        return 'cpu_loop'

    def add(self, left, right) -> Result[NDArray[np.float64]]:
        return self._elementwise('add', left, right, operator.add)

    def subtract(self, left, right) -> Result[NDArray[np.float64]]:
        return self._elementwise('subtract', left, right, operator.sub)

    def dot_multiply(self, left, right) -> Result[NDArray[np.float64]]:
        return self._elementwise('dot_multiply', left, right, operator.mul)

    def _elementwise(
        self,
        operation: str,
        left: NDArray[np.float64],
        right: NDArray[np.float64],
        op: Callable[[float, float], float],
    ) -> Result[NDArray[np.float64]]:
        timer = Timer()
        timer.start()

        n_rows, n_cols = left.shape
        a = left.tolist()
        b = right.tolist()

        with timer.section('elementwise'):
            out = [
                [op(a[i][j], b[i][j]) for j in range(n_cols)]
                for i in range(n_rows)
            ]

        return build_result(
            timer, _to_array(out, n_rows, n_cols),
            operation=operation, backend_name=self.name, inputs=(left, right),
        )

    def multiply(self, left, right) -> Result[NDArray[np.float64]]:
        """
        Triple loop, i over rows of left, j over cols of right, k ascending.
        """
        timer = Timer()
        timer.start()

        n_rows, inner = left.shape
        n_cols = right.shape[1]
        a = left.tolist()
        b = right.tolist()

        with timer.section('accumulate'):
            out = [[0.0] * n_cols for _ in range(n_rows)]
            for i in range(n_rows):
                a_i = a[i]
                out_i = out[i]
                for j in range(n_cols):
                    acc = 0.0
                    for k in range(inner):
                        acc += a_i[k] * b[k][j]
                    out_i[j] = acc

        return build_result(
            timer, _to_array(out, n_rows, n_cols),
            operation='multiply', backend_name=self.name, inputs=(left, right),
        )

    def transpose(self, array) -> Result[NDArray[np.float64]]:
        timer = Timer()
        timer.start()

        n_rows, n_cols = array.shape
        a = array.tolist()

        with timer.section('permute'):
            out = [[a[i][j] for i in range(n_rows)] for j in range(n_cols)]

        return build_result(
            timer, _to_array(out, n_cols, n_rows),
            operation='transpose', backend_name=self.name, inputs=(array,),
        )

    def map(self, array, func: Callable[[float], Any]) -> Result[NDArray[np.float64]]:
        timer = Timer()
        timer.start()

        n_rows, n_cols = array.shape
        a = array.tolist()

        with timer.section('apply'):
            out = [[apply_scalar(func, x) for x in row] for row in a]

        return build_result(
            timer, _to_array(out, n_rows, n_cols),
            operation='map', backend_name=self.name, inputs=(array,),
        )
