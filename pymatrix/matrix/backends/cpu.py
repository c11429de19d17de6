"""
Vectorised CPU backend built on numpy.

Results are bit-identical to the loop backend. Elementwise operations are
single ufunc calls. The product is computed as a sequence of rank-1
updates, acc += outer(left[:, k], right[k, :]) for k ascending, which
performs per cell exactly the multiply-then-add sequence of the triple
loop. BLAS matmul is deliberately not used: it reorders and may fuse the
accumulation.
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.result import Result
from pymatrix.core.compute.timing import Timer
from pymatrix.matrix._common import apply_scalar, build_result


class CPUMatrixBackend:
    """numpy backend, the default."""

    @property
    def name(self) -> str:
        return 'cpu_numpy'

    def add(self, left, right) -> Result[NDArray[np.float64]]:
        return self._elementwise('add', left, right, np.add)

    def subtract(self, left, right) -> Result[NDArray[np.float64]]:
        return self._elementwise('subtract', left, right, np.subtract)

    def dot_multiply(self, left, right) -> Result[NDArray[np.float64]]:
        return self._elementwise('dot_multiply', left, right, np.multiply)

    def _elementwise(
        self,
        operation: str,
        left: NDArray[np.float64],
        right: NDArray[np.float64],
        ufunc: np.ufunc,
    ) -> Result[NDArray[np.float64]]:
        timer = Timer()
        timer.start()

        # Overflow is reported through Result.warnings instead
        with timer.section('elementwise'), np.errstate(over='ignore', invalid='ignore'):
            out = ufunc(left, right)

        return build_result(
            timer, out,
            operation=operation, backend_name=self.name, inputs=(left, right),
        )

    def multiply(self, left, right) -> Result[NDArray[np.float64]]:
        timer = Timer()
        timer.start()

        n_rows, inner = left.shape
        n_cols = right.shape[1]

        with timer.section('allocate'):
            out = np.zeros((n_rows, n_cols), dtype=np.float64)
            step = np.empty((n_rows, n_cols), dtype=np.float64)

        with timer.section('accumulate'), np.errstate(over='ignore', invalid='ignore'):
            for k in range(inner):
                np.outer(left[:, k], right[k, :], out=step)
                out += step

        return build_result(
            timer, out,
            operation='multiply', backend_name=self.name, inputs=(left, right),
        )

    def transpose(self, array) -> Result[NDArray[np.float64]]:
        timer = Timer()
        timer.start()

        with timer.section('permute'):
            out = array.T.copy()

        return build_result(
            timer, out,
            operation='transpose', backend_name=self.name, inputs=(array,),
        )

    def map(self, array, func: Callable[[float], Any]) -> Result[NDArray[np.float64]]:
        timer = Timer()
        timer.start()

        # tolist() walks C order and yields Python floats
        with timer.section('apply'):
            flat = np.fromiter(
                (apply_scalar(func, x) for x in array.ravel().tolist()),
                dtype=np.float64,
                count=array.size,
            )
            out = flat.reshape(array.shape)

        return build_result(
            timer, out,
            operation='map', backend_name=self.name, inputs=(array,),
        )
