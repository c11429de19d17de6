"""
Core protocols for PyMatrix.

These define structural interfaces that backends must satisfy. We use
Protocol (structural typing) rather than ABC (nominal typing) so a backend
only has to provide the right methods, not inherit from anything.

Design Principles:
    - Minimal contracts: the six kernels and a name, nothing else
    - Backends see validated float64 arrays, never Matrix objects
    - Every kernel returns a Result envelope
"""

from typing import Callable, Protocol, Any, runtime_checkable

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.result import Result

FloatArray = NDArray[np.float64]


@runtime_checkable
class MatrixBackend(Protocol):
    """
    Protocol for computational backends.

    A backend receives operands that have already been validated (shapes
    checked, dtype float64, two-dimensional) and returns a freshly allocated
    array inside a Result. It must never write to its inputs.

    Backends are stateless. This makes them easy to test and swap, and lets
    the reference loop backend check the vectorised one bit for bit.
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{strategy}'
        Examples: 'cpu_loop', 'cpu_numpy'
        """
        ...

    def add(self, left: FloatArray, right: FloatArray) -> Result[FloatArray]:
        """Elementwise sum of two equally shaped arrays."""
        ...

    def subtract(self, left: FloatArray, right: FloatArray) -> Result[FloatArray]:
        """Elementwise difference of two equally shaped arrays."""
        ...

    def dot_multiply(self, left: FloatArray, right: FloatArray) -> Result[FloatArray]:
        """Elementwise (Hadamard) product of two equally shaped arrays."""
        ...

    def multiply(self, left: FloatArray, right: FloatArray) -> Result[FloatArray]:
        """
        Matrix product with k-ascending accumulation.

        Every cell must equal ((0.0 + a0*b0) + a1*b1) + ... evaluated with
        one rounding per operation, so all backends agree bit for bit.
        """
        ...

    def transpose(self, array: FloatArray) -> Result[FloatArray]:
        """Swap rows and columns."""
        ...

    def map(
        self, array: FloatArray, func: Callable[[float], Any]
    ) -> Result[FloatArray]:
        """Apply func to every element in row-major order."""
        ...
