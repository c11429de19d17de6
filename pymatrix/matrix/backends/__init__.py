"""
Matrix kernels.

cpu: numpy vectorised backend (default)
loop: pure-Python reference backend
"""

from pymatrix.matrix.backends.cpu import CPUMatrixBackend
from pymatrix.matrix.backends.loop import LoopMatrixBackend

__all__ = [
    "CPUMatrixBackend",
    "LoopMatrixBackend",
]
