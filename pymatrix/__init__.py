"""
PyMatrix: small dense-matrix arithmetic for Python.

Immutable float64 matrices with construction (literal, zeros, random,
identity), elementwise add/subtract/multiply, the standard matrix product,
transpose and elementwise map. Products are accumulated in a fixed order so
results are bit-reproducible across backends.

Submodules:
    matrix: Matrix type and operations
    core: Exceptions, Result envelope, validation, compute utilities
"""

__version__ = "0.1.0"

from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    MalformedInputError,
    DimensionError,
    DimensionMismatchError,
    IncompatibleShapeForProductError,
)
from pymatrix.matrix import (
    Matrix,
    add,
    subtract,
    dot_multiply,
    multiply,
    transpose,
    map_elements,
    evaluate,
)

__all__ = [
    "__version__",
    # Matrix
    "Matrix",
    "add",
    "subtract",
    "dot_multiply",
    "multiply",
    "transpose",
    "map_elements",
    "evaluate",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "MalformedInputError",
    "DimensionError",
    "DimensionMismatchError",
    "IncompatibleShapeForProductError",
]
