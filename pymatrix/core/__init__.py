"""
Core infrastructure for PyMatrix.

This module provides shared abstractions and utilities used by the matrix
package and its backends.

Key components:
    protocols: MatrixBackend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing, precision, tolerances, random source
"""

from pymatrix.core.protocols import MatrixBackend
from pymatrix.core.result import Result
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    MalformedInputError,
    DimensionError,
    DimensionMismatchError,
    IncompatibleShapeForProductError,
)

__all__ = [
    # Protocols
    "MatrixBackend",
    # Result
    "Result",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "MalformedInputError",
    "DimensionError",
    "DimensionMismatchError",
    "IncompatibleShapeForProductError",
]
