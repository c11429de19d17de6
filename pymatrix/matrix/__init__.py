"""
Dense matrix module.

Public API:
    Matrix              - immutable float64 matrix with constructors
                          (from_rows, zeros, random, identity)
    add(a, b)           - elementwise sum
    subtract(a, b)      - elementwise difference
    dot_multiply(a, b)  - elementwise product
    multiply(a, b)      - matrix product (k-ascending accumulation)
    transpose(m)        - swap rows and columns
    map_elements(m, f)  - apply a scalar function to every element
    evaluate(op, ...)   - any of the above, returning the full Result
"""

from pymatrix.matrix.matrix import Matrix
from pymatrix.matrix.solvers import (
    add,
    subtract,
    dot_multiply,
    multiply,
    transpose,
    map_elements,
    evaluate,
)

__all__ = [
    "Matrix",
    "add",
    "subtract",
    "dot_multiply",
    "multiply",
    "transpose",
    "map_elements",
    "evaluate",
]
