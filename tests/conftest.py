"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def square_matrix(rng):
    """4x4 matrix with mixed-sign, non-integer entries."""
    return Matrix.from_rows(rng.standard_normal((4, 4)))


@pytest.fixture
def chain_matrices(rng):
    """A (3x4), B (4x5), C (5x2) for associativity checks."""
    A = Matrix.from_rows(rng.standard_normal((3, 4)))
    B = Matrix.from_rows(rng.standard_normal((4, 5)))
    C = Matrix.from_rows(rng.standard_normal((5, 2)))
    return A, B, C
