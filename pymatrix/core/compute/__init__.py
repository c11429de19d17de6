"""
Shared compute infrastructure for PyMatrix.

This module provides timing, precision constants, tolerance tiers and the
random source used by the matrix backends.

IMPORTANT: This is NOT where the matrix kernels live. Those go in
pymatrix/matrix/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    precision: Numerical precision constants and utilities
    tolerances: Named tolerance tiers per operation
    random: Seeded generator factory
"""

from pymatrix.core.compute.timing import Timer
from pymatrix.core.compute.random import make_rng

__all__ = [
    # Timing
    "Timer",
    # Random source
    "make_rng",
]
