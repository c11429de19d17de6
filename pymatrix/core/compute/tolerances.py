"""
Tolerance tiers for numerical validation.

Defines precision expectations for different kinds of operation:
- EXACT: operations that only copy or permute values (transpose, zeros)
- CPU_FP64: a single rounding per element (add, subtract, dot_multiply)
- CPU_FP64_ACCUMULATED: rounding compounded over an inner dimension
  (multiply, chained products)

Used by the test suite through select_tolerance(). Matrix.allclose does not
use these tiers; its defaults are DEFAULT_RTOL and DEFAULT_ATOL from
pymatrix.core.compute.precision.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Bitwise equality, values are only moved',
)

CPU_FP64 = ToleranceTier(
    rtol=1e-12,
    atol=1e-14,
    name='cpu_fp64',
    description='CPU double precision, one rounding per element',
)

# Reassociating a k-term sum (e.g. (AB)C vs A(BC)) moves each cell by a
# few ulps per term.
CPU_FP64_ACCUMULATED = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64_accumulated',
    description='CPU double precision, rounding accumulated over an inner dimension',
)

_TIERS_BY_OPERATION = {
    'transpose': EXACT,
    'add': CPU_FP64,
    'subtract': CPU_FP64,
    'dot_multiply': CPU_FP64,
    'map': CPU_FP64,
    'multiply': CPU_FP64_ACCUMULATED,
}


def select_tolerance(operation: str) -> ToleranceTier:
    """Select appropriate tolerance tier for a given operation."""
    try:
        return _TIERS_BY_OPERATION[operation]
    except KeyError:
        raise ValueError(
            f"Unknown operation {operation!r}. "
            f"Known: {sorted(_TIERS_BY_OPERATION)}"
        ) from None
