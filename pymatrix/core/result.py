"""
Generic result container for all PyMatrix computations.

The Result class provides a standardized envelope that every backend call
returns. This enables shared tooling for timing, warnings and reproducibility
while the payload stays whatever the operation produced (a raw array from a
backend, a Matrix from evaluate()).

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (operation, shape)
    - timing is optional (don't burden unit tests)
    - provenance records library versions for reproducibility
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any
import platform

import numpy as np

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Versions of everything that can change a floating-point result."""
    from pymatrix import __version__

    return {
        'pymatrix_version': __version__,
        'numpy_version': np.__version__,
        'python_version': platform.python_version(),
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for matrix computations.

    Type Parameters:
        P: The payload type

    Attributes:
        params: The computed payload (array or Matrix)
        info: Structured metadata (operation, output shape)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Library versions that produced this result

    Examples:
        >>> Result(
        ...     params=product,
        ...     info={'operation': 'multiply', 'shape': (2, 3)},
        ...     timing={'total_seconds': 0.001, 'accumulate': 0.0008},
        ...     backend_name='cpu_numpy'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
