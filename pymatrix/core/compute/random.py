"""
Random source for random-filled matrices.

Without a seed every call draws fresh OS entropy, so random matrices are
not reproducible by default. Passing a seed (or an existing Generator)
makes them deterministic.
"""

from __future__ import annotations

from typing import Union

import numpy as np

from pymatrix.core.exceptions import ValidationError

SeedLike = Union[int, np.random.SeedSequence, np.random.Generator, None]


def make_rng(seed: SeedLike = None) -> np.random.Generator:
    """
    Build a numpy Generator from a seed.

    Args:
        seed: None (fresh entropy), a non-negative int, a SeedSequence, or
            a Generator (returned unchanged, so callers can share a stream)

    Returns:
        numpy.random.Generator

    Raises:
        ValidationError: If seed is of an unsupported type or negative
    """
    if isinstance(seed, bool):
        raise ValidationError("seed: expected int, SeedSequence or Generator, got bool")
    if seed is None or isinstance(seed, (np.random.SeedSequence, np.random.Generator)):
        return np.random.default_rng(seed)
    if isinstance(seed, (int, np.integer)):
        if seed < 0:
            raise ValidationError(f"seed: must be non-negative, got {seed}")
        return np.random.default_rng(int(seed))
    raise ValidationError(
        f"seed: expected int, SeedSequence or Generator, got {type(seed).__name__}"
    )


def uniform_unit(rng: np.random.Generator, rows: int, cols: int) -> np.ndarray:
    """Draw a (rows, cols) float64 array from uniform [0.0, 1.0)."""
    return rng.random((rows, cols), dtype=np.float64)
