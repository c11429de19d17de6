"""
Shared helpers for the matrix backends.

Both backends build their Result the same way and apply user callables
with the same checks, so the behaviour cannot drift between them.
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.result import Result
from pymatrix.core.compute.timing import Timer
from pymatrix.core.compute.precision import count_non_finite
from pymatrix.core.exceptions import ValidationError


def apply_scalar(func: Callable[[float], Any], value: float) -> float:
    """
    Call func on one element and coerce the answer to float.

    Errors raised inside func propagate unchanged. A return value that float()
    cannot convert, or a string, is turned into a ValidationError chained to
    the conversion error.
    """
    out = func(value)
    if isinstance(out, (str, bytes)):
        raise ValidationError(
            f"map: function returned {type(out).__name__} {out!r} for input "
            f"{value!r}, expected a real number"
        )
    try:
        return float(out)
    except (TypeError, ValueError, OverflowError) as e:
        raise ValidationError(
            f"map: function returned {type(out).__name__} {out!r} for input "
            f"{value!r}, expected a real number"
        ) from e


def non_finite_warnings(
    operation: str,
    inputs: tuple[NDArray[np.float64], ...],
    output: NDArray[np.float64],
) -> tuple[str, ...]:
    """
    Report NaN/Inf that the operation itself introduced.

    Non-finite values already present in the inputs are the caller's
    business and are passed through silently.
    """
    if any(not np.all(np.isfinite(a)) for a in inputs):
        return ()
    n_nan, n_inf = count_non_finite(output)
    if n_nan == 0 and n_inf == 0:
        return ()
    return (
        f"{operation}: result contains {n_nan} NaN and {n_inf} Inf values "
        f"from finite inputs (overflow or invalid operation)",
    )


def build_result(
    timer: Timer,
    output: NDArray[np.float64],
    *,
    operation: str,
    backend_name: str,
    inputs: tuple[NDArray[np.float64], ...],
) -> Result[NDArray[np.float64]]:
    """Stop the timer and wrap a kernel's output in a Result."""
    with timer.section('diagnostics'):
        warnings = non_finite_warnings(operation, inputs, output)
    timer.stop()
    return Result(
        params=output,
        info={'operation': operation, 'shape': tuple(output.shape)},
        timing=timer.result(),
        backend_name=backend_name,
        warnings=warnings,
    )
