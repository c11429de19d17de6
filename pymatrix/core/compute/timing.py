"""
Per-call timing for backend kernels.

Each backend call owns one Timer. The kernel phases it runs ('allocate',
'accumulate', 'apply', 'diagnostics', ...) are recorded as sections and end
up in Result.timing next to 'total_seconds'.
"""

import time
from contextlib import contextmanager
from typing import Callable, Iterator


Clock = Callable[[], float]


class Timer:
    """
    Wall-clock timer for one backend call, split into named phases.

    The clock is injectable so phase bookkeeping can be checked without
    depending on real elapsed time.

    Usage:
        timer = Timer()
        timer.start()
        with timer.section('accumulate'):
            ...
        timer.stop()
        timer.result()  # {'total_seconds': ..., 'accumulate': ...}
    """

    def __init__(self, clock: Clock = time.perf_counter):
        self._clock = clock
        self._phases: dict[str, float] = {}
        self._started_at: float | None = None
        self._elapsed: float | None = None

    @property
    def sections(self) -> dict[str, float]:
        """Seconds spent in each phase so far (a copy)."""
        return dict(self._phases)

    def start(self) -> None:
        self._started_at = self._clock()
        self._elapsed = None

    def stop(self) -> None:
        if self._started_at is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._elapsed = self._clock() - self._started_at

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """
        Charge the enclosed block to phase `name`.

        A phase entered more than once accumulates. The block's time is
        recorded even if it raises.
        """
        entered = self._clock()
        try:
            yield
        finally:
            self._phases[name] = self._phases.get(name, 0.0) + (self._clock() - entered)

    def result(self) -> dict[str, float]:
        """'total_seconds' followed by every phase, for Result.timing."""
        if self._elapsed is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._elapsed, **self._phases}
