"""
Wall-clock timing for describe() and other multi-step computations.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Accumulating wall-clock timer with named sections.

    Used as a context manager, the block is the total:

        with Timer() as timer:
            with timer.section('moments'):
                mean = dist.mean()
            with timer.section('median'):
                median = dist.median()
        timer.result()
        # {'total_seconds': 4e-5, 'moments': 1e-5, 'median': 3e-5}

    start() and stop() do the same explicitly.
    """

    def __init__(self):
        self._sections: dict[str, float] = {}
        self._start_time: float | None = None
        self._total: float | None = None

    def __enter__(self) -> 'Timer':
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()

    def start(self) -> None:
        self._start_time = time.perf_counter()
        self._total = None

    def stop(self) -> None:
        if self._start_time is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._start_time

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Time a named section; repeated sections accumulate."""
        began = time.perf_counter()
        try:
            yield
        finally:
            self._sections[name] = (
                self._sections.get(name, 0.0) + time.perf_counter() - began
            )

    @property
    def sections(self) -> tuple[str, ...]:
        """Section names in the order they were first timed."""
        return tuple(self._sections)

    def result(self) -> dict[str, float]:
        """
        'total_seconds' followed by each section's accumulated seconds.

        Raises:
            RuntimeError: If the timer has not been stopped
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._sections}
