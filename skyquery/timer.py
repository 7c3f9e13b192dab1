"""Wall-clock timing helpers."""

from __future__ import annotations

import time
from typing import Any, Callable, TypeVar

T = TypeVar("T")


class Timer:
    """Starts on creation; :meth:`stop` returns seconds elapsed since then."""

    def __init__(self) -> None:
        self._start = time.perf_counter()
        self.elapsed: float | None = None

    def stop(self) -> float:
        """Return the seconds elapsed since the timer was created."""
        self.elapsed = time.perf_counter() - self._start
        return self.elapsed

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.stop()


def measure(func: Callable[..., T], *args: Any, **kwargs: Any) -> tuple[T, float]:
    """Call ``func`` and return its result with the seconds it took."""
    timer = Timer()
    result = func(*args, **kwargs)
    return result, timer.stop()