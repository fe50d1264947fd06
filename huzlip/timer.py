"""High-resolution wall-clock timer."""

from __future__ import annotations

import time


class Timer:
    """Measures the time since construction or the last reset."""

    def __init__(self) -> None:
        self._start = time.perf_counter()

    def reset(self) -> None:
        """Restart the measurement from now."""
        self._start = time.perf_counter()

    def elapsed(self) -> float:
        """Seconds since the start."""
        return time.perf_counter() - self._start

    def elapsed_str(self) -> str:
        """Elapsed seconds with six decimals, followed by " s"."""
        return f"{self.elapsed():.6f} s"