"""Thread-safe random number generation."""

from __future__ import annotations

import os
import random
import threading
import time


class Random:
    """Random source guarded by a lock so threads may share it."""

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = time.perf_counter_ns() ^ int.from_bytes(os.urandom(8), "little")
        self._rng = random.Random(seed)
        self._lock = threading.Lock()

    def uniform(self, low: float, high: float) -> float:
        """Real number drawn uniformly from [low, high)."""
        with self._lock:
            return low + (high - low) * self._rng.random()

    def randint(self, low: int, high: int) -> int:
        """Integer drawn uniformly from [low, high], both ends included."""
        with self._lock:
            return self._rng.randint(low, high)