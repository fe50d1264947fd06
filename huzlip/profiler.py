"""A lightweight profiler for labelled blocks of code."""

from __future__ import annotations

import time


class Profiler:
    """Accumulates total time and call counts per label."""

    def __init__(self) -> None:
        self._times: dict[str, float] = {}
        self._counts: dict[str, int] = {}
        self._label: str | None = None
        self._start = 0.0

    @property
    def times(self) -> dict[str, float]:
        return dict(self._times)

    @property
    def counts(self) -> dict[str, int]:
        return dict(self._counts)

    def start(self, label: str) -> None:
        """Begin timing a block under ``label``."""
        self._label = label
        self._start = time.perf_counter()

    def stop(self) -> None:
        """End the block started last and record its duration."""
        end = time.perf_counter()
        if self._label is None:
            raise RuntimeError("Profiler.stop() called without start()")
        label = self._label
        self._times[label] = self._times.get(label, 0.0) + (end - self._start)
        self._counts[label] = self._counts.get(label, 0) + 1
        self._label = None

    def report(self) -> None:
        """Print the totals, call counts and averages, sorted by label."""
        print("Profiler Report:")
        for label in sorted(self._times):
            total = self._times[label]
            count = self._counts[label]
            print(f"{label:<20} {total:<10g} s (calls: {count} avg: {total / count:g} s)")