"""Thread-safe logging of info, warning and error messages."""

from __future__ import annotations

import sys
import threading

_lock = threading.Lock()


def _write(stream, prefix: str, message: str) -> None:
    with _lock:
        print(f"{prefix} {message}", file=stream, flush=True)


def info(message: str) -> None:
    """Write an informational message to standard output."""
    _write(sys.stdout, "[INFO]", message)


def warn(message: str) -> None:
    """Write a warning to standard output."""
    _write(sys.stdout, "[WARNING]", message)


def error(message: str) -> None:
    """Write an error to standard error."""
    _write(sys.stderr, "[ERROR]", message)