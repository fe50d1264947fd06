"""A simple in-memory key-value configuration."""

from __future__ import annotations


class Config:
    """String settings looked up by key."""

    def __init__(self) -> None:
        self._values: dict[str, str] = {}

    def set(self, key: str, value: str) -> None:
        """Set or replace a setting."""
        self._values[key] = value

    def get(self, key: str, default: str = "") -> str:
        """Return a setting, or ``default`` when it is absent."""
        return self._values.get(key, default)

    def contains(self, key: str) -> bool:
        """True if the key is set."""
        return key in self._values

    def __contains__(self, key: object) -> bool:
        return key in self._values