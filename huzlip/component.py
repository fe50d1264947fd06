"""Base class for components in an assembly."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Component(ABC):
    """A named component carrying string properties."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._properties: dict[str, str] = {}

    @property
    def name(self) -> str:
        return self._name

    def set_property(self, key: str, value: str) -> None:
        """Set or replace a property."""
        self._properties[key] = value

    def get_property(self, key: str) -> str:
        """Return a property, or an empty string when it is not set."""
        return self._properties.get(key, "")

    def property_keys(self) -> list[str]:
        """Names of all properties that are set."""
        return list(self._properties)

    @abstractmethod
    def clone(self) -> Component:
        """Return an independent copy of this component."""