"""Parametric templates that build components."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from huzlip.component import Component
from huzlip.parameter import Parameter, ParameterValue


class Template(ABC):
    """A set of parameters from which a component is built."""

    def __init__(self, parameters: Iterable[Parameter] = ()) -> None:
        self._parameters: list[Parameter] = list(parameters)

    @property
    def parameters(self) -> list[Parameter]:
        return list(self._parameters)

    def set_parameter(self, name: str, value: ParameterValue) -> None:
        """Set the first parameter with this name; unknown names are ignored."""
        for param in self._parameters:
            if param.name == name:
                param.value = value
                return

    @abstractmethod
    def build(self) -> Component:
        """Build a component from the current parameters."""