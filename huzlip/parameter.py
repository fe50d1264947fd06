"""Named parameter values for templates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeVar, Union

ParameterValue = Union[float, int, bool, str]

T = TypeVar("T")


@dataclass
class Parameter:
    """A named value that is a float, int, bool or str."""

    name: str
    value: ParameterValue

    def get_as(self, kind: type[T]) -> T | None:
        """Return the value if it is held as exactly ``kind``, otherwise None."""
        if type(self.value) is kind:
            return self.value
        return None