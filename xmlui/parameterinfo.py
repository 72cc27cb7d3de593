"""Named, typed parameter signatures for markup elements."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from xmlui.core import tag_length
from xmlui.linkedlist import LinkedList


class ParameterType(Enum):
    """Value type of an element parameter."""

    NONE = auto()
    INT = auto()
    FLOAT = auto()
    STRING = auto()


@dataclass(frozen=True)
class Parameter:
    """A parameter name and its type, as collected by the builder."""

    name: str
    type: ParameterType


class ParameterInfo:
    """Ordered parameter signature, looked up by name.

    Parameters are taken from the list by id, starting at position 0 and
    stopping at the first position that is missing.
    """

    def __init__(self, parameters: LinkedList[Parameter]) -> None:
        entries: list[Parameter] = []
        while (parameter := parameters.get_by_id(len(entries))) is not None:
            entries.append(parameter)
        self._entries = tuple(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        fields = ", ".join(f"{p.name}: {p.type.name}" for p in self._entries)
        return f"ParameterInfo({fields})"

    def match(self, name: str) -> tuple[ParameterType, int]:
        """Return the type and position of ``name``, or ``(NONE, -1)`` if unknown.

        Raises TagTooLongError if ``name`` is longer than the tag limit.
        """
        tag_length(name)
        for position, parameter in enumerate(self._entries):
            if parameter.name == name:
                return parameter.type, position
        return ParameterType.NONE, -1


class ParameterInfoBuilder:
    """Collects parameters and turns them into a :class:`ParameterInfo`."""

    def __init__(self) -> None:
        self._parameters: LinkedList[Parameter] = LinkedList()

    def add_parameter(self, name: str, param_type: ParameterType, position: int) -> None:
        """Add a parameter at the given position."""
        if not isinstance(name, str):
            raise TypeError(f"parameter name must be a string, not {type(name).__name__}")
        self._parameters.push_back(Parameter(name, param_type), position)

    def build(self) -> ParameterInfo:
        """Return the collected signature and start afresh."""
        info = ParameterInfo(self._parameters)
        self.reset()
        return info

    def reset(self) -> None:
        """Discard every parameter added so far."""
        self._parameters = LinkedList()