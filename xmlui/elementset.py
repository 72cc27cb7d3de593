"""The registry of element names the markup may use."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

from xmlui.core import tag_length
from xmlui.parameterinfo import ParameterInfo

if TYPE_CHECKING:
    from xmlui.xmlfile import XMLFile


class ElementType(Enum):
    """Kind of element a name stands for."""

    DIV = auto()
    LINE = auto()
    FILLED_RECT = auto()
    OUTLINED_RECT = auto()
    CIRCLE = auto()
    TEXT_STATIC = auto()
    TEXT_INPUT = auto()
    TEXTURE = auto()
    BUTTON = auto()
    DRAGABLE = auto()
    CUSTOM = auto()


@dataclass
class Element:
    """A registered element: its name, signature, kind and, if custom, its file."""

    name: str
    params: ParameterInfo
    type: ElementType
    xml_file: XMLFile | None = None


class ElementSet:
    """Element definitions, looked up by name in the order they were added."""

    def __init__(self) -> None:
        self._elements: list[Element] = []

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self):
        return iter(self._elements)

    @staticmethod
    def _check(name: str, parameters: ParameterInfo) -> None:
        if not isinstance(name, str):
            raise TypeError(f"element name must be a string, not {type(name).__name__}")
        if parameters is None:
            raise TypeError(f"element {name!r} needs parameter info")
        tag_length(name)

    def add_default_element(
        self, name: str, parameters: ParameterInfo, element_type: ElementType
    ) -> None:
        """Register a built-in element kind under ``name``."""
        if element_type is ElementType.CUSTOM:
            raise ValueError("custom elements must be added with add_custom_element")
        self._check(name, parameters)
        self._elements.append(Element(name, parameters, element_type))

    def add_custom_element(
        self, name: str, parameters: ParameterInfo, xml_file: XMLFile
    ) -> None:
        """Register an element defined by its own markup file."""
        self._check(name, parameters)
        if xml_file is None:
            raise TypeError(f"custom element {name!r} needs a markup file")
        self._elements.append(
            Element(name, parameters, ElementType.CUSTOM, xml_file)
        )

    def match(self, name: str) -> Element | None:
        """Return the first element registered as ``name``, or None.

        Raises TagTooLongError if ``name`` is longer than the tag limit.
        """
        tag_length(name)
        return next((e for e in self._elements if e.name == name), None)