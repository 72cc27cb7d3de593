"""Deriving the structural (primitive) tags of a tag sequence from its text."""

from __future__ import annotations

from xmlui.core import is_reserved_char
from xmlui.tagsequence import PrimitiveTagState, PrimitiveTagType, TagSequence

_ELEMENT = PrimitiveTagType.ELEMENT
_PARAMS = PrimitiveTagType.PARAMS
_CHILDREN = PrimitiveTagType.CHILDREN


class PrimTagError(ValueError):
    """Raised when the markup structure cannot be turned into primitive tags."""


def populate_prim_tags(sequence: TagSequence) -> None:
    """Set the element, params and children slots of ``sequence`` from its text.

    ``<`` opens an element (or closes and opens one right after ``/>``),
    ``/`` closes it, a space opens the parameter section and ``>`` closes
    it, opening the children section unless the element closed itself.
    """
    tag_index = 0
    in_tag = False
    in_params = False
    previous = ""
    current = ""

    for char in sequence.text:
        previous, current = current, char

        if not is_reserved_char(char):
            in_tag = True
            continue

        if in_tag:
            tag_index += 1
            in_tag = False

        if char == "<":
            state = sequence.get_primitive_tag(tag_index, _ELEMENT)
            if state is PrimitiveTagState.CLOSE:
                sequence.set_primitive_tag(tag_index, _ELEMENT, PrimitiveTagState.CLOSE_OPEN)
            else:
                sequence.set_primitive_tag(tag_index, _ELEMENT, PrimitiveTagState.OPEN)

        elif char == ">":
            if in_params:
                sequence.set_primitive_tag(tag_index, _PARAMS, PrimitiveTagState.CLOSE)
                in_params = False
            if tag_index > 0:
                before = sequence.get_primitive_tag(tag_index - 1, _ELEMENT)
                if before in (PrimitiveTagState.CLOSE, PrimitiveTagState.DOUBLE_CLOSE):
                    continue
            if previous != "/":
                sequence.set_primitive_tag(tag_index, _CHILDREN, PrimitiveTagState.OPEN)
            else:
                sequence.set_primitive_tag(tag_index, _CHILDREN, PrimitiveTagState.NONE)

        elif char == "/":
            if previous == "/":
                raise PrimTagError(
                    f"found 2 '/' characters in a row in file "
                    f"{sequence.file_name or 'Unspecified!!'!r}; "
                    "this is most likely a typo in the file"
                )
            state = sequence.get_primitive_tag(tag_index, _ELEMENT)
            if state is PrimitiveTagState.CLOSE_OPEN:
                sequence.set_primitive_tag(tag_index, _ELEMENT, PrimitiveTagState.DOUBLE_CLOSE)
            else:
                sequence.set_primitive_tag(tag_index, _ELEMENT, PrimitiveTagState.CLOSE)
            if in_params:
                sequence.set_primitive_tag(tag_index, _PARAMS, PrimitiveTagState.CLOSE)
                in_params = False
            if previous == "<":
                sequence.set_primitive_tag(tag_index, _CHILDREN, PrimitiveTagState.CLOSE)

        elif char == " ":
            if not in_params:
                sequence.set_primitive_tag(tag_index, _PARAMS, PrimitiveTagState.OPEN)
                in_params = True