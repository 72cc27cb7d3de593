"""Tokenised view of a markup section: string tags interleaved with primitive tags."""

from __future__ import annotations

import warnings
from collections.abc import Iterator
from enum import IntEnum

from xmlui.core import MAX_TAG_LENGTH, PRIM_TAG_LENGTH, is_reserved_char, tag_length


class PrimitiveTagType(IntEnum):
    """The three structural slots that precede each string tag."""

    ELEMENT = 0
    PARAMS = 1
    CHILDREN = 2


class PrimitiveTagState(IntEnum):
    """State recorded in a primitive tag slot."""

    NONE = 0
    OPEN = 1
    CLOSE = 2
    CLOSE_OPEN = 3
    DOUBLE_CLOSE = 4


_TYPE_LABELS = {
    PrimitiveTagType.ELEMENT: "Element",
    PrimitiveTagType.PARAMS: "Params",
    PrimitiveTagType.CHILDREN: "Children",
}

_STATE_LABELS = {
    PrimitiveTagState.OPEN: "Open",
    PrimitiveTagState.CLOSE: "Close",
    PrimitiveTagState.CLOSE_OPEN: "Close-Open",
    PrimitiveTagState.DOUBLE_CLOSE: "Double-Close",
}


def _string_runs(text: str) -> Iterator[str]:
    """Yield each run of non-reserved characters that a reserved character ends."""
    start: int | None = None
    for index, char in enumerate(text):
        if is_reserved_char(char):
            if start is not None:
                yield text[start:index]
                start = None
        elif start is None:
            start = index


class TagSequence:
    """String tags of a section, each preceded by a set of primitive tags.

    A string tag is a run of characters that are not reserved, closed by a
    reserved character; a run at the very end of the text is not counted.
    There is one more primitive tag set than there are string tags.
    """

    def __init__(self, text: str, file_name: str | None = None) -> None:
        self.text = text
        self.file_name = file_name
        count = sum(1 for _ in _string_runs(text))
        self._strings: list[str] = [""] * count
        self._prims: list[list[PrimitiveTagState]] = [
            [PrimitiveTagState.NONE] * PRIM_TAG_LENGTH for _ in range(count + 1)
        ]

    @property
    def string_tag_count(self) -> int:
        """Number of string tags."""
        return len(self._strings)

    @property
    def prim_tag_count(self) -> int:
        """Number of primitive tag sets."""
        return len(self._prims)

    @property
    def _buffer_length(self) -> int:
        return (
            self.string_tag_count * MAX_TAG_LENGTH
            + self.prim_tag_count * PRIM_TAG_LENGTH
        )

    def __repr__(self) -> str:
        return f"TagSequence({self._strings!r})"

    @staticmethod
    def _check_index(index: int, limit: int, what: str, function: str) -> None:
        if index < 0:
            raise IndexError(f"TagSequence.{function} called with index {index} less than 0")
        if index >= limit:
            raise IndexError(
                f"TagSequence.{function} called with index {index} out of range "
                f"with {what} of {limit}"
            )

    def get_string_tag(self, index: int) -> str:
        """Return the string tag at ``index``."""
        self._check_index(index, self.string_tag_count, "tag count", "get_string_tag")
        return self._strings[index]

    def set_string_tag(self, index: int, tag: str) -> None:
        """Store ``tag`` at ``index``, cutting it to the tag limit if longer."""
        if not isinstance(tag, str):
            raise TypeError(f"tag must be a string, not {type(tag).__name__}")
        self._check_index(index, self.string_tag_count, "tag count", "set_string_tag")
        if len(tag) > MAX_TAG_LENGTH:
            warnings.warn(
                f"tag of length {len(tag)} cut to the maximum of {MAX_TAG_LENGTH}",
                stacklevel=2,
            )
            tag = tag[:MAX_TAG_LENGTH]
        self._strings[index] = tag

    def swap_string_tag(self, old_tag: str, new_tag: str) -> int:
        """Replace every string tag equal to ``old_tag`` with ``new_tag``.

        Returns the number of tags replaced, warning when there were none.
        """
        tag_length(old_tag)
        tag_length(new_tag)
        matches = [i for i, tag in enumerate(self._strings) if tag == old_tag]
        for index in matches:
            self._strings[index] = new_tag
        if not matches:
            warnings.warn(f"string tag {old_tag!r} was not found", stacklevel=2)
        return len(matches)

    def reset_primitive_tags(self, index: int) -> None:
        """Set every primitive tag at ``index`` back to NONE."""
        self._check_index(index, self.prim_tag_count, "primTagCount", "reset_primitive_tags")
        self._prims[index] = [PrimitiveTagState.NONE] * PRIM_TAG_LENGTH

    def get_primitive_tag(self, index: int, kind: PrimitiveTagType) -> PrimitiveTagState:
        """Return the state of the ``kind`` slot at ``index``."""
        self._check_index(index, self.prim_tag_count, "primTagCount", "get_primitive_tag")
        return self._prims[index][kind]

    def set_primitive_tag(
        self, index: int, kind: PrimitiveTagType, state: PrimitiveTagState
    ) -> None:
        """Set the ``kind`` slot at ``index`` to ``state``."""
        self._check_index(index, self.prim_tag_count, "primTagCount", "set_primitive_tag")
        self._prims[index][kind] = PrimitiveTagState(state)

    def populate_string_tags(self) -> None:
        """Fill the string tags from the text."""
        for index, run in enumerate(_string_runs(self.text)):
            self.set_string_tag(index, run)

    def copy(self) -> TagSequence:
        """Return an independent copy sharing the same source text."""
        duplicate = TagSequence.__new__(TagSequence)
        duplicate.text = self.text
        duplicate.file_name = self.file_name
        duplicate._strings = list(self._strings)
        duplicate._prims = [list(prims) for prims in self._prims]
        return duplicate

    def describe(self) -> str:
        """Return a readable listing of the primitive and string tags."""
        parts: list[str] = []
        for index, prims in enumerate(self._prims):
            for kind in PrimitiveTagType:
                state = prims[kind]
                if state is PrimitiveTagState.NONE:
                    continue
                parts.append(
                    f"[ Prim Tag ]   -> {_TYPE_LABELS[kind]} = "
                    f"{_STATE_LABELS.get(state, '???')}"
                )
            if index < self.string_tag_count:
                parts.append(f"[ String Tag ] -> {self._strings[index]}")
        header = f"Tag Sequence (Buffer Length = {self._buffer_length} Bytes):\r\n"
        return header + "".join("\n" + part for part in parts)