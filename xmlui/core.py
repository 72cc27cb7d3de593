"""Character classes and limits shared by the markup parser."""

from __future__ import annotations

MAX_TAG_LENGTH = 64
"""Longest string tag the parser stores, in characters."""

PRIM_TAG_LENGTH = 3
"""Number of primitive tag slots (element, params, children) between string tags."""

_RESERVED = frozenset("<>/= ")


class TagTooLongError(ValueError):
    """Raised when a tag is longer than :data:`MAX_TAG_LENGTH`."""


def is_valid_char(c: str) -> bool:
    """Return True for printable ASCII characters, space included."""
    return " " <= c <= "~"


def is_reserved_char(c: str) -> bool:
    """Return True for characters that may not appear inside a tag name."""
    return c in _RESERVED


def tag_length(tag: str) -> int:
    """Return the length of ``tag``, raising if it exceeds the tag limit."""
    length = len(tag)
    if length > MAX_TAG_LENGTH:
        raise TagTooLongError(
            f"tag {tag!r} has length {length}, maximum is {MAX_TAG_LENGTH}"
        )
    return length