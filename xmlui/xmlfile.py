"""A parsed markup file: its cleaned text and the tag sequences of its sections."""

from __future__ import annotations

import os

from xmlui.core import MAX_TAG_LENGTH, TagTooLongError
from xmlui.filereader import read_file
from xmlui.primtags import populate_prim_tags
from xmlui.sections import Sections, format_text, locate_sections
from xmlui.tagsequence import TagSequence
from xmlui.utility import int_to_string, number_to_string

_FLOAT_DIGITS = 4
_SECTION_GAP = "\n\n\n"


class LabelError(ValueError):
    """Raised when the labels section does not hold name/value pairs."""


def _section_text(text: str, start: int, end: int) -> str:
    # The section runs up to and including the '<' of its closing tag.
    if start == -1 or end == -1:
        return ""
    return text[start : end + 1]


class XMLFile:
    """Markup split into parameters, labels and main tag sequences.

    Labels are applied to the main section as soon as the file is parsed.
    """

    def __init__(self, text: str, file_name: str | None = None) -> None:
        self.file_name = file_name
        self.text = format_text(text)
        self.sections: Sections = locate_sections(self.text, file_name)

        s = self.sections
        self.parameters = TagSequence(
            _section_text(self.text, s.parameters_start, s.parameters_end), file_name
        )
        self.parameters.populate_string_tags()

        self.labels = TagSequence(
            _section_text(self.text, s.labels_start, s.labels_end), file_name
        )
        self.labels.populate_string_tags()

        self.main = TagSequence(_section_text(self.text, s.main_start, s.main_end), file_name)
        self.main.populate_string_tags()
        populate_prim_tags(self.main)

        self._apply_labels()

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> XMLFile:
        """Read and parse the file at ``path``."""
        return cls(read_file(path).decode("latin-1"), os.fspath(path))

    def _apply_labels(self) -> None:
        if self.sections.labels_start == -1 or self.sections.labels_end == -1:
            return
        count = self.labels.string_tag_count
        if count % 2:
            raise LabelError(
                f"found an uneven number of label tags in file {self.file_name!r}"
            )
        for index in range(0, count, 2):
            self.set_label(
                self.labels.get_string_tag(index), self.labels.get_string_tag(index + 1)
            )

    def set_parameter(self, tag: str, value: str | int | float) -> None:
        """Replace every ``_tag`` in the main section with ``value``."""
        if isinstance(value, float):
            text = number_to_string(value, MAX_TAG_LENGTH, _FLOAT_DIGITS)
        elif isinstance(value, int):
            text = int_to_string(value, MAX_TAG_LENGTH)
        else:
            text = value
        if not tag:
            raise ValueError("parameter name has 0 length")
        if len(tag) > MAX_TAG_LENGTH:
            raise TagTooLongError(
                f"parameter name {tag!r} is longer than {MAX_TAG_LENGTH}"
            )
        self.main.swap_string_tag("_" + tag, text)

    def set_label(self, tag: str, value: str) -> None:
        """Replace every ``tag`` in the main section with ``value``."""
        self.main.swap_string_tag(tag, value)

    def copy(self) -> XMLFile:
        """Return a copy whose tag sequences can be changed independently."""
        duplicate = XMLFile.__new__(XMLFile)
        duplicate.file_name = self.file_name
        duplicate.text = self.text
        duplicate.sections = self.sections
        duplicate.parameters = self.parameters.copy()
        duplicate.labels = self.labels.copy()
        duplicate.main = self.main.copy()
        return duplicate

    def _describe_section(self, title: str, label: str, start: int, end: int) -> str:
        if start == -1 or end == -1:
            return f"No valid <{label}> section!\r\n"
        return f"{title} section:\r\n{self.text[start:end]}"

    def describe(self) -> str:
        """Return a readable dump of the text, sections and tag sequences."""
        s = self.sections
        parts = [
            "XMLFile object contents:\r\n",
            f'File Name: "{self.file_name}"\r\n',
            self.text,
            "\n\n",
            self._describe_section("Parameters", "parameters", s.parameters_start, s.parameters_end),
            _SECTION_GAP,
            self._describe_section("Labels", "labels", s.labels_start, s.labels_end),
            _SECTION_GAP,
            self._describe_section("Main", "main", s.main_start, s.main_end),
            _SECTION_GAP,
            "Parameters Tag Sequence:\r\n",
            self.parameters.describe(),
            _SECTION_GAP,
            "Labels Tag Sequence:\r\n",
            self.labels.describe(),
            _SECTION_GAP,
            "Main Tag Sequence:\r\n",
            self.main.describe(),
        ]
        return "".join(parts)