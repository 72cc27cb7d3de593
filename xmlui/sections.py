"""Cleaning up markup text and finding its reserved sections."""

from __future__ import annotations

from dataclasses import dataclass

from xmlui.core import is_valid_char


class SectionError(ValueError):
    """Raised when the reserved sections of a markup file are missing or misplaced."""


@dataclass(frozen=True)
class Sections:
    """Bounds of the reserved sections, -1 where a section is absent.

    Each start is the index just after the opening tag; each end is the index
    of the ``<`` that begins the closing tag.
    """

    parameters_start: int = -1
    parameters_end: int = -1
    labels_start: int = -1
    labels_end: int = -1
    main_start: int = -1
    main_end: int = -1


def format_text(text: str) -> str:
    """Strip comments, unprintable characters and redundant spaces.

    Spaces survive only inside ``<...>``, and never two in a row.
    """
    out: list[str] = []
    inside_element = False
    last_was_space = False
    in_comment = False

    for position, char in enumerate(text):
        if not is_valid_char(char):
            continue

        if char == "<":
            inside_element = True
            if text[position + 1 : position + 4] == "!--":
                in_comment = True

        if char == ">":
            inside_element = False
            if position >= 2 and text[position - 2 : position] == "--":
                in_comment = False
                continue

        if in_comment:
            continue

        if char == " ":
            if not inside_element or last_was_space:
                continue
            last_was_space = True
        else:
            last_was_space = False

        out.append(char)

    return "".join(out)


@dataclass
class _SearchTag:
    pattern: str
    closing: bool
    index: int = 0
    found_at: int = -1

    @property
    def found(self) -> bool:
        return self.found_at != -1

    def feed(self, char: str, position: int) -> None:
        if self.found:
            return
        if char != self.pattern[self.index]:
            self.index = 0
            return
        self.index += 1
        if self.index == len(self.pattern):
            if self.closing:
                self.found_at = position - (len(self.pattern) - 1)
            else:
                self.found_at = position + 1


def _fail(file_name: str | None, detail: str) -> SectionError:
    return SectionError(f"Error when validating XML file: '{file_name}': {detail}")


def locate_sections(text: str, file_name: str | None = None) -> Sections:
    """Find the first ``<parameters>``, ``<labels>`` and ``<main>`` sections.

    The main section is required; the others are optional but must be
    complete and in order when present.
    """
    tags = {
        "parameters_start": _SearchTag("<parameters>", False),
        "labels_start": _SearchTag("<labels>", False),
        "main_start": _SearchTag("<main>", False),
        "parameters_end": _SearchTag("</parameters>", True),
        "labels_end": _SearchTag("</labels>", True),
        "main_end": _SearchTag("</main>", True),
    }

    for position, char in enumerate(text):
        if char == "\0":
            break
        for tag in tags.values():
            tag.feed(char, position)

    for name in ("parameters", "labels"):
        start, end = tags[f"{name}_start"], tags[f"{name}_end"]
        if start.found != end.found:
            if not start.found:
                detail = f"failed to find an opening <{name}> tag to match the closing </{name}> tag"
            else:
                detail = f"failed to find a closing </{name}> tag to match the opening <{name}> tag"
            raise _fail(file_name, detail)

    main_start, main_end = tags["main_start"], tags["main_end"]
    if not main_start.found and not main_end.found:
        raise _fail(file_name, "failed to find an opening <main> tag and a closing </main> tag")
    if not main_start.found:
        raise _fail(file_name, "failed to find an opening <main> tag")
    if not main_end.found:
        raise _fail(file_name, "failed to find a closing </main> tag")

    for name in ("parameters", "labels", "main"):
        start, end = tags[f"{name}_start"], tags[f"{name}_end"]
        if start.found and end.found and start.found_at > end.found_at:
            raise _fail(file_name, f"</{name}> tag should not appear before <{name}> tag")

    return Sections(**{key: tag.found_at for key, tag in tags.items()})