"""Walking the files of a directory that match a wildcard pattern."""

from __future__ import annotations

import fnmatch
import os
import posixpath
from collections.abc import Iterator
from pathlib import Path

from xmlui.filereader import read_file

MAX_PATH = 260
"""Longest path, terminator included, that the navigator will build."""


def _check_length(path: str | os.PathLike[str], what: str) -> None:
    text = os.fspath(path)
    length = len(text) + 1
    if length > MAX_PATH:
        raise ValueError(
            f"{what} {text!r} has length {length} but max allowed is {MAX_PATH}"
        )


class FileNavigator:
    """Iterates over the files below a working directory.

    A pattern such as ``"*"``, ``"*.txt"`` or ``"dir/*"`` is matched against
    the entries of each directory, ignoring case. Entries are visited in name
    order. When ``use_subdirs`` is set, every matching directory is entered
    as soon as it is reached and searched with the same pattern, giving a
    depth-first walk; otherwise directories are skipped.
    """

    def __init__(
        self, working_path: str | os.PathLike[str], use_subdirs: bool = True
    ) -> None:
        self.use_subdirs = use_subdirs
        self._working_path = Path()
        self.set_working_path(working_path)

    @property
    def working_path(self) -> Path:
        """The directory that patterns are resolved against."""
        return self._working_path

    def set_working_path(self, path: str | os.PathLike[str]) -> None:
        """Resolve later patterns against ``path``."""
        _check_length(path, "working path")
        self._working_path = Path(os.fspath(path))

    def files(self, pattern: str = "*") -> Iterator[Path]:
        """Yield the path of every file matching ``pattern``."""
        head, tail = posixpath.split(pattern.replace("\\", "/"))
        if not tail:
            raise ValueError(f"pattern {pattern!r} does not name any files")
        yield from self._walk(Path(), head, tail)

    def read_files(self, pattern: str = "*") -> Iterator[tuple[Path, bytes]]:
        """Yield ``(path, contents)`` for every file matching ``pattern``."""
        for path in self.files(pattern):
            yield path, read_file(path)

    def _walk(self, relative: Path, head: str, tail: str) -> Iterator[Path]:
        directory = self._working_path / relative / head
        _check_length(directory / tail, "search path")

        folded = tail.casefold()
        try:
            with os.scandir(directory) as listing:
                entries = sorted(
                    (
                        (entry.name, entry.is_dir())
                        for entry in listing
                        if fnmatch.fnmatchcase(entry.name.casefold(), folded)
                    ),
                    key=lambda pair: (pair[0].casefold(), pair[0]),
                )
        except (FileNotFoundError, NotADirectoryError):
            return

        for name, is_dir in entries:
            if is_dir:
                if self.use_subdirs:
                    yield from self._walk(relative / head / name, head, tail)
                continue
            yield directory / name