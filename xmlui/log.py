"""A small write-through log file."""

from __future__ import annotations

import os
from typing import BinaryIO

from xmlui.utility import int_to_string, number_to_string

_BUFFER_LENGTH = 64
_FLOAT_DIGITS = 4
_LINE_END = "\r\n"


class Log:
    """Log file that is truncated on open and flushed after every write.

    Writes to a log that has no file, or that was closed, are ignored.
    """

    def __init__(self, path: str | os.PathLike[str] | None) -> None:
        self.path = path
        self._file: BinaryIO | None = None if path is None else open(path, "wb")

    @property
    def closed(self) -> bool:
        """True when there is no open file behind this log."""
        return self._file is None

    def close(self) -> None:
        """Close the file; later writes are ignored."""
        if self._file is not None:
            self._file.close()
            self._file = None

    def clear(self) -> None:
        """Remove everything written so far."""
        if self._file is None:
            return
        self._file.seek(0)
        self._file.truncate()
        self._file.flush()

    def _emit(self, text: str) -> None:
        if self._file is None:
            return
        self._file.write(text.encode("utf-8"))
        self._file.flush()

    def write(self, message: str | int | float, new_line: bool = False) -> None:
        """Write a string, integer or float, optionally ending the line."""
        if isinstance(message, str):
            text = message
        elif isinstance(message, float):
            text = number_to_string(message, _BUFFER_LENGTH, _FLOAT_DIGITS)
        elif isinstance(message, int):
            text = int_to_string(int(message), _BUFFER_LENGTH)
        else:
            raise TypeError(f"cannot log value of type {type(message).__name__}")
        self._emit(text + _LINE_END if new_line else text)

    def new_line(self) -> None:
        """Write a bare line feed."""
        self._emit("\n")

    def var(self, message: str, value: int | float) -> None:
        """Write ``message: value`` on its own line."""
        self.write(message)
        self.write(": ")
        self.write(value, True)

    def __enter__(self) -> Log:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()