"""Reading whole files as raw bytes."""

from __future__ import annotations

import os


class FileReadError(OSError):
    """Raised when a file opens but its contents cannot be read in full."""


def file_size(path: str | os.PathLike[str]) -> int:
    """Return the size of the file at ``path`` in bytes."""
    return os.path.getsize(path)


def read_file(path: str | os.PathLike[str]) -> bytes:
    """Return the whole contents of the file at ``path``.

    Empty files count as unreadable, as do files that yield fewer bytes than
    their reported size.
    """
    with open(path, "rb") as handle:
        size = os.fstat(handle.fileno()).st_size
        if size <= 0:
            raise FileReadError(f"failed to read file {os.fspath(path)!r}: file is empty")
        data = handle.read(size)
    if len(data) != size:
        raise FileReadError(
            f"failed to read file {os.fspath(path)!r}: "
            f"got {len(data)} of {size} bytes"
        )
    return data