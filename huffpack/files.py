"""File reading and file-name helpers."""

from __future__ import annotations

import os
from typing import Optional, Union

MAX_FILE_SIZE = 200 * 1024 * 1024


class FileTooLargeError(ValueError):
    """Raised when a file exceeds the size that is read in one piece."""


def read_file(path: Union[str, os.PathLike]) -> bytes:
    """Read a whole file, refusing files larger than MAX_FILE_SIZE."""
    with open(path, "rb") as handle:
        size = os.fstat(handle.fileno()).st_size
        if size > MAX_FILE_SIZE:
            raise FileTooLargeError(f"file too large: {size} bytes")
        data = handle.read()
    if len(data) != size:
        raise OSError(f"short read on {os.fspath(path)!r}")
    return data


def file_extension(path: str) -> Optional[str]:
    """Return the text after the last dot, or None when there is none."""
    _, dot, extension = path.rpartition(".")
    if not dot or not extension:
        return None
    return extension


def with_extension(name: str, extension: str) -> str:
    """Replace everything from the first dot of ``name`` with ``.extension``."""
    stem = name.split(".", 1)[0]
    return f"{stem}.{extension}"