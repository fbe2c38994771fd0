"""Helpers for file bytes and system error messages."""

from __future__ import annotations

import sys
import threading
from pathlib import Path
from typing import Union

PathLike = Union[str, Path]

_state = threading.local()


def _record(error: OSError) -> None:
    _state.last_error = error.strerror or str(error)


def last_system_error() -> str:
    """Return the message of the last operating-system error.

    An OSError currently being handled takes precedence over the last one
    recorded by this module's file helpers. Empty if there is none.
    """
    current = sys.exc_info()[1]
    if isinstance(current, OSError):
        return current.strerror or str(current)
    return getattr(_state, "last_error", "")


def read_file_bytes(path: PathLike) -> bytes:
    """Read a whole file; return empty bytes if it cannot be read."""
    try:
        return Path(path).read_bytes()
    except OSError as error:
        _record(error)
        return b""


def write_file_bytes(path: PathLike, data: bytes, overwrite: bool = True) -> bool:
    """Write bytes to a file.

    Returns False if the file exists and overwrite is false, or if writing fails.
    """
    target = Path(path)
    if target.exists() and not overwrite:
        return False
    try:
        target.write_bytes(bytes(data))
    except OSError as error:
        _record(error)
        return False
    return True