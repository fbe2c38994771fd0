"""String helpers."""

from __future__ import annotations

import base64
import binascii
import re
import uuid
from itertools import takewhile
from typing import Iterable, List, Optional
from urllib.parse import urlsplit

UINT_MAX = 0xFFFFFFFF

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_SCHEME = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*")
_ARG = re.compile(r"""[^\s"']+|"([^"]*)"|'([^']*)'""")


def decode(text: str) -> bytes:
    """Decode base64 text; return empty bytes if it is not valid base64."""
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError):
        return b""


def encode(data: bytes) -> str:
    """Encode bytes as base64 text."""
    return base64.b64encode(bytes(data)).decode("ascii")


def is_valid_url(s: str) -> bool:
    """Return whether the string is a URL with a scheme and a host."""
    if not s or any(c.isspace() for c in s):
        return False
    try:
        parts = urlsplit(s)
    except ValueError:
        return False
    return bool(_SCHEME.fullmatch(parts.scheme)) and bool(parts.netloc)


def join(values: Iterable[str], separator: str, separate_last: bool = True) -> str:
    """Join strings with a separator, optionally also after the last one."""
    joined = separator.join(values)
    if separate_last and joined != "" or separate_last and values_nonempty(values):
        return joined + separator
    return joined


def values_nonempty(values: Iterable[str]) -> bool:
    """Return whether the iterable holds at least one element."""
    return any(True for _ in values)


def lower(s: str) -> str:
    """Return the string in lower case."""
    return s.lower()


def upper(s: str) -> str:
    """Return the string in upper case."""
    return s.upper()


def new_guid() -> str:
    """Return a new random (version 4) UUID as text."""
    return str(uuid.uuid4())


def replace(s: str, to_replace: str, replacement: str) -> str:
    """Replace every occurrence of a substring; an empty target changes nothing."""
    if not s or not to_replace:
        return s
    return s.replace(to_replace, replacement)


def split(s: str, delimiter: str) -> List[str]:
    """Split on a delimiter; a trailing empty piece is dropped."""
    if not s:
        return [""]
    if not delimiter:
        return [s]
    pieces = s.split(delimiter)
    if pieces[-1] == "":
        pieces.pop()
    return pieces


def split_args(s: str) -> List[str]:
    """Split a command line into arguments, honouring single and double quotes."""
    args = []
    for match in _ARG.finditer(s):
        if match.group(1) is not None:
            args.append(match.group(1))
        elif match.group(2) is not None:
            args.append(match.group(2))
        else:
            args.append(match.group(0))
    return args


def stoui(s: str, base: int = 10) -> int:
    """Parse the leading unsigned integer of a string.

    Returns UINT_MAX if the value does not fit in 32 bits and 0 if nothing
    could be parsed.
    """
    if not 2 <= base <= 36:
        return 0
    text = s.lstrip(_WHITESPACE).lower()
    negative = False
    if text and text[0] in "+-":
        negative = text[0] == "-"
        text = text[1:]
    valid = _DIGITS[:base]
    if base == 16 and text.startswith("0x") and len(text) > 2 and text[2] in valid:
        text = text[2:]
    digits = "".join(takewhile(lambda c: c in valid, text))
    if not digits:
        return 0
    value = int(digits, base)
    if negative and value:
        return 0
    return min(value, UINT_MAX)


def trim(s: str, delimiter: Optional[str] = None) -> str:
    """Strip whitespace, or the given character, from both ends."""
    if delimiter is None:
        return s.strip(_WHITESPACE)
    if len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")
    return s.strip(delimiter)