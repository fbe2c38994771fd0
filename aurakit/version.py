"""Version numbers in the form major.minor.build[-dev]."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


class VersionType(Enum):
    """Kinds of version."""

    STABLE = 0
    PREVIEW = 1


def _leading_int(token: str) -> int:
    """Parse the leading integer of a token, ignoring trailing text."""
    match = _LEADING_INT.match(token)
    if match is None:
        raise ValueError(f"Ill-formatted version number: {token!r}")
    value = int(match.group(1))
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise ValueError(f"Version number out of range: {token!r}")
    return value


@dataclass(frozen=True, eq=False)
class Version:
    """A version number; a non-empty dev part marks a preview."""

    major: int = 0
    minor: int = 0
    build: int = 0
    dev: str = ""

    def __post_init__(self) -> None:
        if self.dev and not self.dev.startswith("-"):
            raise ValueError("Dev version must start with a '-'.")

    @classmethod
    def parse(cls, text: str) -> "Version":
        """Parse "major.minor.build" or "major.minor.build-dev"."""
        parts = text.split(".")
        if len(parts) != 3:
            raise ValueError("Ill-formatted version string.")
        major = _leading_int(parts[0])
        minor = _leading_int(parts[1])
        rest = parts[2]
        dash = rest.find("-")
        if dash == -1:
            return cls(major, minor, _leading_int(rest))
        return cls(major, minor, _leading_int(rest[:dash]), rest[dash:])

    @property
    def version_type(self) -> VersionType:
        """Stable when there is no dev part, else preview."""
        return VersionType.PREVIEW if self.dev else VersionType.STABLE

    @property
    def is_empty(self) -> bool:
        """Whether this is the empty version 0.0.0."""
        return self.major == 0 and self.minor == 0 and self.build == 0 and not self.dev

    def _key(self) -> tuple:
        return (self.major, self.minor, self.build, 0 if self.dev else 1)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.build}{self.dev}"

    def __hash__(self) -> int:
        return hash((self.major, self.minor, self.build, self.dev))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return (self.major, self.minor, self.build, self.dev) == (
            other.major,
            other.minor,
            other.build,
            other.dev,
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self < other or self == other

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self > other or self == other