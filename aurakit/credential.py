"""Credentials stored in a keyring."""

from __future__ import annotations

from functools import total_ordering


@total_ordering
class Credential:
    """A named login: a URI (or comment), a username and a password.

    Credentials are identified, compared and ordered by their id.
    """

    def __init__(self, name: str, uri: str, username: str, password: str, id: int = 0) -> None:
        self._id = id
        self.name = name
        self.uri = uri
        self.username = username
        self.password = password

    @property
    def id(self) -> int:
        return self._id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Credential):
            return NotImplemented
        return self._id == other._id

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Credential):
            return NotImplemented
        return self._id < other._id

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Credential):
            return NotImplemented
        return self._id > other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __str__(self) -> str:
        return (
            f"[CRED: {self.name}]\n"
            f"Uri: {self.uri}\n"
            f"Username: {self.username}\n"
            f"Password: {self.password}"
        )

    def __repr__(self) -> str:
        return f"Credential(id={self._id!r}, name={self.name!r}, uri={self.uri!r}, username={self.username!r})"