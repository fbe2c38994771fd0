"""Enumerations and flag sets shared across the package."""

from enum import Enum, IntFlag


class WatcherFlags(IntFlag):
    """Properties of a file system object whose changes can be watched."""

    FILE_NAME = 1
    DIRECTORY_NAME = 2
    ATTRIBUTES = 4
    SIZE = 8
    LAST_WRITE = 16
    LAST_ACCESS = 32


class FileAction(Enum):
    """Actions that cause a file system object to change."""

    ADDED = 1
    REMOVED = 2
    MODIFIED = 3
    RENAMED = 4


class CredentialCheckStatus(IntFlag):
    """Status flags of a validated credential."""

    VALID = 1
    EMPTY_NAME = 2
    EMPTY_USERNAME_PASSWORD = 4
    INVALID_URI = 8


class PasswordContent(IntFlag):
    """Kinds of characters a password may contain."""

    NUMERIC = 1
    UPPERCASE = 2
    LOWERCASE = 4
    SPECIAL = 8


class ProgressState(Enum):
    """States of progress shown on a taskbar button."""

    NO_PROGRESS = 0
    INDETERMINATE = 1
    NORMAL = 2
    ERROR = 4
    PAUSED = 8