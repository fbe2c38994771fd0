import pytest

from aurakit.flags import (
    CredentialCheckStatus,
    FileAction,
    PasswordContent,
    ProgressState,
    WatcherFlags,
)


@pytest.mark.parametrize(
    "flag, value",
    [
        (WatcherFlags.FILE_NAME, 1),
        (WatcherFlags.DIRECTORY_NAME, 2),
        (WatcherFlags.ATTRIBUTES, 4),
        (WatcherFlags.SIZE, 8),
        (WatcherFlags.LAST_WRITE, 16),
        (WatcherFlags.LAST_ACCESS, 32),
    ],
)
def test_watcher_flag_values(flag, value):
    assert int(flag) == value


def test_watcher_flags_combine():
    combined = WatcherFlags(9)
    assert combined == WatcherFlags.FILE_NAME | WatcherFlags.SIZE
    assert WatcherFlags.FILE_NAME in combined
    assert WatcherFlags.SIZE in combined
    assert WatcherFlags.ATTRIBUTES not in combined
    assert combined & WatcherFlags.SIZE == WatcherFlags.SIZE
    assert combined ^ WatcherFlags.SIZE == WatcherFlags.FILE_NAME


def test_file_action_values():
    assert [action.value for action in FileAction] == [1, 2, 3, 4]
    assert FileAction(3) is FileAction.MODIFIED


@pytest.mark.parametrize(
    "value, member",
    [
        (1, CredentialCheckStatus.VALID),
        (2, CredentialCheckStatus.EMPTY_NAME),
        (4, CredentialCheckStatus.EMPTY_USERNAME_PASSWORD),
        (8, CredentialCheckStatus.INVALID_URI),
    ],
)
def test_credential_check_status_values(value, member):
    assert CredentialCheckStatus(value) is member


def test_credential_check_status_accumulates():
    status = CredentialCheckStatus(0)
    status |= CredentialCheckStatus.EMPTY_NAME
    status |= CredentialCheckStatus.INVALID_URI
    assert CredentialCheckStatus.EMPTY_NAME in status
    assert CredentialCheckStatus.VALID not in status


def test_password_content_all():
    everything = PasswordContent(15)
    assert everything == (
        PasswordContent.NUMERIC
        | PasswordContent.UPPERCASE
        | PasswordContent.LOWERCASE
        | PasswordContent.SPECIAL
    )
    assert all(member in everything for member in PasswordContent)
    assert PasswordContent(8) is PasswordContent.SPECIAL


@pytest.mark.parametrize(
    "value, member",
    [
        (0, ProgressState.NO_PROGRESS),
        (1, ProgressState.INDETERMINATE),
        (2, ProgressState.NORMAL),
        (4, ProgressState.ERROR),
        (8, ProgressState.PAUSED),
    ],
)
def test_progress_state_values(value, member):
    assert ProgressState(value) is member


def test_progress_state_rejects_unknown():
    with pytest.raises(ValueError):
        ProgressState(3)