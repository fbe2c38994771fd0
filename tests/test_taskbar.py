from aurakit.flags import ProgressState
from aurakit.taskbar import TaskbarItem


def test_defaults():
    item = TaskbarItem()
    assert item.progress_state == ProgressState.NO_PROGRESS
    assert item.progress == 0.0
    assert item.urgent is False
    assert item.count_visible is False
    assert item.count == 0
    assert item.connected is False


def test_positive_progress_is_normal():
    item = TaskbarItem()
    item.progress = 0.5
    assert item.progress == 0.5
    assert item.progress_state == ProgressState.NORMAL


def test_zero_progress_is_no_progress():
    item = TaskbarItem()
    item.progress = 0.5
    item.progress = 0.0
    assert item.progress_state == ProgressState.NO_PROGRESS


def test_set_state_and_fields():
    item = TaskbarItem()
    item.progress_state = ProgressState.PAUSED
    item.urgent = True
    item.count_visible = True
    item.count = 7
    assert item.progress_state == ProgressState.PAUSED
    assert (item.urgent, item.count_visible, item.count) == (True, True, 7)


def test_connect():
    item = TaskbarItem()
    assert item.connect("") is False
    assert item.connect("org.example.app.desktop") is True
    assert item.app_uri == "application://org.example.app.desktop"
    assert item.connected


def test_updates_only_after_connect():
    item = TaskbarItem()
    received = []
    item.updated.subscribe(lambda args: received.append(args.param))
    item.count = 3
    assert received == []
    item.connect("org.example.app.desktop")
    item.count = 4
    assert received[-1]["count"] == 4
    assert len(received) == 2


def test_launcher_entry_reflects_state():
    item = TaskbarItem()
    item.progress = 0.25
    item.urgent = True
    entry = item.launcher_entry()
    assert entry["progress"] == 0.25
    assert entry["progress-visible"] is True
    assert entry["urgent"] is True
    assert entry["count-visible"] is False