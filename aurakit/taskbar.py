"""The application's item on the taskbar or launcher."""

from __future__ import annotations

import threading
from typing import Any, Dict, Optional

from aurakit.events import Event, ParamEventArgs
from aurakit.flags import ProgressState

LauncherEntry = Dict[str, Any]


class TaskbarItem:
    """Progress, urgency and count shown on the application's taskbar item.

    Once connected, every change invokes ``updated`` with the launcher entry
    properties, ready to be sent to the desktop's launcher.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._progress_state = ProgressState.NO_PROGRESS
        self._progress = 0.0
        self._urgent = False
        self._count_visible = False
        self._count = 0
        self._app_uri: Optional[str] = None
        self._updated: Event[ParamEventArgs[LauncherEntry]] = Event()

    @property
    def updated(self) -> Event[ParamEventArgs[LauncherEntry]]:
        return self._updated

    @property
    def app_uri(self) -> Optional[str]:
        return self._app_uri

    @property
    def connected(self) -> bool:
        return self._app_uri is not None

    def connect(self, desktop_file: str) -> bool:
        """Connect to the application's desktop file; False if it is empty."""
        if not desktop_file:
            return False
        with self._lock:
            self._app_uri = f"application://{desktop_file}"
        self._send_update()
        return True

    @property
    def progress_state(self) -> ProgressState:
        with self._lock:
            return self._progress_state

    @progress_state.setter
    def progress_state(self, state: ProgressState) -> None:
        with self._lock:
            self._progress_state = ProgressState(state)
        self._send_update()

    @property
    def progress(self) -> float:
        with self._lock:
            return self._progress

    @progress.setter
    def progress(self, value: float) -> None:
        """Set the progress (0 to 1); the state becomes NORMAL if above 0, else NO_PROGRESS."""
        with self._lock:
            self._progress = float(value)
            self._progress_state = ProgressState.NORMAL if value > 0 else ProgressState.NO_PROGRESS
        self._send_update()

    @property
    def urgent(self) -> bool:
        with self._lock:
            return self._urgent

    @urgent.setter
    def urgent(self, value: bool) -> None:
        with self._lock:
            self._urgent = bool(value)
        self._send_update()

    @property
    def count_visible(self) -> bool:
        with self._lock:
            return self._count_visible

    @count_visible.setter
    def count_visible(self, value: bool) -> None:
        with self._lock:
            self._count_visible = bool(value)
        self._send_update()

    @property
    def count(self) -> int:
        with self._lock:
            return self._count

    @count.setter
    def count(self, value: int) -> None:
        with self._lock:
            self._count = int(value)
        self._send_update()

    def launcher_entry(self) -> LauncherEntry:
        """The launcher entry properties describing the current state."""
        with self._lock:
            return {
                "count": self._count,
                "count-visible": self._count_visible,
                "progress": self._progress,
                "progress-visible": self._progress_state != ProgressState.NO_PROGRESS,
                "urgent": self._urgent,
            }

    def _send_update(self) -> None:
        if self._app_uri is None:
            return
        self._updated.invoke(ParamEventArgs(self.launcher_entry()))