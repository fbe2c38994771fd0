"""Watching a folder for changes by polling."""

from __future__ import annotations

import os
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterator, List, Tuple, Union

from aurakit.events import Event, EventArgs
from aurakit.flags import FileAction, WatcherFlags

PathLike = Union[str, os.PathLike]

ALL_WATCHER_FLAGS = (
    WatcherFlags.FILE_NAME
    | WatcherFlags.DIRECTORY_NAME
    | WatcherFlags.ATTRIBUTES
    | WatcherFlags.SIZE
    | WatcherFlags.LAST_WRITE
    | WatcherFlags.LAST_ACCESS
)


@dataclass(frozen=True)
class FileSystemChangedEventArgs(EventArgs):
    """The path of a changed file or folder and why it changed."""

    path: Path
    why: FileAction


@dataclass(frozen=True)
class _Entry:
    is_dir: bool
    inode: int
    size: int
    mtime_ns: int
    atime_ns: int
    mode: int


def _entry(path: str) -> Union[_Entry, None]:
    try:
        st = os.lstat(path)
    except OSError:
        return None
    is_dir = os.path.isdir(path) and not os.path.islink(path)
    return _Entry(is_dir, st.st_ino, st.st_size, st.st_mtime_ns, st.st_atime_ns, st.st_mode)


class FileSystemWatcher:
    """Watches a folder and invokes ``changed`` for each detected change.

    Changes are found by comparing snapshots taken every ``poll_interval``
    seconds on a background thread.
    """

    def __init__(
        self,
        path: PathLike,
        include_subdirectories: bool,
        watcher_flags: WatcherFlags = ALL_WATCHER_FLAGS,
        *,
        poll_interval: float = 0.5,
    ) -> None:
        self._path = Path(path)
        if not self._path.is_dir():
            raise NotADirectoryError(f"Cannot watch {self._path}: not a directory.")
        if poll_interval <= 0:
            raise ValueError("poll_interval must be positive.")
        self._include_subdirectories = include_subdirectories
        self._watcher_flags = WatcherFlags(watcher_flags)
        self._poll_interval = poll_interval
        self._changed: Event[FileSystemChangedEventArgs] = Event()
        self._lock = threading.Lock()
        self._extension_filters: List[str] = []
        self._snapshot = self._scan()
        self._stop = threading.Event()
        self._thread = threading.Thread(target=self._watch, name="FileSystemWatcher", daemon=True)
        self._thread.start()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def include_subdirectories(self) -> bool:
        return self._include_subdirectories

    @property
    def watcher_flags(self) -> WatcherFlags:
        return self._watcher_flags

    @property
    def changed(self) -> Event[FileSystemChangedEventArgs]:
        return self._changed

    def is_extension_watched(self, extension: PathLike) -> bool:
        """Whether changes to files with this extension are reported.

        Every extension is watched while no filters are set.
        """
        with self._lock:
            return not self._extension_filters or os.fspath(extension) in self._extension_filters

    def add_extension_filter(self, extension: PathLike) -> bool:
        """Add an extension to watch; False if it was already present."""
        ext = os.fspath(extension)
        with self._lock:
            if ext in self._extension_filters:
                return False
            self._extension_filters.append(ext)
            return True

    def remove_extension_filter(self, extension: PathLike) -> bool:
        """Remove a watched extension; False if it was not present."""
        ext = os.fspath(extension)
        with self._lock:
            if ext not in self._extension_filters:
                return False
            self._extension_filters.remove(ext)
            return True

    def clear_extension_filters(self) -> bool:
        """Remove all filters so that every extension is watched."""
        with self._lock:
            self._extension_filters.clear()
        return True

    def close(self) -> None:
        """Stop watching."""
        self._stop.set()
        if self._thread.is_alive() and self._thread is not threading.current_thread():
            self._thread.join()

    def __enter__(self) -> "FileSystemWatcher":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _scan(self) -> Dict[str, _Entry]:
        snapshot: Dict[str, _Entry] = {}
        root = os.fspath(self._path)
        if self._include_subdirectories:
            names = (
                os.path.join(folder, name)
                for folder, dirs, files in os.walk(root)
                for name in dirs + files
            )
        else:
            try:
                names = [entry.path for entry in os.scandir(root)]
            except OSError:
                names = []
        for name in names:
            entry = _entry(name)
            if entry is not None:
                snapshot[name] = entry
        return snapshot

    def _watch(self) -> None:
        while not self._stop.wait(self._poll_interval):
            current = self._scan()
            changes = list(self._diff(self._snapshot, current))
            self._snapshot = current
            for name, why in changes:
                if self._stop.is_set():
                    return
                path = Path(name)
                if self.is_extension_watched(path.suffix):
                    self._changed.invoke(FileSystemChangedEventArgs(path, why))

    def _names_watched(self, entry: _Entry) -> bool:
        flag = WatcherFlags.DIRECTORY_NAME if entry.is_dir else WatcherFlags.FILE_NAME
        return bool(self._watcher_flags & flag)

    def _modified(self, old: _Entry, new: _Entry) -> bool:
        flags = self._watcher_flags
        return (
            (bool(flags & WatcherFlags.SIZE) and not new.is_dir and old.size != new.size)
            or (bool(flags & WatcherFlags.LAST_WRITE) and old.mtime_ns != new.mtime_ns)
            or (bool(flags & WatcherFlags.LAST_ACCESS) and old.atime_ns != new.atime_ns)
            or (bool(flags & WatcherFlags.ATTRIBUTES) and old.mode != new.mode)
        )

    def _diff(
        self, old: Dict[str, _Entry], new: Dict[str, _Entry]
    ) -> Iterator[Tuple[str, FileAction]]:
        removed = {name: entry for name, entry in old.items() if name not in new}
        by_inode = {
            (entry.inode, entry.is_dir): name for name, entry in removed.items() if entry.inode
        }
        for name in sorted(n for n in new if n not in old):
            entry = new[name]
            source = by_inode.pop((entry.inode, entry.is_dir), None) if entry.inode else None
            if source is not None:
                del removed[source]
                action = FileAction.RENAMED
            else:
                action = FileAction.ADDED
            if self._names_watched(entry):
                yield name, action
        for name in sorted(removed):
            if self._names_watched(removed[name]):
                yield name, FileAction.REMOVED
        for name in sorted(n for n in new if n in old):
            if self._modified(old[name], new[name]):
                yield name, FileAction.MODIFIED