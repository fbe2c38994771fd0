"""The application base: identity, environment, dependencies and configuration."""

from __future__ import annotations

import logging
import os
import sys
import threading
from pathlib import Path
from typing import Dict, Optional, Type, TypeVar

from aurakit.appinfo import AppInfo
from aurakit.configuration import ConfigurationBase
from aurakit.directories import system_path
from aurakit.ipc import InterProcessCommunicator
from aurakit.strings import lower

C = TypeVar("C", bound=ConfigurationBase)

_WINDOWS_APPS = "AppData\\Local\\Microsoft\\WindowsApps"


def _executable_directory() -> Path:
    argv0 = sys.argv[0] if sys.argv and sys.argv[0] else sys.executable
    return Path(argv0).resolve().parent


class Aura:
    """An application base holding the state shared by the whole application.

    ``get_active`` returns the process-wide instance; other instances may be
    created for isolated use.
    """

    _active: Optional["Aura"] = None
    _active_lock = threading.Lock()

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._initialized = False
        self._executable_directory: Optional[Path] = None
        self._app_info = AppInfo()
        self._ipc: Optional[InterProcessCommunicator] = None
        self._dependencies: Dict[str, Path] = {}
        self._config_files: Dict[str, ConfigurationBase] = {}
        self._logger: Optional[logging.Logger] = None

    @classmethod
    def get_active(cls) -> "Aura":
        """Return the process-wide instance, creating it on first use."""
        with cls._active_lock:
            if cls._active is None:
                cls._active = cls()
            return cls._active

    def init(
        self,
        app_id: str,
        name: str,
        english_short_name: str,
        log_level: int = logging.INFO,
    ) -> bool:
        """Initialize the application; False if it was already initialized."""
        with self._lock:
            if self._initialized:
                return False
            if not app_id:
                raise ValueError("The application id must not be empty.")
            try:
                self._executable_directory = _executable_directory()
            except OSError as error:
                raise RuntimeError("Unable to get the executable directory path.") from error
            self._app_info.id = app_id
            self._app_info.name = name
            self._app_info.english_short_name = english_short_name
            logger = logging.getLogger(f"aurakit.{app_id}")
            logger.setLevel(log_level)
            self._logger = logger
            self._initialized = True
            return True

    def is_valid(self) -> bool:
        """Whether the application has been initialized."""
        return self._initialized

    def __bool__(self) -> bool:
        return self.is_valid()

    @property
    def executable_directory(self) -> Optional[Path]:
        """The directory of the running executable; None before init."""
        return self._executable_directory

    @property
    def app_info(self) -> AppInfo:
        return self._app_info

    @property
    def logger(self) -> logging.Logger:
        """The application's logger; raises RuntimeError before init."""
        if self._logger is None:
            raise RuntimeError("Aura has not been initialized.")
        return self._logger

    @property
    def ipc(self) -> InterProcessCommunicator:
        """The application's inter process communicator, created on first use."""
        with self._lock:
            if not self._initialized:
                raise RuntimeError("Aura has not been initialized.")
            if self._ipc is None:
                self._ipc = InterProcessCommunicator(self._app_info.id)
            return self._ipc

    def is_running_on_windows(self) -> bool:
        return sys.platform.startswith("win")

    def is_running_on_linux(self) -> bool:
        return sys.platform.startswith("linux")

    def is_running_on_mac(self) -> bool:
        return sys.platform == "darwin"

    def is_running_via_flatpak(self) -> bool:
        return Path("/.flatpak-info").exists()

    def is_running_via_snap(self) -> bool:
        return bool(os.environ.get("SNAP"))

    def is_running_via_local(self) -> bool:
        return not self.is_running_via_flatpak() and not self.is_running_via_snap()

    def find_dependency(self, dependency: str) -> Optional[Path]:
        """Locate an executable dependency beside the program or on PATH."""
        if self.is_running_on_windows() and not Path(dependency).suffix:
            dependency += ".exe"
        cached = self._dependencies.get(dependency)
        if cached is not None and cached.exists():
            return cached
        candidates = []
        if self._executable_directory is not None:
            candidates.append(self._executable_directory / dependency)
        candidates.extend(
            folder / dependency
            for folder in system_path()
            if _WINDOWS_APPS not in str(folder)
        )
        for candidate in candidates:
            if candidate.is_file():
                self._dependencies[dependency] = candidate
                return candidate
        self._dependencies.pop(dependency, None)
        return None

    def help_url(self, page_name: str) -> str:
        """The documentation URL of a page.

        A yelp ``help:`` URL on Linux outside of Snap, otherwise a page under
        the application's HTML docs store.
        """
        if self.is_running_on_linux() and not self.is_running_via_snap():
            return f"help:{lower(self._app_info.english_short_name)}/{page_name}"
        store = self._app_info.html_docs_store
        if not store:
            raise ValueError("The HTML docs store of the application is not set.")
        return f"{store.rstrip('/')}/{page_name}.html"

    def config(self, key: str, config_type: Type[C]) -> C:
        """Return the configuration for a key, creating it on first use."""
        if not key:
            raise ValueError("Key must not be empty.")
        if not (isinstance(config_type, type) and issubclass(config_type, ConfigurationBase)):
            raise TypeError("config_type must be a subclass of ConfigurationBase.")
        with self._lock:
            existing = self._config_files.get(key)
            if existing is None:
                existing = config_type(key)
                self._config_files[key] = existing
            if not isinstance(existing, config_type):
                raise TypeError(f"The configuration {key!r} is of another type.")
            return existing