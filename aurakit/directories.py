"""Locations of system-wide and per-user directories."""

from __future__ import annotations

import os
import re
import sys
from pathlib import Path
from typing import Dict, List, Optional

_USER_DIRS_LINE = re.compile(r'^\s*(XDG_[A-Z]+_DIR)\s*=\s*"(.*)"\s*$')


def _windows() -> bool:
    return sys.platform.startswith("win")


def _env_path(name: str) -> Optional[Path]:
    value = os.environ.get(name)
    if not value:
        return None
    path = Path(value)
    if not _windows() and not path.is_absolute():
        return None
    return path


def _env_list(name: str, separator: str) -> List[Path]:
    value = os.environ.get(name, "")
    return [Path(entry) for entry in value.split(separator) if entry]


def system_path() -> List[Path]:
    """Directories listed in the PATH variable."""
    return _env_list("PATH", ";" if _windows() else ":")


def system_config() -> List[Path]:
    """Directories listed in the XDG_CONFIG_DIRS variable."""
    return _env_list("XDG_CONFIG_DIRS", ":")


def system_data() -> List[Path]:
    """Directories listed in the XDG_DATA_DIRS variable."""
    return _env_list("XDG_DATA_DIRS", ":")


def home() -> Path:
    """The user's home directory."""
    name = "USERPROFILE" if _windows() else "HOME"
    value = os.environ.get(name)
    return Path(value) if value else Path.home()


def config() -> Path:
    """The user's configuration directory."""
    if _windows():
        return _env_path("APPDATA") or home() / "AppData" / "Roaming"
    return _env_path("XDG_CONFIG_HOME") or home() / ".config"


def cache() -> Path:
    """The user's cache directory."""
    if _windows():
        return _env_path("LOCALAPPDATA") or home() / "AppData" / "Local"
    return _env_path("XDG_CACHE_HOME") or home() / ".cache"


def local_data() -> Path:
    """The user's local data directory."""
    if _windows():
        return _env_path("APPDATA") or home() / "AppData" / "Roaming"
    return _env_path("XDG_DATA_HOME") or home() / ".local" / "share"


def runtime() -> Optional[Path]:
    """The user's runtime directory; None on Windows or when not set."""
    if _windows():
        return None
    return _env_path("XDG_RUNTIME_DIR")


def _user_dirs_file() -> Dict[str, Path]:
    """Entries of the user-dirs.dirs file in the configuration directory."""
    try:
        text = (config() / "user-dirs.dirs").read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return {}
    entries: Dict[str, Path] = {}
    user_home = str(home())
    for line in text.splitlines():
        match = _USER_DIRS_LINE.match(line)
        if match is None:
            continue
        key, value = match.groups()
        if value.startswith("$HOME"):
            entries[key] = Path(user_home + value[len("$HOME"):])
        elif value.startswith("/"):
            entries[key] = Path(value)
    return entries


def _user_dir(key: str, default_name: str) -> Path:
    variable = f"XDG_{key}_DIR"
    return _env_path(variable) or _user_dirs_file().get(variable) or home() / default_name


def desktop() -> Path:
    """The user's desktop directory."""
    return home() / "Desktop" if _windows() else _user_dir("DESKTOP", "Desktop")


def documents() -> Path:
    """The user's documents directory."""
    return home() / "Documents" if _windows() else _user_dir("DOCUMENTS", "Documents")


def downloads() -> Path:
    """The user's downloads directory."""
    return home() / "Downloads" if _windows() else _user_dir("DOWNLOAD", "Downloads")


def music() -> Path:
    """The user's music directory."""
    return home() / "Music" if _windows() else _user_dir("MUSIC", "Music")


def pictures() -> Path:
    """The user's pictures directory."""
    return home() / "Pictures" if _windows() else _user_dir("PICTURES", "Pictures")


def public_share() -> Optional[Path]:
    """The user's public share directory; None on Windows."""
    if _windows():
        return None
    return _user_dir("PUBLICSHARE", "Public")


def templates() -> Path:
    """The user's templates directory."""
    if _windows():
        return config() / "Microsoft" / "Windows" / "Templates"
    return _user_dir("TEMPLATES", "Templates")


def videos() -> Path:
    """The user's videos directory."""
    return home() / "Videos" if _windows() else _user_dir("VIDEOS", "Videos")


def _application_dir(base: Path, app_name: str) -> Path:
    if not app_name:
        raise ValueError("The application name must not be empty.")
    path = base / app_name
    path.mkdir(parents=True, exist_ok=True)
    return path


def application_config(app_name: str) -> Path:
    """The application's configuration directory, created if missing."""
    return _application_dir(config(), app_name)


def application_cache(app_name: str) -> Path:
    """The application's cache directory, created if missing."""
    return _application_dir(cache(), app_name)


def application_local_data(app_name: str) -> Path:
    """The application's local data directory, created if missing."""
    return _application_dir(local_data(), app_name)