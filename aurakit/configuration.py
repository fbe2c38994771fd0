"""Configuration files stored as JSON."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

from aurakit.directories import config as _config_dir
from aurakit.events import Event, EventArgs


class ConfigurationBase:
    """A configuration file named by a key, loaded from disk on creation.

    Subclasses keep their settings in ``data``, a JSON-compatible dict.
    The file is ``<directory>/<key>.json``; the directory defaults to the
    user's configuration directory.
    """

    def __init__(self, key: str, directory: Optional[Union[str, os.PathLike]] = None) -> None:
        if not key:
            raise ValueError("Key must not be empty.")
        self._key = key
        base = Path(directory) if directory is not None else _config_dir()
        self._path = base / f"{key}.json"
        self._saved: Event[EventArgs] = Event()
        self.data: Dict[str, Any] = self._load()

    def _load(self) -> Dict[str, Any]:
        try:
            loaded = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return {}
        return loaded if isinstance(loaded, dict) else {}

    @property
    def key(self) -> str:
        return self._key

    @property
    def path(self) -> Path:
        return self._path

    @property
    def saved(self) -> Event[EventArgs]:
        """Invoked after the file has been written."""
        return self._saved

    def save(self) -> None:
        """Write the configuration to disk; raises OSError on failure."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(self.data, indent=4), encoding="utf-8")
        self._saved.invoke(EventArgs())