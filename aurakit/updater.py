"""Checking a GitHub repository's releases for application updates."""

from __future__ import annotations

import json
import threading
import urllib.error
import urllib.request
from typing import Callable, Optional

from aurakit.strings import split
from aurakit.version import Version, VersionType

FetchJson = Callable[[str], str]

_INVALID_URL = "The url is not a valid formatted GitHub repo url."


def _fetch_json(url: str) -> str:
    """Fetch a JSON document as text; empty on any failure."""
    request = urllib.request.Request(
        url,
        headers={"Accept": "application/vnd.github+json", "User-Agent": "aurakit"},
    )
    try:
        with urllib.request.urlopen(request, timeout=30) as response:
            return response.read().decode("utf-8")
    except (urllib.error.URLError, OSError, ValueError, UnicodeDecodeError):
        return ""


class Updater:
    """Finds the latest stable or preview release of a GitHub repository."""

    def __init__(self, github_repo_url: str, fetch_json: Optional[FetchJson] = None) -> None:
        if not github_repo_url:
            raise ValueError(_INVALID_URL)
        fields = split(github_repo_url, "/")
        try:
            self._repo_owner = fields[3]
            self._repo_name = fields[4]
        except IndexError:
            raise ValueError(_INVALID_URL) from None
        self._fetch = fetch_json or _fetch_json
        self._lock = threading.Lock()
        self._latest_stable_release_id = -1
        self._latest_preview_release_id = -1

    @property
    def repo_owner(self) -> str:
        return self._repo_owner

    @property
    def repo_name(self) -> str:
        return self._repo_name

    @property
    def latest_stable_release_id(self) -> int:
        return self._latest_stable_release_id

    @property
    def latest_preview_release_id(self) -> int:
        return self._latest_preview_release_id

    def fetch_current_version(self, version_type: VersionType) -> Version:
        """Return the newest release of the given type, or an empty Version.

        Tags containing '-' are previews; others are stable. A malformed tag
        of the wanted type raises ValueError.
        """
        with self._lock:
            url = f"https://api.github.com/repos/{self._repo_owner}/{self._repo_name}/releases"
            text = self._fetch(url)
            if not text:
                return Version()
            try:
                root = json.loads(text)
            except ValueError:
                return Version()
            if isinstance(root, dict):
                releases = list(root.values())
            elif isinstance(root, list):
                releases = root
            else:
                return Version()
            for release in releases:
                tag = release.get("tag_name") if isinstance(release, dict) else None
                if not isinstance(tag, str):
                    return Version()
                is_preview = "-" in tag
                if version_type is VersionType.STABLE and not is_preview:
                    self._latest_stable_release_id = _release_id(release)
                    return Version.parse(tag)
                if version_type is VersionType.PREVIEW and is_preview:
                    self._latest_preview_release_id = _release_id(release)
                    return Version.parse(tag)
            return Version()

    def __copy__(self) -> "Updater":
        with self._lock:
            clone = Updater.__new__(Updater)
            clone._repo_owner = self._repo_owner
            clone._repo_name = self._repo_name
            clone._fetch = self._fetch
            clone._lock = threading.Lock()
            clone._latest_stable_release_id = self._latest_stable_release_id
            clone._latest_preview_release_id = self._latest_preview_release_id
        return clone


def _release_id(release: dict) -> int:
    value = release.get("id", -1)
    try:
        return int(value)
    except (TypeError, ValueError):
        return -1