"""Information describing an application."""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional

from aurakit.strings import is_valid_url
from aurakit.version import Version


def url_map_to_list(urls: Mapping[str, str]) -> List[str]:
    """Turn a mapping of names to URLs into "name url" entries."""
    return [f"{name} {url}" for name, url in urls.items()]


def _checked_url(value: str, what: str) -> str:
    if not is_valid_url(value):
        raise ValueError(f"The {what} is not a valid formatted URL: {value!r}")
    return value


class AppInfo:
    """Identity, links and credits of an application.

    The source repository, issue tracker and support URL must be valid URLs;
    assigning anything else raises ValueError and keeps the previous value.
    """

    def __init__(
        self,
        *,
        id: str = "",
        name: str = "",
        short_name: str = "",
        english_short_name: str = "",
        description: str = "",
        version: Optional[Version] = None,
        changelog: str = "",
        source_repo: str = "",
        issue_tracker: str = "",
        support_url: str = "",
        html_docs_store: str = "",
        extra_links: Optional[Mapping[str, str]] = None,
        developers: Optional[Mapping[str, str]] = None,
        designers: Optional[Mapping[str, str]] = None,
        artists: Optional[Mapping[str, str]] = None,
        translator_credits: str = "",
    ) -> None:
        self.id = id
        self.name = name
        self.short_name = short_name
        self.english_short_name = english_short_name
        self.description = description
        self.version = version if version is not None else Version()
        self.changelog = changelog
        self._source_repo = ""
        self._issue_tracker = ""
        self._support_url = ""
        if source_repo:
            self.source_repo = source_repo
        if issue_tracker:
            self.issue_tracker = issue_tracker
        if support_url:
            self.support_url = support_url
        self.html_docs_store = html_docs_store
        self.extra_links: Dict[str, str] = dict(extra_links or {})
        self.developers: Dict[str, str] = dict(developers or {})
        self.designers: Dict[str, str] = dict(designers or {})
        self.artists: Dict[str, str] = dict(artists or {})
        self.translator_credits = translator_credits

    @property
    def source_repo(self) -> str:
        return self._source_repo

    @source_repo.setter
    def source_repo(self, value: str) -> None:
        self._source_repo = _checked_url(value, "source repo")

    @property
    def issue_tracker(self) -> str:
        return self._issue_tracker

    @issue_tracker.setter
    def issue_tracker(self, value: str) -> None:
        self._issue_tracker = _checked_url(value, "issue tracker")

    @property
    def support_url(self) -> str:
        return self._support_url

    @support_url.setter
    def support_url(self, value: str) -> None:
        self._support_url = _checked_url(value, "support url")

    @property
    def translator_names(self) -> List[str]:
        """Names from the translator credits, one per non-blank line.

        A trailing contact part in angle brackets is left out.
        """
        return list(_names(self.translator_credits.splitlines()))

    def __repr__(self) -> str:
        return f"AppInfo(id={self.id!r}, name={self.name!r}, version={str(self.version)!r})"


def _names(lines: Iterable[str]) -> Iterable[str]:
    for line in lines:
        name = line.strip()
        if name.endswith(">") and "<" in name:
            name = name[: name.rfind("<")].strip()
        if name:
            yield name