import pytest

from aurakit.appinfo import AppInfo, url_map_to_list
from aurakit.version import Version


def test_defaults_are_empty():
    info = AppInfo()
    assert info.name == ""
    assert info.version.is_empty
    assert info.developers == {}
    assert info.translator_names == []


def test_fields_round_trip():
    info = AppInfo(id="org.example.app", name="Example", version=Version(1, 2, 3))
    info.short_name = "Ex"
    assert info.id == "org.example.app"
    assert info.short_name == "Ex"
    assert info.version == Version(1, 2, 3)


def test_valid_url_is_stored():
    info = AppInfo()
    info.source_repo = "https://example.com/owner/repo"
    info.issue_tracker = "https://example.com/owner/repo/issues"
    info.support_url = "https://example.com/support"
    assert info.source_repo == "https://example.com/owner/repo"
    assert info.issue_tracker == "https://example.com/owner/repo/issues"
    assert info.support_url == "https://example.com/support"


@pytest.mark.parametrize("attr", ["source_repo", "issue_tracker", "support_url"])
def test_invalid_url_raises_and_keeps_previous(attr):
    info = AppInfo()
    setattr(info, attr, "https://example.com/a")
    with pytest.raises(ValueError):
        setattr(info, attr, "not a url")
    assert getattr(info, attr) == "https://example.com/a"


def test_invalid_url_in_constructor_raises():
    with pytest.raises(ValueError):
        AppInfo(source_repo="nope")


def test_maps_are_mutable_in_place():
    info = AppInfo()
    info.developers["Someone"] = "https://example.com/someone"
    assert info.developers == {"Someone": "https://example.com/someone"}


def test_translator_names():
    info = AppInfo(translator_credits="Alice\n\nBob <bob@example.com>\n  Carol  \n")
    assert info.translator_names == ["Alice", "Bob", "Carol"]


def test_url_map_to_list_keeps_order_and_contents():
    urls = {"GitHub": "https://example.com/gh", "Site": "https://example.com/"}
    result = url_map_to_list(urls)
    assert len(result) == len(urls)
    for entry, (name, url) in zip(result, urls.items()):
        assert entry.startswith(name)
        assert entry.endswith(url)


def test_url_map_to_list_empty():
    assert url_map_to_list({}) == []