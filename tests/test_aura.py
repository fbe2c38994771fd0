import logging
import sys

import pytest

from aurakit.aura import Aura
from aurakit.configuration import ConfigurationBase


def test_init_once():
    aura = Aura()
    assert not aura.is_valid()
    assert aura.init("org.example.app", "App", "App") is True
    assert aura.is_valid()
    assert bool(aura)
    assert aura.init("org.example.app", "App", "App") is False


def test_init_sets_app_info_and_logger():
    aura = Aura()
    aura.init("org.example.info", "Info App", "InfoApp", logging.DEBUG)
    assert aura.app_info.id == "org.example.info"
    assert aura.app_info.name == "Info App"
    assert aura.app_info.english_short_name == "InfoApp"
    assert aura.logger.level == logging.DEBUG
    assert aura.executable_directory.is_dir()


def test_logger_before_init_raises():
    with pytest.raises(RuntimeError):
        Aura().logger


def test_empty_id_raises():
    with pytest.raises(ValueError):
        Aura().init("", "App", "App")


def test_get_active_is_singleton():
    first = Aura.get_active()
    second = Aura.get_active()
    assert isinstance(first, Aura)
    assert second is first
    assert Aura() is not first


@pytest.mark.parametrize(
    "platform, expected",
    [("linux", (False, True, False)), ("win32", (True, False, False)), ("darwin", (False, False, True))],
)
def test_platform(monkeypatch, platform, expected):
    monkeypatch.setattr(sys, "platform", platform)
    aura = Aura()
    result = (aura.is_running_on_windows(), aura.is_running_on_linux(), aura.is_running_on_mac())
    assert result == expected


def test_snap_is_not_local(monkeypatch):
    monkeypatch.setenv("SNAP", "/snap/app/1")
    aura = Aura()
    assert aura.is_running_via_snap() is True
    assert aura.is_running_via_local() is False


def test_local_is_neither_flatpak_nor_snap(monkeypatch):
    monkeypatch.delenv("SNAP", raising=False)
    aura = Aura()
    assert aura.is_running_via_local() == (not aura.is_running_via_flatpak())


def test_help_url_linux(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.delenv("SNAP", raising=False)
    aura = Aura()
    aura.app_info.english_short_name = "MyApp"
    assert aura.help_url("index") == "help:myapp/index"


def test_help_url_store(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setenv("SNAP", "/snap/app/1")
    aura = Aura()
    aura.app_info.html_docs_store = "https://docs.example.com/app"
    assert aura.help_url("index").startswith("https://docs.example.com/app/index")
    assert aura.help_url("index").endswith(".html")


def test_help_url_without_store_raises(monkeypatch):
    monkeypatch.setattr(sys, "platform", "win32")
    with pytest.raises(ValueError):
        Aura().help_url("index")


def test_find_dependency_on_path(tmp_path, monkeypatch):
    (tmp_path / "aurakitdep").write_text("")
    (tmp_path / "aurakitdep.exe").write_text("")
    monkeypatch.setenv("PATH", str(tmp_path))
    aura = Aura()
    found = aura.find_dependency("aurakitdep")
    assert found is not None
    assert found.parent == tmp_path
    assert found.name.startswith("aurakitdep")
    assert aura.find_dependency("aurakitdep") == found


def test_find_dependency_missing(tmp_path, monkeypatch):
    monkeypatch.setenv("PATH", str(tmp_path))
    assert Aura().find_dependency("aurakit-no-such-tool") is None


def _config_type(directory):
    class AppConfig(ConfigurationBase):
        def __init__(self, key):
            super().__init__(key, directory)

    return AppConfig


def test_config_cached(tmp_path):
    config_type = _config_type(tmp_path)
    aura = Aura()
    first = aura.config("settings", config_type)
    assert first.key == "settings"
    assert aura.config("settings", config_type) is first
    assert first.path.parent == tmp_path


def test_config_empty_key_raises(tmp_path):
    with pytest.raises(ValueError):
        Aura().config("", _config_type(tmp_path))


def test_config_wrong_type_raises():
    with pytest.raises(TypeError):
        Aura().config("settings", dict)