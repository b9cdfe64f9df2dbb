import subprocess
import tomllib
from pathlib import Path

import pytest

from kswitch import config as config_module
from kswitch.config import Config, ConfigError, config_dir, default_config_path
from kswitch.schedule import Schedule
from kswitch.theme import Style


@pytest.fixture
def xdg(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    return tmp_path


def _config(path, konsolerc):
    return Config(
        path=path,
        light=Style(
            wallpaper=Path("/usr/share/wallpapers/Bamboo/contents/images/5120x2880.png"),
            color_scheme="BreathLight",
            desktop_theme="breath",
            terminal_profile="light",
        ),
        dark=Style(
            wallpaper=Path(
                "/usr/share/wallpapers/Bamboo at Night/contents/images/5120x2880.png"
            ),
            color_scheme="BreathDark",
            desktop_theme="breath-dark",
            terminal_profile="light",
        ),
        schedule=Schedule.default(),
        konsolerc=konsolerc,
    )


def test_create_and_load_config(tmp_path):
    konsolerc = tmp_path / "konsolerc"
    konsolerc.write_text("[Desktop Entry]\nDefaultProfile=light.profile\n")
    conf = _config(tmp_path / "testconfig.toml", konsolerc)

    conf.save()

    loaded = Config.load(conf.path)
    assert loaded.light.color_scheme == "BreathLight"
    assert loaded.dark.color_scheme == "BreathDark"
    assert loaded.konsolerc.is_file()
    assert loaded == conf


def test_config_dir_uses_xdg(xdg):
    assert config_dir() == xdg
    assert default_config_path() == xdg / "kswitch" / "config.toml"


def test_config_dir_ignores_relative_xdg(monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", "relative/dir")
    assert config_dir() == Path.home() / ".config"


def test_default_without_file(xdg):
    conf = Config.default()
    assert conf.path == xdg / "kswitch" / "config.toml"
    assert conf.light.color_scheme == "BreathLight"
    assert conf.dark.desktop_theme == "breath-dark"
    assert conf.dark.terminal_profile == "dark"
    assert conf.konsolerc == xdg / "konsolerc"
    assert conf.schedule == Schedule.default()


def test_default_loads_existing_file(xdg):
    conf = Config.default()
    conf.light.color_scheme = "Custom"
    conf.save()
    assert default_config_path().is_file()
    assert Config.default().light.color_scheme == "Custom"


def test_save_creates_directory(tmp_path):
    path = tmp_path / "a" / "b" / "config.toml"
    conf = _config(path, tmp_path / "konsolerc")
    conf.save()
    assert Config.load(path) == conf


def test_to_toml_omits_path(tmp_path):
    conf = _config(tmp_path / "config.toml", tmp_path / "konsolerc")
    data = tomllib.loads(conf.to_toml())
    assert "path" not in data
    assert data == conf.to_dict()
    assert data["schedule"]["windows"][0]["theme"] == "Light"


def test_load_invalid_toml(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("this is = = not toml")
    with pytest.raises(ConfigError):
        Config.load(path)


def test_load_missing_section(tmp_path):
    path = tmp_path / "config.toml"
    data = _config(path, tmp_path / "konsolerc").to_dict()
    del data["dark"]
    import tomli_w

    path.write_text(tomli_w.dumps(data))
    with pytest.raises(ConfigError):
        Config.load(path)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Config.load(tmp_path / "absent.toml")


def test_edit_runs_editor(tmp_path, monkeypatch):
    calls = []

    def fake_run(args):
        calls.append(args)
        return subprocess.CompletedProcess(args, 0)

    monkeypatch.setenv("EDITOR", "vi")
    monkeypatch.setattr(config_module.subprocess, "run", fake_run)
    conf = _config(tmp_path / "config.toml", tmp_path / "konsolerc")
    assert conf.edit() == 0
    assert calls == [["vi", str(tmp_path / "config.toml")]]


def test_edit_defaults_to_nano(tmp_path, monkeypatch):
    calls = []

    def fake_run(args):
        calls.append(args)
        return subprocess.CompletedProcess(args, 3)

    monkeypatch.delenv("EDITOR", raising=False)
    monkeypatch.setattr(config_module.subprocess, "run", fake_run)
    conf = _config(tmp_path / "config.toml", tmp_path / "konsolerc")
    assert conf.edit() == 3
    assert calls[0][0] == "nano"


def test_edit_reports_missing_editor(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("EDITOR", str(tmp_path / "no-such-editor"))
    conf = _config(tmp_path / "config.toml", tmp_path / "konsolerc")
    assert conf.edit() is None
    assert "Failed to start editor" in capsys.readouterr().err