"""Loading, saving and editing the kswitch configuration file."""

from __future__ import annotations

import os
import subprocess
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomli_w

from kswitch.schedule import Schedule
from kswitch.theme import Style


class ConfigError(Exception):
    """The configuration file could not be understood."""


def config_dir() -> Path:
    """Return the user's configuration directory."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg and Path(xdg).is_absolute():
        return Path(xdg)
    return Path.home() / ".config"


def default_config_path() -> Path:
    """Return the location of the kswitch configuration file."""
    return config_dir() / "kswitch" / "config.toml"


@dataclass
class Config:
    """Styles for both themes, the schedule and the Konsole settings file."""

    path: Path
    light: Style
    dark: Style
    schedule: Schedule
    konsolerc: Path

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.konsolerc = Path(self.konsolerc)

    @classmethod
    def default(cls) -> Config:
        """Load the user's configuration file, or build the built-in defaults."""
        path = default_config_path()
        if path.is_file():
            return cls.load(path)
        return cls(
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
                terminal_profile="dark",
            ),
            schedule=Schedule.default(),
            konsolerc=config_dir() / "konsolerc",
        )

    @classmethod
    def load(cls, path: Path | str) -> Config:
        """Read a configuration file; raise ConfigError if its content is invalid."""
        path = Path(path)
        with path.open("rb") as handle:
            try:
                data = tomllib.load(handle)
            except tomllib.TOMLDecodeError as exc:
                raise ConfigError(f"invalid TOML in {path}: {exc}") from exc
        try:
            konsolerc = data["konsolerc"]
            if not isinstance(konsolerc, str):
                raise ValueError("konsolerc must be a string")
            return cls(
                path=path,
                light=Style.from_dict(data["light"]),
                dark=Style.from_dict(data["dark"]),
                schedule=Schedule.from_dict(data["schedule"]),
                konsolerc=Path(konsolerc),
            )
        except KeyError as exc:
            raise ConfigError(f"missing field {exc.args[0]!r} in {path}") from exc
        except ValueError as exc:
            raise ConfigError(f"invalid config in {path}: {exc}") from exc

    def to_dict(self) -> dict[str, Any]:
        """Return the configuration as a plain mapping, without its own path."""
        return {
            "light": self.light.to_dict(),
            "dark": self.dark.to_dict(),
            "schedule": self.schedule.to_dict(),
            "konsolerc": str(self.konsolerc),
        }

    def to_toml(self) -> str:
        """Return the configuration as TOML text."""
        return tomli_w.dumps(self.to_dict())

    def save(self) -> None:
        """Write the configuration to its path, creating the directory if needed."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(self.to_toml(), encoding="utf-8")

    def edit(self) -> int | None:
        """Open the configuration file in $EDITOR (nano by default).

        Return the editor's exit status, or None if it could not be started.
        """
        editor = os.environ.get("EDITOR", "nano")
        try:
            result = subprocess.run([editor, str(self.path)])
        except OSError as exc:
            print(f"Failed to start editor: {exc}", file=sys.stderr)
            return None
        print(f"Editor exited with status: {result.returncode}")
        return result.returncode