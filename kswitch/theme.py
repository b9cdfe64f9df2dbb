"""Theme identifiers and the per-theme desktop style."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Any, Mapping


class Theme(StrEnum):
    """The two themes that can be applied."""

    LIGHT = "light"
    DARK = "dark"


def parse_theme(text: str) -> Theme:
    """Parse a theme name, ignoring case."""
    try:
        return Theme(text.lower())
    except ValueError:
        raise ValueError(f"unknown theme: {text!r}") from None


def _require_str(data: Mapping[str, Any], key: str) -> str:
    if key not in data:
        raise ValueError(f"missing field {key!r}")
    value = data[key]
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


@dataclass
class Style:
    """Everything that is applied to the desktop for one theme."""

    wallpaper: Path
    color_scheme: str
    desktop_theme: str
    terminal_profile: str

    def __post_init__(self) -> None:
        self.wallpaper = Path(self.wallpaper)

    def to_dict(self) -> dict[str, str]:
        """Return the style as a plain mapping suitable for TOML."""
        return {
            "wallpaper": str(self.wallpaper),
            "color_scheme": self.color_scheme,
            "desktop_theme": self.desktop_theme,
            "terminal_profile": self.terminal_profile,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Style:
        """Build a style from a mapping; raise ValueError if it is malformed."""
        if not isinstance(data, Mapping):
            raise ValueError("style must be a table")
        return cls(
            wallpaper=Path(_require_str(data, "wallpaper")),
            color_scheme=_require_str(data, "color_scheme"),
            desktop_theme=_require_str(data, "desktop_theme"),
            terminal_profile=_require_str(data, "terminal_profile"),
        )