"""Time-of-day schedule deciding which theme should be active."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import time
from typing import Any, Mapping

from kswitch.theme import Theme

_THEME_NAMES = {Theme.LIGHT: "Light", Theme.DARK: "Dark"}
_THEMES_BY_NAME = {name: theme for theme, name in _THEME_NAMES.items()}


@dataclass
class Window:
    """A theme that becomes active at a given time of day."""

    theme: Theme
    start: time

    def to_dict(self) -> dict[str, str]:
        """Return the window as a plain mapping suitable for TOML."""
        return {"theme": _THEME_NAMES[self.theme], "start": self.start.isoformat()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Window:
        """Build a window from a mapping; raise ValueError if it is malformed."""
        if not isinstance(data, Mapping):
            raise ValueError("window must be a table")
        name = data.get("theme")
        if name not in _THEMES_BY_NAME:
            raise ValueError(f"unknown theme in window: {name!r}")
        start = data.get("start")
        if isinstance(start, time):
            start_time = start
        elif isinstance(start, str):
            try:
                start_time = time.fromisoformat(start)
            except ValueError:
                raise ValueError(f"invalid start time: {start!r}") from None
        else:
            raise ValueError("window needs a start time")
        return cls(theme=_THEMES_BY_NAME[name], start=start_time)


@dataclass
class Schedule:
    """A list of windows covering the day."""

    windows: list[Window] = field(default_factory=list)

    @classmethod
    def default(cls) -> Schedule:
        """Light from 07:00, dark from 17:00."""
        return cls(
            windows=[
                Window(Theme.LIGHT, time(7, 0, 0)),
                Window(Theme.DARK, time(17, 0, 0)),
            ]
        )

    def theme_from_time(self, time: time) -> Theme:
        """Return the theme of the latest window starting at or before `time`.

        Before the earliest window the schedule wraps around midnight and the
        latest window of the day applies.
        """
        if not self.windows:
            raise ValueError("schedule has no windows")
        ordered = sorted(self.windows, key=lambda w: w.start)
        for window in reversed(ordered):
            if window.start <= time:
                return window.theme
        return ordered[-1].theme

    def to_dict(self) -> dict[str, list[dict[str, str]]]:
        """Return the schedule as a plain mapping suitable for TOML."""
        return {"windows": [window.to_dict() for window in self.windows]}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Schedule:
        """Build a schedule from a mapping; raise ValueError if it is malformed."""
        if not isinstance(data, Mapping):
            raise ValueError("schedule must be a table")
        windows = data.get("windows")
        if not isinstance(windows, list):
            raise ValueError("schedule needs a list of windows")
        return cls(windows=[Window.from_dict(item) for item in windows])