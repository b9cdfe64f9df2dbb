"""Working out which theme is active now and which one to switch to."""

from __future__ import annotations

import os
from datetime import datetime, time

from kswitch.config import Config
from kswitch.theme import Theme, parse_theme

_OPPOSITE = {Theme.LIGHT: Theme.DARK, Theme.DARK: Theme.LIGHT}


def current_theme(config: Config, now: time | None = None) -> Theme:
    """Return the active theme.

    KSWITCH_THEME wins when set; otherwise the schedule is consulted for
    `now`, which defaults to the local time of day.
    """
    value = os.environ.get("KSWITCH_THEME")
    if value is not None:
        return parse_theme(value)
    if now is None:
        now = datetime.now().time()
    return config.schedule.theme_from_time(now)


def target_theme(config: Config, now: time | None = None) -> Theme:
    """Return the theme opposite to the active one."""
    return _OPPOSITE[current_theme(config, now)]