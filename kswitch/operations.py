"""Applying a whole style to the desktop and toggling between themes."""

from __future__ import annotations

import os
import subprocess
import threading
from typing import Any, Callable

from kswitch.config import Config
from kswitch.konsole import set_theme as set_konsole_theme
from kswitch.plasma import set_color_scheme, set_desktop_theme, set_wallpaper
from kswitch.target import target_theme
from kswitch.theme import Style, Theme


def apply(style: Style, theme: Theme, config: Config) -> None:
    """Apply `style` to Plasma, export KSWITCH_THEME and update Konsole."""
    tasks: list[tuple[Callable[[Any], Any], Any]] = [
        (set_desktop_theme, style.desktop_theme),
        (set_wallpaper, style.wallpaper),
        (set_color_scheme, style.color_scheme),
    ]
    barrier = threading.Barrier(len(tasks) + 1)

    def run(func: Callable[[Any], Any], argument: Any) -> None:
        barrier.wait()
        try:
            func(argument)
        except OSError:
            pass

    threads = [threading.Thread(target=run, args=task) for task in tasks]
    for thread in threads:
        thread.start()
    barrier.wait()
    for thread in threads:
        thread.join()

    try:
        subprocess.run(
            ["systemctl", "--user", "import-environment", "KSWITCH_THEME"],
            env={**os.environ, "KSWITCH_THEME": str(theme)},
        )
    except OSError:
        pass

    set_konsole_theme(theme, config)


def toggle(config: Config) -> Theme:
    """Switch to the theme opposite the active one and return it."""
    theme = target_theme(config)
    style = config.light if theme is Theme.LIGHT else config.dark
    apply(style, theme, config)
    return theme