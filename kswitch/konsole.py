"""Switching Konsole's default profile and the profile of open sessions."""

from __future__ import annotations

import re
import subprocess

from kswitch.config import Config
from kswitch.theme import Theme

_STRING_LINE = re.compile(r'^\s*string "(.*)"\s*$')


def _dbus_send(destination: str, object_path: str, member: str, *arguments: str) -> str:
    command = [
        "dbus-send",
        "--session",
        "--print-reply",
        f"--dest={destination}",
        object_path,
        member,
        *arguments,
    ]
    result = subprocess.run(command, capture_output=True, text=True)
    if result.returncode != 0:
        raise OSError(f"D-Bus error: {result.stderr.strip()}")
    return result.stdout


def update_default_profile(text: str, theme: Theme) -> str:
    """Return konsolerc content with DefaultProfile in [Desktop Entry] set for `theme`."""
    lines = []
    in_desktop_entry = False
    for line in text.splitlines():
        trimmed = line.strip()
        if trimmed.startswith("[") and trimmed.endswith("]"):
            in_desktop_entry = trimmed == "[Desktop Entry]"
        if in_desktop_entry and trimmed.startswith("DefaultProfile="):
            lines.append(f"DefaultProfile={theme}.profile")
        else:
            lines.append(line)
    return "".join(f"{line}\n" for line in lines)


def set_default_profile(theme: Theme, config: Config) -> None:
    """Rewrite the konsolerc file so new windows use the profile for `theme`."""
    text = config.konsolerc.read_text(encoding="utf-8")
    config.konsolerc.write_text(update_default_profile(text, theme), encoding="utf-8")


def session_ids() -> list[str]:
    """Return the bus names of all running Konsole instances."""
    reply = _dbus_send(
        "org.freedesktop.DBus", "/org/freedesktop/DBus", "org.freedesktop.DBus.ListNames"
    )
    names = (m.group(1) for m in map(_STRING_LINE.match, reply.splitlines()) if m)
    return [name for name in names if "org.kde.konsole" in name]


def set_session_theme(session_id: str, theme: Theme) -> None:
    """Switch the first session of a Konsole instance to the profile for `theme`."""
    _dbus_send(
        session_id,
        "/Sessions/1",
        "org.kde.konsole.Session.setProfile",
        f"string:{theme}",
    )


def set_theme(theme: Theme, config: Config) -> None:
    """Apply `theme` to the default profile and to every open Konsole."""
    try:
        set_default_profile(theme, config)
    except OSError:
        pass
    for session_id in session_ids():
        try:
            set_session_theme(session_id, theme)
        except OSError:
            pass