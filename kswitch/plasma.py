"""Applying colour schemes, desktop themes and wallpapers to Plasma."""

from __future__ import annotations

import subprocess
from pathlib import Path


def _dbus_send(destination: str, object_path: str, member: str, *arguments: str) -> str:
    """Call a method on the session bus and return the printed reply."""
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


def set_color_scheme(name: str) -> subprocess.CompletedProcess:
    """Apply a colour scheme with plasma-apply-colorscheme."""
    return subprocess.run(
        ["plasma-apply-colorscheme", name], capture_output=True, text=True
    )


def set_desktop_theme(name: str) -> subprocess.CompletedProcess:
    """Apply a desktop theme with plasma-apply-desktoptheme."""
    return subprocess.run(
        ["plasma-apply-desktoptheme", name], capture_output=True, text=True
    )


def wallpaper_script(wallpaper: Path | str) -> str:
    """Return the plasmashell script that sets `wallpaper` on every desktop."""
    uri = f"file://{wallpaper}"
    return (
        "var Desktops = desktops();\n"
        "         for (i = 0; i < Desktops.length; i++) {\n"
        "             d = Desktops[i];\n"
        "             d.wallpaperPlugin = 'org.kde.image';\n"
        "             d.currentConfigGroup = Array('Wallpaper', 'org.kde.image', 'General');\n"
        f"             d.writeConfig('Image', '{uri}');\n"
        "         }"
    )


def set_wallpaper(wallpaper: Path | str) -> None:
    """Set the wallpaper of all desktops through plasmashell over D-Bus."""
    try:
        _dbus_send(
            "org.kde.plasmashell",
            "/PlasmaShell",
            "org.kde.PlasmaShell.evaluateScript",
            "string:" + wallpaper_script(wallpaper),
        )
    except OSError as exc:
        message = str(exc)
        if not message.startswith("D-Bus error"):
            message = f"D-Bus error: {message}"
        raise OSError(message) from exc


def _value_in_section(text: str, header: str, key: str) -> str | None:
    in_section = False
    prefix = f"{key}="
    for line in text.splitlines():
        if line.strip() == header:
            in_section = True
        elif line.startswith("["):
            in_section = False
        elif in_section and line.startswith(prefix):
            return line.removeprefix(prefix).strip()
    return None


def current_color_scheme(text: str) -> str | None:
    """Return the colour scheme named in kdeglobals content, if any."""
    return _value_in_section(text, "[General]", "ColorScheme")


def current_desktop_theme(text: str) -> str | None:
    """Return the desktop theme named in plasmarc content, if any."""
    return _value_in_section(text, "[Theme]", "name")


def current_wallpaper(text: str) -> Path | None:
    """Return the wallpaper image named in the desktop applets configuration."""
    in_section = False
    for line in text.splitlines():
        if line.startswith("[Containments]") and "Wallpaper][org.kde.image][General]" in line:
            in_section = True
        elif line.startswith("["):
            in_section = False
        elif in_section and line.startswith("Image="):
            image = line.removeprefix("Image=").strip()
            return Path(image.removeprefix("file://"))
    return None