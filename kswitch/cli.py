"""Command-line interface for switching the Plasma theme."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from kswitch import __version__ as _version
from kswitch.config import Config, ConfigError, default_config_path
from kswitch.operations import apply, toggle
from kswitch.theme import Theme

_SET_EPILOG = """Example usage:
    kswitch set light
    kswitch set dark"""


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the kswitch command."""
    parser = argparse.ArgumentParser(
        prog="kswitch",
        description="kswitch: theme switching tool for KDE Plasma",
    )
    parser.add_argument("--version", action="version", version=f"kswitch {_version}")
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    set_parser = commands.add_parser(
        "set",
        help="Set theme to either Dark or Light",
        epilog=_SET_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    set_parser.set_defaults(show_help=set_parser.print_help)
    themes = set_parser.add_subparsers(dest="theme", metavar="THEME")
    themes.add_parser(Theme.LIGHT.value, help="Set theme to Light")
    themes.add_parser(Theme.DARK.value, help="Set theme to Dark")

    commands.add_parser("toggle", help="Toggle the theme between Light and Dark")

    config_parser = commands.add_parser("config", help="Configure for kswitch")
    config_parser.set_defaults(show_help=config_parser.print_help)
    config_commands = config_parser.add_subparsers(dest="config_command", metavar="ACTION")
    config_commands.add_parser("list", help="Print the configuration")
    config_commands.add_parser("edit", help="Open the configuration in $EDITOR")
    return parser


def _load_config() -> Config | None:
    path = default_config_path()
    if path.is_file():
        try:
            return Config.load(path)
        except (ConfigError, OSError):
            print(f"Error:\tInvalid config file at {path}")
            return None
    config = Config.default()
    try:
        config.save()
    except OSError:
        pass
    return config


def main(argv: Sequence[str] | None = None) -> int:
    """Run the kswitch command and return its exit status."""
    config = _load_config()
    if config is None:
        return 1

    parser = build_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else list(argv))

    if args.command is None:
        parser.print_help()
        return 2
    if args.command == "set":
        if args.theme is None:
            args.show_help()
            return 2
        theme = Theme(args.theme)
        style = config.light if theme is Theme.LIGHT else config.dark
        apply(style, theme, config)
    elif args.command == "toggle":
        toggle(config)
    elif args.command == "config":
        if args.config_command is None:
            args.show_help()
            return 2
        if args.config_command == "list":
            print(config.to_toml())
        else:
            config.edit()
    return 0