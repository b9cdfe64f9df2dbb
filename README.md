# kswitch

kswitch is a small command-line tool that moves a KDE Plasma desktop between a
light look and a dark look in a single step. One switch does the following:

- applies the Plasma desktop theme with `plasma-apply-desktoptheme`,
- applies the colour scheme with `plasma-apply-colorscheme`,
- sets the wallpaper on every desktop by sending a script to plasmashell
  (`org.kde.PlasmaShell.evaluateScript`) with `dbus-send`,
- records the chosen theme (`light` or `dark`) in the systemd user environment
  as `KSWITCH_THEME`, using `systemctl --user import-environment`,
- sets `DefaultProfile` in the `[Desktop Entry]` section of `konsolerc` to
  `light.profile` or `dark.profile`, and switches `/Sessions/1` of each running
  Konsole instance to the `light` or `dark` profile.

The desktop theme, colour scheme and wallpaper are applied in parallel. If one
of those external programs is missing or fails, kswitch carries on with the
other steps.

## Requirements

- Python 3.11 or newer
- A Plasma session that provides `plasma-apply-desktoptheme`,
  `plasma-apply-colorscheme` and `dbus-send`
- `systemctl` for the user session

## Installation

```
pip install .
```

This installs the `kswitch` command.

## Usage

```
kswitch set light      # apply the light style
kswitch set dark       # apply the dark style
kswitch toggle         # apply the style opposite the active one
kswitch config list    # print the configuration as TOML
kswitch config edit    # open the configuration file in $EDITOR (nano by default)
kswitch --version
```

If `kswitch`, `kswitch set` or `kswitch config` is run with nothing after it,
kswitch prints the matching help and exits with status 2.

`toggle` first reads `KSWITCH_THEME` from its own environment. A shell started
after a switch picks up the value that kswitch placed in the systemd user
environment. If the variable is not set, the active theme comes from the time of
day and the configured schedule. kswitch then applies the other theme.

## Configuration

The configuration file is at `$XDG_CONFIG_HOME/kswitch/config.toml`, or at
`~/.config/kswitch/config.toml` if `XDG_CONFIG_HOME` is not set. If the file is
missing, kswitch writes the built-in defaults to it on the first run:

```toml
konsolerc = "/home/you/.config/konsolerc"

[light]
wallpaper = "/usr/share/wallpapers/Bamboo/contents/images/5120x2880.png"
color_scheme = "BreathLight"
desktop_theme = "breath"
terminal_profile = "light"

[dark]
wallpaper = "/usr/share/wallpapers/Bamboo at Night/contents/images/5120x2880.png"
color_scheme = "BreathDark"
desktop_theme = "breath-dark"
terminal_profile = "dark"

[[schedule.windows]]
theme = "Light"
start = "07:00:00"

[[schedule.windows]]
theme = "Dark"
start = "17:00:00"
```

Each schedule window names the theme (`Light` or `Dark`) that takes effect from
its start time onward. Before the earliest window of the day, the latest window
still applies, so the schedule wraps around midnight.

If the file cannot be read, or if it is invalid, kswitch prints
`Error:	Invalid config file at <path>` and exits with status 1.

Konsole profiles take their names from the theme. `light.profile` and
`dark.profile` must exist in Konsole's profile directory. The `terminal_profile`
field is stored in the file and printed with the rest of the configuration, but
the profile name comes from the theme, not from this field.

## Using it as a library

```python
from datetime import time

from kswitch.config import Config
from kswitch.operations import apply, toggle
from kswitch.target import current_theme, target_theme
from kswitch.theme import Theme, parse_theme

config = Config.default()            # loads the user's file, or the built-in defaults
config.schedule.theme_from_time(time(20, 0))   # Theme.DARK with the defaults
target_theme(config, time(8, 0))     # the theme a toggle would switch to
apply(config.dark, Theme.DARK, config)
toggle(config)                       # returns the theme it applied
```

Other helpers:

- `kswitch.config`: `Config.load(path)`, `Config.save()`, `Config.to_toml()`,
  `Config.edit()`, and `ConfigError` for files that cannot be understood.
- `kswitch.plasma`: `set_color_scheme`, `set_desktop_theme`, `set_wallpaper`,
  `wallpaper_script`, plus `current_color_scheme`, `current_desktop_theme` and
  `current_wallpaper`. These read the current value from the text of
  `kdeglobals`, `plasmarc` and `plasma-org.kde.plasma.desktop-appletsrc`.
- `kswitch.konsole`: `update_default_profile(text, theme)` returns updated
  `konsolerc` content. `set_default_profile`, `session_ids`, `set_session_theme`
  and `set_theme` act on the running system.

## What kswitch does not do

kswitch does not run in the background and does not switch themes by itself at
the scheduled times. The schedule only decides which theme is active when
`toggle` runs and `KSWITCH_THEME` is not set. To get timed switching, run
`kswitch set light` and `kswitch set dark` from a timer or cron job.