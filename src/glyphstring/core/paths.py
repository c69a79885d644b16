# SPDX-FileCopyrightText: 2026 glyphstring contributors
# SPDX-License-Identifier: Apache-2.0

"""Platform-aware config and state directories."""

import os
from pathlib import Path

from platformdirs import user_config_dir, user_state_dir

APP_NAME = "glyphstring"


def config_root() -> Path:
    """
    Base directory for user configuration.

    Priority:
      1. GLYPHSTRING_CONFIG_DIR
      2. XDG_CONFIG_HOME/glyphstring
      3. platformdirs user config dir (~/.config/glyphstring on Linux)
    """
    env = os.getenv("GLYPHSTRING_CONFIG_DIR")
    if env:
        return Path(env).expanduser()

    xdg = os.getenv("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_NAME
    return Path(user_config_dir(APP_NAME))


def state_root() -> Path:
    """
    Writable state (debug log).

    Priority:
      1. GLYPHSTRING_STATE_DIR
      2. platformdirs user state dir (~/.local/state/glyphstring on Linux)
    """
    env = os.getenv("GLYPHSTRING_STATE_DIR")
    if env:
        return Path(env).expanduser()
    return Path(user_state_dir(APP_NAME))
