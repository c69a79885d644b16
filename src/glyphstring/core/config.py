# SPDX-FileCopyrightText: 2026 glyphstring contributors
# SPDX-License-Identifier: Apache-2.0

"""Configuration lookup for glyphstring.

Resolved through a :class:`~glyphstring._util.config_stack.ConfigStack` with
four scopes, lowest priority first:

``defaults``
    :data:`DEFAULTS` below.
``global``
    The YAML file from :func:`global_config_path`.
``env``
    ``GLYPHSTRING_MARKS_FILE`` and ``GLYPHSTRING_DEBUG``.
``cli``
    Overrides installed by the command line (:func:`set_cli_overrides`).

Example ``config.yml``::

    marks:
      data_file: ~/share/glyphstring/marks.json
    logging:
      debug: true
"""

import os
import sys
from pathlib import Path
from typing import Any

from .._util.config_stack import ConfigScope, ConfigStack, load_yaml_scope
from .paths import APP_NAME, config_root

DEFAULTS: dict[str, Any] = {
    "marks": {"data_file": None},
    "logging": {"debug": False},
}

_cli_overrides: dict[str, Any] = {}


def global_config_search_paths() -> list[Path]:
    """Return the ordered list of paths that will be checked for global config.

    - If GLYPHSTRING_CONFIG_FILE is set, only that single path is considered.
    - Otherwise, check in order:
        1) config_root()/config.yml  (GLYPHSTRING_CONFIG_DIR or XDG)
        2) sys.prefix/etc/glyphstring/config.yml
        3) /etc/glyphstring/config.yml
    """
    env_file = os.environ.get("GLYPHSTRING_CONFIG_FILE")
    if env_file:
        return [Path(env_file).expanduser().resolve()]

    user_cfg = config_root() / "config.yml"
    sp_cfg = Path(sys.prefix) / "etc" / APP_NAME / "config.yml"
    etc_cfg = Path("/etc") / APP_NAME / "config.yml"
    return [user_cfg, sp_cfg, etc_cfg]


def global_config_path() -> Path:
    """Global config file path.

    An explicit GLYPHSTRING_CONFIG_FILE is returned even if missing so the
    user can see where it is expected.  Otherwise the first existing
    candidate wins; if none exist, the last candidate is returned.
    """
    candidates = global_config_search_paths()
    if len(candidates) == 1:
        return candidates[0]

    for c in candidates:
        if c.is_file():
            return c.resolve()
    return candidates[-1]


def _env_scope() -> ConfigScope:
    data: dict[str, Any] = {}
    marks_file = os.environ.get("GLYPHSTRING_MARKS_FILE")
    if marks_file:
        data["marks"] = {"data_file": marks_file}
    debug = os.environ.get("GLYPHSTRING_DEBUG")
    if debug:
        data["logging"] = {"debug": debug != "0"}
    return ConfigScope("env", None, data)


def set_cli_overrides(overrides: dict[str, Any]) -> None:
    """Install the highest-priority ``cli`` scope (replaces any previous one).

    Process-wide state meant for the command line, set once before any
    glyph work.  Not synchronized: changing it while other threads rebuild
    :func:`~glyphstring.core.classifier.default_classifier` is unsafe.
    """
    global _cli_overrides
    _cli_overrides = dict(overrides)


def build_config_stack() -> ConfigStack:
    """Assemble defaults, global file, environment and CLI scopes."""
    stack = ConfigStack()
    stack.push(ConfigScope("defaults", None, DEFAULTS))
    stack.push(load_yaml_scope("global", global_config_path()))
    stack.push(_env_scope())
    stack.push(ConfigScope("cli", None, _cli_overrides))
    return stack


def get_marks_data_file() -> Path | None:
    """Configured classifier artifact, or ``None`` to use ``unicodedata``."""
    value = build_config_stack().get("marks.data_file")
    if not value:
        return None
    return Path(str(value)).expanduser()


def debug_log_enabled() -> bool:
    """Return whether ``logging.debug`` is on.  Never raises."""
    try:
        return bool(build_config_stack().get("logging.debug", False))
    except Exception:
        return False
