"""Informational CLI commands: config overview."""

from __future__ import annotations

import argparse
from pathlib import Path

from ..._util.ansi import gray, supports_color, violet, yes_no
from ...core.classifier import default_classifier
from ...core.config import (
    build_config_stack,
    global_config_path,
    global_config_search_paths,
)
from ...core.paths import state_root


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register informational subcommands (config)."""
    subparsers.add_parser("config", help="Show configuration paths, values and mark data source")


def dispatch(args: argparse.Namespace) -> bool:
    """Handle the config command.  Returns True if handled."""
    if args.cmd == "config":
        _print_config()
        return True
    return False


def _print_config() -> None:
    """Display config file search order, resolved values and their scope."""
    color_enabled = supports_color()

    print("Configuration (read):")
    gcfg = global_config_path()
    print(
        f"- Global config file: {gray(str(gcfg), color_enabled)} "
        f"(exists: {yes_no(Path(gcfg).is_file(), color_enabled)})"
    )
    paths = global_config_search_paths()
    if len(paths) > 1:
        print("- Global config search order:")
        for p in paths:
            exists = yes_no(p.is_file(), color_enabled)
            print(f"  • {gray(str(p), color_enabled)} (exists: {exists})")

    stack = build_config_stack()
    print()
    print("Resolved values:")
    for key in ("marks.data_file", "logging.debug"):
        value = stack.get(key)
        scope = stack.provenance(key) or "defaults"
        print(f"- {key}: {violet(str(value), color_enabled)} [{gray(scope, color_enabled)}]")

    print()
    print("Mark data:")
    classifier = default_classifier()
    print(f"- Source: {gray(classifier.source, color_enabled)}")
    for name, count in classifier.summary().items():
        print(f"  • {name}: {count} ranges")

    print()
    print("State (write):")
    print(f"- Debug log: {gray(str(state_root() / 'glyphstring.log'), color_enabled)}")
