#!/usr/bin/env python3

import argparse

import yaml

from .. import __version__
from .._util.logging_utils import _log_debug
from ..core.classifier import CharacterClassifier, MarkDataError, default_classifier
from ..core.config import set_cli_overrides
from .commands import info, text

_COMMAND_MODULES = (text, info)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="glyphstring",
        description="glyphstring – glyph-aware segmentation and truncation of Unicode text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Budgets are counted in units: 1 per glyph, 2 for a glyph carrying a\n"
            "spacing combining mark.\n"
            "\n"
            "Examples:\n"
            "  glyphstring segment 'ಭೆನಿಬೇ'\n"
            "  glyphstring truncate 'abcdefghijklmnop' 6      → abcdef\n"
            "  glyphstring ellipsize 'abcdefghijklmnop' 6     → abcde…\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"glyphstring {__version__}")
    parser.add_argument(
        "--marks-file",
        metavar="PATH",
        help="JSON mark-range data to use instead of the bundled Unicode database",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Append debug lines to the state-dir log"
    )
    sub = parser.add_subparsers(dest="cmd", required=True)
    for module in _COMMAND_MODULES:
        module.register(sub)
    return parser


def _cli_overrides(args: argparse.Namespace) -> dict:
    overrides: dict = {}
    if args.marks_file:
        overrides["marks"] = {"data_file": args.marks_file}
    if args.debug:
        overrides["logging"] = {"debug": True}
    return overrides


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    overrides = _cli_overrides(args)
    set_cli_overrides(overrides)
    if overrides:
        default_classifier.cache_clear()
    _log_debug(f"cli: cmd={args.cmd}")

    try:
        # an explicit --marks-file is loaded strictly
        if args.marks_file:
            CharacterClassifier.from_file(args.marks_file)
        for module in _COMMAND_MODULES:
            if module.dispatch(args):
                return
    except (MarkDataError, yaml.YAMLError, ValueError, OSError) as exc:
        raise SystemExit(f"error: {exc}") from exc
    parser.error(f"Unknown command: {args.cmd}")


if __name__ == "__main__":
    main()
