# SPDX-FileCopyrightText: 2026 glyphstring contributors
# SPDX-License-Identifier: Apache-2.0

"""Text commands: segment, classify, truncate, ellipsize."""

from __future__ import annotations

import argparse
import json
import sys
import unicodedata

from rich.cells import cell_len
from rich.console import Console
from rich.table import Table

from ..._util.ansi import gray, supports_color, yellow
from ...core.classifier import default_classifier
from ...core.glyphstring import GlyphString
from ...core.iterator import Glyph, read_unit


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register text subcommands (segment, classify, truncate, ellipsize)."""
    text_help = "Input text ('-' reads standard input)"

    p_segment = subparsers.add_parser("segment", help="Show the glyphs of a string")
    p_segment.add_argument("text", help=text_help)
    p_segment.add_argument("--json", action="store_true", help="Emit JSON instead of a table")

    p_classify = subparsers.add_parser(
        "classify", help="Show the mark category of every codepoint in a string"
    )
    p_classify.add_argument("text", help=text_help)

    p_truncate = subparsers.add_parser(
        "truncate", help="Cut a string to a unit budget without splitting glyphs"
    )
    p_truncate.add_argument("text", help=text_help)
    p_truncate.add_argument("units", type=int, help="Maximum width in units")

    p_ellipsize = subparsers.add_parser(
        "ellipsize", help="Like truncate, but end a shortened string with '…'"
    )
    p_ellipsize.add_argument("text", help=text_help)
    p_ellipsize.add_argument("units", type=int, help="Maximum width in units, ellipsis included")


def dispatch(args: argparse.Namespace) -> bool:
    """Handle text commands.  Returns True if handled."""
    if args.cmd == "segment":
        _cmd_segment(_read_text(args.text), as_json=args.json)
        return True
    if args.cmd == "classify":
        _cmd_classify(_read_text(args.text))
        return True
    if args.cmd == "truncate":
        print(GlyphString(_read_text(args.text)).truncate(args.units))
        return True
    if args.cmd == "ellipsize":
        print(GlyphString(_read_text(args.text)).ellipsize(args.units))
        return True
    return False


def _read_text(value: str) -> str:
    if value == "-":
        return sys.stdin.read().rstrip("\n")
    return value


def _codepoints(text: str) -> list[int]:
    """Scalar values of *text*, joining surrogate pairs."""
    result = []
    pos = 0
    while pos < len(text):
        cp, length = read_unit(text, pos)
        result.append(cp)
        pos += length
    return result


def _glyph_row(glyph: Glyph) -> dict:
    return {
        "text": glyph.text,
        "codepoints": [f"U+{cp:04X}" for cp in _codepoints(glyph.text)],
        "units": glyph.units,
        "cells": cell_len(glyph.text),
    }


def _cmd_segment(text: str, as_json: bool) -> None:
    rows = [_glyph_row(glyph) for glyph in GlyphString(text).glyphs()]
    if as_json:
        print(json.dumps(rows, ensure_ascii=False, indent=2))
        return

    table = Table(title=f"{len(rows)} glyphs, {sum(r['units'] for r in rows)} units")
    table.add_column("#", justify="right")
    table.add_column("Glyph")
    table.add_column("Codepoints")
    table.add_column("Units", justify="right")
    table.add_column("Cells", justify="right")
    for index, row in enumerate(rows):
        table.add_row(
            str(index),
            row["text"],
            " ".join(row["codepoints"]),
            str(row["units"]),
            str(row["cells"]),
        )
    Console().print(table)


def _cmd_classify(text: str) -> None:
    color_enabled = supports_color()
    classifier = default_classifier()
    for cp in _codepoints(text):
        category = classifier.classify(cp)
        label = f"{category.value:<15}"
        if category.is_mark:
            label = yellow(label, color_enabled)
        name = unicodedata.name(chr(cp), "")
        print(f"U+{cp:04X}  {label} {gray(name, color_enabled)}".rstrip())
