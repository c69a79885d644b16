# SPDX-FileCopyrightText: 2026 glyphstring contributors
# SPDX-License-Identifier: Apache-2.0

"""Codepoint classification into base characters and combining marks.

The classifier answers one question: does a codepoint start a new glyph
(``Category.BASE``) or attach to the previous one as a mark?  Marks are
looked up in immutable, sorted range tables, one per Unicode General
Category:

* ``Mn`` → ``Category.NONSPACING_MARK``
* ``Mc`` → ``Category.SPACING_MARK``
* ``Me`` → ``Category.ENCLOSING_MARK``

Tables come from one of two sources:

* a JSON artifact mapping category names to ``[start, end]`` inclusive
  ranges (``marks.data_file`` in the config, or ``--marks-file``), or
* the Unicode Character Database bundled with the interpreter
  (``unicodedata``), scanned once per process.

Either way the tables are validated when they are built and never mutated
afterwards, so one classifier can be shared freely between threads.
"""

from __future__ import annotations

import bisect
import json
import sys
import unicodedata
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from pathlib import Path

import yaml

MAX_CODEPOINT = 0x10FFFF


class Category(Enum):
    """Glyph-relevant classification of a single codepoint."""

    BASE = "Base"
    NONSPACING_MARK = "NonspacingMark"
    SPACING_MARK = "SpacingMark"
    ENCLOSING_MARK = "EnclosingMark"

    @property
    def is_mark(self) -> bool:
        return self is not Category.BASE


MARK_CATEGORIES: tuple[Category, ...] = (
    Category.NONSPACING_MARK,
    Category.SPACING_MARK,
    Category.ENCLOSING_MARK,
)

# Unicode General Category → mark category
GENERAL_CATEGORY_MAP: dict[str, Category] = {
    "Mn": Category.NONSPACING_MARK,
    "Mc": Category.SPACING_MARK,
    "Me": Category.ENCLOSING_MARK,
}


class MarkDataError(ValueError):
    """Raised when classifier range data is malformed.

    This is a load-time configuration defect; classification itself never
    raises.
    """


# ---------------------------------------------------------------------------
# Range tables
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CodepointRangeTable:
    """Sorted, non-overlapping inclusive codepoint ranges for one category."""

    category: Category
    starts: tuple[int, ...]
    ends: tuple[int, ...]

    @classmethod
    def from_ranges(cls, category: Category, ranges: Iterable) -> CodepointRangeTable:
        """Build a table from ``[start, end]`` pairs, validating as we go.

        Ranges must already be sorted by start and must not overlap; a
        table that violates this is rejected with :class:`MarkDataError`
        rather than silently re-sorted.
        """
        starts: list[int] = []
        ends: list[int] = []
        for index, item in enumerate(ranges):
            start, end = _coerce_range(category, index, item)
            if ends and start <= ends[-1]:
                raise MarkDataError(
                    f"{category.value}: range #{index} [{start:#06x}, {end:#06x}] "
                    f"is unsorted or overlaps [{starts[-1]:#06x}, {ends[-1]:#06x}]"
                )
            starts.append(start)
            ends.append(end)
        return cls(category=category, starts=tuple(starts), ends=tuple(ends))

    def __contains__(self, codepoint: object) -> bool:
        if not isinstance(codepoint, int):
            return False
        i = bisect.bisect_right(self.starts, codepoint) - 1
        return i >= 0 and codepoint <= self.ends[i]

    def __len__(self) -> int:
        return len(self.starts)

    def ranges(self) -> list[tuple[int, int]]:
        return list(zip(self.starts, self.ends))

    def codepoint_count(self) -> int:
        return sum(e - s + 1 for s, e in zip(self.starts, self.ends))


def _coerce_range(category: Category, index: int, item: object) -> tuple[int, int]:
    if not isinstance(item, (list, tuple)) or len(item) not in (1, 2):
        raise MarkDataError(f"{category.value}: range #{index} must be [start, end], got {item!r}")
    values = list(item)
    if len(values) == 1:
        values.append(values[0])
    # bool is an int subclass; reject it explicitly
    if not all(isinstance(v, int) and not isinstance(v, bool) for v in values):
        raise MarkDataError(f"{category.value}: range #{index} has non-integer bounds {item!r}")
    start, end = values
    if not 0 <= start <= end <= MAX_CODEPOINT:
        raise MarkDataError(f"{category.value}: range #{index} [{start}, {end}] is out of bounds")
    return start, end


# ---------------------------------------------------------------------------
# Classifier
# ---------------------------------------------------------------------------


class CharacterClassifier:
    """Map codepoints to :class:`Category` using per-category range tables.

    Usage::

        classifier = CharacterClassifier.from_unicodedata()
        classifier.classify(0x0308)   # Category.NONSPACING_MARK
        classifier.classify(ord("a")) # Category.BASE
    """

    def __init__(self, tables: Mapping[Category, CodepointRangeTable], source: str = "<memory>"):
        for category, table in tables.items():
            if category not in MARK_CATEGORIES:
                raise MarkDataError(f"Not a mark category: {category!r}")
            if table.category is not category:
                raise MarkDataError(
                    f"Table for {category.value} is labelled {table.category.value}"
                )
        self._tables: dict[Category, CodepointRangeTable] = {
            category: tables.get(
                category, CodepointRangeTable(category=category, starts=(), ends=())
            )
            for category in MARK_CATEGORIES
        }
        self._check_disjoint()
        self.source = source

    def _check_disjoint(self) -> None:
        spans = sorted(
            (s, e, category)
            for category, table in self._tables.items()
            for s, e in table.ranges()
        )
        for (s1, e1, c1), (s2, e2, c2) in zip(spans, spans[1:]):
            if s2 <= e1:
                raise MarkDataError(
                    f"{c1.value} range [{s1:#06x}, {e1:#06x}] overlaps "
                    f"{c2.value} range [{s2:#06x}, {e2:#06x}]"
                )

    def classify(self, codepoint: int) -> Category:
        """Return the category of *codepoint*; anything not in a mark table is ``BASE``."""
        for category in MARK_CATEGORIES:
            if codepoint in self._tables[category]:
                return category
        return Category.BASE

    def table(self, category: Category) -> CodepointRangeTable:
        return self._tables[category]

    def summary(self) -> dict[str, int]:
        """Range count per mark category (for diagnostics and the debug log)."""
        return {category.value: len(table) for category, table in self._tables.items()}

    # -- constructors -------------------------------------------------------

    @classmethod
    def from_mapping(cls, data: object, source: str = "<memory>") -> CharacterClassifier:
        """Build from the artifact layout: ``{"NonspacingMark": [[s, e], ...], ...}``."""
        if not isinstance(data, Mapping):
            raise MarkDataError(f"{source}: expected an object of category → ranges")
        by_name = {category.value: category for category in MARK_CATEGORIES}
        tables: dict[Category, CodepointRangeTable] = {}
        for name, ranges in data.items():
            category = by_name.get(name)
            if category is None:
                raise MarkDataError(f"{source}: unknown mark category {name!r}")
            if not isinstance(ranges, list):
                raise MarkDataError(f"{source}: ranges for {name} must be a list")
            tables[category] = CodepointRangeTable.from_ranges(category, ranges)
        return cls(tables, source=source)

    @classmethod
    def from_file(cls, path: Path | str) -> CharacterClassifier:
        """Load a JSON range artifact from *path*."""
        path = Path(path).expanduser()
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise MarkDataError(f"Cannot read mark data {path}: {exc}") from exc
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise MarkDataError(f"Invalid JSON in mark data {path}: {exc}") from exc
        return cls.from_mapping(data, source=str(path))

    @classmethod
    def from_unicodedata(cls) -> CharacterClassifier:
        """Derive the tables from the interpreter's Unicode Character Database."""
        collected: dict[Category, list[tuple[int, int]]] = {c: [] for c in MARK_CATEGORIES}
        run_category: Category | None = None
        run_start = 0
        for cp in range(sys.maxunicode + 1):
            category = GENERAL_CATEGORY_MAP.get(unicodedata.category(chr(cp)))
            if category is run_category:
                continue
            if run_category is not None:
                collected[run_category].append((run_start, cp - 1))
            run_category, run_start = category, cp
        if run_category is not None:
            collected[run_category].append((run_start, sys.maxunicode))
        tables = {
            category: CodepointRangeTable.from_ranges(category, ranges)
            for category, ranges in collected.items()
        }
        return cls(tables, source=f"unicodedata {unicodedata.unidata_version}")


# ---------------------------------------------------------------------------
# Process-wide default
# ---------------------------------------------------------------------------


@lru_cache(maxsize=1)
def default_classifier() -> CharacterClassifier:
    """Return the shared classifier, building it on first use.

    Honors ``marks.data_file`` from the resolved configuration; otherwise
    scans ``unicodedata``.  A broken config file or unusable mark data falls
    back to ``unicodedata`` (noted in the debug log) so glyph operations keep
    working; use :meth:`CharacterClassifier.from_file` directly for a strict
    load.  Call ``default_classifier.cache_clear()`` after changing
    configuration in-process.
    """
    from .._util.logging_utils import _log_debug
    from .config import get_marks_data_file

    classifier = None
    try:
        data_file = get_marks_data_file()
        if data_file is not None:
            classifier = CharacterClassifier.from_file(data_file)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        _log_debug(f"classifier: mark data unavailable, using unicodedata: {exc}")
    if classifier is None:
        classifier = CharacterClassifier.from_unicodedata()
    _log_debug(f"classifier: loaded from {classifier.source} ranges={classifier.summary()}")
    return classifier


def classify(codepoint: int) -> Category:
    """Classify *codepoint* with the shared default classifier."""
    return default_classifier().classify(codepoint)
