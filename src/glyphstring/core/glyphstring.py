# SPDX-FileCopyrightText: 2026 glyphstring contributors
# SPDX-License-Identifier: Apache-2.0

"""Glyph-aware string wrapper with width-budgeted truncation.

Budgets are counted in *units*: a plain glyph costs 1, a glyph carrying a
spacing combining mark costs 2 (the mark takes its own display slot).
Truncation always drops whole glyphs; a base is never separated from its
marks.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from .classifier import CharacterClassifier
from .iterator import Glyph, GlyphIterator

ELLIPSIS = "\N{HORIZONTAL ELLIPSIS}"


class GlyphString:
    """Immutable view of *source* as a sequence of glyphs.

    Example::

        >>> GlyphString("abcdefghijklmnop").ellipsize(6)
        'abcde…'
    """

    __slots__ = ("_source", "_classifier")

    def __init__(self, source: str, classifier: CharacterClassifier | None = None):
        if not isinstance(source, str):
            raise TypeError(f"GlyphString expects str, got {type(source).__name__}")
        self._source = source
        self._classifier = classifier

    @property
    def source(self) -> str:
        return self._source

    def __str__(self) -> str:
        return self._source

    def __repr__(self) -> str:
        return f"GlyphString({self._source!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, GlyphString):
            return self._source == other._source
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._source)

    def char_iterator(self) -> GlyphIterator:
        """Return a fresh iterator; iterators never share position."""
        return GlyphIterator(self._source, self._classifier)

    def glyphs(self) -> Iterator[Glyph]:
        return iter(self.char_iterator())

    def __iter__(self) -> Iterator[str]:
        for glyph in self.char_iterator():
            yield glyph.text

    def for_each(self, callback: Callable[[str], object]) -> None:
        """Call *callback* with each glyph's text, in source order."""
        it = self.char_iterator()
        while it.has_next():
            callback(it.next())

    def unit_length(self) -> int:
        """Total width-budget cost of the whole string."""
        return sum(glyph.units for glyph in self.char_iterator())

    def _prefix_end(self, max_units: int) -> tuple[int, bool]:
        """Return ``(end, complete)`` for the longest prefix within *max_units*.

        *end* is the offset in the source where the prefix stops; *complete*
        is True when no glyph had to be dropped.
        """
        used = 0
        end = 0
        for glyph in self.char_iterator():
            if used + glyph.units > max_units:
                return end, False
            used += glyph.units
            end += len(glyph.text)
        return end, True

    def truncate(self, max_units: int) -> str:
        """Return the longest whole-glyph prefix costing at most *max_units*."""
        if max_units <= 0:
            return ""
        end, complete = self._prefix_end(max_units)
        if complete:
            return self._source
        return self._source[:end]

    def ellipsize(self, max_units: int) -> str:
        """Like :meth:`truncate`, but mark a cut with ``…``.

        One unit of the budget is reserved for the ellipsis.  A string
        whose whole length fits in *max_units* is returned untouched.
        """
        if max_units <= 0:
            return ""
        used = 0
        cut = 0
        for glyph in self.char_iterator():
            used += glyph.units
            if used > max_units:
                return self._source[:cut] + ELLIPSIS
            # still within the budget left over after the ellipsis
            if used < max_units:
                cut += len(glyph.text)
        return self._source
