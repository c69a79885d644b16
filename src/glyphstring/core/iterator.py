# SPDX-FileCopyrightText: 2026 glyphstring contributors
# SPDX-License-Identifier: Apache-2.0

"""Glyph iteration: group a base character with its trailing marks.

A *unit* here is one codepoint of the Python string, except that a high
surrogate immediately followed by a low surrogate is read as a single unit
(strings decoded with ``surrogatepass`` or built from UTF-16 data can carry
such pairs).  Each glyph is one base unit plus every mark unit that
attaches to it:

- non-spacing and enclosing marks attach without limit;
- at most one spacing mark attaches; a second one starts a new glyph.
"""

from __future__ import annotations

from dataclasses import dataclass

from .classifier import Category, CharacterClassifier, default_classifier

_HIGH_SURROGATES = range(0xD800, 0xDC00)
_LOW_SURROGATES = range(0xDC00, 0xE000)


@dataclass(frozen=True)
class Glyph:
    """One visually indivisible unit of text."""

    text: str
    has_spacing_mark: bool = False

    @property
    def units(self) -> int:
        """Width-budget cost: 2 when a spacing mark is attached, else 1."""
        return 2 if self.has_spacing_mark else 1


def read_unit(text: str, pos: int) -> tuple[int, int]:
    """Return ``(scalar_value, length)`` of the unit starting at *pos*.

    *length* is 2 for a surrogate pair, 1 otherwise.  An unpaired surrogate
    is returned as-is.
    """
    cp = ord(text[pos])
    if cp in _HIGH_SURROGATES and pos + 1 < len(text):
        low = ord(text[pos + 1])
        if low in _LOW_SURROGATES:
            return 0x10000 + ((cp - 0xD800) << 10) + (low - 0xDC00), 2
    return cp, 1


class GlyphIterator:
    """Forward-only cursor over the glyphs of a string.

    Each instance owns its position; create a new one (``GlyphString.char_iterator``)
    for every pass.  Supports both the explicit ``has_next()``/``next()``
    style and ordinary ``for glyph in iterator`` iteration.
    """

    def __init__(self, text: str, classifier: CharacterClassifier | None = None):
        self._text = text
        self._pos = 0
        self._classifier = classifier if classifier is not None else default_classifier()

    def has_next(self) -> bool:
        return self._pos < len(self._text)

    def next_glyph(self) -> Glyph | None:
        """Return the next :class:`Glyph`, or ``None`` once the text is exhausted."""
        text = self._text
        start = self._pos
        if start >= len(text):
            return None

        # The base unit is taken as-is, whatever its category.
        _, length = read_unit(text, start)
        pos = start + length
        has_spacing_mark = False

        while pos < len(text):
            cp, length = read_unit(text, pos)
            category = self._classifier.classify(cp)
            if category in (Category.NONSPACING_MARK, Category.ENCLOSING_MARK):
                pos += length
            elif category is Category.SPACING_MARK and not has_spacing_mark:
                has_spacing_mark = True
                pos += length
            else:
                break

        self._pos = pos
        return Glyph(text=text[start:pos], has_spacing_mark=has_spacing_mark)

    def next(self) -> str | None:
        """Return the text of the next glyph, or ``None`` at the end."""
        glyph = self.next_glyph()
        return glyph.text if glyph is not None else None

    def __iter__(self) -> GlyphIterator:
        return self

    def __next__(self) -> Glyph:
        glyph = self.next_glyph()
        if glyph is None:
            raise StopIteration
        return glyph
