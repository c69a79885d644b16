# SPDX-FileCopyrightText: 2026 glyphstring contributors
#
# SPDX-License-Identifier: Apache-2.0

"""Tests for glyph iteration."""

import unittest

from test_utils import ucd_classifier

from glyphstring.core.classifier import CharacterClassifier
from glyphstring.core.iterator import Glyph, GlyphIterator, read_unit

DIAERESIS = "\N{COMBINING DIAERESIS}"


def texts(source: str, classifier: CharacterClassifier | None = None) -> list[str]:
    it = GlyphIterator(source, classifier or ucd_classifier())
    result = []
    while it.has_next():
        result.append(it.next())
    return result


class CharIteratorTests(unittest.TestCase):
    def assert_sequence(self, source: str, expected: list[str]) -> None:
        it = GlyphIterator(source, ucd_classifier())
        for glyph in expected:
            self.assertTrue(it.has_next())
            self.assertEqual(it.next(), glyph)
        self.assertFalse(it.has_next())
        self.assertIsNone(it.next())

    def test_normal(self) -> None:
        self.assert_sequence("aba", ["a", "b", "a"])

    def test_decomposed(self) -> None:
        self.assert_sequence("aA" + DIAERESIS + "a", ["a", "A" + DIAERESIS, "a"])

    def test_empty(self) -> None:
        self.assert_sequence("", [])

    def test_with_surrogates(self) -> None:
        self.assert_sequence(
            "a\ud800\udf02b\ud800\udc00", ["a", "\ud800\udf02", "b", "\ud800\udc00"]
        )

    def test_with_surrogates_and_decomposed_chars(self) -> None:
        self.assert_sequence(
            "a\ud800\udf02bi" + DIAERESIS + "\ud800\udc00",
            ["a", "\ud800\udf02", "b", "i" + DIAERESIS, "\ud800\udc00"],
        )

    def test_multiple_decomposed(self) -> None:
        # A + circumflex + dot below
        acc = "A\N{COMBINING CIRCUMFLEX ACCENT}\N{COMBINING DOT BELOW}"
        self.assert_sequence("a" + acc + "a", ["a", acc, "a"])

    def test_agrave(self) -> None:
        self.assert_sequence("A\N{COMBINING GRAVE ACCENT}", ["A\N{COMBINING GRAVE ACCENT}"])

    def test_astral_characters(self) -> None:
        self.assert_sequence("a\U00010302b", ["a", "\U00010302", "b"])

    def test_exhausted_iterator_stays_exhausted(self) -> None:
        it = GlyphIterator("a", ucd_classifier())
        self.assertEqual(it.next(), "a")
        self.assertIsNone(it.next())
        self.assertIsNone(it.next_glyph())
        self.assertFalse(it.has_next())


class AttachmentTests(unittest.TestCase):
    def test_spacing_mark_sets_flag(self) -> None:
        it = GlyphIterator("लो", ucd_classifier())
        self.assertEqual(it.next_glyph(), Glyph("लो", has_spacing_mark=True))

    def test_nonspacing_mark_does_not_set_flag(self) -> None:
        it = GlyphIterator("है", ucd_classifier())
        self.assertEqual(it.next_glyph(), Glyph("है", has_spacing_mark=False))

    def test_second_spacing_mark_starts_new_glyph(self) -> None:
        glyphs = list(GlyphIterator("लोो", ucd_classifier()))
        self.assertEqual([g.text for g in glyphs], ["लो", "ो"])
        self.assertEqual([g.units for g in glyphs], [2, 1])

    def test_nonspacing_after_spacing_attaches(self) -> None:
        # KA + VOWEL SIGN O (Mc) + ANUSVARA (Mn)
        glyphs = list(GlyphIterator("कों", ucd_classifier()))
        self.assertEqual(glyphs, [Glyph("कों", has_spacing_mark=True)])

    def test_spacing_mark_after_nonspacing_attaches(self) -> None:
        # NA + VOWEL SIGN I (Mn) + VOWEL SIGN EE (Mc)
        glyphs = list(GlyphIterator("ನಿೇ", ucd_classifier()))
        self.assertEqual(glyphs, [Glyph("ನಿೇ", has_spacing_mark=True)])

    def test_enclosing_mark_attaches_like_nonspacing(self) -> None:
        circled = "a\N{COMBINING ENCLOSING CIRCLE}"
        glyphs = list(GlyphIterator(circled + "b", ucd_classifier()))
        self.assertEqual(glyphs, [Glyph(circled), Glyph("b")])

    def test_leading_mark_is_taken_as_base(self) -> None:
        self.assertEqual(texts(DIAERESIS + DIAERESIS + "a"), [DIAERESIS + DIAERESIS, "a"])

    def test_leading_spacing_mark_is_not_counted_as_spacing(self) -> None:
        glyphs = list(GlyphIterator("ोक", ucd_classifier()))
        self.assertEqual(glyphs, [Glyph("ो"), Glyph("क")])

    def test_mark_after_surrogate_pair_attaches(self) -> None:
        pair = "\ud800\udf02"
        self.assertEqual(texts(pair + DIAERESIS + "b"), [pair + DIAERESIS, "b"])

    def test_mark_encoded_as_surrogate_pair_attaches(self) -> None:
        # U+1D167 MUSICAL SYMBOL COMBINING TREMOLO-1 as a UTF-16 pair
        self.assertEqual(texts("a\ud834\udd67b"), ["a\ud834\udd67", "b"])

    def test_unpaired_surrogates_are_base_glyphs(self) -> None:
        self.assertEqual(texts("a\udc00\ud800"), ["a", "\udc00", "\ud800"])
        self.assertEqual(texts("\ud800a"), ["\ud800", "a"])

    def test_custom_classifier(self) -> None:
        classifier = CharacterClassifier.from_mapping({"SpacingMark": [[ord("x"), ord("x")]]})
        glyphs = list(GlyphIterator("axxb", classifier))
        self.assertEqual([g.text for g in glyphs], ["ax", "x", "b"])


class IteratorProtocolTests(unittest.TestCase):
    def test_for_loop_yields_glyphs(self) -> None:
        glyphs = list(GlyphIterator("ab", ucd_classifier()))
        self.assertEqual(glyphs, [Glyph("a"), Glyph("b")])

    def test_iter_returns_self(self) -> None:
        it = GlyphIterator("ab", ucd_classifier())
        self.assertIs(iter(it), it)

    def test_stop_iteration(self) -> None:
        it = GlyphIterator("", ucd_classifier())
        with self.assertRaises(StopIteration):
            next(it)

    def test_glyph_units(self) -> None:
        self.assertEqual(Glyph("a").units, 1)
        self.assertEqual(Glyph("लो", has_spacing_mark=True).units, 2)


class ReadUnitTests(unittest.TestCase):
    def test_bmp_character(self) -> None:
        self.assertEqual(read_unit("ab", 0), (ord("a"), 1))

    def test_surrogate_pair(self) -> None:
        self.assertEqual(read_unit("\ud800\udf02", 0), (0x10302, 2))

    def test_high_surrogate_at_end(self) -> None:
        self.assertEqual(read_unit("a\ud800", 1), (0xD800, 1))

    def test_low_then_high_is_not_a_pair(self) -> None:
        self.assertEqual(read_unit("\udc00\ud800", 0), (0xDC00, 1))

    def test_astral_character(self) -> None:
        self.assertEqual(read_unit("\U0001F600", 0), (0x1F600, 1))


if __name__ == "__main__":
    unittest.main()
