"""Glyph classification, iteration and truncation, plus config and paths."""
