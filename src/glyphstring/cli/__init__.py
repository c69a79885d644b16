"""Command line interface for glyphstring."""
