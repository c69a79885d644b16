"""glyphstring package.

Glyph-aware iteration and width-budgeted truncation of Unicode text.

Modules:
- glyphstring.core.classifier: codepoint → mark category range tables
- glyphstring.core.iterator: glyph cursor (base + attached marks)
- glyphstring.core.glyphstring: GlyphString façade (truncate, ellipsize)
- glyphstring.core.config / paths: layered YAML config, platform dirs
- glyphstring.cli: ``glyphstring`` command line entry point
- glyphstring._util: internal helpers (config stack, logging, colors)
"""

from .core.classifier import (
    Category,
    CharacterClassifier,
    CodepointRangeTable,
    MarkDataError,
    classify,
    default_classifier,
)
from .core.glyphstring import ELLIPSIS, GlyphString
from .core.iterator import Glyph, GlyphIterator

__all__ = [
    "Category",
    "CharacterClassifier",
    "CodepointRangeTable",
    "ELLIPSIS",
    "Glyph",
    "GlyphIterator",
    "GlyphString",
    "MarkDataError",
    "classify",
    "default_classifier",
]

# Version information - single source of truth using importlib.metadata
try:
    from importlib.metadata import version

    __version__ = version("glyphstring")
except Exception:
    # Fallback for development mode when package is not installed
    try:
        import tomllib
        from pathlib import Path

        pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
        if pyproject_path.exists():
            with open(pyproject_path, "rb") as f:
                pyproject_data = tomllib.load(f)
                __version__ = pyproject_data["tool"]["poetry"]["version"]
        else:
            __version__ = "unknown"
    except Exception:
        __version__ = "unknown"
