"""Glyphmap - Resolve and export the glyphs of icon fonts.

Glyphmap loads a TrueType/OpenType font, resolves codepoints to glyph ids
and glyph names, enumerates every named glyph in the character map and
extracts embedded bitmap images.

Example:
    $ glyphmap list MaterialSymbolsOutlined.ttf

This prints every named glyph with its id and private-use codepoint.
"""

__version__ = "0.1.0"

from glyphmap.core import CmapIndex, export
from glyphmap.domain import GlyphRecord
from glyphmap.exceptions import (
    FontError,
    FontIOError,
    FontParseError,
    FontReadWriteError,
    GlyphmapError,
)
from glyphmap.io import FontHandle

__all__ = [
    "CmapIndex",
    "FontError",
    "FontHandle",
    "FontIOError",
    "FontParseError",
    "FontReadWriteError",
    "GlyphRecord",
    "GlyphmapError",
    "__version__",
    "export",
]
