"""Font I/O layer for glyphmap.

This module handles reading fonts using fonttools and writing exported
glyph images. It provides a clean abstraction layer between fonttools and
the domain models.

Key responsibilities:
- Load TTF/OTF/TTC fonts from memory or disk
- Resolve codepoints, glyph names and bitmap strikes
- Write exported glyph bitmaps

Key classes:
- FontHandle: Load a font and query its glyphs
- BitmapWriter: Save exported glyph images
"""

from glyphmap.io.reader import FontHandle
from glyphmap.io.writer import BitmapWriter

__all__ = [
    "BitmapWriter",
    "FontHandle",
]
