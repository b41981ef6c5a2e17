"""Core glyph resolution for glyphmap.

This module contains the logic built on top of a loaded font:

- CmapIndex: Decode the character map once and enumerate named glyphs
- export: Classify a bitmap payload into (extension, bytes)
"""

from glyphmap.core.cmap import CmapIndex
from glyphmap.core.exporter import export

__all__ = [
    "CmapIndex",
    "export",
]
