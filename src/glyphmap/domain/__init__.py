"""Domain models for glyphmap.

This module contains the value types produced by font queries. All models
are immutable (frozen dataclasses) and independent of fonttools
implementation details.

Key classes:
- GlyphRecord: A named glyph with its id and codepoint
- EncapsulatedBitmap / EmbeddedBitmap: Bitmap payloads for a glyph
- Icon: An icon constant bound to a font style
"""

from glyphmap.domain.bitmap import (
    BitmapPayload,
    EmbeddedBitmap,
    EncapsulatedBitmap,
    EncapsulatedFormat,
)
from glyphmap.domain.glyph import GlyphRecord, is_scalar_value
from glyphmap.domain.icon import Icon, IconStyle, icon_char

__all__: list[str] = [
    # Enums
    "EncapsulatedFormat",
    "IconStyle",
    # Core types
    "BitmapPayload",
    "EmbeddedBitmap",
    "EncapsulatedBitmap",
    "GlyphRecord",
    "Icon",
    # Helpers
    "icon_char",
    "is_scalar_value",
]
