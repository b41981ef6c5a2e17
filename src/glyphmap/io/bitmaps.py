"""Bitmap strike lookups over fontTools tables.

Each lookup takes the loaded TTFont, the glyph's name and id, and the
bitmap configuration, and returns a payload or None when the table holds
no image for the glyph. Structural problems surface as the decoder's own
exceptions; FontHandle translates them.
"""

from collections.abc import Callable
from functools import partial

from fontTools.ttLib import TTFont, TTLibError
from fontTools.ttLib.tables.C_B_D_T_ import ColorBitmapGlyph

from glyphmap.config import BitmapConfig
from glyphmap.domain.bitmap import (
    BitmapPayload,
    EmbeddedBitmap,
    EncapsulatedBitmap,
    EncapsulatedFormat,
)

SBIX_BIT_DEPTH = 32

BitmapLookup = Callable[[TTFont, str, int, BitmapConfig], BitmapPayload | None]


def lookup_sbix(
    font: TTFont, glyph_name: str, glyph_id: int, config: BitmapConfig
) -> BitmapPayload | None:
    """Find the glyph's image in the first sbix strike that has one.

    'dupe' records are followed to the glyph they reference.
    """
    if config.max_bit_depth < SBIX_BIT_DEPTH:
        return None

    for strike in font["sbix"].strikes.values():
        glyph = _resolve_sbix_glyph(strike.glyphs, strike.glyphs.get(glyph_name))
        if glyph is None or not glyph.imageData:
            continue
        return EncapsulatedBitmap(
            format=EncapsulatedFormat.from_graphic_type(glyph.graphicType),
            data=bytes(glyph.imageData),
            ppem=strike.ppem,
            tag=glyph.graphicType,
        )
    return None


def _resolve_sbix_glyph(glyphs, glyph):
    seen: set[str] = set()
    while glyph is not None and glyph.graphicType == "dupe":
        reference = glyph.referenceGlyphName
        if reference in seen:
            raise TTLibError(f"circular sbix 'dupe' reference to '{reference}'")
        seen.add(reference)
        glyph = glyphs.get(reference)
    return glyph


def lookup_strikes(
    font: TTFont,
    glyph_name: str,
    glyph_id: int,
    config: BitmapConfig,
    *,
    locator_tag: str,
    data_tag: str,
) -> BitmapPayload | None:
    """Find the glyph's bitmap in an EBLC/EBDT or CBLC/CBDT table pair.

    Strikes deeper than the configured bit depth are skipped. Format 17-19
    colour bitmaps are PNG files; every other format is raw pixel data.
    Composite bitmaps (formats 8 and 9) carry no pixel data of their own
    and are treated as absent.
    """
    locator = font[locator_tag]
    strike_data = font[data_tag].strikeData

    for strike, bitmaps in zip(locator.strikes, strike_data):
        size = strike.bitmapSizeTable
        if size.bitDepth > config.max_bit_depth:
            continue

        bitmap = bitmaps.get(glyph_name)
        if bitmap is None:
            continue

        image_data = getattr(bitmap, "imageData", None)
        if not image_data:
            continue

        if isinstance(bitmap, ColorBitmapGlyph):
            return EncapsulatedBitmap(
                format=EncapsulatedFormat.PNG,
                data=bytes(image_data),
                ppem=size.ppemX,
                tag="png",
            )

        metrics = getattr(bitmap, "metrics", None)
        return EmbeddedBitmap(
            data=bytes(image_data),
            ppem=size.ppemX,
            bit_depth=size.bitDepth,
            width=getattr(metrics, "width", None),
            height=getattr(metrics, "height", None),
        )
    return None


def lookup_svg(
    font: TTFont, glyph_name: str, glyph_id: int, config: BitmapConfig
) -> BitmapPayload | None:
    """Find the SVG document whose glyph range covers the glyph."""
    if not config.include_svg:
        return None

    for document in font["SVG "].docList:
        if document.startGlyphID <= glyph_id <= document.endGlyphID:
            data = document.data
            if isinstance(data, str):
                data = data.encode("utf-8")
            return EncapsulatedBitmap(
                format=EncapsulatedFormat.SVG,
                data=bytes(data),
                tag="svg",
            )
    return None


# Search order: colour strikes first, then monochrome, then scalable SVG
BITMAP_SOURCES: tuple[tuple[str, BitmapLookup], ...] = (
    ("sbix", lookup_sbix),
    ("CBLC", partial(lookup_strikes, locator_tag="CBLC", data_tag="CBDT")),
    ("EBLC", partial(lookup_strikes, locator_tag="EBLC", data_tag="EBDT")),
    ("SVG ", lookup_svg),
)
