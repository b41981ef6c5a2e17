"""Shared fixtures: small icon fonts built in memory with fontTools."""

from collections.abc import Callable
from io import BytesIO

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib import TTFont, newTable
from fontTools.ttLib.tables.S_V_G_ import SVGDocument
from fontTools.ttLib.tables.sbixGlyph import Glyph as SbixGlyph
from fontTools.ttLib.tables.sbixStrike import Strike
from fontTools.ttLib.ttCollection import TTCollection

NEUROLOGY = 0xE5CA
ADD = 0xE145
SMILE = 0xE7F2
STAR = 0xE838
HEART = 0xE87D

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00\x00\x00\rIHDR" + bytes(range(32))
SVG_DOC = '<svg xmlns="http://www.w3.org/2000/svg"><rect width="10" height="10"/></svg>'

FontFactory = Callable[..., bytes]


def _square_glyph():
    pen = TTGlyphPen(None)
    pen.moveTo((100, 0))
    pen.lineTo((100, 700))
    pen.lineTo((600, 700))
    pen.lineTo((600, 0))
    pen.closePath()
    return pen.glyph()


def _empty_glyph():
    return TTGlyphPen(None).glyph()


def build_font(
    glyph_order: list[str],
    cmap: dict[int, str],
    keep_glyph_names: bool = True,
    sbix: dict[str, SbixGlyph] | None = None,
    svg: list[tuple[str, int, int]] | None = None,
    family_name: str = "Test Icons",
) -> bytes:
    """Compile a TrueType font with square outlines for every glyph.

    Args:
        glyph_order: Glyph names; ".notdef" must come first
        cmap: Codepoint to glyph name
        keep_glyph_names: Write a format 2 'post' table (False = format 3)
        sbix: Glyphs for a single 64 ppem sbix strike
        svg: (document, first glyph id, last glyph id) entries for an 'SVG ' table
        family_name: Name table family

    Returns:
        Compiled font bytes
    """
    fb = FontBuilder(unitsPerEm=1000, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap(cmap)
    fb.setupGlyf(
        {name: _empty_glyph() if name == ".notdef" else _square_glyph() for name in glyph_order}
    )
    fb.setupHorizontalMetrics({name: (700, 100) for name in glyph_order})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": family_name, "styleName": "Regular"})
    fb.setupOS2(sTypoAscender=800, usWinAscent=800, usWinDescent=200)
    fb.setupPost(keepGlyphNames=keep_glyph_names)

    if sbix is not None:
        table = newTable("sbix")
        strike = Strike(ppem=64, resolution=72)
        strike.glyphs.update(sbix)
        table.strikes[64] = strike
        fb.font["sbix"] = table

    if svg is not None:
        table = newTable("SVG ")
        table.docList = [SVGDocument(doc, start, end, False) for doc, start, end in svg]
        fb.font["SVG "] = table

    buffer = BytesIO()
    fb.save(buffer)
    return buffer.getvalue()


def icon_glyph_order() -> list[str]:
    """Glyph order placing 'neurology' at glyph id 42."""
    fillers = [f"filler{i:02d}" for i in range(1, 42)]
    return [".notdef", *fillers, "neurology", "add", "smile", "smile_alt", "star", "unmapped"]


@pytest.fixture
def font_factory() -> FontFactory:
    """Return the font builder for tests that need a custom font."""
    return build_font


@pytest.fixture
def icon_font_bytes() -> bytes:
    """Icon font with sbix and SVG images for some glyphs.

    - U+E5CA -> neurology (id 42), outline only
    - U+E145 -> add (id 43), outline only
    - U+E7F2 -> smile (id 44), PNG in the sbix strike
    - U+E87D -> smile_alt (id 45), sbix 'dupe' of smile
    - U+E838 -> star (id 46), SVG document
    - unmapped (id 47) has no codepoint
    """
    glyph_order = icon_glyph_order()
    star_id = glyph_order.index("star")
    return build_font(
        glyph_order,
        {NEUROLOGY: "neurology", ADD: "add", SMILE: "smile", HEART: "smile_alt", STAR: "star"},
        sbix={
            "smile": SbixGlyph(glyphName="smile", graphicType="png ", imageData=PNG_BYTES),
            "smile_alt": SbixGlyph(
                glyphName="smile_alt", graphicType="dupe", referenceGlyphName="smile"
            ),
        },
        svg=[(SVG_DOC, star_id, star_id)],
    )


@pytest.fixture
def unnamed_font_bytes() -> bytes:
    """Font whose 'post' table (format 3) carries no glyph names."""
    return build_font(
        [".notdef", "a", "b"],
        {0xE000: "a", 0xE001: "b"},
        keep_glyph_names=False,
    )


@pytest.fixture
def collection_bytes() -> bytes:
    """TrueType Collection of two single-glyph fonts."""
    first = build_font([".notdef", "first"], {0xE000: "first"}, family_name="First")
    second = build_font([".notdef", "second"], {0xE001: "second"}, family_name="Second")

    collection = TTCollection()
    collection.fonts = [TTFont(BytesIO(first)), TTFont(BytesIO(second))]
    buffer = BytesIO()
    collection.save(buffer)
    return buffer.getvalue()
