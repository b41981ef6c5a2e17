"""Font handle for querying a loaded font.

This module provides the FontHandle class, which owns a font buffer and
the fontTools table set decoded from it, and answers the per-glyph
queries: codepoint to glyph id, glyph id to name, glyph id to bitmap.
"""

from io import BytesIO
from pathlib import Path

from fontTools.ttLib import TTFont, TTLibError

from glyphmap.config import GlyphmapSettings, get_default_settings
from glyphmap.domain.bitmap import BitmapPayload
from glyphmap.domain.glyph import is_scalar_value
from glyphmap.exceptions import FontIOError, FontParseError, translate_errors
from glyphmap.io.bitmaps import BITMAP_SOURCES

NOTDEF_GLYPH_ID = 0

REQUIRED_TABLES = ("maxp", "cmap")

# (platformID, platEncID) in order of preference; symbol cmap last for icon fonts
CMAP_PREFERENCES: tuple[tuple[int, int], ...] = (
    (3, 10),
    (0, 6),
    (0, 4),
    (3, 1),
    (0, 3),
    (0, 2),
    (0, 1),
    (0, 0),
    (3, 0),
)

# post table versions that carry glyph names
NAMED_POST_FORMATS = (1.0, 2.0)


def select_cmap_subtable(cmap_table):
    """Pick the Unicode (or symbol) subtable to resolve codepoints with.

    Args:
        cmap_table: fontTools 'cmap' table

    Returns:
        The preferred subtable, or None if the font has none usable
    """
    for platform_id, encoding_id in CMAP_PREFERENCES:
        subtable = cmap_table.getcmap(platform_id, encoding_id)
        if subtable is not None:
            return subtable
    return None


class FontHandle:
    """A loaded font and the queries it answers.

    The handle keeps the font buffer and decoded tables alive for as long
    as anything derived from it is in use. Lookups populate lazy caches,
    so one handle must not be queried from several threads at once.

    Example:
        handle = FontHandle.load(Path("icons.ttf").read_bytes())
        glyph_id = handle.index_of(0xE5CA)
        print(handle.glyph_name(glyph_id))
    """

    def __init__(
        self,
        font: TTFont,
        data: bytes,
        settings: GlyphmapSettings | None = None,
    ) -> None:
        """Wrap an already opened font.

        Use load() or from_path() instead of calling this directly.

        Args:
            font: fontTools font opened over data
            data: The font buffer
            settings: Application settings (defaults if None)
        """
        self._font = font
        self._data = data
        self._settings = settings or get_default_settings()
        self._subtable = None
        self._unicode_map: dict[int, str] | None = None
        self._has_names: bool | None = None

    @classmethod
    def load(cls, data: bytes, settings: GlyphmapSettings | None = None) -> "FontHandle":
        """Load a font from an in-memory buffer.

        The first font of a collection is used unless the settings select
        another one.

        Args:
            data: sfnt/OpenType/TrueType Collection bytes
            settings: Application settings (defaults if None)

        Returns:
            FontHandle over the buffer

        Raises:
            FontParseError: If the container or a required table is malformed
            FontReadWriteError: If table data is truncated
        """
        settings = settings or get_default_settings()
        data = bytes(data)

        with translate_errors("loading font"):
            font = TTFont(
                BytesIO(data),
                fontNumber=settings.loading.font_number,
                lazy=settings.loading.lazy,
            )
            handle = cls(font, data, settings)
            handle._validate()

        return handle

    @classmethod
    def from_path(
        cls, font_path: Path, settings: GlyphmapSettings | None = None
    ) -> "FontHandle":
        """Read a font file and load it.

        Raises:
            FontIOError: If the file cannot be read
            FontParseError: If the container or a required table is malformed
            FontReadWriteError: If table data is truncated
        """
        try:
            data = Path(font_path).read_bytes()
        except OSError as e:
            raise FontIOError(f"reading '{font_path}'", e) from e
        return cls.load(data, settings)

    def _validate(self) -> None:
        for tag in REQUIRED_TABLES:
            if tag not in self._font:
                raise FontParseError("loading font", TTLibError(f"missing required '{tag}' table"))

        if self.cmap_subtable() is None:
            raise FontParseError(
                "loading font", TTLibError("no Unicode or symbol character map subtable")
            )

        # Decode eagerly so broken name or cmap data fails here, not in a query
        self._font.getGlyphOrder()
        self._get_unicode_map()
        self._has_glyph_names()

    @property
    def data(self) -> bytes:
        """The font buffer this handle was loaded from."""
        return self._data

    @property
    def font(self) -> TTFont:
        """The underlying fontTools font."""
        return self._font

    @property
    def settings(self) -> GlyphmapSettings:
        return self._settings

    @property
    def format(self) -> str:
        """Return font format.

        Returns:
            'TrueType' for glyf fonts, 'OpenType' for CFF/CFF2 fonts
        """
        if "CFF " in self._font or "CFF2" in self._font:
            return "OpenType"
        return "TrueType"

    @property
    def glyph_count(self) -> int:
        """Return total number of glyphs in the font."""
        return self._font["maxp"].numGlyphs

    @property
    def units_per_em(self) -> int | None:
        """Return font's units per em, or None without a 'head' table."""
        if "head" not in self._font:
            return None
        return self._font["head"].unitsPerEm

    def cmap_subtable(self):
        """Return the character map subtable used for codepoint lookups."""
        if self._subtable is None:
            with translate_errors("reading cmap table"):
                self._subtable = select_cmap_subtable(self._font["cmap"])
        return self._subtable

    def _get_unicode_map(self) -> dict[int, str]:
        if self._unicode_map is None:
            with translate_errors("reading cmap subtable"):
                self._unicode_map = self.cmap_subtable().cmap
        return self._unicode_map

    def _has_glyph_names(self) -> bool:
        if self._has_names is None:
            with translate_errors("reading glyph names"):
                if "CFF " in self._font:
                    self._has_names = True
                elif "post" in self._font:
                    self._has_names = self._font["post"].formatType in NAMED_POST_FORMATS
                else:
                    self._has_names = False
        return self._has_names

    def index_of(self, codepoint: int) -> int | None:
        """Look up the glyph id for a codepoint.

        No text or emoji presentation is required of the mapping.

        Args:
            codepoint: Unicode codepoint

        Returns:
            Glyph id; 0 (.notdef) if the font does not map the codepoint;
            None if the codepoint is not a Unicode scalar value
        """
        if not is_scalar_value(codepoint):
            return None

        glyph_name = self._get_unicode_map().get(codepoint)
        if glyph_name is None:
            return NOTDEF_GLYPH_ID

        with translate_errors("looking up glyph index"):
            return self._font.getGlyphID(glyph_name)

    def glyph_name(self, glyph_id: int) -> str | None:
        """Look up the name the font gives a glyph.

        Args:
            glyph_id: Glyph id

        Returns:
            Glyph name, or None if the font carries no glyph names or the
            id is out of range
        """
        if not self._has_glyph_names():
            return None

        glyph_order = self._font.getGlyphOrder()
        if not 0 <= glyph_id < len(glyph_order):
            return None
        return glyph_order[glyph_id] or None

    def bitmap_for(self, glyph_id: int) -> BitmapPayload | None:
        """Look up an embedded image for a glyph.

        Searches sbix, CBLC/CBDT, EBLC/EBDT and SVG tables in that order and
        returns the first strike image found.

        Args:
            glyph_id: Glyph id

        Returns:
            Bitmap payload, or None for a glyph with no embedded image

        Raises:
            FontParseError: If a bitmap table is malformed
            FontReadWriteError: If bitmap table data is truncated
        """
        glyph_order = self._font.getGlyphOrder()
        if not 0 <= glyph_id < len(glyph_order):
            return None
        glyph_name = glyph_order[glyph_id]

        for tag, lookup in BITMAP_SOURCES:
            if tag not in self._font:
                continue
            with translate_errors(f"reading '{tag.strip()}' table"):
                payload = lookup(self._font, glyph_name, glyph_id, self._settings.bitmap)
            if payload is not None:
                return payload
        return None

    def close(self) -> None:
        """Close the underlying font and free resources."""
        self._font.close()

    def __enter__(self) -> "FontHandle":
        """Context manager entry."""
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
