"""Character map index for enumerating named glyphs.

CmapIndex decodes a font's selected character map subtable once and
answers codepoint queries against it, pairing every mapping with the
glyph name the font declares.
"""

from collections.abc import Iterator
from typing import TYPE_CHECKING

from glyphmap.domain.glyph import GlyphRecord, is_scalar_value
from glyphmap.exceptions import translate_errors

if TYPE_CHECKING:
    from glyphmap.io.reader import FontHandle

NOTDEF_GLYPH_ID = 0


class CmapIndex:
    """Decoded character map of one font.

    The index is read-only once built and may be shared between threads.
    Glyphs the font does not name are left out of every result: an
    unnamed glyph cannot be exposed as a named resource. The raw
    (codepoint, glyph id) pairs stay reachable through mappings().

    Example:
        index = CmapIndex.build(handle)
        for record in index.all_chars():
            print(f"U+{record.codepoint:04X} {record.name}")
    """

    def __init__(self, handle: "FontHandle", mapping: dict[int, int]) -> None:
        """Initialize from an already decoded mapping.

        Args:
            handle: Font the mapping was read from
            mapping: Codepoint to glyph id, in subtable order
        """
        self._handle = handle
        self._mapping = mapping

    @classmethod
    def build(cls, handle: "FontHandle") -> "CmapIndex":
        """Decode the handle's character map subtable.

        Args:
            handle: Loaded font

        Returns:
            CmapIndex over the font's preferred Unicode subtable

        Raises:
            FontParseError: If the subtable is malformed
            FontReadWriteError: If the subtable data is truncated
        """
        subtable = handle.cmap_subtable()
        font = handle.font

        with translate_errors("decoding cmap subtable"):
            mapping: dict[int, int] = {}
            for codepoint, glyph_name in subtable.cmap.items():
                glyph_id = font.getGlyphID(glyph_name)
                if glyph_id != NOTDEF_GLYPH_ID:
                    mapping[codepoint] = glyph_id

        return cls(handle, mapping)

    @property
    def handle(self) -> "FontHandle":
        return self._handle

    def __len__(self) -> int:
        """Number of mappings the subtable declares."""
        return len(self._mapping)

    def __contains__(self, codepoint: object) -> bool:
        return codepoint in self._mapping

    def mappings(self) -> list[tuple[int, int]]:
        """Return every (codepoint, glyph id) pair, named or not."""
        return list(self._mapping.items())

    def _records(self) -> Iterator[GlyphRecord]:
        for codepoint, glyph_id in self._mapping.items():
            record = self._resolve(codepoint, glyph_id)
            if record is not None:
                yield record

    def _resolve(self, codepoint: int, glyph_id: int) -> GlyphRecord | None:
        if not is_scalar_value(codepoint):
            return None
        name = self._handle.glyph_name(glyph_id)
        if name is None:
            return None
        return GlyphRecord(id=glyph_id, codepoint=codepoint, name=name)

    def all_chars(self) -> list[GlyphRecord]:
        """Return every named glyph reachable from the character map.

        Records come in the subtable's own order. The list is rebuilt on
        every call.
        """
        return list(self._records())

    def find_glyph(self, codepoint: int) -> GlyphRecord | None:
        """Return the named glyph a codepoint maps to.

        Args:
            codepoint: Unicode codepoint

        Returns:
            GlyphRecord, or None if the codepoint is unmapped or its
            glyph has no name
        """
        glyph_id = self._mapping.get(codepoint)
        if glyph_id is None:
            return None
        return self._resolve(codepoint, glyph_id)
