"""Glyph record value type.

A GlyphRecord ties together the three views of one named, mapped glyph:
its font-internal id, the codepoint that maps to it and its name.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from glyphmap.domain.icon import Icon, IconStyle

MAX_GLYPH_ID = 0xFFFF
MAX_CODEPOINT = 0x10FFFF
SURROGATE_RANGE = range(0xD800, 0xE000)


def is_scalar_value(codepoint: int) -> bool:
    """Check whether an integer is a Unicode scalar value.

    Scalar values are all code points except the surrogate range.
    """
    return 0 <= codepoint <= MAX_CODEPOINT and codepoint not in SURROGATE_RANGE


@dataclass(frozen=True)
class GlyphRecord:
    """A named glyph reachable from a codepoint.

    Glyph ids are only meaningful relative to the font that produced them.

    Attributes:
        id: Glyph index in the font (16-bit unsigned)
        codepoint: Unicode scalar value mapped to the glyph
        name: Glyph name from the font's name data (never empty)
    """

    id: int
    codepoint: int
    name: str

    def __post_init__(self) -> None:
        if not 0 <= self.id <= MAX_GLYPH_ID:
            raise ValueError(f"Glyph id out of range: {self.id}")
        if not is_scalar_value(self.codepoint):
            raise ValueError(f"Not a Unicode scalar value: U+{self.codepoint:04X}")
        if not self.name:
            raise ValueError("Glyph name must not be empty")

    def character(self) -> str | None:
        """Return the character for the stored codepoint, if representable."""
        if not is_scalar_value(self.codepoint):
            return None
        return chr(self.codepoint)

    def to_icon(self, style: "IconStyle") -> "Icon":
        """Bind this glyph to an icon font style."""
        from glyphmap.domain.icon import Icon

        return Icon(name=self.name, codepoint=self.codepoint, style=style)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for JSON output.

        Returns:
            Dictionary representation of the record
        """
        return {
            "id": self.id,
            "codepoint": self.codepoint,
            "name": self.name,
        }
