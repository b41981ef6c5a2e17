"""Icon constants bound to an icon font style.

Generated icon tables bind a name to a fixed private-use codepoint; this
module turns such a pair into the character and display text a UI layer
needs.
"""

from dataclasses import dataclass
from enum import Enum

from glyphmap.domain.glyph import is_scalar_value

REPLACEMENT_CHARACTER = "\ufffd"


class IconStyle(str, Enum):
    """Material Symbols font styles."""

    OUTLINED = "outlined"
    ROUNDED = "rounded"
    SHARP = "sharp"

    @property
    def family(self) -> str:
        """Font family name used to select the style in a UI toolkit."""
        return f"Material Symbols {self.value.capitalize()}"


def icon_char(codepoint: int) -> str:
    """Convert an icon codepoint to its character.

    Returns U+FFFD when the codepoint is not a Unicode scalar value.
    """
    if not is_scalar_value(codepoint):
        return REPLACEMENT_CHARACTER
    return chr(codepoint)


@dataclass(frozen=True)
class Icon:
    """A named icon in a given style.

    Attributes:
        name: Icon name (e.g. "neurology")
        codepoint: Private-use codepoint of the icon
        style: Font style the codepoint belongs to
    """

    name: str
    codepoint: int
    style: IconStyle = IconStyle.OUTLINED

    @property
    def char(self) -> str:
        return icon_char(self.codepoint)

    @property
    def family(self) -> str:
        return self.style.family

    def __str__(self) -> str:
        return self.char
