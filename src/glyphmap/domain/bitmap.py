"""Bitmap payloads decoded from a font's strike tables.

A payload is either a complete image file stored inside the font
(EncapsulatedBitmap) or raw pixel rows (EmbeddedBitmap).
"""

from dataclasses import dataclass
from enum import Enum


class EncapsulatedFormat(str, Enum):
    """Image file formats a font may carry verbatim."""

    JPEG = "jpeg"
    PNG = "png"
    TIFF = "tiff"
    SVG = "svg"
    PDF = "pdf"
    MASK = "mask"
    OTHER = "other"

    @classmethod
    def from_graphic_type(cls, tag: str | None) -> "EncapsulatedFormat":
        """Map an sbix graphicType tag (e.g. "png ") to a format."""
        if tag is None:
            return cls.OTHER
        return _SBIX_GRAPHIC_TYPES.get(tag.strip().lower(), cls.OTHER)


_SBIX_GRAPHIC_TYPES = {
    "jpg": EncapsulatedFormat.JPEG,
    "jpeg": EncapsulatedFormat.JPEG,
    "png": EncapsulatedFormat.PNG,
    "tiff": EncapsulatedFormat.TIFF,
    "svg": EncapsulatedFormat.SVG,
    "pdf": EncapsulatedFormat.PDF,
    "mask": EncapsulatedFormat.MASK,
}


@dataclass(frozen=True)
class EncapsulatedBitmap:
    """A standalone image file embedded in the font.

    Attributes:
        format: Declared image format
        data: Image file bytes, exactly as stored
        ppem: Pixels per em of the strike (None for scalable documents)
        tag: Raw format tag from the source table
    """

    format: EncapsulatedFormat
    data: bytes
    ppem: int | None = None
    tag: str | None = None


@dataclass(frozen=True)
class EmbeddedBitmap:
    """Raw pixel data from an EBDT/CBDT style strike.

    Attributes:
        data: Pixel bytes without any image file header
        ppem: Pixels per em of the strike
        bit_depth: Bits per pixel declared by the strike
        width: Bitmap width in pixels, when the metrics are known
        height: Bitmap height in pixels, when the metrics are known
    """

    data: bytes
    ppem: int | None = None
    bit_depth: int | None = None
    width: int | None = None
    height: int | None = None


BitmapPayload = EncapsulatedBitmap | EmbeddedBitmap
