"""Bitmap payload classification.

Turns a decoded bitmap payload into a (file extension, bytes) pair that
can be written out as-is. Nothing is transcoded.
"""

from glyphmap.domain.bitmap import (
    BitmapPayload,
    EmbeddedBitmap,
    EncapsulatedBitmap,
    EncapsulatedFormat,
)

EXTENSIONS: dict[EncapsulatedFormat, str] = {
    EncapsulatedFormat.JPEG: "jpg",
    EncapsulatedFormat.PNG: "png",
    EncapsulatedFormat.TIFF: "tiff",
    EncapsulatedFormat.SVG: "svg",
}

# Raw strike pixels are returned without a synthesized BMP header
RAW_EXTENSION = "bmp"


def export(payload: BitmapPayload) -> tuple[str, bytes] | None:
    """Classify a bitmap payload for export.

    Args:
        payload: Payload returned by FontHandle.bitmap_for()

    Returns:
        (extension, data) for JPEG, PNG, TIFF and SVG images with the bytes
        unchanged; ("bmp", raw pixel bytes) for embedded strike data, which
        is headerless and not a directly openable .bmp file; None for any
        other encapsulated format
    """
    if isinstance(payload, EmbeddedBitmap):
        return RAW_EXTENSION, payload.data

    if isinstance(payload, EncapsulatedBitmap):
        extension = EXTENSIONS.get(payload.format)
        if extension is None:
            return None
        return extension, payload.data

    raise TypeError(f"Not a bitmap payload: {type(payload).__name__}")
