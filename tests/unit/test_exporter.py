"""Unit tests for bitmap payload classification."""

import pytest

from glyphmap.core.exporter import export
from glyphmap.domain.bitmap import EmbeddedBitmap, EncapsulatedBitmap, EncapsulatedFormat

DATA = b"\x89PNG\r\n\x1a\n\x00\x01\x02"


class TestExport:
    """Tests for the export classification table."""

    @pytest.mark.parametrize(
        ("image_format", "extension"),
        [
            (EncapsulatedFormat.JPEG, "jpg"),
            (EncapsulatedFormat.PNG, "png"),
            (EncapsulatedFormat.TIFF, "tiff"),
            (EncapsulatedFormat.SVG, "svg"),
        ],
    )
    def test_supported_formats(self, image_format: EncapsulatedFormat, extension: str) -> None:
        """Test supported encapsulated formats keep their bytes."""
        payload = EncapsulatedBitmap(format=image_format, data=DATA)

        result = export(payload)

        assert result == (extension, DATA)
        assert result[1] is payload.data

    @pytest.mark.parametrize(
        "image_format",
        [EncapsulatedFormat.PDF, EncapsulatedFormat.MASK, EncapsulatedFormat.OTHER],
    )
    def test_unsupported_formats(self, image_format: EncapsulatedFormat) -> None:
        """Test other encapsulated formats are skipped."""
        assert export(EncapsulatedBitmap(format=image_format, data=DATA)) is None

    def test_embedded_bitmap_is_raw_bmp(self) -> None:
        """Test raw strike pixels are labelled bmp with no header added."""
        pixels = b"\xff\x00" * 8
        payload = EmbeddedBitmap(data=pixels, ppem=12, bit_depth=1, width=16, height=8)

        extension, data = export(payload)

        assert extension == "bmp"
        assert data == pixels
        assert not data.startswith(b"BM")

    def test_not_a_payload(self) -> None:
        """Test that other objects are rejected."""
        with pytest.raises(TypeError, match="Not a bitmap payload"):
            export(DATA)  # type: ignore[arg-type]
