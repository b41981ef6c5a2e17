"""Tests for domain models to verify they work correctly."""

import dataclasses

import pytest

from glyphmap.domain import (
    EmbeddedBitmap,
    EncapsulatedBitmap,
    EncapsulatedFormat,
    GlyphRecord,
    Icon,
    IconStyle,
    icon_char,
    is_scalar_value,
)


class TestIsScalarValue:
    """Tests for the Unicode scalar value check."""

    @pytest.mark.parametrize("codepoint", [0, 0x41, 0xD7FF, 0xE000, 0xE5CA, 0x10FFFF])
    def test_scalars(self, codepoint: int) -> None:
        """Test valid scalar values."""
        assert is_scalar_value(codepoint)

    @pytest.mark.parametrize("codepoint", [-1, 0xD800, 0xDBFF, 0xDFFF, 0x110000])
    def test_non_scalars(self, codepoint: int) -> None:
        """Test surrogates and out-of-range values."""
        assert not is_scalar_value(codepoint)


class TestGlyphRecord:
    """Tests for GlyphRecord class."""

    def test_creation(self) -> None:
        """Test basic record creation."""
        record = GlyphRecord(id=42, codepoint=0xE5CA, name="neurology")
        assert record.id == 42
        assert record.codepoint == 0xE5CA
        assert record.name == "neurology"

    def test_character(self) -> None:
        """Test the displayable character is rebuilt from the codepoint."""
        record = GlyphRecord(id=42, codepoint=0xE5CA, name="neurology")
        assert record.character() == "\ue5ca"

    def test_character_defensive(self) -> None:
        """Test character() yields None if the invariant were bypassed."""
        record = GlyphRecord(id=42, codepoint=0xE5CA, name="neurology")
        object.__setattr__(record, "codepoint", 0xD800)
        assert record.character() is None

    def test_equality(self) -> None:
        """Test records compare by value."""
        assert GlyphRecord(1, 0xE000, "a") == GlyphRecord(1, 0xE000, "a")
        assert GlyphRecord(1, 0xE000, "a") != GlyphRecord(2, 0xE000, "a")

    def test_immutable(self) -> None:
        """Test that records are immutable."""
        record = GlyphRecord(id=1, codepoint=0xE000, name="a")
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.name = "b"  # type: ignore

    @pytest.mark.parametrize(
        ("glyph_id", "codepoint", "name"),
        [
            (1, 0xD800, "surrogate"),
            (1, 0x110000, "too_big"),
            (-1, 0xE000, "negative_id"),
            (0x10000, 0xE000, "wide_id"),
            (1, 0xE000, ""),
        ],
    )
    def test_invalid(self, glyph_id: int, codepoint: int, name: str) -> None:
        """Test construction rejects values breaking the invariants."""
        with pytest.raises(ValueError):
            GlyphRecord(id=glyph_id, codepoint=codepoint, name=name)

    def test_to_dict(self) -> None:
        """Test serialization."""
        record = GlyphRecord(id=42, codepoint=0xE5CA, name="neurology")
        assert record.to_dict() == {"id": 42, "codepoint": 0xE5CA, "name": "neurology"}

    def test_to_icon(self) -> None:
        """Test binding a record to an icon style."""
        icon = GlyphRecord(id=43, codepoint=0xE145, name="add").to_icon(IconStyle.SHARP)
        assert icon == Icon(name="add", codepoint=0xE145, style=IconStyle.SHARP)


class TestBitmapModels:
    """Tests for bitmap payload types."""

    @pytest.mark.parametrize(
        ("tag", "expected"),
        [
            ("png ", EncapsulatedFormat.PNG),
            ("jpg ", EncapsulatedFormat.JPEG),
            ("tiff", EncapsulatedFormat.TIFF),
            ("pdf ", EncapsulatedFormat.PDF),
            ("mask", EncapsulatedFormat.MASK),
            ("emjc", EncapsulatedFormat.OTHER),
            (None, EncapsulatedFormat.OTHER),
        ],
    )
    def test_from_graphic_type(self, tag: str | None, expected: EncapsulatedFormat) -> None:
        """Test sbix graphic type tags map to formats."""
        assert EncapsulatedFormat.from_graphic_type(tag) == expected

    def test_payloads_immutable(self) -> None:
        """Test that payloads are immutable."""
        encapsulated = EncapsulatedBitmap(EncapsulatedFormat.PNG, b"x")
        embedded = EmbeddedBitmap(b"x")
        with pytest.raises(AttributeError):
            encapsulated.data = b"y"  # type: ignore
        with pytest.raises(AttributeError):
            embedded.data = b"y"  # type: ignore


class TestIcon:
    """Tests for icon conversions."""

    def test_char_and_display(self) -> None:
        """Test character and display text conversions."""
        icon = Icon(name="neurology", codepoint=0xE5CA)
        assert icon.char == "\ue5ca"
        assert str(icon) == "\ue5ca"
        assert f"{icon}" == "\ue5ca"

    def test_replacement_character(self) -> None:
        """Test invalid codepoints convert to U+FFFD."""
        assert icon_char(0xD800) == "\ufffd"
        assert Icon(name="broken", codepoint=0x110000).char == "\ufffd"

    @pytest.mark.parametrize(
        ("style", "family"),
        [
            (IconStyle.OUTLINED, "Material Symbols Outlined"),
            (IconStyle.ROUNDED, "Material Symbols Rounded"),
            (IconStyle.SHARP, "Material Symbols Sharp"),
        ],
    )
    def test_family(self, style: IconStyle, family: str) -> None:
        """Test style font family names."""
        assert Icon(name="add", codepoint=0xE145, style=style).family == family
