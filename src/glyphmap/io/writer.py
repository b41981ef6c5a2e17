"""Bitmap writer for saving exported glyph images.

This module provides the BitmapWriter class, which writes the classified
bitmap of a glyph to '<output_dir>/<glyph name>.<extension>'.
"""

import re
from pathlib import Path

import structlog

from glyphmap.core.exporter import export
from glyphmap.domain.bitmap import BitmapPayload
from glyphmap.domain.glyph import GlyphRecord

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]")


def safe_file_stem(name: str) -> str:
    """Make a glyph name usable as a file name.

    Converts: "arrow/left" -> "arrow_left"
              ".notdef" -> "_notdef"
    """
    stem = _UNSAFE_CHARS.sub("_", name)
    if stem.startswith("."):
        stem = "_" + stem[1:]
    return stem or "_"


class BitmapWriter:
    """Writes exported glyph bitmaps to a directory.

    Example:
        writer = BitmapWriter(Path("out"))
        for record in index.all_chars():
            payload = handle.bitmap_for(record.id)
            if payload is not None:
                writer.write(record, payload)
    """

    def __init__(
        self,
        output_dir: Path,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the bitmap writer.

        Args:
            output_dir: Directory the images are written to (created if missing)
            logger: Logger for per-file events (module logger if None)
        """
        self._output_dir = output_dir
        self._logger = logger or structlog.get_logger(__name__)
        self._written: list[Path] = []

    @property
    def written(self) -> list[Path]:
        """Paths written so far."""
        return list(self._written)

    def path_for(self, record: GlyphRecord, extension: str) -> Path:
        """Return the output path for a glyph image."""
        return self._output_dir / f"{safe_file_stem(record.name)}.{extension}"

    def write(self, record: GlyphRecord, payload: BitmapPayload) -> Path | None:
        """Write one glyph's bitmap.

        Args:
            record: Glyph the payload belongs to
            payload: Bitmap payload from FontHandle.bitmap_for()

        Returns:
            Path written, or None if the payload format is not exportable

        Raises:
            OSError: If the file cannot be written
        """
        exported = export(payload)
        if exported is None:
            self._logger.debug(
                "Bitmap skipped",
                glyph=record.name,
                reason="unsupported format",
            )
            return None

        extension, data = exported
        self._output_dir.mkdir(parents=True, exist_ok=True)
        path = self.path_for(record, extension)
        path.write_bytes(data)
        self._written.append(path)

        self._logger.debug(
            "Bitmap written",
            glyph=record.name,
            path=str(path),
            size=len(data),
        )
        return path
