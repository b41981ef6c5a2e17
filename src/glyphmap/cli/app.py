"""CLI application entry point for glyphmap.

This module provides the main CLI interface using Typer.
"""

import json
import string
from pathlib import Path
from typing import Annotated

import structlog
import typer

from glyphmap import __version__
from glyphmap.cli.output import (
    console,
    create_progress,
    print_cmap_info,
    print_error,
    print_export_summary,
    print_font_info,
    print_glyph_table,
    print_header,
    print_lookup_result,
    print_step,
)
from glyphmap.config import GlyphmapSettings, LoadingConfig, LoggingConfig
from glyphmap.core import CmapIndex, export
from glyphmap.domain.bitmap import EmbeddedBitmap
from glyphmap.exceptions import GlyphmapError, InvalidCodepointError
from glyphmap.io import BitmapWriter, FontHandle
from glyphmap.io.bitmaps import BITMAP_SOURCES
from glyphmap.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="glyphmap",
    help="Resolve, list and export the named glyphs of icon fonts.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Glyphmap[/bold blue] v{__version__}")
        raise typer.Exit()


def parse_codepoint(text: str) -> int:
    """Parse a codepoint given on the command line.

    Accepts "U+E5CA", "0xE5CA", bare hex with letters ("e5ca"), decimal
    ("58826") or a single non-digit character.

    Raises:
        InvalidCodepointError: If the text matches none of these forms
    """
    value = text.strip()
    if not value:
        raise InvalidCodepointError(text)

    if len(value) == 1 and not value.isdigit():
        return ord(value)

    lowered = value.lower()
    try:
        if lowered.startswith(("u+", "0x")):
            return int(value[2:], 16)
        if value.isdigit():
            return int(value)
        if all(c in string.hexdigits for c in value):
            return int(value, 16)
    except ValueError:
        raise InvalidCodepointError(text) from None

    raise InvalidCodepointError(text)


def _describe_bitmap(handle: FontHandle, glyph_id: int) -> str | None:
    payload = handle.bitmap_for(glyph_id)
    if payload is None:
        return None

    exported = export(payload)
    if exported is None:
        return f"{payload.format.value} (not exportable)"

    extension, data = exported
    details = [extension, f"{len(data):,} bytes"]
    if payload.ppem is not None:
        details.append(f"{payload.ppem} ppem")
    return ", ".join(details)


def _open_font(font_path: Path, settings: GlyphmapSettings) -> FontHandle:
    """Validate the path and load the font, exiting on failure."""
    if not font_path.exists():
        print_error(
            f"Input file not found: {font_path}",
            details=f"The file '{font_path}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not font_path.is_file():
        print_error(
            f"Input path is not a file: {font_path}",
            details="Please provide a path to a TTF, OTF or TTC font file.",
        )
        raise typer.Exit(code=1)

    try:
        handle = FontHandle.from_path(font_path, settings)
    except GlyphmapError as e:
        print_error(f"Could not load font: {e}")
        raise typer.Exit(code=1)

    structlog.get_logger("glyphmap").debug(
        "Font loaded",
        path=str(font_path),
        glyphs=handle.glyph_count,
        format=handle.format,
    )
    return handle


@app.callback()
def main_options(
    ctx: typer.Context,
    font_number: Annotated[
        int,
        typer.Option(
            "--font-number",
            help="Font to use from a collection (TTC/OTC)",
            min=0,
        ),
    ] = 0,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Resolve, list and export the named glyphs of icon fonts."""
    settings = GlyphmapSettings(
        loading=LoadingConfig(font_number=font_number),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
    )
    ctx.obj = settings


@app.command("list")
def list_glyphs(
    ctx: typer.Context,
    font_path: Annotated[
        Path,
        typer.Argument(
            help="Path to input TTF/OTF/TTC font file",
            show_default=False,
        ),
    ],
    as_json: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Print records as a JSON array",
        ),
    ] = False,
) -> None:
    """List every named glyph in the character map.

    Glyphs the font does not name are left out.
    """
    logger = structlog.get_logger("glyphmap")

    with _open_font(font_path, ctx.obj) as handle:
        try:
            index = CmapIndex.build(handle)
            records = index.all_chars()
        except GlyphmapError as e:
            print_error(f"Could not read character map: {e}")
            raise typer.Exit(code=1)

        logger.info(
            "Character map enumerated",
            mapped=len(index),
            named=len(records),
            skipped=len(index) - len(records),
        )

        if as_json:
            typer.echo(json.dumps([record.to_dict() for record in records], indent=2))
        else:
            print_glyph_table(records)


@app.command()
def lookup(
    ctx: typer.Context,
    font_path: Annotated[
        Path,
        typer.Argument(
            help="Path to input TTF/OTF/TTC font file",
            show_default=False,
        ),
    ],
    codepoint: Annotated[
        str,
        typer.Argument(
            help="Codepoint as U+E5CA, 0xE5CA, e5ca, decimal, or the character itself",
            show_default=False,
        ),
    ],
) -> None:
    """Resolve one codepoint to its glyph id, name and bitmap.

    Exits with code 1 if the font does not map the codepoint.
    """
    try:
        value = parse_codepoint(codepoint)
    except InvalidCodepointError as e:
        print_error(str(e), details="Use U+XXXX, 0xXXXX, hex digits or a decimal number.")
        raise typer.Exit(code=1)

    with _open_font(font_path, ctx.obj) as handle:
        glyph_id = handle.index_of(value)
        if glyph_id is None:
            print_error(f"U+{value:04X} is not a Unicode scalar value")
            raise typer.Exit(code=1)
        if glyph_id == 0:
            print_error(f"U+{value:04X} is not mapped by this font")
            raise typer.Exit(code=1)

        try:
            bitmap = _describe_bitmap(handle, glyph_id)
        except GlyphmapError as e:
            print_error(f"Could not read bitmap tables: {e}")
            raise typer.Exit(code=1)

        print_lookup_result(value, glyph_id, handle.glyph_name(glyph_id), bitmap)


@app.command("export")
def export_bitmaps(
    ctx: typer.Context,
    font_path: Annotated[
        Path,
        typer.Argument(
            help="Path to input TTF/OTF/TTC font file",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output directory (default: {name}-glyphs next to the font)",
        ),
    ] = None,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Export the embedded bitmap of every named glyph.

    Images stored as JPEG, PNG, TIFF or SVG are written unchanged. Raw strike
    pixels are written as headerless .bmp data.
    """
    output_dir = output or font_path.parent / f"{font_path.stem}-glyphs"
    logger = structlog.get_logger("glyphmap")

    if not quiet:
        print_header(__version__)
        print_step("Loading font")

    with _open_font(font_path, ctx.obj) as handle:
        if not quiet:
            print_font_info(
                font_path=str(font_path),
                font_type=handle.format,
                glyph_count=handle.glyph_count,
                upm=handle.units_per_em,
            )
            print_step("Exporting bitmaps")

        writer = BitmapWriter(output_dir, logger=logger)
        without_bitmap = 0
        unsupported = 0
        raw = 0
        exported_ids: set[int] = set()

        try:
            records = CmapIndex.build(handle).all_chars()
            with create_progress() as progress:
                task_id = progress.add_task("Exporting", total=len(records), visible=not quiet)
                for record in records:
                    progress.advance(task_id)
                    if record.id in exported_ids:
                        continue
                    exported_ids.add(record.id)

                    payload = handle.bitmap_for(record.id)
                    if payload is None:
                        without_bitmap += 1
                        continue
                    if writer.write(record, payload) is None:
                        unsupported += 1
                    elif isinstance(payload, EmbeddedBitmap):
                        raw += 1
        except GlyphmapError as e:
            print_error(f"Could not export bitmaps: {e}")
            raise typer.Exit(code=1)
        except OSError as e:
            print_error(f"Could not write bitmaps: {e}")
            raise typer.Exit(code=1)

        logger.info(
            "Bitmaps exported",
            output_dir=str(output_dir),
            written=len(writer.written),
            without_bitmap=without_bitmap,
            unsupported=unsupported,
        )

        if not quiet:
            print_export_summary(
                output_dir=output_dir,
                written=len(writer.written),
                without_bitmap=without_bitmap,
                unsupported=unsupported,
                raw=raw,
            )


@app.command()
def info(
    ctx: typer.Context,
    font_path: Annotated[
        Path,
        typer.Argument(
            help="Path to input TTF/OTF/TTC font file",
            show_default=False,
        ),
    ],
) -> None:
    """Show font format, glyph count and character map summary."""
    print_header(__version__)

    with _open_font(font_path, ctx.obj) as handle:
        try:
            index = CmapIndex.build(handle)
            named = len(index.all_chars())
        except GlyphmapError as e:
            print_error(f"Could not read character map: {e}")
            raise typer.Exit(code=1)

        print_font_info(
            font_path=str(font_path),
            font_type=handle.format,
            glyph_count=handle.glyph_count,
            upm=handle.units_per_em,
        )
        bitmap_tables = [tag.strip() for tag, _ in BITMAP_SOURCES if tag in handle.font]
        print_cmap_info(mapped=len(index), named=named, bitmap_tables=bitmap_tables)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
