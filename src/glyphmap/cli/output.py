"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars, tables, and formatted messages.
"""

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.text import Text

from glyphmap.domain.glyph import GlyphRecord

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def format_codepoint(codepoint: int) -> str:
    """Format a codepoint in U+XXXX notation."""
    return f"U+{codepoint:04X}"


def create_progress() -> Progress:
    """Create a rich progress bar for bitmap export.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Glyphmap[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_font_info(
    font_path: str,
    font_type: str,
    glyph_count: int,
    upm: int | None,
) -> None:
    """Print font information.

    Args:
        font_path: Path to the font file
        font_type: Font format type (e.g., "TrueType", "OpenType")
        glyph_count: Total number of glyphs in font
        upm: Units per em value (None if unknown)
    """
    # Use Text to safely handle paths with special characters
    line1 = Text("  ")
    line1.append(font_path)
    line1.append(f" ({font_type})")
    console.print(line1)
    upm_str = f"{upm:,} UPM" if upm is not None else "unknown UPM"
    console.print(f"  {glyph_count:,} glyphs {SYM_DOT} {upm_str}")


def print_cmap_info(mapped: int, named: int, bitmap_tables: list[str]) -> None:
    """Print character map and bitmap table summary.

    Args:
        mapped: Number of mappings in the character map
        named: Number of mappings whose glyph has a name
        bitmap_tables: Tags of the bitmap tables present
    """
    console.print(f"  {mapped:,} mapped codepoints {SYM_DOT} {named:,} named glyphs")
    tables = ", ".join(bitmap_tables) if bitmap_tables else "none"
    console.print(f"  Bitmap tables: {tables}")


def print_glyph_table(records: list[GlyphRecord]) -> None:
    """Print named glyphs as a table.

    Args:
        records: Glyph records in character map order
    """
    table = Table(show_edge=False, header_style="bold")
    table.add_column("Codepoint", no_wrap=True)
    table.add_column("Id", justify="right", no_wrap=True)
    table.add_column("Name", no_wrap=True)

    for record in records:
        table.add_row(format_codepoint(record.codepoint), str(record.id), Text(record.name))

    console.print(table)
    console.print(f"\n[bold]{len(records)} named glyphs[/bold]")


def print_lookup_result(
    codepoint: int,
    glyph_id: int,
    name: str | None,
    bitmap: str | None,
) -> None:
    """Print the result of a single codepoint lookup.

    Args:
        codepoint: Codepoint looked up
        glyph_id: Resolved glyph id
        name: Glyph name (None if unnamed)
        bitmap: Bitmap description (None if the glyph has none)
    """
    console.print(f"  Codepoint   {format_codepoint(codepoint)}")
    console.print(f"  Glyph id    {glyph_id}")
    console.print(f"  Name        {name if name is not None else '(unnamed)'}", markup=False)
    console.print(f"  Bitmap      {bitmap if bitmap is not None else 'none'}")


def print_export_summary(
    output_dir: Path,
    written: int,
    without_bitmap: int,
    unsupported: int,
    raw: int = 0,
) -> None:
    """Print bitmap export summary.

    Args:
        output_dir: Directory images were written to
        written: Number of files written
        without_bitmap: Number of glyphs with no embedded image
        unsupported: Number of images in formats that cannot be exported
        raw: Number of files holding raw strike pixels
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green]")

    line = Text("  ")
    line.append(str(output_dir), style="bold")
    console.print(line)

    console.print(
        f"  {written} files {SYM_DOT} {without_bitmap} without bitmap {SYM_DOT} "
        f"{unsupported} unsupported"
    )
    if raw:
        console.print(f"  {raw} .bmp files hold raw strike pixels without a BMP header")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}")
    if details:
        console.print(f"  {escape(details)}")
