"""Exception hierarchy for glyphmap."""

import struct
from collections.abc import Iterator
from contextlib import contextmanager

from fontTools.ttLib import TTLibError


class GlyphmapError(Exception):
    """Base exception for all glyphmap errors."""

    pass


class FontError(GlyphmapError):
    """A font table could not be obtained or decoded.

    Wraps the underlying cause; the three subclasses are mutually exclusive.
    """

    kind = "Font error"

    def __init__(self, operation: str, cause: BaseException) -> None:
        self.operation = operation
        self.cause = cause
        super().__init__(f"{self.kind} while {operation}: {cause}")


class FontParseError(FontError):
    """Malformed binary table structure (bad offsets, bad magic, bad format)."""

    kind = "Parse error"


class FontReadWriteError(FontError):
    """Bounds or arithmetic failure while decoding table data."""

    kind = "Read/write error"


class FontIOError(FontError):
    """The source byte stream could not be read."""

    kind = "I/O error"


class InvalidCodepointError(GlyphmapError):
    """A codepoint string given by the user could not be parsed."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Invalid codepoint '{text}'")


# fontTools reports truncated data through struct/indexing failures
READ_WRITE_ERRORS: tuple[type[BaseException], ...] = (
    struct.error,
    IndexError,
    OverflowError,
    EOFError,
)

PARSE_ERRORS: tuple[type[BaseException], ...] = (
    TTLibError,
    ValueError,
    AssertionError,
    KeyError,
    TypeError,
)


@contextmanager
def translate_errors(operation: str) -> Iterator[None]:
    """Re-raise decoder failures inside the block as a FontError kind.

    Args:
        operation: Short description used in the error message
            (e.g. "loading font", "reading sbix table")

    Raises:
        FontReadWriteError: For truncation and bounds failures
        FontIOError: For OSError while reading the source
        FontParseError: For any other structural failure
    """
    try:
        yield
    except GlyphmapError:
        raise
    except READ_WRITE_ERRORS as e:
        raise FontReadWriteError(operation, e) from e
    except OSError as e:
        raise FontIOError(operation, e) from e
    except PARSE_ERRORS as e:
        raise FontParseError(operation, e) from e
