"""Field, byte and character extraction.

Contains pure functions that select parts of a single line according to a
position list.  No I/O and no parsing of selection strings happen here; see
:mod:`cutr.positions` for the latter.

Positions beyond the end of a line are clipped: they select nothing instead of
raising.
"""

from dataclasses import dataclass
from typing import Union

from cutr.positions import PositionList

DEFAULT_DELIMITER = "\t"

Line = Union[str, bytes]


@dataclass(frozen=True)
class Fields:
    """Select delimiter-separated fields; *delimiter* is a single-byte string."""

    delimiter: str = DEFAULT_DELIMITER


@dataclass(frozen=True)
class Bytes:
    """Select raw bytes of the UTF-8 encoded line."""


@dataclass(frozen=True)
class Chars:
    """Select Unicode characters."""


ExtractionMode = Union[Fields, Bytes, Chars]


def _as_text(line: Line) -> str:
    if isinstance(line, bytes):
        return line.decode("utf-8", errors="replace")
    return line


def _as_bytes(line: Line) -> bytes:
    if isinstance(line, str):
        return line.encode("utf-8")
    return line


def extract_fields(line: Line, delimiter: str, positions: PositionList) -> str:
    """Extract delimiter-separated fields from a line.

    The line is split on every occurrence of *delimiter*; there is no quoting,
    so a delimiter inside quotes still separates fields.  Selected fields are
    joined with the same delimiter, in the order of *positions*.

    Args:
        line: Line content without its trailing newline
        delimiter: Single-character field separator
        positions: Ranges of 0-indexed field numbers

    Returns:
        The selected fields joined by *delimiter*, or an empty string if no
        field falls inside the ranges

    Examples:
        >>> extract_fields("a,b,c,d", ",", parse_selection("1,3"))  # "a,c"
        >>> extract_fields("a,b,c", ",", parse_selection("5-10"))  # ""
    """
    fields = _as_text(line).split(delimiter)
    selected = []
    for position in positions:
        selected.extend(fields[position.as_slice()])
    return delimiter.join(selected)


def extract_bytes(line: Line, positions: PositionList) -> str:
    """Extract byte ranges from a line.

    Str lines are UTF-8 encoded first.  A range may cut a multi-byte character
    in half; such partial sequences come out as U+FFFD replacement characters.

    Examples:
        >>> extract_bytes("abcdef", parse_selection("1-3"))  # "abc"
        >>> extract_bytes("Ébc", parse_selection("1"))  # "\\ufffd"
    """
    data = _as_bytes(line)
    selected = b"".join(data[position.as_slice()] for position in positions)
    return selected.decode("utf-8", errors="replace")


def extract_chars(line: Line, positions: PositionList) -> str:
    """Extract character ranges from a line.

    Examples:
        >>> extract_chars("Ébc", parse_selection("1"))  # "É"
    """
    text = _as_text(line)
    return "".join(text[position.as_slice()] for position in positions)


def extract(line: Line, mode: ExtractionMode, positions: PositionList) -> str:
    """Extract the parts of *line* selected by *positions* under *mode*."""
    if isinstance(mode, Fields):
        return extract_fields(line, mode.delimiter, positions)
    if isinstance(mode, Bytes):
        return extract_bytes(line, positions)
    if isinstance(mode, Chars):
        return extract_chars(line, positions)
    raise TypeError(f"Unknown extraction mode: {mode!r}")


class Extractor:
    """Applies one position list under one mode to any number of lines.

    Holds no per-line state, so calling it twice on the same line gives the
    same result.
    """

    def __init__(self, mode: ExtractionMode, positions: PositionList):
        self.mode = mode
        self.positions = positions

    def __call__(self, line: Line) -> str:
        return extract(line, self.mode, self.positions)

    def __repr__(self) -> str:
        return f"Extractor(mode={self.mode!r}, positions={self.positions!r})"
