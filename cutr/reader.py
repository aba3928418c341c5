"""Input handling: opening files or stdin and splitting them into lines."""

import sys
from typing import BinaryIO, Iterator

STDIN_NAME = "-"


def open_input(name: str) -> BinaryIO:
    """Open *name* for binary reading, or return stdin's buffer for ``-``.

    Raises:
        OSError: if the file cannot be opened
    """
    if name == STDIN_NAME:
        return sys.stdin.buffer
    return open(name, "rb")


def read_lines(stream: BinaryIO) -> Iterator[bytes]:
    """Lazily yield the lines of *stream* without their ``\\n`` or ``\\r\\n`` ending.

    Examples:
        >>> list(read_lines(io.BytesIO(b"a\\r\\nb\\nc")))  # [b"a", b"b", b"c"]
    """
    for line in stream:
        if line.endswith(b"\r\n"):
            yield line[:-2]
        elif line.endswith(b"\n"):
            yield line[:-1]
        else:
            yield line
