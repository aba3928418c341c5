"""
cutr - select fields, bytes or characters from lines of text

A Python package implementing a ``cut``-style utility: a selection string
parser and a per-line extraction engine, with a small command line front end.
"""

__version__ = "0.1.0"

from .extract import Bytes, Chars, Extractor, Fields, extract  # noqa: E402
from .positions import Range, parse_selection  # noqa: E402

__all__ = ["Bytes", "Chars", "Extractor", "Fields", "Range", "extract", "parse_selection", "main"]


def main(command_line_args=None):
    """Main entry point for the cutr command"""
    from .cli import main as cli_main

    return cli_main(command_line_args)
