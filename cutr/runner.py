"""Runs one extraction request over all of its input files."""

import logging
import sys
from typing import Optional, TextIO

from cutr.config import ExtractionRequest
from cutr.exceptions import ExitCode
from cutr.extract import Extractor
from cutr.positions import parse_selection
from cutr.reader import STDIN_NAME, open_input, read_lines


class CutRunner:
    """Applies an :class:`ExtractionRequest` to each input file in turn.

    The selection string is parsed once, when the runner is created, so an
    invalid selection fails before any input is read.
    """

    def __init__(self, request: ExtractionRequest, output: Optional[TextIO] = None):
        self.request = request
        self.output = output
        self.failed_files = 0

        positions = parse_selection(request.selection)
        logging.debug(f"Parsed selection {request.selection!r} into {positions}")
        self.extractor = Extractor(request.mode, positions)

    def write_line(self, text: str) -> None:
        """Write one extracted line.

        Without an explicit output stream the text goes to stdout as UTF-8,
        whatever encoding stdout was opened with.
        """
        if self.output is not None:
            self.output.write(text)
            self.output.write("\n")
        else:
            sys.stdout.buffer.write(text.encode("utf-8") + b"\n")

    def process_file(self, name: str) -> bool:
        """Extract every line of one input and write the results.

        Errors writing the output propagate to the caller; only errors opening
        or reading *name* are reported against the input.

        Returns:
            False if the input could not be opened or read, True otherwise
        """
        try:
            stream = open_input(name)
        except OSError as e:
            logging.error(f"{name}: {e.strerror or e}")
            return False

        logging.info(f"Processing {'<stdin>' if name == STDIN_NAME else name}")
        lines = read_lines(stream)
        try:
            while True:
                try:
                    line = next(lines, None)
                except OSError as e:
                    logging.error(f"{name}: {e.strerror or e}")
                    return False
                if line is None:
                    break
                self.write_line(self.extractor(line))
        finally:
            if name != STDIN_NAME:
                stream.close()
        return True

    def run(self) -> int:
        """Process all files of the request.

        Returns:
            ExitCode.OK if every file was processed, ExitCode.FILE_ERROR otherwise
        """
        for name in self.request.files:
            if not self.process_file(name):
                self.failed_files += 1
        if self.output is None:
            sys.stdout.buffer.flush()

        if self.failed_files:
            logging.info(f"{self.failed_files} of {len(self.request.files)} input(s) could not be read")
            return ExitCode.FILE_ERROR
        return ExitCode.OK
