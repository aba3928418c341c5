"""Unit tests for cutr.reader."""

import io
import sys
from unittest.mock import patch

import pytest

from cutr.reader import open_input, read_lines


class TestReadLines:
    def test_strips_line_endings(self):
        stream = io.BytesIO(b"a\r\nb\nc")
        assert list(read_lines(stream)) == [b"a", b"b", b"c"]

    def test_keeps_other_whitespace(self):
        stream = io.BytesIO(b" a\t\n\r\n\n")
        assert list(read_lines(stream)) == [b" a\t", b"", b""]

    def test_lone_carriage_return_is_kept(self):
        assert list(read_lines(io.BytesIO(b"a\rb\n"))) == [b"a\rb"]

    def test_empty_input(self):
        assert list(read_lines(io.BytesIO(b""))) == []

    def test_is_lazy(self):
        lines = read_lines(io.BytesIO(b"one\ntwo\n"))
        assert next(lines) == b"one"
        assert next(lines) == b"two"
        with pytest.raises(StopIteration):
            next(lines)


class TestOpenInput:
    def test_dash_is_stdin(self):
        fake_stdin = io.TextIOWrapper(io.BytesIO(b"from stdin\n"))
        with patch("sys.stdin", fake_stdin):
            stream = open_input("-")
            assert stream is sys.stdin.buffer
            assert list(read_lines(stream)) == [b"from stdin"]

    def test_file(self, make_input):
        path = make_input(content="x,y\n")
        with open_input(str(path)) as stream:
            assert list(read_lines(stream)) == [b"x,y"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            open_input(str(tmp_path / "missing.txt"))
