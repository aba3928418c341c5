"""Unit tests for cutr.positions."""

import pytest

from cutr.exceptions import EmptySelection, InvalidRangeOrder, InvalidToken, SelectionError, UsageError
from cutr.positions import Range, parse_selection


class TestRejectedSelections:
    @pytest.mark.parametrize("raw", ["", ",", "1,", ",1"])
    def test_empty(self, raw):
        with pytest.raises(EmptySelection):
            parse_selection(raw)

    @pytest.mark.parametrize(
        "raw, quoted",
        [
            ("0", "0"),
            ("0-1", "0"),
            ("1-00", "00"),
            ("+1", "+1"),
            ("+1-2", "+1-2"),
            ("1-+2", "1-+2"),
            ("a", "a"),
            ("1,a", "a"),
            ("1-a", "1-a"),
            ("a-1", "a-1"),
        ],
    )
    def test_illegal_value_message(self, raw, quoted):
        with pytest.raises(InvalidToken) as exc_info:
            parse_selection(raw)
        assert exc_info.value.token == quoted
        assert str(exc_info.value) == f'illegal list value: "{quoted}"'

    @pytest.mark.parametrize("raw", ["-", "1-", "-1", "1-1-1", "1-1-a", " 1", "1 ", "١"])
    def test_malformed_tokens(self, raw):
        with pytest.raises(InvalidToken):
            parse_selection(raw)

    def test_equal_bounds(self):
        with pytest.raises(InvalidRangeOrder) as exc_info:
            parse_selection("1-1")
        assert (exc_info.value.low, exc_info.value.high) == (1, 1)
        assert str(exc_info.value) == "First number in range (1) must be lower than second number (1)"

    def test_descending_bounds(self):
        with pytest.raises(InvalidRangeOrder) as exc_info:
            parse_selection("2-1")
        assert str(exc_info.value) == "First number in range (2) must be lower than second number (1)"

    def test_first_error_wins(self):
        """Tokens are validated left to right; later problems are not reported."""
        with pytest.raises(InvalidToken, match='"b"'):
            parse_selection("1,b,3-2,")

    def test_errors_are_usage_errors(self):
        with pytest.raises(UsageError):
            parse_selection("x")
        assert issubclass(SelectionError, UsageError)


class TestAcceptedSelections:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("1", [(0, 1)]),
            ("01", [(0, 1)]),
            ("1,3", [(0, 1), (2, 3)]),
            ("001,0003", [(0, 1), (2, 3)]),
            ("1-3", [(0, 3)]),
            ("0001-03", [(0, 3)]),
            ("1,7,3-5", [(0, 1), (6, 7), (2, 5)]),
            ("15,19-20", [(14, 15), (18, 20)]),
        ],
    )
    def test_parse(self, raw, expected):
        assert parse_selection(raw) == tuple(Range(start, end) for start, end in expected)

    def test_overlapping_ranges_are_kept(self):
        assert parse_selection("2-4,3,3") == (Range(1, 4), Range(2, 3), Range(2, 3))

    def test_leading_zeros_are_transparent(self):
        assert parse_selection("01") == parse_selection("1")
        assert parse_selection("0001-03") == parse_selection("1-3")

    def test_large_position(self):
        assert parse_selection("123456789") == (Range(123456788, 123456789),)

    def test_result_is_immutable(self):
        positions = parse_selection("1,2")
        assert isinstance(positions, tuple)
        with pytest.raises(AttributeError):
            positions[0].start = 5

    def test_as_slice(self):
        assert Range(2, 5).as_slice() == slice(2, 5)
        assert "abcdefg"[Range(2, 5).as_slice()] == "cde"
