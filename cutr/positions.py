"""Selection string parsing.

Turns a user-written list such as ``1,7,3-5`` into an ordered tuple of
half-open, 0-indexed :class:`Range` values.  Positions in the input are
1-indexed and inclusive.  Token order is kept exactly as written: ranges are
neither sorted nor merged.
"""

import re
from typing import NamedTuple, Tuple

from cutr.exceptions import EmptySelection, InvalidRangeOrder, InvalidToken

_NUMBER_RE = re.compile(r"[0-9]+")
_RANGE_RE = re.compile(r"([0-9]+)-([0-9]+)")


class Range(NamedTuple):
    """Half-open interval ``[start, end)`` over 0-indexed positions."""

    start: int
    end: int

    def as_slice(self) -> slice:
        return slice(self.start, self.end)


PositionList = Tuple[Range, ...]


def _parse_position(text: str) -> int:
    """Parse a 1-indexed position, rejecting anything but ASCII digits and zero.

    Raises:
        InvalidToken: quoting *text* when it is not a positive integer
    """
    if not _NUMBER_RE.fullmatch(text):
        raise InvalidToken(text)
    value = int(text)
    if value == 0:
        raise InvalidToken(text)
    return value


def _parse_token(token: str) -> Range:
    if not token:
        raise EmptySelection()

    range_match = _RANGE_RE.fullmatch(token)
    if range_match:
        low = _parse_position(range_match.group(1))
        high = _parse_position(range_match.group(2))
        if low >= high:
            raise InvalidRangeOrder(low, high)
        return Range(low - 1, high)

    # Anything that is not a well formed range is quoted as a whole
    if not _NUMBER_RE.fullmatch(token):
        raise InvalidToken(token)
    position = _parse_position(token)
    return Range(position - 1, position)


def parse_selection(raw: str) -> PositionList:
    """Parse a comma-separated selection string into a position list.

    Each token is either a single position (``3``) or an inclusive range
    (``3-5``).  Leading zeros are accepted, signs are not.  Validation stops at
    the first bad token.

    Args:
        raw: Selection string as given by the user, e.g. ``"1,7,3-5"``

    Returns:
        Tuple of ranges in the order the tokens were written

    Raises:
        EmptySelection: if *raw* or any token in it is empty
        InvalidToken: if a token is not a valid position or range
        InvalidRangeOrder: if a range's first number is not lower than its second

    Examples:
        >>> parse_selection("1,7,3-5")
        (Range(start=0, end=1), Range(start=6, end=7), Range(start=2, end=5))
        >>> parse_selection("0001-03")
        (Range(start=0, end=3),)
    """
    return tuple(_parse_token(token) for token in raw.split(","))
