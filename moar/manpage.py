"""Recognition of man page headings: all caps, every character overstruck."""

from __future__ import annotations

import enum
import unicodedata
from collections.abc import Callable
from typing import Optional

from moar.twin.styled_rune import StyledRune
from moar.twin.styles import Style

_LATIN1_SPACES = frozenset("\t\n\v\f\r \x85\xa0")


def _is_space(char: str) -> bool:
    if char in _LATIN1_SPACES:
        return True
    if ord(char) < 0x100:
        return False
    return unicodedata.category(char) in ("Zs", "Zl", "Zp")


class _State(enum.Enum):
    FIRST_CHAR = enum.auto()
    BACKSPACE = enum.auto()
    SECOND_CHAR = enum.auto()


def parse_man_page_heading(
    text: str, report: Optional[Callable[[str], None]] = None
) -> bool:
    """True if the whole text is a man page heading.

    Each heading character is written as char, backspace, char, and letters
    are all upper case. Whitespace may also appear without overstriking.
    Heading characters are passed to report as they are found; reporting
    stops where the text turns out not to be a heading.
    """
    if len(text.encode("utf-8", "surrogatepass")) < 3:
        # Too short for even one char+backspace+char
        return False

    def emit(char: str) -> None:
        if report is not None:
            report(char)

    state = _State.FIRST_CHAR
    first_char = ""
    for position, char in enumerate(text):
        if state is _State.FIRST_CHAR:
            if position == 0 and _is_space(char):
                # Headings do not start with whitespace
                return False
            if char == "\b":
                return False
            first_char = char
            state = _State.BACKSPACE

        elif state is _State.BACKSPACE:
            if char == "\b":
                state = _State.SECOND_CHAR
                continue

            if _is_space(first_char):
                # Whitespace need not be overstruck; this is a new first char
                emit(first_char)
                first_char = char
                continue

            return False

        else:
            if char == "\b" or char != first_char:
                return False
            if char.isalpha() and not char.isupper():
                # Not ALL CAPS, not a heading
                return False
            emit(char)
            state = _State.FIRST_CHAR

    return state is _State.FIRST_CHAR


def man_page_heading_from_string(text: str, heading_style: Style) -> Optional[list[StyledRune]]:
    """The heading's characters in heading_style, or None if text is no heading."""
    chars: list[str] = []
    if not parse_man_page_heading(text, chars.append):
        return None
    return [StyledRune(char, heading_style) for char in chars]