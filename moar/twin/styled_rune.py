"""Characters with styles, as written to screen cells."""

from __future__ import annotations

import unicodedata
from collections.abc import Sequence
from dataclasses import dataclass

from wcwidth import wcwidth

from moar.twin.styles import STYLE_DEFAULT, Style

_LATIN1_SPACES = frozenset("\t\n\v\f\r \x85\xa0")


def _is_space(char: str) -> bool:
    if char in _LATIN1_SPACES:
        return True
    if ord(char) < 0x100:
        return False
    return unicodedata.category(char) in ("Zs", "Zl", "Zp")


@dataclass(frozen=True)
class StyledRune:
    """A character and the style to draw it with.

    Some characters, like '午', cover two screen cells.
    """

    rune: str
    style: Style = STYLE_DEFAULT

    def __post_init__(self) -> None:
        if len(self.rune) != 1:
            raise ValueError(f"expected exactly one character, got {self.rune!r}")

    def __str__(self) -> str:
        return f"rune='{self.rune}' {self.style}"

    def width(self) -> int:
        """How many screen cells this character covers."""
        return max(wcwidth(self.rune), 0)


def trim_space_right(runes: Sequence[StyledRune]) -> list[StyledRune]:
    """Return the cells with trailing whitespace cells removed."""
    end = len(runes)
    while end > 0 and _is_space(runes[end - 1].rune):
        end -= 1
    return list(runes[:end])


def trim_space_left(runes: Sequence[StyledRune]) -> list[StyledRune]:
    """Return the cells with leading whitespace cells removed."""
    for start, cell in enumerate(runes):
        if not _is_space(cell.rune):
            return list(runes[start:])
    return []


def printable(char: str) -> bool:
    """True if the character can be shown as it is."""
    if char.isprintable():
        return True

    # Private use characters are used by icon fonts, let the terminal show them
    if unicodedata.category(char) == "Co":
        return True

    # Non-breaking space is printable
    return char == "\xa0"