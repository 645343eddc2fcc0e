"""Rendering of screen rows into terminal output."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise

from moar.twin.colors import COLOR_DEFAULT, Color, ColorCount
from moar.twin.styled_rune import StyledRune, printable
from moar.twin.styles import STYLE_DEFAULT, Attr, Style

# White on red, bold: how characters that cannot be shown are highlighted
_UNPRINTABLE_STYLE = Style(fg=Color.new_16(7), bg=Color.new_16(1), attrs=Attr.BOLD)


def without_hidden_runes(runes: Sequence[StyledRune]) -> list[StyledRune]:
    """Drop cells hidden behind a preceding wide character."""
    return list(runes[:1]) + [
        current for previous, current in pairwise(runes) if previous.width() != 2
    ]


def _significant_length(row: Sequence[StyledRune]) -> tuple[int, Color]:
    """Length of the row without trailing same-background spaces, and that background."""
    end = len(row)
    trailer_bg = COLOR_DEFAULT
    trailer_bg_set = False
    while end > 0:
        cell = row[end - 1]
        if cell.rune != " ":
            break

        whitespace_bg = cell.style.bg
        if cell.style.attrs & Attr.REVERSE:
            if cell.style.fg == COLOR_DEFAULT:
                # The default color is unknown, so it cannot be used
                break
            whitespace_bg = cell.style.fg

        if not trailer_bg_set:
            trailer_bg = whitespace_bg
            trailer_bg_set = True

        if whitespace_bg != trailer_bg:
            break

        end -= 1
    return end, trailer_bg


def render_line(
    row: Sequence[StyledRune], width: int, terminal_color_count: ColorCount
) -> tuple[str, int]:
    """Render a row of cells.

    Returns the rendered text and how many information carrying cells went
    into it.
    """
    visible = without_hidden_runes(row)
    end, trailer_bg = _significant_length(visible)
    visible = visible[:end]

    parts = ["\x1b[m"]
    last_style = STYLE_DEFAULT

    for cell in visible:
        style = cell.style
        char = cell.rune
        if not printable(char):
            style = _UNPRINTABLE_STYLE
            char = "?"

        if style != last_style:
            parts.append(style.render_update_from(last_style, terminal_color_count))
            last_style = style

        parts.append(char)

    without_link = last_style.with_hyperlink(None)
    if without_link != last_style:
        parts.append(without_link.render_update_from(last_style, terminal_color_count))
        last_style = without_link

    if len(visible) < width:
        # Clearing to end of line is not possible in the last screen column
        parts.append(
            STYLE_DEFAULT.with_background(trailer_bg).render_update_from(
                last_style, terminal_color_count
            )
        )
        parts.append("\x1b[K")

    return "".join(parts), len(visible)