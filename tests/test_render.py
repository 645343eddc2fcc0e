from moar.twin.colors import ColorCount
from moar.twin.render import render_line, without_hidden_runes
from moar.twin.styled_rune import StyledRune
from moar.twin.styles import STYLE_DEFAULT, Attr

RESET = "\x1b[m"
REVERSED = "\x1b[7m"
NOT_REVERSED = "\x1b[27m"
DIM = "\x1b[2m"
CLEAR_TO_EOL = "\x1b[K"


def _esc(text):
    return text.replace("\x1b", "ESC")


def test_render_line():
    row = [
        StyledRune("<", STYLE_DEFAULT.with_attr(Attr.REVERSE)),
        StyledRune("f", STYLE_DEFAULT.with_attr(Attr.DIM)),
    ]
    rendered, count = render_line(row, 33, ColorCount.COLORS_16)
    assert count == 2
    assert _esc(rendered) == _esc(
        RESET + REVERSED + "<" + DIM + NOT_REVERSED + "f" + RESET + CLEAR_TO_EOL
    )


def test_render_line_empty():
    rendered, count = render_line([], 33, ColorCount.COLORS_16)
    assert count == 0
    assert rendered == "\x1b[m\x1b[K"


def test_render_line_last_reversed():
    row = [StyledRune("<", STYLE_DEFAULT.with_attr(Attr.REVERSE))]
    rendered, count = render_line(row, 33, ColorCount.COLORS_16)
    assert count == 1
    assert _esc(rendered) == _esc(RESET + REVERSED + "<" + RESET + CLEAR_TO_EOL)


def test_render_line_last_non_space():
    row = [StyledRune("X", STYLE_DEFAULT)]
    rendered, count = render_line(row, 33, ColorCount.COLORS_16)
    assert count == 1
    assert _esc(rendered) == _esc(RESET + "X" + CLEAR_TO_EOL)


def test_render_line_last_reversed_plus_trailing_space():
    row = [
        StyledRune("<", STYLE_DEFAULT.with_attr(Attr.REVERSE)),
        StyledRune(" ", STYLE_DEFAULT),
    ]
    rendered, count = render_line(row, 33, ColorCount.COLORS_16)
    assert count == 1
    assert _esc(rendered) == _esc(RESET + REVERSED + "<" + RESET + CLEAR_TO_EOL)


def test_render_line_only_trailing_spaces():
    row = [StyledRune(" ", STYLE_DEFAULT), StyledRune(" ", STYLE_DEFAULT)]
    rendered, count = render_line(row, 33, ColorCount.COLORS_16)
    assert count == 0
    assert rendered == "\x1b[m\x1b[K"


def test_render_line_last_reversed_spaces():
    row = [StyledRune(" ", STYLE_DEFAULT.with_attr(Attr.REVERSE))]
    rendered, count = render_line(row, 33, ColorCount.COLORS_16)
    assert count == 1
    assert _esc(rendered) == _esc(RESET + REVERSED + " " + RESET + CLEAR_TO_EOL)


def test_render_line_non_printable():
    row = [StyledRune("\x1b")]
    rendered, count = render_line(row, 33, ColorCount.COLORS_16)
    assert count == 1
    white = "\x1b[37m"
    red_bg = "\x1b[41m"
    bold = "\x1b[1m"
    assert _esc(rendered) == _esc(RESET + white + red_bg + bold + "?" + RESET + CLEAR_TO_EOL)


def test_render_hyperlink_at_end_of_line():
    url = "https://example.com/"
    row = [StyledRune("*", STYLE_DEFAULT.with_hyperlink(url))]
    rendered, count = render_line(row, 33, ColorCount.COLORS_16)
    assert count == 1
    assert _esc(rendered) == "ESC[mESC]8;;" + url + "ESC\\*ESC]8;;ESC\\ESC[K"


def test_multi_char_hyperlink():
    url = "https://example.com/"
    style = STYLE_DEFAULT.with_hyperlink(url)
    row = [StyledRune("-", style), StyledRune("X", style), StyledRune("-", style)]
    rendered, count = render_line(row, 33, ColorCount.COLORS_16)
    assert count == 3
    assert _esc(rendered) == "ESC[mESC]8;;" + url + "ESC\\-X-ESC]8;;ESC\\ESC[K"


def test_render_line_full_width():
    row = [StyledRune("x"), StyledRune("y")]

    rendered, count = render_line(row, 2, ColorCount.COLORS_16)
    assert count == 2
    assert _esc(rendered) == "ESC[mxy"

    rendered, count = render_line(row, 3, ColorCount.COLORS_16)
    assert count == 2
    assert _esc(rendered) == "ESC[mxyESC[K"


def test_without_hidden_runes_drops_cell_after_wide_rune():
    row = [StyledRune("午"), StyledRune("x"), StyledRune("y")]
    assert without_hidden_runes(row) == [StyledRune("午"), StyledRune("y")]


def test_without_hidden_runes_keeps_narrow_runes():
    row = [StyledRune("a"), StyledRune("b")]
    assert without_hidden_runes(row) == row
    assert without_hidden_runes([]) == []


def test_render_line_skips_hidden_cell():
    row = [StyledRune("午"), StyledRune("x")]
    rendered, count = render_line(row, 33, ColorCount.COLORS_16)
    assert count == 1
    assert rendered == "\x1b[m午\x1b[K"