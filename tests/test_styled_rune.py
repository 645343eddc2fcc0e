import pytest

from moar.twin.styled_rune import StyledRune, printable, trim_space_left, trim_space_right
from moar.twin.styles import STYLE_DEFAULT, Attr


def test_trim_space_right_empty():
    assert trim_space_right([]) == []


def test_trim_space_right_single_non_space():
    assert trim_space_right([StyledRune("x")]) == [StyledRune("x")]


def test_trim_space_right_single_space():
    assert trim_space_right([StyledRune(" ")]) == []


def test_trim_space_right_non_space_plus_space():
    assert trim_space_right([StyledRune("x"), StyledRune(" ")]) == [StyledRune("x")]


def test_trim_space_left():
    assert trim_space_left([]) == []
    assert trim_space_left([StyledRune(" ")]) == []
    assert trim_space_left([StyledRune(" "), StyledRune("x"), StyledRune(" ")]) == [
        StyledRune("x"),
        StyledRune(" "),
    ]


def test_rune_width():
    assert StyledRune("x").width() == 1
    assert StyledRune("午").width() == 2


def test_default_style():
    assert StyledRune("x").style == STYLE_DEFAULT


def test_str_mentions_rune_and_style():
    rendered = str(StyledRune("x", STYLE_DEFAULT.with_attr(Attr.BOLD)))
    assert rendered.startswith("rune='x' ")
    assert "bold" in rendered


def test_rejects_multiple_characters():
    with pytest.raises(ValueError):
        StyledRune("xy")


@pytest.mark.parametrize(
    "char, expected",
    [
        ("a", True),
        (" ", True),
        ("\x1b", False),
        ("\xa0", True),
        ("\ue000", True),
        ("午", True),
    ],
)
def test_printable(char, expected):
    assert printable(char) is expected