"""Text styles and the escape sequences that switch between them."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace

from moar.twin.colors import COLOR_DEFAULT, Color, ColorCount, ColorType


class Attr(enum.IntFlag):
    """Text attributes."""

    NONE = 0
    BOLD = 1
    BLINK = 2
    REVERSE = 4
    UNDERLINE = 8
    DIM = 16
    ITALIC = 32
    STRIKE_THROUGH = 64


_ATTR_NAMES = (
    (Attr.BOLD, "bold"),
    (Attr.BLINK, "blinking"),
    (Attr.REVERSE, "reverse"),
    (Attr.UNDERLINE, "underlined"),
    (Attr.DIM, "dim"),
    (Attr.ITALIC, "italic"),
    (Attr.STRIKE_THROUGH, "strikethrough"),
)

# Attributes with on/off codes of their own, bold and dim are handled separately
_TOGGLED_ATTRS = (
    (Attr.BLINK, "\x1b[5m", "\x1b[25m"),
    (Attr.REVERSE, "\x1b[7m", "\x1b[27m"),
    (Attr.UNDERLINE, "\x1b[4m", "\x1b[24m"),
    (Attr.ITALIC, "\x1b[3m", "\x1b[23m"),
    (Attr.STRIKE_THROUGH, "\x1b[9m", "\x1b[29m"),
)


@dataclass(frozen=True)
class Style:
    """Colors, attributes and an optional hyperlink for a screen cell."""

    fg: Color = COLOR_DEFAULT
    bg: Color = COLOR_DEFAULT
    underline_color: Color = COLOR_DEFAULT
    attrs: Attr = Attr.NONE
    hyperlink_url: str | None = None

    def __post_init__(self) -> None:
        if self.hyperlink_url == "":
            object.__setattr__(self, "hyperlink_url", None)
        object.__setattr__(self, "attrs", Attr(self.attrs))

    def __str__(self) -> str:
        underline_suffix = ""
        if self.underline_color != COLOR_DEFAULT:
            underline_suffix = f" underlined with {self.underline_color}"

        names = [name for attr, name in _ATTR_NAMES if self.attrs & attr]
        if self.hyperlink_url is not None:
            names.append(f'"{self.hyperlink_url}"')

        colors = f"{self.fg} on {self.bg}{underline_suffix}"
        if not names:
            return colors
        return " ".join(names) + " " + colors

    def with_attr(self, attr: Attr) -> Style:
        """Add attributes. Bold and dim are mutually exclusive."""
        result = replace(self, attrs=self.attrs | attr)
        if attr & Attr.BOLD:
            return result.without_attr(Attr.DIM)
        if attr & Attr.DIM:
            return result.without_attr(Attr.BOLD)
        return result

    def without_attr(self, attr: Attr) -> Style:
        return replace(self, attrs=self.attrs & ~attr)

    def with_hyperlink(self, url: str | None) -> Style:
        """Set the hyperlink; None or an empty string removes it."""
        return replace(self, hyperlink_url=url or None)

    def with_background(self, color: Color) -> Style:
        return replace(self, bg=color)

    def with_foreground(self, color: Color) -> Style:
        return replace(self, fg=color)

    def with_underline_color(self, color: Color) -> Style:
        return replace(self, underline_color=color)

    def render_update_from(self, previous: Style, terminal_color_count: ColorCount) -> str:
        """Escape sequence switching the terminal from the previous style to this one."""
        if self == previous:
            return ""

        if self == STYLE_DEFAULT and previous.hyperlink_url is None:
            return "\x1b[m"

        parts: list[str] = []
        if self.fg != previous.fg:
            parts.append(self.fg.ansi_string(ColorType.FOREGROUND, terminal_color_count))
        if self.bg != previous.bg:
            parts.append(self.bg.ansi_string(ColorType.BACKGROUND, terminal_color_count))
        if self.underline_color != previous.underline_color:
            parts.append(
                self.underline_color.ansi_string(ColorType.UNDERLINE, terminal_color_count)
            )

        bold_dim = Attr.BOLD | Attr.DIM
        previous_bold_dim = previous.attrs & bold_dim
        current_bold_dim = self.attrs & bold_dim
        if current_bold_dim != previous_bold_dim:
            if previous_bold_dim:
                parts.append("\x1b[22m")
            if self.attrs & Attr.BOLD:
                parts.append("\x1b[1m")
            if self.attrs & Attr.DIM:
                parts.append("\x1b[2m")

        for attr, on, off in _TOGGLED_ATTRS:
            now = bool(self.attrs & attr)
            if now != bool(previous.attrs & attr):
                parts.append(on if now else off)

        if self.hyperlink_url != previous.hyperlink_url:
            parts.append(f"\x1b]8;;{self.hyperlink_url or ''}\x1b\\")

        return "".join(parts)


STYLE_DEFAULT = Style()