"""Terminal colors and their ANSI rendering."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass

from moar.twin.palette import color256_to_rgb


class ColorCount(enum.IntEnum):
    """How many colors a color or a terminal can represent."""

    DEFAULT = 0
    # Only used for output; 3 bit input colors are stored as 4 bit colors
    COLORS_8 = 1
    COLORS_16 = 2
    COLORS_256 = 3
    COLORS_24BIT = 4


class ColorType(enum.Enum):
    """Which part of a cell a color applies to, with its SGR marker digit."""

    FOREGROUND = "3"
    BACKGROUND = "4"
    UNDERLINE = "5"


_COLOR_NAMES_16 = {
    0: "0 black",
    1: "1 red",
    2: "2 green",
    3: "3 yellow (orange)",
    4: "4 blue",
    5: "5 magenta",
    6: "6 cyan",
    7: "7 white (light gray)",
    8: "8 bright black (dark gray)",
    9: "9 bright red",
    10: "10 bright green",
    11: "11 bright yellow",
    12: "12 bright blue",
    13: "13 bright magenta",
    14: "14 bright cyan",
    15: "15 bright white",
}

# Distance between black and white, used for scaling distances to 0.0-1.0
_MAX_DISTANCE = 764.8333151739665


@dataclass(frozen=True)
class Color:
    """A color with the palette size it belongs to."""

    count: ColorCount = ColorCount.DEFAULT
    value: int = 0

    @classmethod
    def new_16(cls, number: int) -> Color:
        """A four bit ANSI color, 0-15."""
        return cls(ColorCount.COLORS_16, number)

    @classmethod
    def new_256(cls, number: int) -> Color:
        """An eight bit palette color, 0-255."""
        return cls(ColorCount.COLORS_256, number & 0xFF)

    @classmethod
    def new_24bit(cls, red: int, green: int, blue: int) -> Color:
        """An RGB color."""
        return cls(
            ColorCount.COLORS_24BIT,
            ((red & 0xFF) << 16) + ((green & 0xFF) << 8) + (blue & 0xFF),
        )

    @classmethod
    def from_hex(cls, rgb: int) -> Color:
        """An RGB color from a 0xRRGGBB integer."""
        return cls(ColorCount.COLORS_24BIT, rgb & 0xFFFFFF)

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.value >> 16) & 0xFF, (self.value >> 8) & 0xFF, self.value & 0xFF

    def __str__(self) -> str:
        if self.count == ColorCount.DEFAULT:
            return "Default color"
        if self.count in (ColorCount.COLORS_8, ColorCount.COLORS_16):
            return _COLOR_NAMES_16.get(self.value, str(self.value))
        if self.count == ColorCount.COLORS_256:
            if self.value < 16:
                return _COLOR_NAMES_16[self.value]
            return f"#{self.value:02x}"
        return f"#{self.value:06x}"

    def to_24bit(self) -> Color:
        """Convert to an RGB color."""
        if self.count == ColorCount.COLORS_24BIT:
            return self
        if self.count in (ColorCount.COLORS_8, ColorCount.COLORS_16, ColorCount.COLORS_256):
            return Color.new_24bit(*color256_to_rgb(self.value & 0xFF))
        raise ValueError(f"cannot convert {self} to 24 bit")

    def downsample_to(self, terminal_color_count: ColorCount) -> Color:
        """Return the closest color the terminal can show."""
        if self.count == ColorCount.DEFAULT or terminal_color_count == ColorCount.DEFAULT:
            raise ValueError(
                f"downsampling to or from default color not supported, "
                f"{self} -> {terminal_color_count!r}"
            )

        if self.count <= terminal_color_count:
            return self

        if terminal_color_count == ColorCount.COLORS_8:
            scan = range(0, 8)
        elif terminal_color_count == ColorCount.COLORS_16:
            scan = range(0, 16)
        elif terminal_color_count == ColorCount.COLORS_256:
            # Colors 0-15 can be customized by the user, use only well defined ones
            scan = range(16, 256)
        else:
            raise ValueError(f"unhandled terminal color count {terminal_color_count!r}")

        target = self.to_24bit()
        best_match = min(
            scan, key=lambda i: target.distance(Color.new_24bit(*color256_to_rgb(i)))
        )

        if best_match <= 15:
            return Color.new_16(best_match)
        return Color.new_256(best_match)

    def ansi_string(self, color_type: ColorType, terminal_color_count: ColorCount) -> str:
        """Render this color as an SGR escape sequence."""
        marker = color_type.value

        if self.count == ColorCount.DEFAULT:
            return f"\x1b[{marker}9m"

        color = self.downsample_to(terminal_color_count)

        if color.count in (ColorCount.COLORS_8, ColorCount.COLORS_16):
            if color_type == ColorType.UNDERLINE:
                # Only 256 and 24 bit colors are supported for underlines
                return ""
            if color.value < 8:
                return f"\x1b[{marker}{color.value}m"
            if color.value <= 15:
                bright_marker = "10" if color_type == ColorType.BACKGROUND else "9"
                return f"\x1b[{bright_marker}{color.value - 8}m"
            raise ValueError(f"unhandled color16 value {color.value}")

        if color.count == ColorCount.COLORS_256 and color.value <= 255:
            return f"\x1b[{marker}8;5;{color.value}m"

        if color.count == ColorCount.COLORS_24BIT:
            red, green, blue = color.rgb
            return f"\x1b[{marker}8;2;{red};{green};{blue}m"

        raise ValueError(f"unhandled color type={color.count!r} {color}")

    def distance(self, other: Color) -> float:
        """Perceptual distance between two RGB colors, 1.0 being black to white."""
        if self.count != ColorCount.COLORS_24BIT:
            raise ValueError(
                f"distance only supported for 24 bit colors, got {self} vs {other}"
            )

        ar, ag, ab = self.rgb
        br, bg, bb = other.rgb
        rmean = (ar + br) // 2
        r = ar - br
        g = ag - bg
        b = ab - bb
        squared = (((512 + rmean) * r * r) >> 8) + 4 * g * g + (((767 - rmean) * b * b) >> 8)
        return math.sqrt(squared) / _MAX_DISTANCE


COLOR_DEFAULT = Color(ColorCount.DEFAULT, 0)