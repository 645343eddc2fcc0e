"""The standard 256 color terminal palette."""

_STANDARD_ANSI_COLORS: tuple[tuple[int, int, int], ...] = (
    (0x00, 0x00, 0x00),  # Black
    (0xAA, 0x00, 0x00),  # Red
    (0x00, 0xAA, 0x00),  # Green
    (0xAA, 0x55, 0x00),  # Yellow
    (0x00, 0x00, 0xAA),  # Blue
    (0xAA, 0x00, 0xAA),  # Magenta
    (0x00, 0xAA, 0xAA),  # Cyan
    (0xAA, 0xAA, 0xAA),  # White
    (0x55, 0x55, 0x55),  # Bright Black
    (0xFF, 0x55, 0x55),  # Bright Red
    (0x55, 0xFF, 0x55),  # Bright Green
    (0xFF, 0xFF, 0x55),  # Bright Yellow
    (0x55, 0x55, 0xFF),  # Bright Blue
    (0xFF, 0x55, 0xFF),  # Bright Magenta
    (0x55, 0xFF, 0xFF),  # Bright Cyan
    (0xFF, 0xFF, 0xFF),  # Bright White
)

_CUBE_COMPONENTS = (0x00, 0x5F, 0x87, 0xAF, 0xD7, 0xFF)


def color256_to_rgb(color256: int) -> tuple[int, int, int]:
    """Return the (red, green, blue) components of a 256 color palette entry."""
    if not 0 <= color256 <= 255:
        raise ValueError(f"color number out of range 0-255: {color256}")

    if color256 < 16:
        return _STANDARD_ANSI_COLORS[color256]

    if color256 >= 232:
        # Grayscale, colors 232-255 map to components 0x08 to 0xee
        gray = (color256 - 232) * 0x0A + 0x08
        return gray, gray, gray

    cube_index = color256 - 16
    return (
        _CUBE_COMPONENTS[(cube_index // 36) % 6],
        _CUBE_COMPONENTS[(cube_index // 6) % 6],
        _CUBE_COMPONENTS[cube_index % 6],
    )