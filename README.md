# moar

The pieces a terminal pager is built from, in plain Python.

## What is in the box

`moar.twin` handles terminal output:

- **Palette** (`moar.twin.palette`): `color256_to_rgb` maps a 256-colour
  index to its RGB components: the 16 standard ANSI colours, the 6x6x6 colour
  cube and the grey ramp. Numbers outside 0-255 raise `ValueError`.
- **Colours** (`moar.twin.colors`): immutable `Color` values built with
  `Color.new_16`, `Color.new_256`, `Color.new_24bit` or `Color.from_hex`, and
  `COLOR_DEFAULT` for the terminal's own colour. `Color.downsample_to` picks
  the closest colour a `ColorCount` palette can show, `Color.ansi_string`
  renders a colour as an SGR sequence for a `ColorType` (foreground,
  background or underline), and `Color.distance` gives the perceptual
  distance between two RGB colours, 1.0 being black to white.
- **Styles** (`moar.twin.styles`): an immutable `Style` carrying foreground,
  background, underline colour, `Attr` flags and an optional hyperlink, with
  `with_attr`, `without_attr`, `with_foreground`, `with_background`,
  `with_underline_color` and `with_hyperlink` returning changed copies. Bold
  and dim exclude each other. `Style.render_update_from` emits the escape
  sequence that switches the terminal from one style to another, including
  OSC 8 hyperlinks. `STYLE_DEFAULT` is the plain style.
- **Cells** (`moar.twin.styled_rune`): `StyledRune` is one character plus its
  style; `StyledRune.width` knows that wide characters such as `午` take two
  columns. `trim_space_left` and `trim_space_right` strip whitespace cells,
  and `printable` tells whether a character can be shown as it is.
- **Line rendering** (`moar.twin.render`): `render_line` turns a row of cells
  into escape-coded text, dropping cells hidden behind wide characters and
  trailing spaces, showing unprintable characters as a highlighted `?` and
  clearing to end of line when the row is narrower than the screen. It
  returns the text and the number of cells that went into it.
  `without_hidden_runes` does the wide-character part on its own.
- **Interruptable input** (`moar.twin.interruptable`): an
  `InterruptableReader` over a file or file descriptor. Its `read` returns
  `b""` as soon as `interrupt` is called from another thread, also when it
  is blocked waiting for input, and for every read after that.

Around that:

- `moar.zopen` opens files and streams with transparent gzip, bzip2, xz and
  zstd decompression, recognising the format by its magic bytes. `zopen`
  returns the decompressed stream and the file name without its compression
  extension (`.tgz` becomes `.tar`); `zreader` wraps an already open binary
  stream.
- `moar.manpage` recognises man page headings: all caps, every character
  written as character-backspace-character. `parse_man_page_heading` tells
  whether a line is one, and `man_page_heading_from_string` returns its
  characters as `StyledRune`s in a given style, or `None`.
- `moar.cmdline` helps with the command line: `get_target_line` finds a
  `+123` argument and returns the zero-based line index plus the remaining
  arguments, `combine_flags` puts options from the `MOAR` environment
  variable before the command line ones, `try_open` checks that a file is
  readable, `pump_to_stdout` copies decompressed files (or stdin) to an
  output stream, `no_line_numbers_default` detects being run by `man`, and
  `get_version` reports the version.

## Examples

Look up a palette entry:

```python
from moar.twin.palette import color256_to_rgb

color256_to_rgb(252)  # (0xd0, 0xd0, 0xd0)
```

Render a row of cells:

```python
from moar.twin.colors import ColorCount
from moar.twin.render import render_line
from moar.twin.styled_rune import StyledRune

text, count = render_line([StyledRune("X")], 33, ColorCount.COLORS_16)
# text == "\x1b[mX\x1b[K", count == 1
```

Read a possibly compressed file:

```python
from moar.zopen import zopen

stream, name = zopen("notes.txt.gz")
with stream:
    text = stream.read()
# name is "notes.txt"
```

Find the line to start at:

```python
from moar.cmdline import get_target_line

get_target_line(["+12", "notes.txt"])  # (11, ["notes.txt"])
```

## What it does not do

This is a library, not a pager. It has no command to run, no interactive
screen that draws to or reads keys and mouse events from a terminal, no
decoding of keyboard input, and no parsing of the pager's option values such
as colour counts, status bar styles or mouse modes. Drawing is limited to
turning rows of cells into text with `render_line`; writing that text to a
terminal and handling input is left to the caller.

## Requirements

Python 3.10 or later, with `wcwidth` and `zstandard`. `InterruptableReader`
needs a POSIX system.