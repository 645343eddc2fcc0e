"""Building blocks for a terminal pager: styles, rendering, man page headings and decompression."""

__version__ = "0.1.0"