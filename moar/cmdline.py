"""Command line handling: target lines, option sources and input checks."""

from __future__ import annotations

import os
import re
import shutil
import sys
from collections.abc import Mapping, Sequence
from importlib.metadata import PackageNotFoundError, version
from typing import IO, Optional

from moar.zopen import zopen

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_DECIMAL = re.compile(r"[+-]?[0-9]+")

# Set this when building a release to override the installed package version
VERSION_STRING = ""


def _parse_int32(text: str) -> Optional[int]:
    if not _DECIMAL.fullmatch(text):
        return None
    value = int(text)
    if not _INT32_MIN <= value <= _INT32_MAX:
        return None
    return value


def get_target_line(args: Sequence[str]) -> tuple[Optional[int], list[str]]:
    """Find a "+123" argument anywhere among the arguments.

    Returns the zero-based index of that line, or None if no line was asked
    for, and the arguments with the line number argument removed.
    """
    for position, arg in enumerate(args):
        if not arg.startswith("+"):
            continue

        line_number = _parse_int32(arg[1:])
        if line_number is None or line_number < 1:
            # Treat it as a file name
            continue

        remaining = list(args[:position]) + list(args[position + 1:])
        return line_number - 1, remaining

    return None, list(args)


def combine_flags(args: Sequence[str], environ: Optional[Mapping[str, str]] = None) -> list[str]:
    """Options from the MOAR environment variable followed by the command line ones.

    The first element of args is the program name and is left out.
    """
    env = os.environ if environ is None else environ
    flags = list(args[1:])
    moar_env = env.get("MOAR", "").strip(" ")
    if moar_env:
        flags = moar_env.split() + flags
    return flags


def try_open(filename: str) -> None:
    """Check that a file can be opened and read, raising OSError if not.

    Empty files are fine.
    """
    with open(filename, "rb") as probe:
        probe.read(1)


def pump_to_stdout(
    filenames: Sequence[str],
    output: Optional[IO[bytes]] = None,
    stdin: Optional[IO[bytes]] = None,
) -> None:
    """Copy the decompressed files, or stdin if there are none, to the output.

    Given files, stdin is ignored, just like less does.
    """
    target = sys.stdout.buffer if output is None else output

    if filenames:
        for filename in filenames:
            try:
                source, _ = zopen(filename)
            except OSError as error:
                raise OSError(f"Failed to open {filename}: {error}") from error

            with source:
                try:
                    shutil.copyfileobj(source, target)
                except (OSError, EOFError) as error:
                    raise OSError(f"Failed to copy {filename} to stdout: {error}") from error
        target.flush()
        return

    source = sys.stdin.buffer if stdin is None else stdin
    try:
        shutil.copyfileobj(source, target)
    except OSError as error:
        raise OSError(f"Failed to copy stdin to stdout: {error}") from error
    target.flush()


def no_line_numbers_default(environ: Optional[Mapping[str, str]] = None) -> bool:
    """True when showing a man page, where line numbers would push text off screen."""
    env = os.environ if environ is None else environ
    if env.get("MANPATH", ""):
        # Set by "man" on macOS
        return True
    if env.get("MAN_PN", ""):
        # Set by "man" on Ubuntu
        return True
    return False


def get_version() -> str:
    """The build's version string, falling back to the installed package version."""
    if VERSION_STRING:
        return VERSION_STRING
    try:
        installed = version("moar")
    except PackageNotFoundError:
        installed = ""
    if installed:
        return installed
    return "Should be set when building, please install the package to get a version"