"""Transparent decompression of files and streams."""

from __future__ import annotations

import bz2
import gzip
import io
import logging
import lzma
from typing import IO, Optional

import zstandard

log = logging.getLogger(__name__)

GZIP_MAGIC = b"\x1f\x8b"
BZIP2_MAGIC = b"\x42\x5a\x68"
ZSTD_MAGIC = b"\x28\xb5\x2f\xfd"
XZ_MAGIC = b"\xfd\x37\x7a\x58\x5a\x00"

# Enough bytes to tell all the supported formats apart
_MAGIC_LENGTH = 6


def _remove_suffix(text: str, suffix: str) -> str:
    if suffix and text.endswith(suffix):
        return text[: -len(suffix)]
    return text


def _zstd_reader(source: IO[bytes], closefd: bool) -> IO[bytes]:
    return zstandard.ZstdDecompressor().stream_reader(
        source, read_across_frames=True, closefd=closefd
    )


def zopen(filename: str) -> tuple[IO[bytes], str]:
    """Open a possibly compressed file for reading.

    Returns a binary stream of the decompressed contents, and the file name
    with any compression extension removed.
    """
    with open(filename, "rb") as probe:
        first_bytes = probe.read(_MAGIC_LENGTH)

    if first_bytes.startswith(GZIP_MAGIC):
        log.debug("File is gzip compressed: %s", filename)
        new_name = _remove_suffix(filename, ".gz")
        if new_name.endswith(".tgz"):
            new_name = _remove_suffix(new_name, ".tgz") + ".tar"
        return gzip.open(filename, "rb"), new_name

    if first_bytes.startswith(BZIP2_MAGIC):
        log.debug("File is bzip2 compressed: %s", filename)
        return bz2.open(filename, "rb"), _remove_suffix(filename, ".bz2")

    if first_bytes.startswith(ZSTD_MAGIC):
        log.debug("File is zstd compressed: %s", filename)
        new_name = _remove_suffix(_remove_suffix(filename, ".zst"), ".zstd")
        return _zstd_reader(open(filename, "rb"), closefd=True), new_name

    if first_bytes.startswith(XZ_MAGIC):
        log.debug("File is xz compressed: %s", filename)
        return lzma.open(filename, "rb"), _remove_suffix(filename, ".xz")

    if first_bytes:
        log.debug("File is assumed to be uncompressed: %s", filename)
    return open(filename, "rb"), filename


class _PrefixedStream(io.RawIOBase):
    """Yields some already read bytes, then the rest of a stream."""

    def __init__(self, prefix: bytes, stream: IO[bytes]) -> None:
        super().__init__()
        self._prefix = prefix
        self._stream = stream

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> Optional[int]:  # type: ignore[override]
        if self._prefix:
            count = min(len(buffer), len(self._prefix))
            buffer[:count] = self._prefix[:count]
            self._prefix = self._prefix[count:]
            return count

        data = self._stream.read(len(buffer))
        if data is None:
            return None
        count = len(data)
        buffer[:count] = data
        return count


def zreader(stream: IO[bytes]) -> IO[bytes]:
    """Wrap a binary stream so that any compression is undone.

    Uncompressed and empty streams come back with their contents as they are.
    """
    first_bytes = stream.read(_MAGIC_LENGTH)
    if not first_bytes:
        return stream

    restored: IO[bytes] = io.BufferedReader(_PrefixedStream(first_bytes, stream))

    if first_bytes.startswith(GZIP_MAGIC):
        log.info("Input stream is gzip compressed")
        return gzip.GzipFile(fileobj=restored, mode="rb")
    if first_bytes.startswith(ZSTD_MAGIC):
        log.info("Input stream is zstd compressed")
        return _zstd_reader(restored, closefd=False)
    if first_bytes.startswith(BZIP2_MAGIC):
        log.info("Input stream is bzip2 compressed")
        return bz2.BZ2File(restored, "rb")
    if first_bytes.startswith(XZ_MAGIC):
        log.info("Input stream is xz compressed")
        return lzma.LZMAFile(restored, "rb")

    log.info("Input stream is assumed to be uncompressed")
    return restored