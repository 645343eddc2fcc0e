"""A reader whose blocking reads can be interrupted from another thread."""

from __future__ import annotations

import logging
import os
import select
import threading
from typing import IO, Union

log = logging.getLogger(__name__)


class InterruptableReader:
    """Reads from a file descriptor until interrupt() is called.

    After an interrupt every read returns b"", also any read that is blocked
    waiting for input when the interrupt happens.
    """

    def __init__(self, base: Union[IO[bytes], int]) -> None:
        self._base_fd = base if isinstance(base, int) else base.fileno()
        self._shutdown_reader, self._shutdown_writer = os.pipe()
        self._interrupted = threading.Event()
        self._lock = threading.Lock()
        self._writer_closed = False
        self._reader_closed = False

    def read(self, size: int) -> bytes:
        """Read up to size bytes; b"" means end of input or interrupted."""
        while True:
            if self._interrupted.is_set():
                return b""

            ready, _, _ = select.select([self._shutdown_reader, self._base_fd], [], [])

            if self._shutdown_reader in ready:
                self._close_shutdown_reader()
                return b""

            if self._base_fd in ready:
                return os.read(self._base_fd, size)

    def _close_shutdown_reader(self) -> None:
        with self._lock:
            if self._reader_closed:
                return
            self._reader_closed = True
        try:
            os.close(self._shutdown_reader)
        except OSError as error:
            log.info("Failed to close shutdown pipe reader: %s", error)

    def interrupt(self) -> None:
        """Make any ongoing and all future reads return b""."""
        self._interrupted.set()
        with self._lock:
            if self._writer_closed:
                return
            self._writer_closed = True
        try:
            os.close(self._shutdown_writer)
        except OSError as error:
            log.warning("Failed to close shutdown pipe writer: %s", error)