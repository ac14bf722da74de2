"""Message channel to the graphics front end over a named pipe."""

from __future__ import annotations

import logging
import time
from typing import BinaryIO, Optional

DEFAULT_PIPE_NAME = r"\\.\pipe\chessPipe"
BUFFER_SIZE = 1024
_ERROR_PIPE_BUSY = 231

logger = logging.getLogger(__name__)


class GraphicsPipe:
    """A duplex connection that exchanges NUL-terminated text messages."""

    busy_wait = 5.0

    def __init__(self, name: str = DEFAULT_PIPE_NAME) -> None:
        self.name = name
        self._handle: Optional[BinaryIO] = None

    def _open(self) -> BinaryIO:
        return open(self.name, "r+b", buffering=0)

    def connect(self) -> None:
        """Open the pipe, waiting once if all its instances are busy."""
        try:
            self._handle = self._open()
        except OSError as exc:
            if getattr(exc, "winerror", None) != _ERROR_PIPE_BUSY:
                raise ConnectionError(f"unable to open named pipe {self.name}: {exc}") from exc
            time.sleep(self.busy_wait)
            try:
                self._handle = self._open()
            except OSError as retry_exc:
                raise ConnectionError(
                    f"unable to open named pipe {self.name}: {retry_exc}"
                ) from retry_exc
        logger.info("The named pipe, %s, is connected.", self.name)

    def _require_handle(self) -> BinaryIO:
        if self._handle is None:
            raise ConnectionError(f"pipe {self.name} is not connected")
        return self._handle

    def send(self, message: str) -> None:
        """Write ``message`` followed by a NUL terminator."""
        handle = self._require_handle()
        data = message.encode() + b"\0"
        try:
            written = handle.write(data)
        except OSError as exc:
            raise ConnectionError(f"write to {self.name} failed: {exc}") from exc
        if written != len(data):
            raise ConnectionError(f"short write to {self.name}: {written} of {len(data)} bytes")
        logger.debug("Sends %d bytes; Message: %r", written, message)

    def receive(self) -> str:
        """Read one message, up to the first NUL; an empty string means end of input."""
        handle = self._require_handle()
        try:
            data = handle.read(BUFFER_SIZE)
        except OSError as exc:
            raise ConnectionError(f"read from {self.name} failed: {exc}") from exc
        data = data or b""
        logger.debug("Receives %d bytes", len(data))
        return data.split(b"\0", 1)[0].decode(errors="replace")

    def close(self) -> None:
        """Close the pipe if it is open."""
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def __enter__(self) -> GraphicsPipe:
        self.connect()
        return self

    def __exit__(self, *args: object) -> None:
        self.close()