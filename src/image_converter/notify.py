"""Notification sinks for per-file conversion status lines."""

from __future__ import annotations

import logging
import threading
from typing import IO

import typer


def printable(message: str) -> str:
    """Escape undecodable file-name bytes so any UTF-8 stream can write them.

    ``os.walk`` hands back names that are not valid UTF-8 with lone
    surrogates in place of the raw bytes; those become ``\\xNN`` escapes.
    """
    return message.encode("utf-8", "surrogateescape").decode(
        "utf-8", "backslashreplace"
    )


class ConsoleNotifier:
    """Write each status message as one line to a text stream.

    Writes are serialised so lines from concurrent workers never interleave.
    """

    def __init__(self, stream: IO[str] | None = None, *, err: bool = False) -> None:
        self._stream = stream
        self._err = err
        self._lock = threading.Lock()

    def notify(self, message: str) -> None:
        with self._lock:
            typer.echo(printable(message), file=self._stream, err=self._err)


class LoggingNotifier:
    """Relay status messages to a logger."""

    def __init__(
        self,
        logger: logging.Logger | None = None,
        level: int = logging.INFO,
    ) -> None:
        self._logger = logger or logging.getLogger("image_converter.conversion")
        self._level = level

    def notify(self, message: str) -> None:
        self._logger.log(self._level, "%s", message)


class RecordingNotifier:
    """Keep status messages in memory, in arrival order."""

    def __init__(self) -> None:
        self.messages: list[str] = []
        self._lock = threading.Lock()

    def notify(self, message: str) -> None:
        with self._lock:
            self.messages.append(message)
