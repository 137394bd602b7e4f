"""Logging sinks.

This module provides the minimal sink interface used by
:class:`~color_logger.logger.ColorLogger`, a sink bridging to the standard
:mod:`logging` tree, a console sink and a file sink.
"""

from __future__ import annotations

from datetime import datetime
import logging
from pathlib import Path
import sys
import threading
from typing import TextIO

from .colors import strip_ansi

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


class LogSink:
    """Abstract sink used by :class:`~color_logger.logger.ColorLogger`."""

    def write(self, level: str, message: str) -> None:
        """Write a log message.

        :param level: Log level text (e.g. ``INFO``).
        :param message: Fully formatted message, escape codes included.
        """
        raise NotImplementedError("Provide a sink implementation.")

    def info(self, message: str) -> None:
        """Write an INFO message.

        :param message: Fully formatted message.
        """
        self.write("INFO", message)


class StdLoggingSink(LogSink):
    """Forward messages to a named :mod:`logging` logger.

    Routing, handlers and level filtering stay with the host's logging setup.

    :param name: Logger name passed to :func:`logging.getLogger`.
    """

    def __init__(self, name: str) -> None:
        self._logger = logging.getLogger(name)

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def write(self, level: str, message: str) -> None:
        # message is data, not a %-template
        self._logger.log(_LEVELS.get(level.upper(), logging.INFO), "%s", message)


class ConsoleLogSink(LogSink):
    """Write raw lines to a text stream.

    :param stream: Target stream; ``sys.stderr`` when omitted.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self._lock = threading.Lock()

    def write(self, level: str, message: str) -> None:
        stream = self._stream if self._stream is not None else sys.stderr
        with self._lock:
            stream.write(message + "\n")
            stream.flush()


class FileLogSink(LogSink):
    """Thread-safe file sink.

    :param path: File path to append logs to.
    :param strip_colors: Remove ANSI escape codes before writing.
    """

    def __init__(self, path: Path, strip_colors: bool = True) -> None:
        self._path = Path(path)
        self._strip_colors = strip_colors
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def write(self, level: str, message: str) -> None:
        if self._strip_colors:
            message = strip_ansi(message)
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{timestamp}] {level}: {message}"
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._lock:
            with self._path.open("a", encoding="utf-8") as handle:
                handle.write(line + "\n")
