"""Line-oriented log sink shared by the default hook and ``exitf``.

Every call writes exactly one line of the form::

    2026/10/18 09:14:03 <message>

terminated by a single newline and flushed immediately.  Output goes to
whatever :data:`sys.stderr` is at the time of the write unless a stream
has been installed with :func:`set_output`.

Only the ``"ctrl"`` logger is configured here; the root logger and its
handlers are left alone.
"""

from __future__ import annotations

import logging
import sys
from typing import IO

LOGGER_NAME: str = "ctrl"
LOG_FORMAT: str = "%(asctime)s %(message)s"
DATE_FORMAT: str = "%Y/%m/%d %H:%M:%S"


class _LineHandler(logging.StreamHandler):
    """Stream handler that resolves ``sys.stderr`` lazily.

    A plain :class:`logging.StreamHandler` captures ``sys.stderr`` once at
    construction; this one looks it up on every write unless an explicit
    stream was installed.
    """

    def __init__(self) -> None:
        super().__init__()
        self._output: IO[str] | None = None

    @property  # type: ignore[override]
    def stream(self) -> IO[str]:
        if self._output is not None:
            return self._output
        return sys.stderr

    @stream.setter
    def stream(self, value: IO[str] | None) -> None:
        self._output = value


_handler = _LineHandler()
_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

_logger = logging.getLogger(LOGGER_NAME)
_logger.addHandler(_handler)
_logger.setLevel(logging.INFO)
_logger.propagate = False


def get_logger() -> logging.Logger:
    """Return the logger backing the sink."""
    return _logger


def set_output(stream: IO[str] | None) -> None:
    """Redirect log lines to *stream*; ``None`` restores ``sys.stderr``."""
    _handler.acquire()
    try:
        _handler.flush()
        _handler.stream = stream
    finally:
        _handler.release()


def log_line(message: str) -> None:
    """Write *message* as one log line.

    A single trailing newline is dropped so the line is never doubled.
    """
    if message.endswith("\n"):
        message = message[:-1]
    _logger.info("%s", message)


def flush() -> None:
    """Flush the underlying stream."""
    _handler.flush()
