# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Stream handler with swappable sinks and severity-class routing."""

import io
import logging
import sys
from typing import IO, Any

from .exceptions import FormattingError
from .formatters import severity_name
from .severity import Severity

logger = logging.getLogger(__name__)


class InfoFilter(logging.Filter):
    """Filter that lets records below ERROR through."""

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < Severity.ERROR


class ErrorFilter(logging.Filter):
    """Filter that lets ERROR and above through."""

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno >= Severity.ERROR


def is_writable(stream: Any) -> bool:
    """Return True if the value can be used as a sink.

    Streams that report ``writable()`` (files, ``io`` buffers) must say yes;
    closed or read-only files are rejected.
    """
    if not callable(getattr(stream, "write", None)):
        return False
    writable = getattr(stream, "writable", None)
    if not callable(writable):
        return True
    try:
        return bool(writable())
    except ValueError:
        # Raised by closed io objects
        return False


def _is_binary(stream: Any) -> bool:
    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        return True
    mode = getattr(stream, "mode", None)
    return isinstance(mode, str) and "b" in mode


def fallback_line(record: logging.LogRecord) -> str:
    """Minimal unformatted rendering used when a formatter fails."""
    return f"{severity_name(record.levelno)} {record.msg}"


class SwappableStreamHandler(logging.StreamHandler):
    """StreamHandler whose sink can be replaced while records are being emitted.

    When no sink is set, the named ``sys`` stream ("stdout" or "stderr") is
    resolved at write time, so test harnesses that replace ``sys.stdout``
    per test are honoured. Formatting and writing happen under the handler
    lock, so one record's text is written by a single ``write`` call and
    never interleaves with another record on the same sink.
    """

    def __init__(self, stream: IO[Any] | None = None, default_stream: str = "stdout"):
        """Initialize the handler.

        Args:
            stream: Sink to write to; None means the default ``sys`` stream
            default_stream: Name of the ``sys`` attribute used when no sink is set
        """
        self._default_stream = default_stream
        self._sink: IO[Any] | None = None
        super().__init__(stream)
        self._sink = stream

    @property
    def stream(self) -> IO[Any]:
        if self._sink is not None:
            return self._sink
        return getattr(sys, self._default_stream)

    @stream.setter
    def stream(self, value: IO[Any] | None) -> None:
        self._sink = value

    def setStream(self, stream: IO[Any] | None) -> IO[Any] | None:
        """Replace the sink for all subsequent records.

        The previous sink is flushed, not closed; callers own their streams.

        Args:
            stream: New sink, or None to go back to the default ``sys`` stream

        Returns:
            The previous sink, or None if the default stream was in use
        """
        self.acquire()
        try:
            previous = self._sink
            self.flush()
            self._sink = stream
        finally:
            self.release()
        return previous

    def flush(self) -> None:
        self.acquire()
        try:
            stream = self.stream
            if stream is not None and hasattr(stream, "flush"):
                stream.flush()
        finally:
            self.release()

    def emit(self, record: logging.LogRecord) -> None:
        """Format the record and write it to the current sink.

        Formatter failures produce a fallback line instead of dropping the
        record. Write failures go to ``handleError`` and never reach the caller.
        """
        try:
            msg = self.format(record)
        except FormattingError as e:
            logger.debug("Falling back to unformatted output: %s", e)
            msg = fallback_line(record)

        try:
            text = msg + self.terminator
            stream = self.stream
            if _is_binary(stream):
                stream.write(text.encode("utf-8", errors="replace"))
            else:
                stream.write(text)
            self.flush()
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)
