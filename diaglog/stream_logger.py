# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Logger that writes formatted records to an info stream and an error stream."""

import logging
import os
import sys
import threading
from typing import IO, Any, Callable

from .diagnostics import diagnostic_fields
from .exceptions import ConfigurationError, ErrorKind
from .formatters import CALLER_FIELD, TerminalFormatter
from .handlers import ErrorFilter, InfoFilter, SwappableStreamHandler, is_writable
from .logger import Logger, Message
from .severity import Severity

logger = logging.getLogger(__name__)

NIL_ERROR = "<nil error>"

# Frames between the public emission method's caller and _caller():
# _caller <- _log <- info/infof/... <- caller
_CALLER_DEPTH = 3


def _caller(depth: int = _CALLER_DEPTH) -> str:
    """Return "<file>:<line>" for the frame `depth` levels up, or "" if there is none."""
    try:
        frame = sys._getframe(depth)
    except ValueError:
        return ""
    return f"{os.path.basename(frame.f_code.co_filename)}:{frame.f_lineno}"


class StreamLogger(Logger):
    """Logger that routes records to an info stream or an error stream.

    Records at ERROR and above go to the error stream; everything else goes
    to the info stream. The threshold decides whether a record is emitted;
    routing decides where it goes.

    Each instance owns a private ``logging.Logger`` engine that is not
    registered with the global ``logging`` manager, so several loggers with
    the same name can coexist with different levels and outputs.
    """

    def __init__(
        self,
        name: str | None = None,
        level: Severity | int | str = Severity.INFO,
        formatter: logging.Formatter | None = None,
        enable_caller_info: bool = False,
        output: IO[Any] | None = None,
        error_output: IO[Any] | None = None,
        exit_func: Callable[[int], Any] = os._exit,
    ):
        """Initialize stream logger.

        Args:
            name: Logger name for identification
            level: Minimum severity to emit
            formatter: Formatter shared by both streams (default: TerminalFormatter)
            enable_caller_info: Prefix records with the calling file and line
            output: Info stream; None means stdout, resolved at write time
            error_output: Error stream; None means stderr, resolved at write time
            exit_func: Called with exit status 1 after a fatal record is written
                and both streams are flushed; the default ends the process from
                any thread without unwinding

        Raises:
            ConfigurationError: If the level is not a known severity
        """
        self.name = name or "diaglog"
        self.enable_caller_info = enable_caller_info
        self._level = Severity.parse(level)
        self._level_lock = threading.Lock()
        self._exit = exit_func

        self.formatter = formatter or TerminalFormatter()

        self._info_handler = SwappableStreamHandler(output, default_stream="stdout")
        self._info_handler.addFilter(InfoFilter())
        self._info_handler.setFormatter(self.formatter)

        self._error_handler = SwappableStreamHandler(error_output, default_stream="stderr")
        self._error_handler.addFilter(ErrorFilter())
        self._error_handler.setFormatter(self.formatter)

        # Threshold is enforced in _log; the engine passes everything through
        self._engine = logging.Logger(self.name, logging.NOTSET)
        self._engine.propagate = False
        self._engine.addHandler(self._info_handler)
        self._engine.addHandler(self._error_handler)

    @property
    def level(self) -> Severity:
        """Current threshold."""
        return self.get_level()

    def _log(self, severity: Severity, message: Message, args: tuple[Any, ...] = ()) -> None:
        """Check the threshold, build fields, and hand the record to the engine.

        Args:
            severity: Severity of the record
            message: Message text, template, exception, or None
            args: Template arguments, substituted when the record is formatted
        """
        if severity < self.get_level():
            return

        fields: dict[str, Any] = {}
        if self.enable_caller_info:
            caller = _caller()
            if caller:
                fields[CALLER_FIELD] = caller

        if message is None:
            text = NIL_ERROR
        elif isinstance(message, BaseException):
            fields.update(diagnostic_fields(message))
            text = str(message) or type(message).__name__
        else:
            text = str(message)

        self._engine.log(severity, text, *args, extra={"fields": fields})

    def debug(self, message: Message) -> None:
        """Log a debug-level message."""
        self._log(Severity.DEBUG, message)

    def debugf(self, template: str, *args: Any) -> None:
        """Log a debug-level message built from a printf-style template."""
        self._log(Severity.DEBUG, template, args)

    def info(self, message: Message) -> None:
        """Log an info-level message."""
        self._log(Severity.INFO, message)

    def infof(self, template: str, *args: Any) -> None:
        """Log an info-level message built from a printf-style template."""
        self._log(Severity.INFO, template, args)

    def warn(self, message: Message) -> None:
        """Log a warning-level message."""
        self._log(Severity.WARN, message)

    def warnf(self, template: str, *args: Any) -> None:
        """Log a warning-level message built from a printf-style template."""
        self._log(Severity.WARN, template, args)

    def error(self, message: Message) -> None:
        """Log an error-level message to the error stream."""
        self._log(Severity.ERROR, message)

    def errorf(self, template: str, *args: Any) -> None:
        """Log an error-level message built from a printf-style template."""
        self._log(Severity.ERROR, template, args)

    def fatal(self, message: Message) -> None:
        """Log a fatal-level message, flush both streams, then exit with status 1."""
        self._log(Severity.FATAL, message)
        self.flush()
        self._exit(1)

    def fatalf(self, template: str, *args: Any) -> None:
        """Log a fatal-level templated message, flush both streams, then exit with status 1."""
        self._log(Severity.FATAL, template, args)
        self.flush()
        self._exit(1)

    def set_level(self, level: Severity | int | str) -> None:
        """Set the threshold for all subsequent records.

        Raises:
            ConfigurationError: If the level is not a known severity
        """
        severity = Severity.parse(level)
        with self._level_lock:
            self._level = severity

    def get_level(self) -> Severity:
        """Return the current threshold."""
        with self._level_lock:
            return self._level

    def update_log_output(self, stream: IO[Any] | None) -> None:
        """Send subsequent info-tier records to a new stream.

        Records already written to the previous stream are left untouched.
        The previous stream is flushed but not closed.

        Args:
            stream: New info stream, or None to go back to stdout
        """
        self._swap(self._info_handler, stream, "info")

    def update_error_log_output(self, stream: IO[Any] | None) -> None:
        """Send subsequent error-tier records to a new stream.

        Args:
            stream: New error stream, or None to go back to stderr
        """
        self._swap(self._error_handler, stream, "error")

    def _swap(self, handler: SwappableStreamHandler, stream: IO[Any] | None, tier: str) -> None:
        if stream is not None and not is_writable(stream):
            raise ConfigurationError(
                f"{tier} output must be a writable stream, got {type(stream).__name__}",
                ErrorKind.INVALID_OUTPUT,
                stream,
            )
        handler.setStream(stream)
        logger.debug("Logger %s: %s output replaced", self.name, tier)

    def flush(self) -> None:
        """Flush both streams."""
        self._info_handler.flush()
        self._error_handler.flush()
