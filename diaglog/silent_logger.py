# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Silent logger implementation for testing."""

import threading
from typing import Any

from .diagnostics import diagnostic_fields
from .logger import Logger, Message
from .severity import Severity
from .stream_logger import NIL_ERROR


class SilentLogger(Logger):
    """Logger that stores log messages in memory without output.

    Useful for testing to verify logging behavior without cluttering test output.
    Note: SilentLogger does not filter logs by level - all logs are captured for testing.
    Fatal records are captured but never terminate the process.
    """

    def __init__(self, level: Severity | int | str = Severity.INFO, name: str | None = None):
        """Initialize silent logger.

        Args:
            level: Logging level (stored but not used for filtering in silent mode)
            name: Optional logger name for identification
        """
        self._level = Severity.parse(level)
        self.name = name or "diaglog"
        self.logs: list[dict[str, Any]] = []
        self._lock = threading.Lock()

    @property
    def level(self) -> Severity:
        return self.get_level()

    def _log(self, severity: Severity, message: Message, args: tuple[Any, ...] = ()) -> None:
        """Internal method to store log message.

        Args:
            severity: Log level
            message: The log message, template, or exception
            args: Template arguments
        """
        log_entry: dict[str, Any] = {"level": severity.name}

        if message is None:
            log_entry["message"] = NIL_ERROR
        elif isinstance(message, BaseException):
            log_entry["message"] = str(message)
            fields = diagnostic_fields(message)
            if fields:
                log_entry["extra"] = fields
        else:
            log_entry["message"] = message % args if args else str(message)

        with self._lock:
            self.logs.append(log_entry)

    def debug(self, message: Message) -> None:
        self._log(Severity.DEBUG, message)

    def debugf(self, template: str, *args: Any) -> None:
        self._log(Severity.DEBUG, template, args)

    def info(self, message: Message) -> None:
        self._log(Severity.INFO, message)

    def infof(self, template: str, *args: Any) -> None:
        self._log(Severity.INFO, template, args)

    def warn(self, message: Message) -> None:
        self._log(Severity.WARN, message)

    def warnf(self, template: str, *args: Any) -> None:
        self._log(Severity.WARN, template, args)

    def error(self, message: Message) -> None:
        self._log(Severity.ERROR, message)

    def errorf(self, template: str, *args: Any) -> None:
        self._log(Severity.ERROR, template, args)

    def fatal(self, message: Message) -> None:
        self._log(Severity.FATAL, message)

    def fatalf(self, template: str, *args: Any) -> None:
        self._log(Severity.FATAL, template, args)

    def set_level(self, level: Severity | int | str) -> None:
        severity = Severity.parse(level)
        with self._lock:
            self._level = severity

    def get_level(self) -> Severity:
        with self._lock:
            return self._level

    def clear_logs(self) -> None:
        """Clear all stored log messages (useful for testing)."""
        with self._lock:
            self.logs.clear()

    def get_logs(self, level: Severity | str | None = None) -> list[dict[str, Any]]:
        """Get stored log messages, optionally filtered by level.

        Args:
            level: Optional log level to filter by (DEBUG, INFO, WARN, ERROR, FATAL)

        Returns:
            List of log entries
        """
        with self._lock:
            logs = list(self.logs)
        if level is None:
            return logs
        name = Severity.parse(level).name
        return [log for log in logs if log["level"] == name]

    def has_log(self, message: str, level: Severity | str | None = None) -> bool:
        """Check if a specific log message exists.

        Args:
            message: Message to search for (substring match)
            level: Optional log level to filter by

        Returns:
            True if message is found, False otherwise
        """
        logs_to_search = self.get_logs(level)
        return any(message in log["message"] for log in logs_to_search)
