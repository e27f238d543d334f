# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Construction-time logger configuration."""

import os
from dataclasses import dataclass
from enum import Enum
from typing import IO, Any

from .exceptions import ConfigurationError, ErrorKind
from .handlers import is_writable
from .severity import Severity

_TRUE_VALUES = {"1", "true", "yes", "on"}


class LogFormat(str, Enum):
    """Output formats a logger can be built with."""

    TERMINAL = "terminal"
    JSON = "json"

    @classmethod
    def parse(cls, value: "LogFormat | str") -> "LogFormat":
        """Resolve a format from a member or its (case-insensitive) value.

        Raises:
            ConfigurationError: If the format is not supported
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ConfigurationError(
            f"Unknown log format: {value}. Must be one of: "
            f"{', '.join(m.value for m in cls)}",
            ErrorKind.UNSUPPORTED_FORMAT,
            value,
        )


def _default(value: Any, env_var: str, fallback: str) -> Any:
    """Helper to pick an explicit value, then env var, then fallback."""
    if value is not None:
        return value
    return os.getenv(env_var) or fallback


@dataclass
class Options:
    """Logger options.

    Attributes:
        format: Output format (terminal or json)
        log_level: Threshold as a Severity, its numeric value, or its name
        enable_caller_info: Prefix records with the calling file and line
        output: Sink for all records; None means stdout for info-tier and
            stderr for error-tier records
        error_output: Sink for error-tier records, overriding ``output``
    """

    format: LogFormat | str = LogFormat.TERMINAL
    log_level: Severity | int | str = Severity.INFO
    enable_caller_info: bool = False
    output: IO[Any] | None = None
    error_output: IO[Any] | None = None

    @classmethod
    def from_env(
        cls,
        format: LogFormat | str | None = None,
        log_level: Severity | int | str | None = None,
        enable_caller_info: bool | None = None,
        output: IO[Any] | None = None,
        error_output: IO[Any] | None = None,
    ) -> "Options":
        """Build options from explicit values, then environment, then defaults.

        Environment variables: LOG_FORMAT (default "terminal"), LOG_LEVEL
        (default "INFO"), LOG_CALLER_INFO (default "false").
        """
        caller_info = _default(enable_caller_info, "LOG_CALLER_INFO", "false")
        if isinstance(caller_info, str):
            caller_info = caller_info.strip().lower() in _TRUE_VALUES
        return cls(
            format=_default(format, "LOG_FORMAT", LogFormat.TERMINAL.value),
            log_level=_default(log_level, "LOG_LEVEL", Severity.INFO.name),
            enable_caller_info=bool(caller_info),
            output=output,
            error_output=error_output,
        )

    def validate(self) -> tuple[LogFormat, Severity]:
        """Check every option.

        Returns:
            The parsed format and threshold

        Raises:
            ConfigurationError: If any option is invalid
        """
        log_format = LogFormat.parse(self.format)
        level = Severity.parse(self.log_level)
        for attr in ("output", "error_output"):
            sink = getattr(self, attr)
            if sink is not None and not is_writable(sink):
                raise ConfigurationError(
                    f"{attr} must be a writable stream, got {type(sink).__name__}",
                    ErrorKind.INVALID_OUTPUT,
                    sink,
                )
        return log_format, level
