# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Severity levels, numerically compatible with the standard logging module."""

import logging
from enum import IntEnum

from .exceptions import ConfigurationError, ErrorKind

# Accepted spellings that are not member names
_ALIASES = {
    "WARNING": "WARN",
    "CRITICAL": "FATAL",
}


class Severity(IntEnum):
    """Ordered urgency of a log record."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR
    FATAL = logging.CRITICAL
    PANIC = logging.CRITICAL + 10

    @property
    def is_error_class(self) -> bool:
        """True for severities routed to the error stream."""
        return self >= Severity.ERROR

    @classmethod
    def parse(cls, value: "Severity | int | str") -> "Severity":
        """Resolve a severity from a member, its numeric value, or its name.

        Names are case-insensitive; "warning" and "critical" are accepted as
        aliases for WARN and FATAL.

        Raises:
            ConfigurationError: If the value does not name a known severity
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise ConfigurationError(
                f"Invalid log level: {value!r}", ErrorKind.INVALID_LEVEL, value
            )
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                raise ConfigurationError(
                    f"Invalid log level: {value}. "
                    f"Must be one of {[int(m) for m in cls]}",
                    ErrorKind.INVALID_LEVEL,
                    value,
                ) from None
        if isinstance(value, str):
            key = value.strip().upper()
            key = _ALIASES.get(key, key)
            if key in cls.__members__:
                return cls[key]
            if key.isdigit():
                return cls.parse(int(key))
            raise ConfigurationError(
                f"Invalid log level: {value}. Must be one of {list(cls.__members__)}",
                ErrorKind.INVALID_LEVEL,
                value,
            )
        raise ConfigurationError(
            f"Invalid log level type: {type(value).__name__}",
            ErrorKind.INVALID_LEVEL,
            value,
        )
