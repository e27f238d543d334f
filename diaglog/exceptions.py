# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Exceptions raised by the diaglog package."""

from enum import Enum


class ErrorKind(str, Enum):
    """Reason a logger could not be configured."""

    UNSUPPORTED_FORMAT = "unsupported_format"
    INVALID_LEVEL = "invalid_level"
    INVALID_OUTPUT = "invalid_output"


class DiaglogError(Exception):
    """Base exception for diaglog errors."""
    pass


class ConfigurationError(DiaglogError, ValueError):
    """Raised when logger options are invalid at construction time."""

    def __init__(self, message: str, kind: ErrorKind, value: object = None):
        """Initialize ConfigurationError with context.

        Args:
            message: Error message
            kind: Which option was rejected
            value: The rejected value (optional)
        """
        super().__init__(message)
        self.kind = kind
        self.value = value


class FormattingError(DiaglogError):
    """Raised when a formatter cannot render a log record."""

    def __init__(self, message: str, record_message: object = None):
        """Initialize FormattingError.

        Args:
            message: Error message
            record_message: Raw message of the record that failed to render (optional)
        """
        super().__init__(message)
        self.record_message = record_message
