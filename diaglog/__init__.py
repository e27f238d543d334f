# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""diaglog: leveled logging with structured diagnostic errors.

A thin facade over the standard ``logging`` engine that renders diagnostic
errors (code, descriptions, probable causes, remediations) as readable text,
and sends informational and error records to independently replaceable
streams.

Example:
    >>> import io
    >>> from diaglog import DiagnosticError, Options, Severity, new
    >>>
    >>> log = new("my-service", Options(log_level=Severity.DEBUG))
    >>> log.info("Service started")
    >>>
    >>> # Redirect error-tier output
    >>> errors = io.StringIO()
    >>> log.update_error_log_output(errors)
    >>> log.error(
    ...     DiagnosticError(
    ...         "1001",
    ...         short_descriptions=["Unable to connect to the database"],
    ...         probable_causes=["The database host is unreachable"],
    ...         remediations=["Verify the connection string"],
    ...     )
    ... )
"""

__version__ = "0.1.0"

from .diagnostics import (
    Diagnostic,
    DiagnosticError,
    diagnostic_fields,
    get_code,
    get_long_descriptions,
    get_probable_causes,
    get_remediations,
    get_severity,
    get_short_descriptions,
    is_diagnostic,
)
from .exceptions import ConfigurationError, DiaglogError, ErrorKind, FormattingError
from .factory import create_logger, new
from .formatters import JSONFormatter, TerminalFormatter
from .logger import Logger
from .options import LogFormat, Options
from .severity import Severity
from .silent_logger import SilentLogger
from .stream_logger import StreamLogger

__all__ = [
    # Version
    "__version__",
    # Loggers
    "Logger",
    "StreamLogger",
    "SilentLogger",
    "new",
    "create_logger",
    # Configuration
    "Options",
    "LogFormat",
    "Severity",
    # Formatters
    "TerminalFormatter",
    "JSONFormatter",
    # Errors
    "DiaglogError",
    "ConfigurationError",
    "FormattingError",
    "ErrorKind",
    "Diagnostic",
    "DiagnosticError",
    "is_diagnostic",
    "diagnostic_fields",
    "get_code",
    "get_severity",
    "get_short_descriptions",
    "get_long_descriptions",
    "get_probable_causes",
    "get_remediations",
]
