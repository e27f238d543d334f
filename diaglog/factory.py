# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Factory functions for creating logger instances."""

import logging
import os
from typing import IO, Any

from .formatters import JSONFormatter, TerminalFormatter
from .options import LogFormat, Options
from .severity import Severity
from .stream_logger import StreamLogger

logger = logging.getLogger(__name__)


def _build_formatter(log_format: LogFormat, name: str) -> logging.Formatter:
    if log_format is LogFormat.JSON:
        return JSONFormatter(logger_name=name)
    return TerminalFormatter()


def new(name: str, options: Options | None = None) -> StreamLogger:
    """Validate options and build a logger.

    Args:
        name: Logger name for identification
        options: Logger options; defaults to terminal output at INFO

    Returns:
        StreamLogger instance

    Raises:
        ConfigurationError: If the format, level or outputs are invalid

    Example:
        >>> log = new("my-service", Options(log_level=Severity.DEBUG))
        >>> log.info("Service started")
        >>>
        >>> # Send everything to a file
        >>> with open("service.log", "a", encoding="utf-8") as f:
        ...     log = new("my-service", Options(output=f))
        ...     log.errorf("failed after %d retries", 3)
    """
    options = options or Options()
    log_format, level = options.validate()

    error_output = options.error_output if options.error_output is not None else options.output
    instance = StreamLogger(
        name=name,
        level=level,
        formatter=_build_formatter(log_format, name),
        enable_caller_info=options.enable_caller_info,
        output=options.output,
        error_output=error_output,
    )
    logger.debug(
        "Created logger %s (format=%s, level=%s, caller_info=%s)",
        instance.name,
        log_format.value,
        level.name,
        options.enable_caller_info,
    )
    return instance


def create_logger(
    name: str | None = None,
    log_format: LogFormat | str | None = None,
    level: Severity | int | str | None = None,
    enable_caller_info: bool | None = None,
    output: IO[Any] | None = None,
) -> StreamLogger:
    """Factory function to create a logger from arguments or the environment.

    Args:
        name: Logger name. Defaults to LOG_NAME env or "diaglog".
        log_format: Output format. Options: "terminal", "json".
            Defaults to LOG_FORMAT env or "terminal".
        level: Logging level. Options: DEBUG, INFO, WARN, ERROR, FATAL.
            Defaults to LOG_LEVEL env or "INFO".
        enable_caller_info: Defaults to LOG_CALLER_INFO env or False.
        output: Sink for all records; defaults to stdout/stderr

    Returns:
        StreamLogger instance

    Raises:
        ConfigurationError: If the resolved configuration is invalid
    """
    name = name or os.getenv("LOG_NAME") or "diaglog"
    options = Options.from_env(
        format=log_format,
        log_level=level,
        enable_caller_info=enable_caller_info,
        output=output,
    )
    return new(name, options)
