# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Formatters that render log records for terminal and JSON output.

Both formatters read structured data from ``record.fields``, the mapping a
logger attaches through ``extra={"fields": ...}``. The line terminator is
appended by the handler, not the formatter.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any

from .diagnostics import (
    CODE_FIELD,
    LONG_DESCRIPTION_FIELD,
    PROBABLE_CAUSE_FIELD,
    SEVERITY_FIELD,
    SHORT_DESCRIPTION_FIELD,
    SUGGESTED_REMEDIATION_FIELD,
)
from .exceptions import FormattingError
from .severity import Severity

CALLER_FIELD = "caller"

PROBABLE_CAUSE_PREFIX = "Probable cause: "
REMEDIATION_PREFIX = "Suggested remediation: "
DETAIL_INDENT = "  "


def record_fields(record: logging.LogRecord) -> dict[str, Any]:
    """Return the structured fields attached to a record (empty if none)."""
    fields = getattr(record, "fields", None)
    return fields if isinstance(fields, dict) else {}


def severity_name(levelno: int) -> str:
    """Name of a numeric level, falling back to the stdlib name."""
    try:
        return Severity(levelno).name
    except ValueError:
        return logging.getLevelName(levelno)


def _entries(fields: dict[str, Any], key: str) -> list[str]:
    values = fields.get(key)
    if not values:
        return []
    if isinstance(values, str):
        return [values]
    return [str(v) for v in values if v is not None and str(v) != ""]


class TerminalFormatter(logging.Formatter):
    """Human-readable formatter for terminals and plain-text files.

    Output shape::

        [app.py:42] message
          short description
          long description
          Probable cause: ...
          Suggested remediation: ...
    """

    def format(self, record: logging.LogRecord) -> str:
        """Render a record as text.

        Args:
            record: Log record to format

        Returns:
            Formatted text without a trailing newline

        Raises:
            FormattingError: If the message cannot be rendered
        """
        try:
            message = record.getMessage()
            fields = record_fields(record)

            caller = fields.get(CALLER_FIELD)
            line = f"[{caller}] {message}" if caller else message

            lines = [line]
            lines.extend(DETAIL_INDENT + s for s in _entries(fields, SHORT_DESCRIPTION_FIELD))
            lines.extend(DETAIL_INDENT + s for s in _entries(fields, LONG_DESCRIPTION_FIELD))
            lines.extend(
                DETAIL_INDENT + PROBABLE_CAUSE_PREFIX + s
                for s in _entries(fields, PROBABLE_CAUSE_FIELD)
            )
            lines.extend(
                DETAIL_INDENT + REMEDIATION_PREFIX + s
                for s in _entries(fields, SUGGESTED_REMEDIATION_FIELD)
            )
            return "\n".join(lines)
        except Exception as e:
            raise FormattingError(f"Failed to format log record: {e}", record.msg) from e


class JSONFormatter(logging.Formatter):
    """Custom formatter that outputs structured JSON logs."""

    def __init__(self, logger_name: str = "diaglog"):
        """Initialize JSON formatter.

        Args:
            logger_name: Name to use in the logger field of JSON output
        """
        super().__init__()
        self.logger_name = logger_name

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON-formatted log string

        Raises:
            FormattingError: If the message cannot be rendered or serialized
        """
        try:
            fields = record_fields(record)
            log_entry: dict[str, Any] = {
                "timestamp": datetime.fromtimestamp(record.created, timezone.utc)
                .isoformat()
                .replace("+00:00", "Z"),
                "level": severity_name(record.levelno),
                "logger": self.logger_name,
                "message": record.getMessage(),
            }

            caller = fields.get(CALLER_FIELD)
            if caller:
                log_entry[CALLER_FIELD] = caller

            error = self._error_entry(fields)
            if error:
                log_entry["error"] = error

            return json.dumps(log_entry, default=str)
        except Exception as e:
            raise FormattingError(f"Failed to format log record as JSON: {e}", record.msg) from e

    @staticmethod
    def _error_entry(fields: dict[str, Any]) -> dict[str, Any]:
        error: dict[str, Any] = {}
        for key in (CODE_FIELD, SEVERITY_FIELD):
            if fields.get(key):
                error[key] = fields[key]
        for key in (
            SHORT_DESCRIPTION_FIELD,
            LONG_DESCRIPTION_FIELD,
            PROBABLE_CAUSE_FIELD,
            SUGGESTED_REMEDIATION_FIELD,
        ):
            entries = _entries(fields, key)
            if entries:
                error[key] = entries
        return error
