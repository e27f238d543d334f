# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Tests for the terminal and JSON formatters."""

import json
import logging

import pytest

from diaglog import DiagnosticError, FormattingError, JSONFormatter, Severity, TerminalFormatter
from diaglog.diagnostics import diagnostic_fields


def make_record(message, *args, fields=None, level=logging.INFO):
    """Build a LogRecord the way the engine does, with optional fields."""
    record = logging.LogRecord(
        name="testapp",
        level=level,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=args or None,
        exc_info=None,
    )
    if fields is not None:
        record.fields = fields
    return record


class TestTerminalFormatter:
    """Tests for TerminalFormatter."""

    def test_format_message(self):
        """Test that a bare record renders its message."""
        formatter = TerminalFormatter()

        output = formatter.format(make_record("test message", fields={}))

        assert output == "test message"

    def test_format_with_caller(self):
        """Test that the caller field becomes a bracket prefix."""
        formatter = TerminalFormatter()

        output = formatter.format(make_record("test message", fields={"caller": "main.go:10"}))

        assert "[main.go:10] test message" in output

    def test_format_without_fields_attribute(self):
        """Test records created outside a diaglog logger."""
        formatter = TerminalFormatter()

        output = formatter.format(make_record("test message"))

        assert output == "test message"
        assert "[" not in output

    def test_empty_caller_is_ignored(self):
        """Test that an empty caller does not produce empty brackets."""
        formatter = TerminalFormatter()

        output = formatter.format(make_record("test message", fields={"caller": ""}))

        assert output == "test message"

    def test_template_arguments_are_substituted(self):
        """Test printf-style substitution of record args."""
        formatter = TerminalFormatter()

        output = formatter.format(make_record("%s has %d items", "cart", 3, fields={}))

        assert output == "cart has 3 items"

    def test_format_diagnostic_fields(self):
        """Test the full diagnostic block."""
        formatter = TerminalFormatter()
        err = DiagnosticError(
            "1001",
            short_descriptions=["S"],
            long_descriptions=["L"],
            probable_causes=["C"],
            remediations=["R"],
        )

        output = formatter.format(make_record(str(err), fields=diagnostic_fields(err)))

        assert output.splitlines() == [
            "S",
            "  S",
            "  L",
            "  Probable cause: C",
            "  Suggested remediation: R",
        ]

    def test_multiple_entries_per_section(self):
        """Test one line per entry."""
        formatter = TerminalFormatter()
        fields = {
            "probable_cause": ["disk full", "quota exceeded"],
            "suggested_remediation": ["free space", "raise quota"],
        }

        output = formatter.format(make_record("write failed", fields=fields))

        assert output.splitlines() == [
            "write failed",
            "  Probable cause: disk full",
            "  Probable cause: quota exceeded",
            "  Suggested remediation: free space",
            "  Suggested remediation: raise quota",
        ]

    def test_empty_sections_are_omitted(self):
        """Test that empty lists leave no headers or markers behind."""
        formatter = TerminalFormatter()
        err = DiagnosticError("1002", remediations=["retry later"])

        output = formatter.format(make_record("temporarily unavailable", fields=diagnostic_fields(err)))

        assert output.splitlines() == [
            "temporarily unavailable",
            "  Suggested remediation: retry later",
        ]
        assert "[]" not in output
        assert "None" not in output
        assert "Probable cause" not in output

    def test_caller_with_diagnostic_fields(self):
        """Test that the caller prefix applies to the message line only."""
        formatter = TerminalFormatter()
        fields = {"caller": "app.py:7", "long_description": ["details"]}

        output = formatter.format(make_record("failed", fields=fields))

        assert output.splitlines() == ["[app.py:7] failed", "  details"]

    def test_unrenderable_message_raises_formatting_error(self):
        """Test that template errors surface as FormattingError."""
        formatter = TerminalFormatter()

        with pytest.raises(FormattingError) as exc_info:
            formatter.format(make_record("%d items", "many", fields={}))

        assert exc_info.value.record_message == "%d items"

    def test_formatter_is_stateless(self):
        """Test that formatting one record does not affect the next."""
        formatter = TerminalFormatter()

        formatter.format(make_record("first", fields={"caller": "a.py:1", "probable_cause": ["x"]}))
        output = formatter.format(make_record("second", fields={}))

        assert output == "second"


class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def test_format_basic_entry(self):
        """Test the fixed keys of a JSON entry."""
        formatter = JSONFormatter(logger_name="svc")

        entry = json.loads(formatter.format(make_record("hello", fields={})))

        assert entry["message"] == "hello"
        assert entry["level"] == "INFO"
        assert entry["logger"] == "svc"
        assert entry["timestamp"].endswith("Z")
        assert "caller" not in entry
        assert "error" not in entry

    def test_severity_names(self):
        """Test that level names follow Severity, not stdlib names."""
        formatter = JSONFormatter()

        warn = json.loads(formatter.format(make_record("w", level=Severity.WARN)))
        fatal = json.loads(formatter.format(make_record("f", level=Severity.FATAL)))

        assert warn["level"] == "WARN"
        assert fatal["level"] == "FATAL"

    def test_format_caller_and_error(self):
        """Test that caller and diagnostic fields are nested."""
        formatter = JSONFormatter()
        err = DiagnosticError(
            "1003",
            Severity.FATAL,
            short_descriptions=["S"],
            probable_causes=["C"],
        )
        fields = {"caller": "main.py:3", **diagnostic_fields(err)}

        entry = json.loads(formatter.format(make_record(str(err), fields=fields, level=logging.ERROR)))

        assert entry["caller"] == "main.py:3"
        assert entry["error"] == {
            "code": "1003",
            "severity": "FATAL",
            "short_description": ["S"],
            "probable_cause": ["C"],
        }

    def test_unrenderable_message_raises_formatting_error(self):
        """Test that template errors surface as FormattingError."""
        formatter = JSONFormatter()

        with pytest.raises(FormattingError):
            formatter.format(make_record("%d", "x"))
