# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Tests for diagnostic errors and their accessor helpers."""

from dataclasses import dataclass, field

import pytest

from diaglog import (
    ConfigurationError,
    Diagnostic,
    DiagnosticError,
    Severity,
    diagnostic_fields,
    get_code,
    get_long_descriptions,
    get_probable_causes,
    get_remediations,
    get_severity,
    get_short_descriptions,
    is_diagnostic,
)


@dataclass
class ForeignDiagnostic(Exception):
    """Error from another library that happens to have the diagnostic shape."""

    code: str = "ext-1"
    severity: Severity = Severity.WARN
    short_descriptions: list[str] = field(default_factory=lambda: ["foreign short"])
    long_descriptions: list[str] = field(default_factory=list)
    probable_causes: list[str] = field(default_factory=lambda: ["foreign cause"])
    remediations: list[str] = field(default_factory=list)


class TestDiagnosticError:
    """Tests for DiagnosticError."""

    def test_attributes(self):
        """Test that constructor arguments are exposed as attributes."""
        err = DiagnosticError(
            "1001",
            Severity.FATAL,
            short_descriptions=["short"],
            long_descriptions=["long"],
            probable_causes=["cause"],
            remediations=["fix"],
        )

        assert err.code == "1001"
        assert err.severity == Severity.FATAL
        assert err.short_descriptions == ("short",)
        assert err.long_descriptions == ("long",)
        assert err.probable_causes == ("cause",)
        assert err.remediations == ("fix",)

    def test_defaults(self):
        """Test that omitted sections are empty and severity is ERROR."""
        err = DiagnosticError("1002")

        assert err.severity == Severity.ERROR
        assert err.short_descriptions == ()
        assert err.long_descriptions == ()
        assert err.probable_causes == ()
        assert err.remediations == ()

    def test_sections_are_immutable_copies(self):
        """Test that later changes to the caller's lists do not leak in."""
        causes = ["first"]
        err = DiagnosticError("1003", probable_causes=causes)

        causes.append("second")

        assert err.probable_causes == ("first",)
        with pytest.raises(AttributeError):
            err.code = "other"

    def test_single_string_is_one_entry(self):
        """Test that a bare string is not split into characters."""
        err = DiagnosticError("1004", remediations="restart the service")

        assert err.remediations == ("restart the service",)

    def test_str_prefers_short_descriptions(self):
        """Test str() fallbacks: short, then long, then code."""
        assert str(DiagnosticError("c", short_descriptions=["a", "b"])) == "a b"
        assert str(DiagnosticError("c", long_descriptions=["details"])) == "details"
        assert str(DiagnosticError("c")) == "c"

    def test_severity_by_name(self):
        """Test that severity accepts names."""
        assert DiagnosticError("c", "warning").severity == Severity.WARN

    def test_invalid_severity(self):
        """Test that an unknown severity is rejected."""
        with pytest.raises(ConfigurationError):
            DiagnosticError("c", "apocalyptic")

    def test_can_be_raised_and_caught(self):
        """Test that DiagnosticError behaves as a normal exception."""
        with pytest.raises(DiagnosticError, match="cannot open archive"):
            raise DiagnosticError("1005", short_descriptions=["cannot open archive"])


class TestDiagnosticProtocol:
    """Tests for the structural diagnostic check."""

    def test_diagnostic_error_satisfies_protocol(self):
        """Test that DiagnosticError is recognised."""
        err = DiagnosticError("1001")

        assert isinstance(err, Diagnostic)
        assert is_diagnostic(err)

    def test_foreign_type_satisfies_protocol(self):
        """Test that any value with the right attributes is recognised."""
        assert is_diagnostic(ForeignDiagnostic())

    def test_plain_errors_do_not_satisfy_protocol(self):
        """Test that ordinary exceptions are not diagnostic."""
        assert not is_diagnostic(ValueError("plain"))
        assert not is_diagnostic(None)
        assert not is_diagnostic("DiagnosticError")


class TestAccessors:
    """Tests for the get_* helpers and diagnostic_fields."""

    def test_accessors_on_diagnostic_error(self):
        """Test every accessor against a DiagnosticError."""
        err = DiagnosticError(
            "1001",
            Severity.ERROR,
            short_descriptions=["s"],
            long_descriptions=["l"],
            probable_causes=["c"],
            remediations=["r"],
        )

        assert get_code(err) == "1001"
        assert get_severity(err) == Severity.ERROR
        assert get_short_descriptions(err) == ["s"]
        assert get_long_descriptions(err) == ["l"]
        assert get_probable_causes(err) == ["c"]
        assert get_remediations(err) == ["r"]

    def test_accessors_on_plain_error(self):
        """Test that plain errors yield empty values rather than raising."""
        err = RuntimeError("plain")

        assert get_code(err) == ""
        assert get_severity(err) is None
        assert get_short_descriptions(err) == []
        assert get_long_descriptions(err) == []
        assert get_probable_causes(err) == []
        assert get_remediations(err) == []

    def test_accessors_tolerate_loose_sections(self):
        """Test None, bare-string and non-iterable sections on foreign errors."""
        err = ForeignDiagnostic(short_descriptions=None, probable_causes="disk full", remediations=7)

        assert get_short_descriptions(err) == []
        assert get_probable_causes(err) == ["disk full"]
        assert get_remediations(err) == []

    def test_foreign_severity_outside_scale(self):
        """Test that an unknown foreign severity does not break accessors."""
        err = ForeignDiagnostic(severity="sev-2")

        assert get_severity(err) is None
        assert diagnostic_fields(err)["severity"] == ""

    def test_diagnostic_fields(self):
        """Test the record fields produced for a diagnostic error."""
        fields = diagnostic_fields(ForeignDiagnostic())

        assert fields == {
            "code": "ext-1",
            "severity": "WARN",
            "short_description": ["foreign short"],
            "long_description": [],
            "probable_cause": ["foreign cause"],
            "suggested_remediation": [],
        }

    def test_diagnostic_fields_for_plain_error(self):
        """Test that plain errors add no fields."""
        assert diagnostic_fields(ValueError("plain")) == {}
