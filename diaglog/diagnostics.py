# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Structured diagnostic errors.

A diagnostic error carries a machine-readable code plus human-oriented
guidance: short and long descriptions, probable causes, and suggested
remediations. Loggers unpack these into record fields so formatters can
render them.

Any exception exposing the same attributes is treated as diagnostic; the
check is structural (see :class:`Diagnostic`), so errors from other
libraries can participate without subclassing :class:`DiagnosticError`.

Example:
    >>> err = DiagnosticError(
    ...     "1001",
    ...     Severity.ERROR,
    ...     short_descriptions=["Unable to open archive"],
    ...     probable_causes=["The archive path does not exist"],
    ...     remediations=["Check the configured archive path"],
    ... )
    >>> logger.error(err)
"""

from collections.abc import Iterable, Sequence
from typing import Any, Protocol, runtime_checkable

from .severity import Severity

# Record field keys for unpacked diagnostic errors
CODE_FIELD = "code"
SEVERITY_FIELD = "severity"
SHORT_DESCRIPTION_FIELD = "short_description"
LONG_DESCRIPTION_FIELD = "long_description"
PROBABLE_CAUSE_FIELD = "probable_cause"
SUGGESTED_REMEDIATION_FIELD = "suggested_remediation"


@runtime_checkable
class Diagnostic(Protocol):
    """Protocol for errors that carry diagnostic structure."""

    code: str
    severity: Severity
    short_descriptions: Sequence[str]
    long_descriptions: Sequence[str]
    probable_causes: Sequence[str]
    remediations: Sequence[str]


def _freeze(values: Iterable[str] | None) -> tuple[str, ...]:
    if values is None:
        return ()
    if isinstance(values, str):
        return (values,)
    return tuple(str(v) for v in values)


class DiagnosticError(Exception):
    """Exception carrying a code, severity, descriptions, causes and remediations."""

    def __init__(
        self,
        code: str,
        severity: Severity = Severity.ERROR,
        short_descriptions: Iterable[str] | None = None,
        long_descriptions: Iterable[str] | None = None,
        probable_causes: Iterable[str] | None = None,
        remediations: Iterable[str] | None = None,
    ):
        """Initialize DiagnosticError.

        Args:
            code: Machine-readable error code
            severity: How urgent the error is (default: ERROR)
            short_descriptions: One-line summaries
            long_descriptions: Detailed explanations
            probable_causes: Likely reasons the error occurred
            remediations: Suggested fixes
        """
        self._code = str(code)
        self._severity = Severity.parse(severity)
        self._short_descriptions = _freeze(short_descriptions)
        self._long_descriptions = _freeze(long_descriptions)
        self._probable_causes = _freeze(probable_causes)
        self._remediations = _freeze(remediations)
        super().__init__(self._summary())

    @property
    def code(self) -> str:
        return self._code

    @property
    def severity(self) -> Severity:
        return self._severity

    @property
    def short_descriptions(self) -> tuple[str, ...]:
        return self._short_descriptions

    @property
    def long_descriptions(self) -> tuple[str, ...]:
        return self._long_descriptions

    @property
    def probable_causes(self) -> tuple[str, ...]:
        return self._probable_causes

    @property
    def remediations(self) -> tuple[str, ...]:
        return self._remediations

    def _summary(self) -> str:
        if self._short_descriptions:
            return " ".join(self._short_descriptions)
        if self._long_descriptions:
            return " ".join(self._long_descriptions)
        return self._code

    def __str__(self) -> str:
        return self._summary()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(code={self._code!r}, "
            f"severity={self._severity.name}, "
            f"short_descriptions={list(self._short_descriptions)!r})"
        )


def is_diagnostic(error: object) -> bool:
    """Return True if the value exposes the diagnostic error shape."""
    return isinstance(error, Diagnostic)


def get_code(error: object) -> str:
    """Return the diagnostic code, or an empty string for plain errors."""
    return str(error.code) if is_diagnostic(error) else ""


def get_severity(error: object) -> Severity | None:
    """Return the diagnostic severity, or None for plain errors."""
    if not is_diagnostic(error):
        return None
    try:
        return Severity.parse(error.severity)
    except ValueError:
        # Foreign diagnostic types may use their own severity scale
        return None


def _section(error: object, attr: str) -> list[str]:
    """Read one description list, tolerating None, bare strings and non-iterables."""
    if not is_diagnostic(error):
        return []
    try:
        return list(_freeze(getattr(error, attr)))
    except TypeError:
        return []


def get_short_descriptions(error: object) -> list[str]:
    """Return the short descriptions, or an empty list for plain errors."""
    return _section(error, "short_descriptions")


def get_long_descriptions(error: object) -> list[str]:
    """Return the long descriptions, or an empty list for plain errors."""
    return _section(error, "long_descriptions")


def get_probable_causes(error: object) -> list[str]:
    """Return the probable causes, or an empty list for plain errors."""
    return _section(error, "probable_causes")


def get_remediations(error: object) -> list[str]:
    """Return the suggested remediations, or an empty list for plain errors."""
    return _section(error, "remediations")


def diagnostic_fields(error: object) -> dict[str, Any]:
    """Unpack a diagnostic error into log record fields.

    Args:
        error: Any value; non-diagnostic values produce no fields

    Returns:
        Mapping with code, severity name and the four description lists
    """
    if not is_diagnostic(error):
        return {}
    severity = get_severity(error)
    return {
        CODE_FIELD: get_code(error),
        SEVERITY_FIELD: severity.name if severity is not None else "",
        SHORT_DESCRIPTION_FIELD: get_short_descriptions(error),
        LONG_DESCRIPTION_FIELD: get_long_descriptions(error),
        PROBABLE_CAUSE_FIELD: get_probable_causes(error),
        SUGGESTED_REMEDIATION_FIELD: get_remediations(error),
    }
