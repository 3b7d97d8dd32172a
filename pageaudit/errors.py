"""Domain exceptions for audit execution and CLI diagnostics."""

from __future__ import annotations


class AuditError(RuntimeError):
    """Raised when a specific audit cannot produce a result."""

    def __init__(
        self,
        *,
        audit_id: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize an audit-scoped error."""

        super().__init__(detail)
        self.audit_id = audit_id
        self.detail = detail
        self.hint = hint


class MissingArtifactError(AuditError):
    """Raised when an artifact listed in `required_artifacts` is absent."""


class MetricComputationError(AuditError):
    """Raised by metric providers when a metric cannot be derived from a trace."""


class DuplicateAuditError(AuditError):
    """Raised when an audit id is registered twice."""


class UnknownAuditError(AuditError):
    """Raised when a requested audit id is not registered."""


class CalibrationError(ValueError):
    """Raised when a score calibration violates `median > podr > 0`."""


class ConfigError(RuntimeError):
    """Raised when run configuration cannot be loaded."""

    def __init__(self, *, detail: str, hint: str | None = None) -> None:
        """Initialize a configuration error with an optional remediation hint."""

        super().__init__(detail)
        self.detail = detail
        self.hint = hint
