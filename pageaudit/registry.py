"""Audit registry composing metric audits by id.

Responsibilities:
- Keep audits in registration order with globally unique ids.
- Expose static metadata to the host pipeline.
"""

from __future__ import annotations

from .audits.base import MetricAudit
from .audits.cumulative_layout_shift import (
    create_cumulative_layout_shift_audit,
    cumulative_layout_shift_metadata,
)
from .computed.provider import MetricProvider
from .errors import DuplicateAuditError, UnknownAuditError
from .i18n import StringResolver
from .models.datatypes import AuditMetadata


class AuditRegistry:
    """Ordered collection of audits keyed by audit id."""

    def __init__(self) -> None:
        """Initialize an empty registry."""

        self._audits: dict[str, MetricAudit] = {}

    def register(self, audit: MetricAudit) -> MetricAudit:
        """Register an audit, rejecting ids that are already taken."""

        if audit.id in self._audits:
            raise DuplicateAuditError(
                audit_id=audit.id,
                detail=f"Audit id `{audit.id}` is already registered.",
            )
        self._audits[audit.id] = audit
        return audit

    def get(self, audit_id: str) -> MetricAudit:
        """Return a registered audit by id."""

        try:
            return self._audits[audit_id]
        except KeyError as exc:
            known = ", ".join(self._audits) or "none"
            raise UnknownAuditError(
                audit_id=audit_id,
                detail=f"Unknown audit id `{audit_id}`.",
                hint=f"Registered audits: {known}.",
            ) from exc

    def ids(self) -> tuple[str, ...]:
        """Return audit ids in registration order."""

        return tuple(self._audits)

    def metadata(self) -> tuple[AuditMetadata, ...]:
        """Return audit descriptors in registration order."""

        return tuple(audit.meta for audit in self._audits.values())

    def __contains__(self, audit_id: object) -> bool:
        return audit_id in self._audits

    def __len__(self) -> int:
        return len(self._audits)


def default_registry(
    provider: MetricProvider,
    resolver: StringResolver | None = None,
) -> AuditRegistry:
    """Build a registry holding the built-in metric audits."""

    registry = AuditRegistry()
    registry.register(create_cumulative_layout_shift_audit(provider, resolver))
    return registry


def builtin_metadata(resolver: StringResolver | None = None) -> tuple[AuditMetadata, ...]:
    """Return descriptors of the built-in audits without binding metric providers."""

    return (cumulative_layout_shift_metadata(resolver),)
