"""Host-side runner executing registered audits against collected artifacts.

Responsibilities:
- Run audits one by one and emit start/complete/failure telemetry events.
- Record per-audit failures as error outcomes, or abort on the first failure.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from ..audits.base import Artifacts, MetricAudit
from ..models.datatypes import AuditContext, AuditOutcome, AuditReport, ScoringMode
from ..registry import AuditRegistry
from ..telemetry.logger import RunLogger

ContextFactory = Callable[[str], AuditContext]


class AuditRunner:
    """Run audits from a registry and collect their outcomes into a report."""

    def __init__(
        self,
        registry: AuditRegistry,
        run_logger: RunLogger | None = None,
        continue_on_error: bool = True,
    ) -> None:
        """Initialize runner collaborators and failure policy."""

        self._registry = registry
        self._run_logger = run_logger
        self._continue_on_error = continue_on_error

    async def run(
        self,
        artifacts: Artifacts,
        context: AuditContext | ContextFactory,
        audit_ids: Iterable[str] | None = None,
    ) -> AuditReport:
        """Run selected audits (all by default) in registration order.

        Args:
            artifacts: Collected artifacts shared by every audit.
            context: One context for all audits, or a factory returning the
                context for a given audit id.
            audit_ids: Optional subset of registered audit ids.
        """

        selected = self._registry.ids() if audit_ids is None else tuple(audit_ids)
        audits = [self._registry.get(audit_id) for audit_id in selected]

        outcomes: list[AuditOutcome] = []
        for audit in audits:
            audit_context = context(audit.id) if callable(context) else context
            outcomes.append(await self._run_one(audit, artifacts, audit_context))
        return AuditReport(outcomes=tuple(outcomes))

    async def _run_one(
        self,
        audit: MetricAudit,
        artifacts: Artifacts,
        context: AuditContext,
    ) -> AuditOutcome:
        """Run one audit with telemetry and apply the failure policy."""

        if self._run_logger is not None:
            self._run_logger.log_audit_start(audit.id)
        try:
            result = await audit.run(artifacts, context)
        except Exception as exc:
            if self._run_logger is not None:
                self._run_logger.log_audit_failure(audit.id, type(exc).__name__)
            if not self._continue_on_error:
                raise
            return AuditOutcome(
                audit_id=audit.id,
                scoring_mode=ScoringMode.ERROR,
                error_message=str(exc) or type(exc).__name__,
            )
        if self._run_logger is not None:
            self._run_logger.log_audit_complete(audit.id, result)
        return AuditOutcome(
            audit_id=audit.id,
            scoring_mode=audit.meta.scoring_mode,
            result=result,
        )
