"""Metric audit contract shared by every log-normally scored audit.

Responsibilities:
- Hold the static metadata, default calibration, and metric provider of an audit.
- Run one audit: check inputs, await the provider, score, and package a result.

Key types:
- `MetricAudit`: plain data contract composed by `AuditRegistry`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..computed.provider import MetricProvider
from ..errors import MissingArtifactError
from ..formatting import format_number
from ..models.datatypes import AuditContext, AuditMetadata, AuditResult, ScoreCalibration
from ..scoring import compute_log_normal_score

DEFAULT_PASS = "defaultPass"
TRACES_ARTIFACT = "traces"

Artifacts = Mapping[str, Any]


def require_artifacts(artifacts: Artifacts, meta: AuditMetadata) -> None:
    """Raise `MissingArtifactError` naming every required artifact that is absent."""

    missing = sorted(name for name in meta.required_artifacts if name not in artifacts)
    if missing:
        raise MissingArtifactError(
            audit_id=meta.id,
            detail=f"Required artifact(s) missing: {', '.join(missing)}.",
            hint="Collect the listed artifacts before running this audit.",
        )


def select_trace(artifacts: Artifacts, meta: AuditMetadata) -> Any:
    """Return the default-pass trace from the `traces` artifact."""

    traces = artifacts[TRACES_ARTIFACT]
    if DEFAULT_PASS not in traces:
        raise MissingArtifactError(
            audit_id=meta.id,
            detail=f"Artifact `{TRACES_ARTIFACT}` has no `{DEFAULT_PASS}` trace.",
            hint="Record a trace for the default pass.",
        )
    return traces[DEFAULT_PASS]


@dataclass(frozen=True, slots=True)
class MetricAudit:
    """An audit scoring one provider-computed metric on a log-normal curve.

    Attributes:
        meta: Static descriptor exposed to the host pipeline.
        provider: Source of the raw metric value.
    """

    meta: AuditMetadata
    provider: MetricProvider

    @property
    def id(self) -> str:
        """Return the audit id."""

        return self.meta.id

    @property
    def default_calibration(self) -> ScoreCalibration:
        """Return the calibration declared in the audit metadata."""

        return self.meta.default_calibration

    def calibration_for(self, context: AuditContext) -> ScoreCalibration:
        """Return the context override, or the built-in default calibration."""

        return context.options if context.options is not None else self.default_calibration

    async def run(self, artifacts: Artifacts, context: AuditContext) -> AuditResult:
        """Score the metric for the default-pass trace.

        Provider failures propagate unchanged; no fallback score is produced.
        """

        require_artifacts(artifacts, self.meta)
        trace = select_trace(artifacts, self.meta)
        metric = await self.provider.request(trace, context)

        calibration = self.calibration_for(context)
        score = compute_log_normal_score(metric.value, calibration.podr, calibration.median)
        return AuditResult(
            score=score,
            explanation=metric.explanation,
            numeric_value=metric.value,
            display_value=format_number(metric.value, context.locale),
        )
