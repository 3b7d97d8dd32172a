"""Core datatypes shared across pageaudit modules.

Responsibilities:
- Represent immutable records exchanged between providers, audits, and runners.
- Provide explicit typing for report serialization.

Key types:
- `RawMetricValue`, `ScoreCalibration`, `AuditResult`, `AuditMetadata`,
  `AuditContext`, `AuditOutcome`, and `AuditReport`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import math
from typing import Any, Mapping

from ..scoring import validate_calibration


class ScoringMode(str, Enum):
    """How the report renderer should present an audit score."""

    NUMERIC = "numeric"
    BINARY = "binary"
    MANUAL = "manual"
    INFORMATIVE = "informative"
    NOT_APPLICABLE = "notApplicable"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class RawMetricValue:
    """A raw metric measurement produced by a metric provider.

    Attributes:
        value: Non-negative measured value.
        explanation: Optional human-readable note surfaced by the provider.
    """

    value: float
    explanation: str | None = None

    def __post_init__(self) -> None:
        if math.isnan(self.value) or self.value < 0:
            raise ValueError(f"Metric value must be non-negative, got {self.value!r}.")


@dataclass(frozen=True, slots=True)
class ScoreCalibration:
    """Two reference points on a metric's scale used for log-normal scoring.

    Attributes:
        podr: Point of diminishing returns; scores 0.9.
        median: Typical measurement; scores 0.5.
    """

    podr: float
    median: float

    def __post_init__(self) -> None:
        validate_calibration(self.podr, self.median)

    def as_options(self) -> dict[str, float]:
        """Return calibration as the scoring-options mapping."""

        return {"podr": self.podr, "median": self.median}


@dataclass(frozen=True, slots=True)
class AuditResult:
    """Scored product of one audit invocation.

    Attributes:
        score: Normalized score in [0, 1], or `None` when no score could be computed.
        explanation: Provider explanation text, if any.
        numeric_value: Raw metric value that was scored.
        display_value: Locale-formatted rendering of `numeric_value`.
    """

    score: float | None
    explanation: str | None
    numeric_value: float
    display_value: str

    def as_dict(self) -> dict[str, Any]:
        """Serialize to report keys."""

        return {
            "score": self.score,
            "explanation": self.explanation,
            "numericValue": self.numeric_value,
            "displayValue": self.display_value,
        }


@dataclass(frozen=True, slots=True)
class AuditMetadata:
    """Static audit descriptor read once at registration time.

    Attributes:
        id: Audit id, unique among all audits of a run.
        title: Localized display title.
        description: Localized description.
        scoring_mode: How the report renders the score.
        required_artifacts: Every artifact the audit reads.
        default_calibration: Calibration used when the run supplies no override.
    """

    id: str
    title: str
    description: str
    scoring_mode: ScoringMode
    required_artifacts: frozenset[str]
    default_calibration: ScoreCalibration


@dataclass(frozen=True, slots=True)
class AuditContext:
    """Run-scoped configuration passed to audits and metric providers.

    Attributes:
        options: Calibration override; audits fall back to their default when `None`.
        locale: Locale used for display strings.
        settings: Run settings that affect metric computation (part of cache identity).
    """

    options: ScoreCalibration | None = None
    locale: str = "en-US"
    settings: Mapping[str, str] = field(default_factory=dict)

    def cache_key(self) -> tuple[tuple[str, str], ...]:
        """Return a hashable identity of the settings that affect computed metrics."""

        return tuple(sorted((str(key), str(value)) for key, value in self.settings.items()))


@dataclass(frozen=True, slots=True)
class AuditOutcome:
    """Per-audit entry of a run report; failed audits carry an error message."""

    audit_id: str
    scoring_mode: ScoringMode
    result: AuditResult | None = None
    error_message: str | None = None

    @property
    def failed(self) -> bool:
        """Return whether the audit failed to produce a result."""

        return self.error_message is not None

    def as_dict(self) -> dict[str, Any]:
        """Serialize the outcome for report rendering."""

        payload: dict[str, Any] = {
            "id": self.audit_id,
            "scoreDisplayMode": self.scoring_mode.value,
        }
        if self.result is not None:
            payload.update(self.result.as_dict())
        else:
            payload["score"] = None
        if self.error_message is not None:
            payload["errorMessage"] = self.error_message
        return payload


@dataclass(frozen=True, slots=True)
class AuditReport:
    """Ordered outcomes of one runner invocation."""

    outcomes: tuple[AuditOutcome, ...] = field(default_factory=tuple)

    def outcome(self, audit_id: str) -> AuditOutcome:
        """Return the outcome for an audit id."""

        for outcome in self.outcomes:
            if outcome.audit_id == audit_id:
                return outcome
        raise KeyError(audit_id)

    def as_dict(self) -> dict[str, Any]:
        """Serialize outcomes keyed by audit id."""

        return {outcome.audit_id: outcome.as_dict() for outcome in self.outcomes}
