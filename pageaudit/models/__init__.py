"""Typed datatypes used by pageaudit providers, audits, and runners."""

from .datatypes import (
    AuditContext,
    AuditMetadata,
    AuditOutcome,
    AuditReport,
    AuditResult,
    RawMetricValue,
    ScoreCalibration,
    ScoringMode,
)

__all__ = [
    "AuditContext",
    "AuditMetadata",
    "AuditOutcome",
    "AuditReport",
    "AuditResult",
    "RawMetricValue",
    "ScoreCalibration",
    "ScoringMode",
]
