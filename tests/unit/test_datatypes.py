"""Unit tests for immutable datatypes and report serialization."""

from __future__ import annotations

import dataclasses

import pytest

from pageaudit.errors import CalibrationError
from pageaudit.models.datatypes import (
    AuditContext,
    AuditOutcome,
    AuditReport,
    AuditResult,
    RawMetricValue,
    ScoreCalibration,
    ScoringMode,
)


def test_score_calibration_validates_on_construction() -> None:
    """Calibration should fail loudly at configuration time."""

    assert ScoreCalibration(podr=0.1, median=0.5).as_options() == {"podr": 0.1, "median": 0.5}
    with pytest.raises(CalibrationError):
        ScoreCalibration(podr=0.5, median=0.1)
    with pytest.raises(CalibrationError):
        ScoreCalibration(podr=0.0, median=0.1)


def test_raw_metric_value_rejects_negative_values() -> None:
    """Layout shift measurements cannot be negative."""

    assert RawMetricValue(value=0.0).explanation is None
    with pytest.raises(ValueError, match="non-negative"):
        RawMetricValue(value=-0.1)


def test_audit_result_is_immutable_and_serializes_report_keys() -> None:
    """Results should expose report keys and reject mutation."""

    result = AuditResult(
        score=0.97,
        explanation=None,
        numeric_value=0.05,
        display_value="0.05",
    )

    assert result.as_dict() == {
        "score": 0.97,
        "explanation": None,
        "numericValue": 0.05,
        "displayValue": "0.05",
    }
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.score = 0.5  # type: ignore[misc]


def test_audit_context_cache_key_ignores_options_and_orders_settings() -> None:
    """Only run settings should contribute to computed-metric identity."""

    first = AuditContext(
        options=ScoreCalibration(podr=0.1, median=0.5),
        settings={"throttling": "mobile", "formFactor": "mobile"},
    )
    second = AuditContext(locale="de-DE", settings={"formFactor": "mobile", "throttling": "mobile"})

    assert first.cache_key() == second.cache_key()
    assert first.cache_key() == (("formFactor", "mobile"), ("throttling", "mobile"))


def test_report_serializes_success_and_error_outcomes() -> None:
    """Failed outcomes should render without a fabricated score."""

    report = AuditReport(
        outcomes=(
            AuditOutcome(
                audit_id="cumulative-layout-shift",
                scoring_mode=ScoringMode.NUMERIC,
                result=AuditResult(0.9, None, 0.1, "0.1"),
            ),
            AuditOutcome(
                audit_id="broken-metric",
                scoring_mode=ScoringMode.ERROR,
                error_message="Trace is missing required events.",
            ),
        )
    )

    payload = report.as_dict()

    assert payload["cumulative-layout-shift"]["score"] == 0.9
    assert payload["cumulative-layout-shift"]["scoreDisplayMode"] == "numeric"
    assert payload["broken-metric"] == {
        "id": "broken-metric",
        "scoreDisplayMode": "error",
        "score": None,
        "errorMessage": "Trace is missing required events.",
    }
    assert report.outcome("broken-metric").failed is True
    with pytest.raises(KeyError):
        report.outcome("missing")
