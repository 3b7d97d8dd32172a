"""Unit tests for deterministic audit-run log lines."""

from __future__ import annotations

import io

from pageaudit.models.datatypes import AuditResult
from pageaudit.telemetry.logger import RunLogger


def test_run_logger_reports_value_and_score_on_completion() -> None:
    """Completion events should carry the measured value next to its score."""

    sink = io.StringIO()
    logger = RunLogger(sink=sink)

    logger.log_audit_complete(
        "cumulative-layout-shift",
        AuditResult(score=0.9, explanation=None, numeric_value=0.1, display_value="0.1"),
    )
    logger.log_audit_complete(
        "cumulative-layout-shift",
        AuditResult(score=None, explanation=None, numeric_value=1e30, display_value="1"),
    )

    assert sink.getvalue().splitlines() == [
        "[audit] level=INFO audit=cumulative-layout-shift event=complete "
        "numeric_value=0.1 score=0.9",
        "[audit] level=INFO audit=cumulative-layout-shift event=complete "
        "numeric_value=1e+30 score=none",
    ]


def test_run_logger_sanitizes_failure_tokens() -> None:
    """Failure context should be rendered as a shell-safe token."""

    sink = io.StringIO()
    logger = RunLogger(sink=sink)

    logger.log_audit_failure("cumulative-layout-shift", "Bad Error!")

    assert sink.getvalue().splitlines() == [
        "[audit] level=ERROR audit=cumulative-layout-shift event=failure error_type=Bad_Error_",
    ]


def test_run_logger_respects_minimum_level() -> None:
    """Events below the configured level should be dropped."""

    sink = io.StringIO()
    logger = RunLogger(sink=sink, level="ERROR")

    logger.log_audit_start("cumulative-layout-shift")
    logger.log_audit_failure("cumulative-layout-shift", "ValueError")

    assert sink.getvalue().splitlines() == [
        "[audit] level=ERROR audit=cumulative-layout-shift event=failure error_type=ValueError",
    ]
