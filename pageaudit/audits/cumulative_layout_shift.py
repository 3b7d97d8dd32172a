"""Cumulative Layout Shift audit.

This metric represents the amount of visual shifting DOM elements do during
page load. Lower values are better; a perfectly stable page scores 0.
"""

from __future__ import annotations

from ..computed.provider import MetricProvider
from ..i18n import MessageCatalog, StringResolver, message_id
from ..models.datatypes import AuditMetadata, ScoreCalibration, ScoringMode
from .base import TRACES_ARTIFACT, MetricAudit

AUDIT_ID = "cumulative-layout-shift"

UI_STRINGS = {
    "title": "Cumulative Layout Shift",
    "description": (
        "The more the page's layout changes during its load, the higher the "
        "Cumulative Layout Shift. "
        "Perfectly solid == 0. Unpleasant experience >= 0.50."
    ),
}

DEFAULT_CALIBRATION = ScoreCalibration(podr=0.1, median=0.5)


def cumulative_layout_shift_metadata(resolver: StringResolver | None = None) -> AuditMetadata:
    """Build the audit descriptor with title and description resolved for a locale."""

    strings = resolver or MessageCatalog()
    return AuditMetadata(
        id=AUDIT_ID,
        title=strings.resolve(message_id(AUDIT_ID, "title"), UI_STRINGS["title"]),
        description=strings.resolve(
            message_id(AUDIT_ID, "description"), UI_STRINGS["description"]
        ),
        scoring_mode=ScoringMode.NUMERIC,
        required_artifacts=frozenset({TRACES_ARTIFACT}),
        default_calibration=DEFAULT_CALIBRATION,
    )


def create_cumulative_layout_shift_audit(
    provider: MetricProvider,
    resolver: StringResolver | None = None,
) -> MetricAudit:
    """Bind the cumulative layout shift descriptor to a metric provider."""

    return MetricAudit(
        meta=cumulative_layout_shift_metadata(resolver),
        provider=provider,
    )
