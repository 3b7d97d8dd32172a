"""Metric audits and the shared audit contract."""

from .base import DEFAULT_PASS, MetricAudit
from .cumulative_layout_shift import create_cumulative_layout_shift_audit

__all__ = ["DEFAULT_PASS", "MetricAudit", "create_cumulative_layout_shift_audit"]
