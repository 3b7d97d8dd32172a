"""Metric provider interface consumed by metric audits.

Responsibilities:
- Define the `MetricProvider` protocol audits await for raw values.
- Provide `StaticMetricProvider` for values measured outside a trace.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from ..models.datatypes import AuditContext, RawMetricValue


class MetricProvider(Protocol):
    """Protocol for providers that derive a raw metric value from a trace."""

    async def request(self, trace: Any, context: AuditContext) -> RawMetricValue:
        """Return the raw metric for `trace`, raising a domain error on failure."""


@dataclass(frozen=True, slots=True)
class StaticMetricProvider:
    """Provider returning one already measured value for every trace."""

    metric: RawMetricValue

    async def request(self, trace: Any, context: AuditContext) -> RawMetricValue:
        """Return the configured measurement."""

        _ = trace
        _ = context
        return self.metric
