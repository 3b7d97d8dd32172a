"""Computed metric providers and their request cache."""

from .cache import ComputedMetricCache
from .provider import MetricProvider, StaticMetricProvider

__all__ = ["ComputedMetricCache", "MetricProvider", "StaticMetricProvider"]
