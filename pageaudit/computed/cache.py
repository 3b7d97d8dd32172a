"""Memoized computed-metric requests.

Responsibilities:
- Compute each metric at most once per (trace identity, context settings) pair.
- Share one in-flight computation between concurrent requesters.
- Track basic cache telemetry (hits/misses).

Entries hold asyncio tasks, so one cache instance belongs to one event loop.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable

from ..models.datatypes import AuditContext, RawMetricValue

ComputeMetric = Callable[[Any, AuditContext], Awaitable[RawMetricValue]]
_CacheKey = tuple[int, tuple[tuple[str, str], ...]]


@dataclass(slots=True)
class _CacheEntry:
    """Cached computation plus a reference keeping the trace id stable."""

    trace: Any
    task: asyncio.Task[RawMetricValue]


@dataclass(slots=True)
class ComputedMetricCache:
    """Metric provider that memoizes an underlying async computation."""

    compute: ComputeMetric
    hits: int = 0
    misses: int = 0
    _entries: dict[_CacheKey, _CacheEntry] = field(default_factory=dict)

    @staticmethod
    def make_key(trace: Any, context: AuditContext) -> _CacheKey:
        """Build the cache key from trace object identity and context settings."""

        return id(trace), context.cache_key()

    async def request(self, trace: Any, context: AuditContext) -> RawMetricValue:
        """Return the memoized metric, starting the computation on first request.

        Failures are memoized as well; every requester of a failed key sees the
        same exception.
        """

        key = self.make_key(trace, context)
        entry = self._entries.get(key)
        if entry is not None and entry.trace is trace:
            self.hits += 1
        else:
            self.misses += 1
            entry = _CacheEntry(
                trace=trace,
                task=asyncio.ensure_future(self.compute(trace, context)),
            )
            self._entries[key] = entry
        return await asyncio.shield(entry.task)

    def clear(self) -> None:
        """Drop all entries, cancelling computations still in flight."""

        for entry in self._entries.values():
            if not entry.task.done():
                entry.task.cancel()
        self._entries.clear()

    def hit_rate(self) -> float:
        """Return cache hit rate for current cache lifecycle."""

        total = self.hits + self.misses
        if total == 0:
            return 0.0
        return self.hits / float(total)
