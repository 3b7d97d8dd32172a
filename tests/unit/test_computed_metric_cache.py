"""Unit tests for memoized computed-metric requests."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest

from pageaudit.computed.cache import ComputedMetricCache
from pageaudit.errors import MetricComputationError
from pageaudit.models.datatypes import AuditContext, RawMetricValue


class _CountingCompute:
    """Async computation double that counts invocations."""

    def __init__(self, value: float = 0.2) -> None:
        """Initialize the returned value and call counter."""

        self.value = value
        self.calls = 0

    async def __call__(self, trace: Any, context: AuditContext) -> RawMetricValue:
        """Yield once to let concurrent requesters overlap, then return the value."""

        _ = trace
        _ = context
        self.calls += 1
        await asyncio.sleep(0)
        return RawMetricValue(value=self.value)


def test_concurrent_requests_share_one_computation(trace: dict[str, Any]) -> None:
    """Concurrent requesters for the same trace/context should compute once."""

    compute = _CountingCompute()
    cache = ComputedMetricCache(compute)
    context = AuditContext()

    async def _scenario() -> list[RawMetricValue]:
        return list(
            await asyncio.gather(*(cache.request(trace, context) for _ in range(5)))
        )

    results = asyncio.run(_scenario())

    assert compute.calls == 1
    assert {result.value for result in results} == {0.2}
    assert cache.misses == 1
    assert cache.hits == 4
    assert cache.hit_rate() == 0.8


def test_cache_is_keyed_by_trace_identity_and_settings(trace: dict[str, Any]) -> None:
    """Equal-looking traces and different settings should not share entries."""

    compute = _CountingCompute()
    cache = ComputedMetricCache(compute)

    async def _scenario() -> None:
        await cache.request(trace, AuditContext())
        await cache.request(trace, AuditContext(locale="de-DE"))
        await cache.request(dict(trace), AuditContext())
        await cache.request(trace, AuditContext(settings={"throttling": "devtools"}))

    asyncio.run(_scenario())

    assert compute.calls == 3
    assert cache.hits == 1


def test_failures_are_shared_by_all_requesters(trace: dict[str, Any]) -> None:
    """A failing computation should run once and fail every requester alike."""

    calls = 0

    async def _compute(_trace: Any, _context: AuditContext) -> RawMetricValue:
        nonlocal calls
        calls += 1
        raise MetricComputationError(audit_id="cumulative-layout-shift", detail="no events")

    cache = ComputedMetricCache(_compute)

    async def _scenario() -> list[object]:
        return list(
            await asyncio.gather(
                cache.request(trace, AuditContext()),
                cache.request(trace, AuditContext()),
                return_exceptions=True,
            )
        )

    results = asyncio.run(_scenario())

    assert calls == 1
    assert all(isinstance(result, MetricComputationError) for result in results)


def test_cancelled_requester_does_not_cancel_shared_computation(
    trace: dict[str, Any],
) -> None:
    """Abandoning one request should leave the computation available to others."""

    async def _scenario() -> tuple[RawMetricValue, bool, int]:
        gate = asyncio.Event()
        calls = 0

        async def _compute(_trace: Any, _context: AuditContext) -> RawMetricValue:
            nonlocal calls
            calls += 1
            await gate.wait()
            return RawMetricValue(value=0.3)

        cache = ComputedMetricCache(_compute)
        first = asyncio.create_task(cache.request(trace, AuditContext()))
        await asyncio.sleep(0)
        first.cancel()
        second = asyncio.create_task(cache.request(trace, AuditContext()))
        await asyncio.sleep(0)
        gate.set()
        value = await second
        with pytest.raises(asyncio.CancelledError):
            await first
        return value, first.cancelled(), calls

    value, first_cancelled, calls = asyncio.run(_scenario())

    assert value.value == 0.3
    assert first_cancelled is True
    assert calls == 1


def test_clear_drops_entries(trace: dict[str, Any]) -> None:
    """Clearing should force the next request to recompute."""

    compute = _CountingCompute()
    cache = ComputedMetricCache(compute)

    async def _scenario() -> None:
        await cache.request(trace, AuditContext())
        cache.clear()
        await cache.request(trace, AuditContext())

    asyncio.run(_scenario())

    assert compute.calls == 2
