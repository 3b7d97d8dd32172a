"""Shared pytest fixtures for the full pageaudit test suite."""

from __future__ import annotations

from typing import Any

import pytest

from pageaudit.audits.base import DEFAULT_PASS


@pytest.fixture
def trace() -> dict[str, Any]:
    """Provide a minimal opaque trace object."""

    return {"traceEvents": [{"name": "LayoutShift", "args": {"data": {"score": 0.05}}}]}


@pytest.fixture
def artifacts(trace: dict[str, Any]) -> dict[str, Any]:
    """Provide artifacts holding the default-pass trace."""

    return {"traces": {DEFAULT_PASS: trace}}
