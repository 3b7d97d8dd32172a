"""Structured audit-run logging utilities.

Responsibilities:
- Emit concise, deterministic audit-level runtime logs through `loguru`.
- Report the scored value with every completed audit.
- Keep failure events free of exception payload details.
"""

from __future__ import annotations

import math
import sys
from typing import TextIO

from loguru import logger as _loguru_logger

from ..models.datatypes import AuditResult

_TOKEN_PUNCTUATION = frozenset({"-", "_", ".", ":", "/", "+"})


def _context_token(value: object) -> str:
    """Render one context value as a shell-safe token.

    Missing scores render as `none` and non-finite metric values as `inf`/`nan`,
    so every event line keeps the same key set.
    """

    if value is None:
        return "none"
    if isinstance(value, float):
        if not math.isfinite(value):
            return "nan" if math.isnan(value) else "inf"
        return repr(value)
    text = str(value).strip() or "none"
    return "".join(
        character if character.isalnum() or character in _TOKEN_PUNCTUATION else "_"
        for character in text
    )


def _event_suffix(context: dict[str, object]) -> str:
    """Serialize event context as ` key=value` pairs in key order."""

    return "".join(f" {key}={_context_token(context[key])}" for key in sorted(context))


class RunLogger:
    """Emit deterministic audit logs for CLI-observable runner activity."""

    def __init__(self, sink: TextIO | None = None, level: str = "INFO") -> None:
        """Route loguru output to `sink` with plain message formatting."""

        self._sink = sink or sys.stderr
        _loguru_logger.remove()
        _loguru_logger.add(self._sink, format="{message}", level=level, colorize=False)

    def _emit(self, level: str, event: str, audit_id: str, **context: object) -> None:
        """Emit one structured runtime log line."""

        line = f"[audit] level={level} audit={audit_id} event={event}{_event_suffix(context)}"
        _loguru_logger.log(level, line)

    def log_audit_start(self, audit_id: str) -> None:
        """Emit an audit-start runtime event."""

        self._emit("INFO", "start", audit_id)

    def log_audit_complete(self, audit_id: str, result: AuditResult) -> None:
        """Emit an audit-complete runtime event with the measured value and its score."""

        self._emit(
            "INFO",
            "complete",
            audit_id,
            numeric_value=float(result.numeric_value),
            score=result.score,
        )

    def log_audit_failure(self, audit_id: str, error_type: str) -> None:
        """Emit an audit-failure runtime event without sensitive payload details."""

        self._emit("ERROR", "failure", audit_id, error_type=error_type)
