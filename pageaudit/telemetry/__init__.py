"""Telemetry for audit runs.

This package emits deterministic run events for auditing and CLI diagnostics.
"""

from .logger import RunLogger

__all__ = ["RunLogger"]
