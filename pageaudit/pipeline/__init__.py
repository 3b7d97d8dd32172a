"""Audit run orchestration for the host pipeline."""

from .runner import AuditRunner

__all__ = ["AuditRunner"]
