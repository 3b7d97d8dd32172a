"""Top-level package for pageaudit.

This package scores page-performance metrics on a log-normal curve and runs
metric audits for report aggregation. The scoring entry point is
`compute_log_normal_score`; audits are composed through `AuditRegistry` and
executed by `AuditRunner`.
"""

from .pipeline import AuditRunner
from .registry import AuditRegistry, default_registry
from .scoring import compute_log_normal_score

__all__ = [
    "AuditRegistry",
    "AuditRunner",
    "__version__",
    "compute_log_normal_score",
    "default_registry",
]

__version__ = "0.1.0"
