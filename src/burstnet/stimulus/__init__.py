"""Applied-current table generators."""

from burstnet.stimulus.applied_current import (
    APPLIED_CURRENT_TABLES,
    create_applied_current,
    linear_applied_current,
    load_applied_current,
    shuffled_applied_current,
)

__all__ = [
    "APPLIED_CURRENT_TABLES",
    "create_applied_current",
    "linear_applied_current",
    "load_applied_current",
    "shuffled_applied_current",
]
