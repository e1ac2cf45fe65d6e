from __future__ import annotations

from .determinism import set_deterministic_cpu
from .tap_monitor import TapMonitor

__all__ = ["TapMonitor", "set_deterministic_cpu"]
