"""Console progress monitor."""

from __future__ import annotations

from collections.abc import Callable

from burstnet.contracts.monitors import IMonitor, StepEvent


class BurstProgressMonitor(IMonitor):
    """Print a line every time an episode ends."""

    name = "burst_progress"

    def __init__(self, *, emit: Callable[[str], None] = print) -> None:
        self._emit = emit

    def on_step(self, event: StepEvent) -> None:
        episode = event.episode
        if episode is None or episode.is_start:
            return
        meta = event.meta or {}
        label = f"<{meta.get('n_exc', '?')},{meta.get('v_inh', '?')}>"
        self._emit(f"{label}- burst:{event.burst_count}, time: {episode.time:.4f}")

    def flush(self) -> None:
        return None

    def close(self) -> None:
        return None


__all__ = ["BurstProgressMonitor"]
