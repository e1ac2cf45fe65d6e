"""Monitoring contracts.

Monitors receive one structured event per simulation step and may write CSV,
print progress, or collect debugging artifacts.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from burstnet.contracts.tensor import Tensor

if TYPE_CHECKING:
    from burstnet.recording.records import EpisodeRecord


@dataclass(frozen=True, slots=True)
class StepEvent:
    """A single simulation step event.

    ``t`` is the time at the start of the step (the time spikes and episodes
    of this step are stamped with). ``mean_state`` has shape [4] (v, n, a, s).
    ``episode`` is set only on steps with a phase transition.
    """

    t: float
    dt: float
    step: int
    mean_state: Tensor
    spike_count: int = 0
    burst_count: int = 0
    episode: EpisodeRecord | None = None
    meta: Mapping[str, Any] | None = None


@runtime_checkable
class IMonitor(Protocol):
    """Observer of simulation steps."""

    name: str

    def on_step(self, event: StepEvent) -> None:
        ...

    def flush(self) -> None:
        ...

    def close(self) -> None:
        ...


__all__ = ["IMonitor", "StepEvent"]
