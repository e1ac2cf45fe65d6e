"""Simulation result handed to exporters after a run."""

from __future__ import annotations

from dataclasses import dataclass

from burstnet.contracts.simulation import SimulationConfig
from burstnet.contracts.tensor import Tensor
from burstnet.core.torch_utils import require_torch
from burstnet.recording.records import EpisodeRecord
from burstnet.recording.spike_train import SpikeTrainStore
from burstnet.simulation.network.specs import NetworkPartition


@dataclass(frozen=True, slots=True)
class SimulationResult:
    config: SimulationConfig
    partition: NetworkPartition
    applied_current: Tensor
    average_states: Tensor  # [steps, 4]: mean v, n, a, s
    episodes: tuple[EpisodeRecord, ...]
    spike_train: SpikeTrainStore
    burst_count: int
    t_final: float
    steps: int
    wall_time_s: float
    final_state: Tensor  # [N, 4]

    def episode_matrix(self) -> Tensor:
        """Episodes as ``[E, 4]``: exc mean, inh mean, signed time, flag."""
        torch = require_torch()
        rows = [record.as_tuple() for record in self.episodes]
        if not rows:
            return torch.empty((0, 4), dtype=self.average_states.dtype)
        return torch.tensor(rows, dtype=self.average_states.dtype)

    def episode_times(self) -> list[tuple[float, float | None]]:
        """Pair phase starts with their ends; an unfinished episode ends in None."""
        pairs: list[tuple[float, float | None]] = []
        for record in self.episodes:
            if record.is_start:
                pairs.append((record.time, None))
            elif pairs and pairs[-1][1] is None:
                pairs[-1] = (pairs[-1][0], record.time)
        return pairs


@dataclass(frozen=True, slots=True)
class NumericAnomaly:
    """First non-finite value observed in a result."""

    step: int | None
    neurons: tuple[int, ...]


def find_numeric_anomalies(result: SimulationResult) -> NumericAnomaly | None:
    """Report NaN/inf in the averages or final state; the kernel never checks itself."""
    torch = require_torch()
    step: int | None = None
    bad_rows = (~torch.isfinite(result.average_states)).any(dim=1).nonzero(as_tuple=False).flatten()
    if bad_rows.numel():
        step = int(bad_rows[0])
    bad_neurons = (~torch.isfinite(result.final_state)).any(dim=1).nonzero(as_tuple=False).flatten()
    neurons = tuple(int(i) for i in bad_neurons.tolist())
    if step is None and not neurons:
        return None
    return NumericAnomaly(step=step, neurons=neurons)


__all__ = ["NumericAnomaly", "SimulationResult", "find_numeric_anomalies"]
