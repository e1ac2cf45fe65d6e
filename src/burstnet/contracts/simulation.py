"""Simulation engine contracts."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from burstnet.contracts.errors import ConfigurationError
from burstnet.contracts.monitors import IMonitor
from burstnet.contracts.neurons import HHReducedParams

V_INH_RANGE: tuple[float, float] = (-12.0, 70.0)


@dataclass(frozen=True, slots=True)
class SimulationConfig:
    """Run configuration for the burst simulation kernel.

    Times are in ms. ``max_time`` is a ceiling on simulated time and
    ``max_bursts`` stops the run after that many completed episodes,
    whichever comes first.
    """

    n_neurons: int = 100
    excitatory_fraction: float = 1.0
    dt: float = 0.01
    max_time: float = 8000.0
    max_bursts: int = 200
    v_inh: float = -12.0
    precision: int = 14

    # Episode detection: thA = 0.25 * (max(a) - min(a)) of a reference run.
    activity_threshold: float = 0.1730
    activity_slope_threshold: float = 0.1490

    neuron_params: HHReducedParams | None = None
    device: str | None = None
    dtype: str | None = "float64"
    seed: int | None = None
    meta: Mapping[str, Any] | None = None

    @property
    def n_excitatory(self) -> int:
        return int(self.n_neurons * self.excitatory_fraction)

    @property
    def n_inhibitory(self) -> int:
        return self.n_neurons - self.n_excitatory

    def validate(self) -> SimulationConfig:
        if isinstance(self.n_neurons, bool) or not isinstance(self.n_neurons, int):
            raise ConfigurationError(f"n_neurons must be an integer, got {self.n_neurons!r}")
        if self.n_neurons <= 0:
            raise ConfigurationError(f"n_neurons must be > 0, got {self.n_neurons}")
        if not 0.0 < self.excitatory_fraction <= 1.0:
            raise ConfigurationError(
                f"excitatory_fraction must be in ]0..1], got {self.excitatory_fraction}"
            )
        lo, hi = V_INH_RANGE
        if not lo <= self.v_inh <= hi:
            raise ConfigurationError(f"v_inh must be in [{lo}..{hi}], got {self.v_inh}")
        if not math.isfinite(self.dt) or self.dt <= 0.0:
            raise ConfigurationError(f"dt must be finite and > 0, got {self.dt}")
        if math.isnan(self.max_time) or self.max_time < 0.0:
            raise ConfigurationError(f"max_time must be >= 0, got {self.max_time}")
        if isinstance(self.max_bursts, bool) or not isinstance(self.max_bursts, int):
            raise ConfigurationError(f"max_bursts must be an integer, got {self.max_bursts!r}")
        if self.max_bursts <= 0:
            raise ConfigurationError(f"max_bursts must be > 0, got {self.max_bursts}")
        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            raise ConfigurationError(f"precision must be an integer, got {self.precision!r}")
        if self.precision < 0:
            raise ConfigurationError(f"precision must be >= 0, got {self.precision}")
        return self

    def validate_applied_current(self, length: int) -> None:
        if length != self.n_neurons:
            raise ConfigurationError(
                f"applied current table has {length} entries, expected {self.n_neurons}"
            )


@runtime_checkable
class ISimulationEngine(Protocol):
    """High-level engine interface (reset/step/run)."""

    name: str

    def reset(self, *, config: SimulationConfig) -> None:
        ...

    def attach_monitors(self, monitors: Sequence[IMonitor]) -> None:
        ...

    def step(self) -> Mapping[str, Any]:
        """Advance the engine by one dt and return step metrics."""
        ...

    def should_stop(self) -> bool:
        ...

    def run(self, steps: int | None = None) -> Any:
        ...


__all__ = ["ISimulationEngine", "SimulationConfig", "V_INH_RANGE"]
