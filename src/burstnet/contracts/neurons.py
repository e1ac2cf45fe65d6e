"""Neuron model contracts.

Design goals:
- **Population-first**: the right-hand side operates on all N neurons at once.
- **Packed state**: one ``[N, 4]`` tensor, columns ``v, n, a, s``.
- **No spike history in the model**: spike trains are a recording concern.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from burstnet.contracts.tensor import Tensor

STATE_FIELDS: tuple[str, ...] = ("v", "n", "a", "s")
V, N, A, S = range(4)


@dataclass(frozen=True, slots=True)
class StepContext:
    """Cross-cutting runtime context (device, dtype, determinism toggles)."""

    device: str | None = None
    dtype: str | None = None
    seed: int | None = None


@dataclass(frozen=True, slots=True)
class HHReducedParams:
    """Reduced Hodgkin-Huxley cell + depressing synapse parameters.

    Values follow the XPP model of Tabak, Mascagni & Bertram (2010).
    Units: mV, ms, mS/cm^2, uA/cm^2.
    """

    g_leak: float = 0.1
    v_leak: float = 10.6
    g_na: float = 36.0
    v_na: float = 115.0
    g_k: float = 12.0
    v_k: float = -12.0
    h0: float = 0.8

    # Total synaptic conductance; each synapse gets g_syn_total / N.
    g_syn_total: float = 3.6
    v_exc: float = 70.0
    v_inh: float = -12.0

    tau_slow: float = 10.0
    tau_fast: float = 1.0
    alpha_depression: float = 0.0015
    beta_depression: float = 0.12

    v_thresh: float = 40.0
    k_v: float = 1.0

    # Initial conditions
    v0: float = 0.0
    n0: float = 0.0
    a0: float = 0.01
    s0: float = 0.25


@dataclass(slots=True)
class NeuronState:
    """Network state, packed as ``x`` with shape [N, 4]."""

    x: Tensor

    @property
    def v(self) -> Tensor:
        return self.x[:, V]

    @property
    def n(self) -> Tensor:
        return self.x[:, N]

    @property
    def a(self) -> Tensor:
        return self.x[:, A]

    @property
    def s(self) -> Tensor:
        return self.x[:, S]

    @property
    def size(self) -> int:
        return int(self.x.shape[0])


@dataclass(frozen=True, slots=True)
class SynapticDrive:
    """Self-excluded synaptic drive seen by each neuron (both shape [N])."""

    exc: Tensor
    inh: Tensor


@runtime_checkable
class INeuronModel(Protocol):
    """Population-level neuron model interface."""

    name: str
    params: HHReducedParams

    def init_state(self, n: int, *, ctx: StepContext) -> NeuronState:
        """Create initial state for n neurons."""
        ...

    def derivatives(self, x: Tensor, drive: SynapticDrive, i_app: Tensor) -> Tensor:
        """Return dx/dt for packed state ``x`` (pure, no side effects)."""
        ...


__all__ = [
    "A",
    "HHReducedParams",
    "INeuronModel",
    "N",
    "NeuronState",
    "S",
    "STATE_FIELDS",
    "StepContext",
    "SynapticDrive",
    "V",
]
