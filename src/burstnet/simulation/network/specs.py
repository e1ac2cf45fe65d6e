"""Network DTOs: excitatory/inhibitory partition and the packed network."""

from __future__ import annotations

from dataclasses import dataclass

from burstnet.contracts.errors import ConfigurationError
from burstnet.contracts.neurons import NeuronState
from burstnet.contracts.tensor import Tensor


@dataclass(frozen=True, slots=True)
class NetworkPartition:
    """Contiguous split: excitatory ``[0, n_exc)``, inhibitory ``[n_exc, n)``."""

    n: int
    n_exc: int

    def __post_init__(self) -> None:
        if self.n <= 0:
            raise ConfigurationError(f"network size must be > 0, got {self.n}")
        if not 0 <= self.n_exc <= self.n:
            raise ConfigurationError(f"n_exc must be in [0..{self.n}], got {self.n_exc}")

    @classmethod
    def from_fraction(cls, n: int, excitatory_fraction: float) -> NetworkPartition:
        return cls(n=n, n_exc=int(n * excitatory_fraction))

    @property
    def n_inh(self) -> int:
        return self.n - self.n_exc

    @property
    def excitatory(self) -> slice:
        return slice(0, self.n_exc)

    @property
    def inhibitory(self) -> slice:
        return slice(self.n_exc, self.n)

    def is_excitatory(self, index: int) -> bool:
        return 0 <= index < self.n_exc


@dataclass(slots=True)
class Network:
    """Neuron state plus the immutable per-neuron inputs."""

    state: NeuronState
    partition: NetworkPartition
    applied_current: Tensor

    def __post_init__(self) -> None:
        if self.state.size != self.partition.n:
            raise ConfigurationError(
                f"state has {self.state.size} neurons, partition expects {self.partition.n}"
            )
        if tuple(self.applied_current.shape) != (self.partition.n,):
            raise ConfigurationError(
                f"applied current must have shape ({self.partition.n},), "
                f"got {tuple(self.applied_current.shape)}"
            )

    @property
    def size(self) -> int:
        return self.partition.n


__all__ = ["Network", "NetworkPartition"]
