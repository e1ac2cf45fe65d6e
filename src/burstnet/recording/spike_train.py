"""Per-neuron spike time storage."""

from __future__ import annotations

import warnings
from collections.abc import Iterable, Iterator, Sequence

from burstnet.contracts.errors import RecordingViolation


class SpikeTrainStore:
    """Append-only, strictly increasing spike times for each of ``n`` neurons.

    A non-monotonic append is dropped with a :class:`RecordingViolation`
    warning; the simulation carries on.
    """

    def __init__(self, n: int) -> None:
        if n <= 0:
            raise ValueError(f"SpikeTrainStore needs n > 0, got {n}")
        self._trains: list[list[float]] = [[] for _ in range(n)]

    def __len__(self) -> int:
        return len(self._trains)

    def __iter__(self) -> Iterator[tuple[float, ...]]:
        for train in self._trains:
            yield tuple(train)

    def add(self, neuron: int, t: float) -> bool:
        """Record a spike; return False if it was rejected."""
        train = self._trains[self._check_index(neuron)]
        if train and not train[-1] < t:
            warnings.warn(
                f"Spike at t={t} for neuron {neuron} is not after its last spike "
                f"at t={train[-1]}; dropped.",
                RecordingViolation,
                stacklevel=2,
            )
            return False
        train.append(float(t))
        return True

    def add_many(self, neurons: Iterable[int], t: float) -> int:
        """Record a spike at ``t`` for every neuron in ``neurons``."""
        return sum(1 for neuron in neurons if self.add(int(neuron), t))

    def spike_times(self, neuron: int) -> tuple[float, ...]:
        return tuple(self._trains[self._check_index(neuron)])

    def last_spike(self, neuron: int) -> float | None:
        train = self._trains[self._check_index(neuron)]
        return train[-1] if train else None

    def counts(self) -> list[int]:
        return [len(train) for train in self._trains]

    @property
    def total_spikes(self) -> int:
        return sum(self.counts())

    def as_lists(self) -> list[list[float]]:
        """Copies of every train, ready for serialization."""
        return [list(train) for train in self._trains]

    def copy(self) -> SpikeTrainStore:
        """Independent snapshot of every train."""
        snapshot = SpikeTrainStore(len(self._trains))
        snapshot._trains = self.as_lists()
        return snapshot

    def to_text(self, neuron: int, *, labels: bool = False, precision: int = 6) -> str:
        times = " ".join(f"{t:.{precision}f}" for t in self._trains[self._check_index(neuron)])
        prefix = f"Neuron({neuron}): " if labels else ""
        return f"{prefix}{times}"

    def __str__(self) -> str:
        header = "Spike Train matrix:\n====================="
        rows = [self.to_text(i, labels=True) for i in range(len(self))]
        return "\n".join([header, *rows])

    def _check_index(self, neuron: int) -> int:
        if not 0 <= neuron < len(self._trains):
            raise IndexError(f"neuron index {neuron} out of range [0..{len(self._trains)})")
        return neuron


def is_strictly_increasing(times: Sequence[float]) -> bool:
    return all(b > a for a, b in zip(times, times[1:], strict=False))


__all__ = ["SpikeTrainStore", "is_strictly_increasing"]
