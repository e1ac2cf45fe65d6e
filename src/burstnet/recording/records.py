"""Per-step and per-episode output records."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from burstnet.contracts.tensor import Tensor
from burstnet.core.torch_utils import require_torch


@dataclass(frozen=True, slots=True)
class AverageStateRecord:
    """Network mean of each state variable after one step."""

    v: float
    n: float
    a: float
    s: float

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.v, self.n, self.a, self.s)


@dataclass(frozen=True, slots=True)
class EpisodeRecord:
    """One episode phase transition.

    ``signed_time`` is +t at phase start and -t at phase end (``-0.0`` for an
    end at t=0, so the sign bit always carries the phase).
    """

    mean_exc_activity: float
    mean_inh_activity: float
    signed_time: float
    flag: float = 1.0

    @property
    def is_start(self) -> bool:
        return math.copysign(1.0, self.signed_time) > 0

    @property
    def time(self) -> float:
        return abs(self.signed_time)

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.mean_exc_activity, self.mean_inh_activity, self.signed_time, self.flag)


class StateRecordBuffer:
    """Growable ``[rows, width]`` tensor filled one row per step.

    Rows are written into preallocated chunks so long runs do not keep one
    Python object per step.
    """

    def __init__(
        self,
        *,
        width: int = 4,
        chunk_rows: int = 65536,
        device: Any = None,
        dtype: Any = None,
    ) -> None:
        if chunk_rows <= 0:
            raise ValueError(f"chunk_rows must be > 0, got {chunk_rows}")
        self.width = int(width)
        self.chunk_rows = int(chunk_rows)
        self.device = device
        self.dtype = dtype
        self._chunks: list[Tensor] = []
        self._row = self.chunk_rows
        self._len = 0

    def __len__(self) -> int:
        return self._len

    def append(self, row: Tensor) -> None:
        if self._row >= self.chunk_rows:
            torch = require_torch()
            self._chunks.append(
                torch.empty((self.chunk_rows, self.width), device=self.device, dtype=self.dtype)
            )
            self._row = 0
        self._chunks[-1][self._row].copy_(row)
        self._row += 1
        self._len += 1

    def clear(self) -> None:
        self._chunks.clear()
        self._row = self.chunk_rows
        self._len = 0

    def to_tensor(self) -> Tensor:
        torch = require_torch()
        if not self._chunks:
            return torch.empty((0, self.width), device=self.device, dtype=self.dtype)
        full = self._chunks[:-1]
        tail = self._chunks[-1][: self._row]
        return torch.cat([*full, tail], dim=0)

    def records(self) -> Iterator[AverageStateRecord]:
        for row in self.to_tensor().tolist():
            yield AverageStateRecord(*row)


__all__ = ["AverageStateRecord", "EpisodeRecord", "StateRecordBuffer"]
