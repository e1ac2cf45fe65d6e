"""Per-neuron spike detection from voltage threshold crossings."""

from __future__ import annotations

from typing import Any

from burstnet.contracts.tensor import Tensor
from burstnet.core.torch_utils import require_torch


class SpikeDetector:
    """Quiescent/Depolarized state machine, one flag per neuron.

    A neuron becomes depolarized when ``v >= v_thresh`` on a rising step and
    fires when it comes back to ``v <= v_thresh`` on a falling step. The spike
    is attributed to the falling (repolarization) edge.
    """

    def __init__(self, n: int, *, v_thresh: float = 40.0, device: Any = None) -> None:
        torch = require_torch()
        self.v_thresh = float(v_thresh)
        self.depolarized = torch.zeros((n,), device=device, dtype=torch.bool)

    @property
    def n(self) -> int:
        return int(self.depolarized.shape[0])

    def reset(self) -> None:
        self.depolarized.zero_()

    def update(self, v_prev: Tensor, v_next: Tensor, dt: float) -> Tensor:
        """Advance every neuron's flag; return the mask of neurons that spiked."""
        slope = (v_next - v_prev) / dt
        rising = ~self.depolarized & (v_next >= self.v_thresh) & (slope > 0)
        self.depolarized |= rising
        falling = self.depolarized & (v_next <= self.v_thresh) & (slope < 0)
        self.depolarized &= ~falling
        return falling


__all__ = ["SpikeDetector"]
