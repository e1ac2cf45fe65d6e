"""All-to-all synaptic coupling with self-exclusion."""

from __future__ import annotations

from burstnet.contracts.neurons import A, S, SynapticDrive
from burstnet.contracts.tensor import Tensor
from burstnet.core.torch_utils import require_torch
from burstnet.simulation.network.specs import NetworkPartition


class AllToAllCoupling:
    """Aggregate population synaptic drive once per step.

    Each neuron's output is ``a * s``. Totals are taken per partition from the
    pre-step state and held fixed for the whole step, so every neuron sees the
    drive of the previous step (one-step lag, no implicit solve).
    """

    name = "all_to_all"

    def __init__(self, partition: NetworkPartition) -> None:
        self.partition = partition
        self._exc_mask: Tensor | None = None

    def outputs(self, x: Tensor) -> Tensor:
        return x[:, A] * x[:, S]

    def totals(self, x: Tensor) -> tuple[Tensor, Tensor]:
        """Return ``(exc_total, inh_total)`` as 0-d tensors."""
        out = self.outputs(x)
        return out[self.partition.excitatory].sum(), out[self.partition.inhibitory].sum()

    def self_excluded(self, x: Tensor, totals: tuple[Tensor, Tensor]) -> SynapticDrive:
        """Per-neuron drive with the neuron's own synapse removed."""
        torch = require_torch()
        exc_total, inh_total = totals
        own = self.outputs(x)
        is_exc = self._mask(x)
        exc = torch.where(is_exc, exc_total - own, exc_total.expand_as(own))
        inh = torch.where(is_exc, inh_total.expand_as(own), inh_total - own)
        return SynapticDrive(exc=exc, inh=inh)

    def drive(self, x: Tensor) -> SynapticDrive:
        return self.self_excluded(x, self.totals(x))

    def _mask(self, like: Tensor) -> Tensor:
        mask = self._exc_mask
        if mask is None or mask.device != like.device:
            torch = require_torch()
            mask = torch.zeros((self.partition.n,), device=like.device, dtype=torch.bool)
            mask[self.partition.excitatory] = True
            self._exc_mask = mask
        return mask


__all__ = ["AllToAllCoupling"]
