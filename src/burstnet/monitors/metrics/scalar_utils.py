"""Tensor-to-Python conversion helpers for monitors."""

from __future__ import annotations

from burstnet.contracts.tensor import Tensor


def vector_to_floats(x: Tensor) -> list[float]:
    """Convert a 1-D tensor (or sequence) to a list of Python floats.

    Note: This is intended for monitor/sink usage only.
    """
    if hasattr(x, "detach"):
        return [float(v) for v in x.detach().cpu().tolist()]
    return [float(v) for v in x]


__all__ = ["vector_to_floats"]
