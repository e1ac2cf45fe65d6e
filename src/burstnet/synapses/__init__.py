"""Synaptic coupling."""

from burstnet.synapses.coupling import AllToAllCoupling

__all__ = ["AllToAllCoupling"]
