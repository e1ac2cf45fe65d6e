"""Neuron model implementations."""

from burstnet.biophysics.models.hh_reduced import HHReducedModel

__all__ = ["HHReducedModel"]
