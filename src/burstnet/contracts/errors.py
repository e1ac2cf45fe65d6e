"""Error and warning types raised by the simulation kernel."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """Invalid simulation configuration, detected before any simulation work."""


class RecordingViolation(RuntimeWarning):
    """A spike time was not strictly after the neuron's last recorded spike.

    Emitted through :func:`warnings.warn`; the offending append is dropped.
    """


__all__ = ["ConfigurationError", "RecordingViolation"]
