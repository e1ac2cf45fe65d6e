"""Contracts (interfaces/protocols/DTOs) for BurstNet-Py.

This package is *not* the public API surface. Only symbols re-exported from
:mod:`burstnet.api` are considered stable.
"""

from burstnet.contracts.errors import ConfigurationError, RecordingViolation
from burstnet.contracts.monitors import IMonitor, StepEvent
from burstnet.contracts.neurons import (
    HHReducedParams,
    INeuronModel,
    NeuronState,
    StepContext,
    SynapticDrive,
)
from burstnet.contracts.simulation import ISimulationEngine, SimulationConfig

__all__ = [
    # common
    "StepContext",
    # errors
    "ConfigurationError",
    "RecordingViolation",
    # neurons
    "HHReducedParams",
    "INeuronModel",
    "NeuronState",
    "SynapticDrive",
    # simulation
    "ISimulationEngine",
    "SimulationConfig",
    # monitors
    "StepEvent",
    "IMonitor",
]
