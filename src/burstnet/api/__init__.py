"""Public facade (stable API surface).

Only symbols re-exported from here are considered public and stable.
Internal modules may change without notice.
"""

from burstnet.api.version import __version__
from burstnet.biophysics.integrators import RungeKutta4Stepper
from burstnet.biophysics.models import HHReducedModel
from burstnet.contracts.errors import ConfigurationError, RecordingViolation
from burstnet.contracts.monitors import IMonitor, StepEvent
from burstnet.contracts.neurons import HHReducedParams, NeuronState, StepContext, SynapticDrive
from burstnet.contracts.simulation import SimulationConfig
from burstnet.detection import EpisodeDetector, EpisodePhase, SpikeDetector
from burstnet.monitors import AverageStateCSVMonitor, BurstProgressMonitor, EpisodeCSVMonitor
from burstnet.recording import AverageStateRecord, EpisodeRecord, SpikeTrainStore
from burstnet.simulation.engine import TorchBurstEngine, simulate
from burstnet.simulation.network import Network, NetworkPartition
from burstnet.simulation.results import NumericAnomaly, SimulationResult, find_numeric_anomalies
from burstnet.stimulus import (
    create_applied_current,
    linear_applied_current,
    load_applied_current,
    shuffled_applied_current,
)
from burstnet.synapses import AllToAllCoupling

__all__ = [
    "__version__",
    # configuration / errors
    "SimulationConfig",
    "ConfigurationError",
    "RecordingViolation",
    # neurons
    "HHReducedParams",
    "HHReducedModel",
    "NeuronState",
    "StepContext",
    "SynapticDrive",
    # kernel components
    "AllToAllCoupling",
    "RungeKutta4Stepper",
    "SpikeDetector",
    "EpisodeDetector",
    "EpisodePhase",
    "Network",
    "NetworkPartition",
    # engine
    "TorchBurstEngine",
    "simulate",
    "SimulationResult",
    "NumericAnomaly",
    "find_numeric_anomalies",
    # recording
    "SpikeTrainStore",
    "AverageStateRecord",
    "EpisodeRecord",
    # stimulus
    "create_applied_current",
    "linear_applied_current",
    "load_applied_current",
    "shuffled_applied_current",
    # monitors
    "IMonitor",
    "StepEvent",
    "AverageStateCSVMonitor",
    "BurstProgressMonitor",
    "EpisodeCSVMonitor",
]
