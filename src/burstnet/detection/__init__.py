"""Online spike and episode detection."""

from burstnet.detection.episodes import EpisodeDetector, EpisodePhase
from burstnet.detection.spikes import SpikeDetector

__all__ = ["EpisodeDetector", "EpisodePhase", "SpikeDetector"]
