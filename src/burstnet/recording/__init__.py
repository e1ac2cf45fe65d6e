"""Spike trains and per-step output records."""

from burstnet.recording.records import AverageStateRecord, EpisodeRecord, StateRecordBuffer
from burstnet.recording.spike_train import SpikeTrainStore, is_strictly_increasing

__all__ = [
    "AverageStateRecord",
    "EpisodeRecord",
    "SpikeTrainStore",
    "StateRecordBuffer",
    "is_strictly_increasing",
]
