"""Population episode (burst) detection from mean synaptic activity."""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum

from burstnet.recording.records import EpisodeRecord

ClassMeansFn = Callable[[], tuple[float, float]]


class EpisodePhase(StrEnum):
    INACTIVE = "inactive"
    ACTIVE = "active"


class EpisodeDetector:
    """Inactive/Active state machine over the network mean of ``a``.

    An episode starts when mean activity is at or above ``activity_threshold``
    and rising faster than ``activity_slope_threshold`` per ms; it ends when
    activity drops below the threshold. Every end increments ``burst_count``.
    """

    def __init__(
        self,
        *,
        dt: float,
        activity_threshold: float = 0.1730,
        activity_slope_threshold: float = 0.1490,
        initial_activity: float = 0.0,
    ) -> None:
        self.dt = float(dt)
        self.activity_threshold = float(activity_threshold)
        self.activity_slope_threshold = float(activity_slope_threshold)
        self.phase = EpisodePhase.INACTIVE
        self.burst_count = 0
        self.previous_activity = float(initial_activity)
        self.records: list[EpisodeRecord] = []

    def reset(self, initial_activity: float) -> None:
        self.phase = EpisodePhase.INACTIVE
        self.burst_count = 0
        self.previous_activity = float(initial_activity)
        self.records = []

    def update(
        self, activity: float, *, t: float, class_means: ClassMeansFn
    ) -> EpisodeRecord | None:
        """Feed this step's mean activity; return the record of a transition, if any.

        ``class_means`` returns the (excitatory, inhibitory) mean activity and is
        only called on a transition.
        """
        slope = (activity - self.previous_activity) / self.dt
        self.previous_activity = activity

        record: EpisodeRecord | None = None
        if (
            self.phase is EpisodePhase.INACTIVE
            and activity >= self.activity_threshold
            and slope > self.activity_slope_threshold
        ):
            self.phase = EpisodePhase.ACTIVE
            exc, inh = class_means()
            record = EpisodeRecord(exc, inh, t)
        elif self.phase is EpisodePhase.ACTIVE and activity < self.activity_threshold:
            self.phase = EpisodePhase.INACTIVE
            self.burst_count += 1
            exc, inh = class_means()
            record = EpisodeRecord(exc, inh, -t)

        if record is not None:
            self.records.append(record)
        return record

    def should_stop(self, max_bursts: int) -> bool:
        return self.burst_count >= max_bursts


__all__ = ["ClassMeansFn", "EpisodeDetector", "EpisodePhase"]
