"""Episode transition CSV monitor."""

from __future__ import annotations

from pathlib import Path

from burstnet.contracts.monitors import IMonitor, StepEvent
from burstnet.io.sinks import CsvSink


class EpisodeCSVMonitor(IMonitor):
    """Write one row per episode start/end.

    Columns: step, t, phase, mean_exc_activity, mean_inh_activity, burst_count
    """

    name = "episode_csv"

    def __init__(self, path: str | Path, *, append: bool = False) -> None:
        self._sink = CsvSink(
            path,
            fieldnames=[
                "step",
                "t",
                "phase",
                "mean_exc_activity",
                "mean_inh_activity",
                "burst_count",
            ],
            append=append,
        )

    def on_step(self, event: StepEvent) -> None:
        episode = event.episode
        if episode is None:
            return
        self._sink.write_row(
            {
                "step": event.step,
                "t": episode.time,
                "phase": "start" if episode.is_start else "end",
                "mean_exc_activity": episode.mean_exc_activity,
                "mean_inh_activity": episode.mean_inh_activity,
                "burst_count": event.burst_count,
            }
        )

    def flush(self) -> None:
        self._sink.flush()

    def close(self) -> None:
        self._sink.close()


__all__ = ["EpisodeCSVMonitor"]
