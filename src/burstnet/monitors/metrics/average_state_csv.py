"""Network-average state CSV monitor."""

from __future__ import annotations

from pathlib import Path

from burstnet.contracts.monitors import IMonitor, StepEvent
from burstnet.contracts.neurons import STATE_FIELDS
from burstnet.io.sinks import CsvSink
from burstnet.monitors.metrics.scalar_utils import vector_to_floats


class AverageStateCSVMonitor(IMonitor):
    """Write the per-step mean state to CSV.

    Columns: step, t, v, n, a, s, burst_count
    """

    name = "average_state_csv"

    def __init__(
        self,
        path: str | Path,
        *,
        stride: int = 1,
        append: bool = False,
        flush_every: int = 1024,
    ) -> None:
        self._sink = CsvSink(
            path,
            fieldnames=["step", "t", *STATE_FIELDS, "burst_count"],
            append=append,
            flush_every=flush_every,
        )
        self._stride = max(1, stride)

    def on_step(self, event: StepEvent) -> None:
        if event.step % self._stride != 0:
            return
        row: dict[str, float | int] = {"step": event.step, "t": event.t}
        row.update(zip(STATE_FIELDS, vector_to_floats(event.mean_state), strict=True))
        row["burst_count"] = event.burst_count
        self._sink.write_row(row)

    def flush(self) -> None:
        self._sink.flush()

    def close(self) -> None:
        self._sink.close()


__all__ = ["AverageStateCSVMonitor"]
