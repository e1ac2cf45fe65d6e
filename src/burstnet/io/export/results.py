"""Plain-text and MATLAB exporters for simulation results."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import numpy as np

from burstnet.contracts.simulation import SimulationConfig
from burstnet.recording.spike_train import SpikeTrainStore
from burstnet.simulation.results import SimulationResult


def result_stem(config: SimulationConfig, *, solver: str = "rk4") -> str:
    """Base file name encoding solver, dt, network split, v_inh and duration."""
    return (
        f"HH_BBT_{solver}_{_dt_tag(config.dt)}_"
        f"{config.n_neurons},{config.n_inhibitory},vI{int(config.v_inh)},"
        f"t={int(config.max_time / 1000)}s_double_IappDES"
    )


def spikes_stem(config: SimulationConfig, *, solver: str = "rk4") -> str:
    """MATLAB-safe variant of :func:`result_stem` (no commas or '=')."""
    v_tag = f"{int(abs(config.v_inh))}_t"
    if config.v_inh < 0:
        v_tag = f"_{v_tag}"
    return (
        f"HH_BBT_{solver}_{_dt_tag(config.dt)}_"
        f"{config.n_neurons}_{config.n_inhibitory}_vI_{v_tag}"
        f"{int(config.max_time / 1000)}s_double_IappDES_Spikes"
    )


def write_state_matrix(path: str | Path, matrix: Any, *, precision: int = 14) -> Path:
    """Write a 2-D array as tab-separated fixed-point rows."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    array = _to_numpy(matrix)
    if array.ndim != 2:
        raise ValueError(f"expected a 2-D matrix, got shape {array.shape}")
    np.savetxt(path, array, fmt=f"%.{precision}f", delimiter="\t")
    return path


def write_applied_current(path: str | Path, applied_current: Any, *, precision: int = 14) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    np.savetxt(path, _to_numpy(applied_current).reshape(-1), fmt=f"%.{precision}f")
    return path


def write_spike_train_matlab(
    path: str | Path,
    spike_train: SpikeTrainStore,
    *,
    precision: int = 14,
) -> Path:
    """Write ``spikeTimes{k} = [ t1 t2 ...];`` lines, one cell per neuron (1-based)."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        for idx, times in enumerate(spike_train, start=1):
            values = "".join(f" {t:.{precision}f}" for t in times)
            handle.write(f"spikeTimes{{{idx}}} = [{values}];\n")
    return path


def write_spike_train_text(
    path: str | Path,
    spike_train: SpikeTrainStore,
    *,
    precision: int = 6,
) -> Path:
    """Write one line of space-separated spike times per neuron."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    lines = [spike_train.to_text(i, precision=precision) for i in range(len(spike_train))]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def write_simulation_outputs(
    result: SimulationResult,
    out_dir: str | Path,
    *,
    solver: str = "rk4",
) -> Mapping[str, Path]:
    """Write averages, episodes, applied currents and spike times under ``out_dir``."""
    out = Path(out_dir)
    config = result.config
    precision = config.precision
    stem = result_stem(config, solver=solver)
    return {
        "averages": write_state_matrix(
            out / f"{stem}.txt", result.average_states, precision=precision
        ),
        "episodes": write_state_matrix(
            out / f"{stem},Epis.txt", result.episode_matrix(), precision=precision
        ),
        "applied_current": write_applied_current(
            out / f"{stem},Iapp.txt", result.applied_current, precision=precision
        ),
        "spikes": write_spike_train_matlab(
            out / f"{spikes_stem(config, solver=solver)}.m",
            result.spike_train,
            precision=precision,
        ),
    }


def _dt_tag(dt: float) -> str:
    return f"dt0{int(dt * 10000)}"


def _to_numpy(values: Any) -> np.ndarray:
    if hasattr(values, "detach"):
        values = values.detach().to("cpu").numpy()
    return np.asarray(values, dtype=np.float64)


__all__ = [
    "result_stem",
    "spikes_stem",
    "write_applied_current",
    "write_simulation_outputs",
    "write_spike_train_matlab",
    "write_spike_train_text",
    "write_state_matrix",
]
