"""Utilities for writing per-run manifest/summary artifacts."""

from __future__ import annotations

import json
import math
from dataclasses import asdict
from pathlib import Path
from typing import Any

from burstnet.contracts.simulation import SimulationConfig
from burstnet.simulation.results import SimulationResult


def _write_json(path: Path, payload: dict[str, Any]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    text = json.dumps(payload, indent=2, sort_keys=True)
    path.write_text(f"{text}\n", encoding="utf-8")
    return path


def config_to_dict(config: SimulationConfig) -> dict[str, Any]:
    payload = asdict(config)
    payload["meta"] = dict(config.meta) if config.meta else None
    payload["n_excitatory"] = config.n_excitatory
    payload["n_inhibitory"] = config.n_inhibitory
    return payload


def summarize_result(result: SimulationResult) -> dict[str, Any]:
    return {
        "burst_count": result.burst_count,
        "t_final": result.t_final,
        "steps": result.steps,
        "wall_time_s": result.wall_time_s,
        "episodes": len(result.episodes),
        "total_spikes": result.spike_train.total_spikes,
        "final_mean_state": [_json_float(v) for v in result.final_state.mean(dim=0).tolist()],
    }


def write_run_config(run_dir: Path, config: SimulationConfig) -> Path:
    return _write_json(run_dir / "run_config.json", config_to_dict(config))


def write_run_summary(run_dir: Path, result: SimulationResult) -> Path:
    return _write_json(run_dir / "run_summary.json", summarize_result(result))


def _json_float(value: float) -> float | str:
    # NaN/Infinity are not valid JSON.
    return value if math.isfinite(value) else str(value)


__all__ = [
    "config_to_dict",
    "summarize_result",
    "write_run_config",
    "write_run_summary",
]
