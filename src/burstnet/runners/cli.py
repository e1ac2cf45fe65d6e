"""CLI entrypoint for running a burst simulation and writing its results."""

from __future__ import annotations

import argparse
import platform
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from burstnet.api.version import __version__
from burstnet.contracts.errors import ConfigurationError
from burstnet.contracts.monitors import IMonitor
from burstnet.contracts.neurons import StepContext
from burstnet.contracts.simulation import SimulationConfig
from burstnet.contracts.tensor import Tensor
from burstnet.core.torch_utils import require_torch, resolve_device_dtype
from burstnet.io.export import (
    result_stem,
    write_run_config,
    write_run_summary,
    write_simulation_outputs,
)
from burstnet.monitors import AverageStateCSVMonitor, BurstProgressMonitor, EpisodeCSVMonitor
from burstnet.simulation.engine import simulate
from burstnet.stimulus import create_applied_current, load_applied_current

IAPP_CHOICES = ("linear", "shuffled", "file")
EXIT_USAGE = 2


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    try:
        config = _config_from_args(args).validate()
        _validate_tensor_options(config)
        applied_current = _applied_current_from_args(args, config)
        config.validate_applied_current(int(applied_current.shape[0]))
    except (ConfigurationError, OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    out_dir = Path(args.out_dir).expanduser().resolve()
    save = not args.no_save

    if not args.quiet:
        print("Simulation ...!!!")
        _print_parameters(config, save=save)

    monitors: list[IMonitor] = []
    if not args.quiet:
        monitors.append(BurstProgressMonitor())
    if save and args.csv:
        stem = result_stem(config)
        monitors.append(
            AverageStateCSVMonitor(out_dir / f"{stem}_average.csv", stride=args.csv_stride)
        )
        monitors.append(EpisodeCSVMonitor(out_dir / f"{stem}_episodes.csv"))

    result = simulate(config, applied_current, monitors=monitors)

    print(f"Simulation duration: {result.wall_time_s:.4f} seconds")
    print("=========================================")

    if save:
        paths = write_simulation_outputs(result, out_dir)
        write_run_config(out_dir, config)
        write_run_summary(out_dir, result)
        for path in paths.values():
            print(f"Writing in file: {path}")
    return 0


def _config_from_args(args: argparse.Namespace) -> SimulationConfig:
    return SimulationConfig(
        n_neurons=args.n,
        excitatory_fraction=args.p_exc,
        dt=args.dt,
        max_time=args.max_time,
        max_bursts=args.n_burst,
        v_inh=args.v_inh,
        precision=args.precision,
        device=args.device,
        dtype=args.dtype,
        seed=args.seed,
    )


def _validate_tensor_options(config: SimulationConfig) -> None:
    resolve_device_dtype(StepContext(device=config.device, dtype=config.dtype))


def _applied_current_from_args(args: argparse.Namespace, config: SimulationConfig) -> Tensor:
    torch = require_torch()
    if args.iapp == "file":
        if not args.iapp_file:
            raise ConfigurationError("--iapp file requires --iapp-file PATH")
        return load_applied_current(args.iapp_file, dtype=torch.float64)
    kwargs: dict[str, Any] = {"i0": args.i0, "deli": args.deli}
    if args.iapp == "shuffled":
        kwargs["seed"] = args.seed
    return create_applied_current(args.iapp, config.n_neurons, **kwargs)


def _print_parameters(config: SimulationConfig, *, save: bool) -> None:
    torch = require_torch()
    print(f"burstnet {__version__} (python {platform.python_version()}, torch {torch.__version__})")
    print(
        "Running with the parameters:\n"
        f"Total Neurons = {config.n_neurons}\n"
        f"Exc Neurons = {config.n_excitatory}\n"
        f"Inh Neurons = {config.n_inhibitory}\n"
        f"maxTimeSimulation = {config.max_time / 1000:.6f} s\n"
        f"nBurst = {config.max_bursts}\n"
        f"dt = {config.dt:.6f}\n"
        f"vInh = {config.v_inh:.6f}\n"
        f"Float Precision = {config.precision}\n"
        f"SAVE_SIMULATION = {int(save)}\n"
    )


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="burstnet",
        description="Simulate a reduced Hodgkin-Huxley network and detect population bursts",
        allow_abbrev=False,
    )
    parser.add_argument(
        "--v-inh",
        "-vInh",
        dest="v_inh",
        type=float,
        default=-12.0,
        help="Inhibitory reversal potential in mV, [-12 .. 70]",
    )
    parser.add_argument(
        "--n-burst",
        "-nBurst",
        dest="n_burst",
        type=int,
        default=200,
        help="Number of bursts after which the simulation stops, > 0",
    )
    parser.add_argument(
        "--p-exc",
        "-pExcN",
        dest="p_exc",
        type=float,
        default=1.0,
        help="Fraction of excitatory neurons, ]0 .. 1]",
    )
    parser.add_argument("--n", type=int, default=100, help="Number of neurons")
    parser.add_argument("--dt", type=float, default=0.01, help="Time step in ms")
    parser.add_argument(
        "--max-time",
        dest="max_time",
        type=float,
        default=8000.0,
        help="Ceiling on simulated time in ms",
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=14,
        help="Decimal places in the written result files",
    )
    parser.add_argument(
        "--iapp",
        choices=IAPP_CHOICES,
        default="linear",
        help="Applied current table: linear ramp, shuffled ramp, or read from --iapp-file",
    )
    parser.add_argument("--iapp-file", dest="iapp_file", default=None)
    parser.add_argument("--i0", type=float, default=-10.0, help="Lowest applied current")
    parser.add_argument(
        "--deli", type=float, default=15.0, help="Spread of the applied current ramp"
    )
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--device", default=None)
    parser.add_argument("--dtype", default="float64")
    parser.add_argument("--out-dir", dest="out_dir", default="results")
    parser.add_argument(
        "--no-save",
        dest="no_save",
        action="store_true",
        help="Run without writing result files",
    )
    parser.add_argument(
        "--csv",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Also stream averages and episodes to CSV while running",
    )
    parser.add_argument("--csv-stride", dest="csv_stride", type=int, default=100)
    parser.add_argument("--quiet", action="store_true")
    return parser.parse_args(argv)


if __name__ == "__main__":
    raise SystemExit(main())
