"""Torch-backed burst simulation engine (the per-step simulation loop)."""

from __future__ import annotations

import math
import time
from collections.abc import Callable, Mapping, Sequence
from dataclasses import replace
from typing import Any

from burstnet.biophysics.integrators.rk4 import RungeKutta4Stepper
from burstnet.biophysics.models.hh_reduced import HHReducedModel
from burstnet.contracts.monitors import IMonitor, StepEvent
from burstnet.contracts.neurons import A, V, HHReducedParams, INeuronModel, StepContext
from burstnet.contracts.simulation import ISimulationEngine, SimulationConfig
from burstnet.contracts.tensor import Tensor
from burstnet.core.torch_utils import as_tensor_1d, resolve_device_dtype
from burstnet.detection.episodes import EpisodeDetector
from burstnet.detection.spikes import SpikeDetector
from burstnet.recording.records import EpisodeRecord, StateRecordBuffer
from burstnet.recording.spike_train import SpikeTrainStore
from burstnet.simulation.network.specs import Network, NetworkPartition
from burstnet.simulation.results import SimulationResult
from burstnet.synapses.coupling import AllToAllCoupling

ModelFactory = Callable[[HHReducedParams], INeuronModel]


class TorchBurstEngine(ISimulationEngine):
    """Fully coupled reduced-HH network advanced with fixed-step RK4.

    One ``step()`` is a global synchronization point: coupling totals are
    taken from the pre-step state, every neuron is integrated, then spikes,
    network averages and episodes are evaluated for that same step.
    """

    name = "torch"

    def __init__(
        self,
        *,
        applied_current: Any,
        model_factory: ModelFactory = HHReducedModel,
        stepper: RungeKutta4Stepper | None = None,
        record_chunk_rows: int = 65536,
    ) -> None:
        self._applied_current_src = applied_current
        self._model_factory = model_factory
        self._stepper = stepper or RungeKutta4Stepper()
        self._record_chunk_rows = record_chunk_rows

        self._config: SimulationConfig | None = None
        self._ctx = StepContext()
        self._dt = 0.0
        self._t = 0.0
        self._step = 0
        self._wall_time_s = 0.0

        self._model: INeuronModel | None = None
        self._network: Network | None = None
        self._coupling: AllToAllCoupling | None = None
        self._spike_detector: SpikeDetector | None = None
        self._episode_detector: EpisodeDetector | None = None
        self._spike_train: SpikeTrainStore | None = None
        self._averages: StateRecordBuffer | None = None
        self._monitors: list[IMonitor] = []
        self._event_meta: Mapping[str, Any] | None = None

    # ---- lifecycle ------------------------------------------------------------
    def reset(self, *, config: SimulationConfig) -> None:
        config.validate()

        self._ctx = StepContext(
            device=config.device,
            dtype=config.dtype,
            seed=config.seed,
        )
        device, dtype = resolve_device_dtype(self._ctx)

        applied_current = as_tensor_1d(
            self._applied_current_src, device=device, dtype=dtype, name="applied_current"
        )
        config.validate_applied_current(int(applied_current.shape[0]))

        params = replace(config.neuron_params or HHReducedParams(), v_inh=config.v_inh)
        self._model = self._model_factory(params)
        partition = NetworkPartition.from_fraction(config.n_neurons, config.excitatory_fraction)
        state = self._model.init_state(config.n_neurons, ctx=self._ctx)
        self._network = Network(state=state, partition=partition, applied_current=applied_current)
        self._coupling = AllToAllCoupling(partition)

        self._config = config
        self._dt = float(config.dt)
        self._t = 0.0
        self._step = 0
        self._wall_time_s = 0.0

        self._spike_detector = SpikeDetector(
            config.n_neurons, v_thresh=params.v_thresh, device=device
        )
        self._episode_detector = EpisodeDetector(
            dt=self._dt,
            activity_threshold=config.activity_threshold,
            activity_slope_threshold=config.activity_slope_threshold,
            initial_activity=float(state.a.mean()),
        )
        self._spike_train = SpikeTrainStore(config.n_neurons)
        self._averages = StateRecordBuffer(
            width=4, chunk_rows=self._record_chunk_rows, device=device, dtype=dtype
        )
        self._event_meta = {
            "n_exc": partition.n_exc,
            "n_inh": partition.n_inh,
            "v_inh": config.v_inh,
        }

    def attach_monitors(self, monitors: Sequence[IMonitor]) -> None:
        """Replace the current monitor list with the provided sequence."""

        self._monitors = list(monitors)

    # ---- stepping -------------------------------------------------------------
    def step(self) -> Mapping[str, Any]:
        network = self._network
        if network is None or self._model is None:
            raise RuntimeError("Engine must be reset before stepping.")
        assert self._coupling is not None
        assert self._spike_detector is not None
        assert self._episode_detector is not None
        assert self._spike_train is not None
        assert self._averages is not None

        model = self._model
        x = network.state.x
        t = self._t
        dt = self._dt
        drive = self._coupling.drive(x)
        i_app = network.applied_current

        def rhs(y: Tensor, _t: float) -> Tensor:
            return model.derivatives(y, drive, i_app)

        x_next = self._stepper.do_step(rhs, x, t, dt)
        spiked = self._spike_detector.update(x[:, V], x_next[:, V], dt)
        x.copy_(x_next)

        spike_count = 0
        if bool(spiked.any()):
            indices = spiked.nonzero(as_tuple=False).flatten().tolist()
            spike_count = self._spike_train.add_many(indices, t)

        mean_state = x.mean(dim=0)
        self._averages.append(mean_state)

        episode = self._episode_detector.update(
            float(mean_state[A]), t=t, class_means=self._class_means
        )
        burst_count = self._episode_detector.burst_count

        if self._monitors:
            event = StepEvent(
                t=t,
                dt=dt,
                step=self._step,
                mean_state=mean_state,
                spike_count=spike_count,
                burst_count=burst_count,
                episode=episode,
                meta=self._event_meta,
            )
            for monitor in self._monitors:
                monitor.on_step(event)

        self._t += dt
        self._step += 1

        return {
            "t": t,
            "t_next": self._t,
            "step": self._step,
            "spike_count": spike_count,
            "burst_count": burst_count,
            "episode": episode,
        }

    def should_stop(self) -> bool:
        config = self._config
        if config is None or self._episode_detector is None:
            raise RuntimeError("Engine must be reset before checking termination.")
        return self._episode_detector.should_stop(config.max_bursts) or self._t > config.max_time

    def run(self, steps: int | None = None) -> SimulationResult:
        """Step until the burst count or time ceiling is reached.

        ``steps`` additionally caps the number of steps taken by this call. A
        capped call pauses the run: monitors are flushed but stay open, and a
        later ``run()`` continues from the current state. Monitors are closed
        once the run terminates or a step raises.
        """
        taken = 0
        paused = False
        start = time.perf_counter()
        try:
            while not self.should_stop():
                if steps is not None and taken >= steps:
                    paused = True
                    break
                self.step()
                taken += 1
        finally:
            self._wall_time_s += time.perf_counter() - start
            for monitor in self._monitors:
                monitor.flush()
            if not paused:
                for monitor in self._monitors:
                    monitor.close()
        return self.result()

    # ---- accessors ------------------------------------------------------------
    @property
    def t(self) -> float:
        return self._t

    @property
    def burst_count(self) -> int:
        return self._episode_detector.burst_count if self._episode_detector else 0

    @property
    def network(self) -> Network:
        if self._network is None:
            raise RuntimeError("Engine must be reset before accessing the network.")
        return self._network

    @property
    def episodes(self) -> list[EpisodeRecord]:
        return list(self._episode_detector.records) if self._episode_detector else []

    def result(self) -> SimulationResult:
        """Snapshot of the run so far; later steps do not change it."""
        if (
            self._config is None
            or self._network is None
            or self._episode_detector is None
            or self._spike_train is None
            or self._averages is None
        ):
            raise RuntimeError("Engine must be reset before collecting results.")
        return SimulationResult(
            config=self._config,
            partition=self._network.partition,
            applied_current=self._network.applied_current.clone(),
            average_states=self._averages.to_tensor(),
            episodes=tuple(self._episode_detector.records),
            spike_train=self._spike_train.copy(),
            burst_count=self._episode_detector.burst_count,
            t_final=self._t,
            steps=self._step,
            wall_time_s=self._wall_time_s,
            final_state=self._network.state.x.clone(),
        )

    def _class_means(self) -> tuple[float, float]:
        network = self.network
        a = network.state.a
        return (
            _mean_or_nan(a[network.partition.excitatory]),
            _mean_or_nan(a[network.partition.inhibitory]),
        )


def simulate(
    config: SimulationConfig,
    applied_current: Any,
    *,
    monitors: Sequence[IMonitor] | None = None,
    steps: int | None = None,
) -> SimulationResult:
    """Build, reset and run an engine in one call."""
    engine = TorchBurstEngine(applied_current=applied_current)
    engine.reset(config=config)
    if monitors:
        engine.attach_monitors(monitors)
    return engine.run(steps)


def _mean_or_nan(values: Tensor) -> float:
    if values.numel() == 0:
        return math.nan
    return float(values.mean())


__all__ = ["ModelFactory", "TorchBurstEngine", "simulate"]
