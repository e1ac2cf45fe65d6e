from __future__ import annotations

import pytest

from burstnet.contracts.neurons import HHReducedParams
from burstnet.contracts.simulation import SimulationConfig
from burstnet.simulation.engine import simulate

pytestmark = pytest.mark.acceptance


def test_uncoupled_neuron_fires_periodically_under_constant_current() -> None:
    pytest.importorskip("torch")
    config = SimulationConfig(
        n_neurons=1,
        excitatory_fraction=1.0,
        dt=0.02,
        max_time=300.0,
        max_bursts=1_000_000,
        neuron_params=HHReducedParams(g_syn_total=0.0),
        device="cpu",
        dtype="float64",
    )

    result = simulate(config, [10.0])

    spikes = result.spike_train.spike_times(0)
    assert len(spikes) >= 4
    # Skip the first interval, which still carries the transient from rest.
    intervals = [b - a for a, b in zip(spikes[1:], spikes[2:], strict=False)]
    mean_isi = sum(intervals) / len(intervals)
    for isi in intervals:
        assert isi == pytest.approx(mean_isi, rel=0.05)


def test_uncoupled_neuron_at_rest_current_matches_single_neuron_kernel() -> None:
    torch = pytest.importorskip("torch")
    coupled = SimulationConfig(n_neurons=1, max_time=5.0, device="cpu", dtype="float64")
    uncoupled = SimulationConfig(
        n_neurons=1,
        max_time=5.0,
        neuron_params=HHReducedParams(g_syn_total=0.0),
        device="cpu",
        dtype="float64",
    )

    first = simulate(coupled, [2.0])
    second = simulate(uncoupled, [2.0])

    # A lone neuron excludes its own synapse, so its drive is zero either way.
    torch.testing.assert_close(first.final_state, second.final_state, rtol=0.0, atol=0.0)
