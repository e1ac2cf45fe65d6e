from __future__ import annotations

import math

import pytest

from burstnet.detection import SpikeDetector

pytestmark = pytest.mark.unit

torch = pytest.importorskip("torch")


def _feed(detector: SpikeDetector, trace: list[float], dt: float = 0.01) -> list[int]:
    """Feed a single-neuron voltage trace; return the indices of steps that spiked."""
    spikes: list[int] = []
    for k in range(1, len(trace)):
        v_prev = torch.tensor([trace[k - 1]], dtype=torch.float64)
        v_next = torch.tensor([trace[k]], dtype=torch.float64)
        if bool(detector.update(v_prev, v_next, dt)[0]):
            spikes.append(k)
    return spikes


def test_constant_voltage_never_transitions() -> None:
    detector = SpikeDetector(1)

    assert _feed(detector, [50.0] * 10) == []
    assert not bool(detector.depolarized[0])


def test_rise_then_fall_through_threshold_records_one_spike() -> None:
    detector = SpikeDetector(1)

    spikes = _feed(detector, [0.0, 30.0, 45.0, 60.0, 50.0, 38.0, 20.0])

    assert spikes == [5]
    assert not bool(detector.depolarized[0])


def test_fall_without_prior_rise_is_not_a_spike() -> None:
    detector = SpikeDetector(1)

    assert _feed(detector, [60.0, 50.0, 30.0]) == []


def test_threshold_is_inclusive_on_both_edges() -> None:
    detector = SpikeDetector(1, v_thresh=40.0)

    assert _feed(detector, [39.0, 40.0, 41.0, 40.0]) == [3]


def test_non_finite_voltage_does_not_transition() -> None:
    detector = SpikeDetector(1)

    assert _feed(detector, [0.0, math.nan, 60.0, math.nan, 0.0]) == []


def test_neurons_are_tracked_independently() -> None:
    detector = SpikeDetector(2)
    dt = 0.01

    detector.update(
        torch.tensor([0.0, 0.0], dtype=torch.float64),
        torch.tensor([50.0, 10.0], dtype=torch.float64),
        dt,
    )
    fired = detector.update(
        torch.tensor([50.0, 10.0], dtype=torch.float64),
        torch.tensor([20.0, 5.0], dtype=torch.float64),
        dt,
    )

    assert fired.tolist() == [True, False]


def test_reset_clears_depolarized_flags() -> None:
    detector = SpikeDetector(1)
    _feed(detector, [0.0, 50.0])
    assert bool(detector.depolarized[0])

    detector.reset()

    assert not bool(detector.depolarized[0])
