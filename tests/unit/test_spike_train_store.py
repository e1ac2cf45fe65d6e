from __future__ import annotations

import pytest

from burstnet.contracts.errors import RecordingViolation
from burstnet.recording import SpikeTrainStore
from burstnet.recording.spike_train import is_strictly_increasing

pytestmark = pytest.mark.unit


def test_add_keeps_times_per_neuron() -> None:
    store = SpikeTrainStore(3)

    assert store.add(0, 1.5)
    assert store.add(0, 2.5)
    assert store.add(2, 0.75)

    assert store.spike_times(0) == (1.5, 2.5)
    assert store.spike_times(1) == ()
    assert store.last_spike(2) == 0.75
    assert store.last_spike(1) is None
    assert store.counts() == [2, 0, 1]
    assert store.total_spikes == 3


@pytest.mark.parametrize("t", [2.0, 1.0])
def test_non_increasing_spike_is_dropped_with_warning(t: float) -> None:
    store = SpikeTrainStore(1)
    store.add(0, 2.0)

    with pytest.warns(RecordingViolation):
        accepted = store.add(0, t)

    assert accepted is False
    assert store.spike_times(0) == (2.0,)


def test_out_of_range_neuron_raises_index_error() -> None:
    store = SpikeTrainStore(2)

    with pytest.raises(IndexError):
        store.add(2, 1.0)
    with pytest.raises(IndexError):
        store.spike_times(-1)


def test_store_requires_positive_size() -> None:
    with pytest.raises(ValueError):
        SpikeTrainStore(0)


def test_add_many_counts_accepted_spikes() -> None:
    store = SpikeTrainStore(3)

    assert store.add_many([0, 2], 1.0) == 2
    assert store.as_lists() == [[1.0], [], [1.0]]


def test_text_views() -> None:
    store = SpikeTrainStore(2)
    store.add(1, 0.5)
    store.add(1, 1.25)

    assert store.to_text(1, precision=2) == "0.50 1.25"
    assert store.to_text(1, labels=True, precision=2) == "Neuron(1): 0.50 1.25"
    text = str(store)
    assert text.startswith("Spike Train matrix:")
    assert "Neuron(0): " in text
    assert list(store) == [(), (0.5, 1.25)]


def test_is_strictly_increasing() -> None:
    assert is_strictly_increasing([])
    assert is_strictly_increasing([0.1, 0.2, 3.0])
    assert not is_strictly_increasing([0.1, 0.1])


def test_copy_is_independent_of_later_appends() -> None:
    store = SpikeTrainStore(2)
    store.add(0, 1.0)

    snapshot = store.copy()
    store.add(0, 2.0)
    store.add(1, 3.0)

    assert snapshot.as_lists() == [[1.0], []]
    assert store.as_lists() == [[1.0, 2.0], [3.0]]
