from __future__ import annotations

import pytest

from burstnet.simulation.network import NetworkPartition
from burstnet.synapses import AllToAllCoupling

pytestmark = pytest.mark.unit

torch = pytest.importorskip("torch")


def _state(a: list[float], s: list[float]):
    n = len(a)
    x = torch.zeros((n, 4), dtype=torch.float64)
    x[:, 2] = torch.tensor(a, dtype=torch.float64)
    x[:, 3] = torch.tensor(s, dtype=torch.float64)
    return x


def test_totals_split_by_partition() -> None:
    coupling = AllToAllCoupling(NetworkPartition(n=4, n_exc=2))
    x = _state([0.1, 0.2, 0.3, 0.4], [1.0, 0.5, 0.5, 0.25])

    exc_total, inh_total = coupling.totals(x)

    assert float(exc_total) == pytest.approx(0.1 + 0.1)
    assert float(inh_total) == pytest.approx(0.15 + 0.1)


def test_drive_excludes_own_synapse_from_own_partition() -> None:
    coupling = AllToAllCoupling(NetworkPartition(n=4, n_exc=2))
    x = _state([0.1, 0.2, 0.3, 0.4], [1.0, 0.5, 0.5, 0.25])
    o = [0.1, 0.1, 0.15, 0.1]

    drive = coupling.drive(x)

    torch.testing.assert_close(
        drive.exc, torch.tensor([o[1], o[0], o[0] + o[1], o[0] + o[1]], dtype=torch.float64)
    )
    torch.testing.assert_close(
        drive.inh, torch.tensor([o[2] + o[3], o[2] + o[3], o[3], o[2]], dtype=torch.float64)
    )


def test_all_excitatory_network_has_zero_inhibitory_drive() -> None:
    coupling = AllToAllCoupling(NetworkPartition(n=3, n_exc=3))
    x = _state([0.5, 0.5, 0.5], [0.5, 0.5, 0.5])

    drive = coupling.drive(x)

    torch.testing.assert_close(drive.exc, torch.full((3,), 0.5, dtype=torch.float64))
    torch.testing.assert_close(drive.inh, torch.zeros(3, dtype=torch.float64))


def test_single_neuron_sees_no_drive() -> None:
    coupling = AllToAllCoupling(NetworkPartition(n=1, n_exc=1))
    x = _state([0.9], [0.8])

    drive = coupling.drive(x)

    assert float(drive.exc[0]) == pytest.approx(0.0, abs=1e-15)
    assert float(drive.inh[0]) == 0.0
