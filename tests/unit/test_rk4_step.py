from __future__ import annotations

import pytest

from burstnet.biophysics.integrators import RungeKutta4Stepper
from burstnet.biophysics.models.hh_reduced import HHReducedModel
from burstnet.contracts.neurons import HHReducedParams, SynapticDrive
from tests.support import reference

pytestmark = pytest.mark.unit

torch = pytest.importorskip("torch")


def test_rk4_matches_hand_computed_step() -> None:
    params = HHReducedParams()
    model = HHReducedModel(params)
    rows = [
        [0.0, 0.0, 0.01, 0.25],
        [-3.0, 0.35, 0.22, 0.61],
        [48.0, 0.4, 0.5, 0.4],
    ]
    exc = [0.3, 0.1, 0.05]
    inh = [0.0, 0.0, 0.0]
    iapp = [1.0, 2.0, 3.0]
    dt = 0.01

    x = torch.tensor(rows, dtype=torch.float64)
    drive = SynapticDrive(
        exc=torch.tensor(exc, dtype=torch.float64), inh=torch.tensor(inh, dtype=torch.float64)
    )
    i_app = torch.tensor(iapp, dtype=torch.float64)

    def rhs(y, _t: float):
        return model.derivatives(y, drive, i_app)

    got = RungeKutta4Stepper().do_step(rhs, x, 0.0, dt)

    expected = [
        reference.rk4_step(rows[i], dt, exc[i], inh[i], iapp[i], len(rows), params)
        for i in range(len(rows))
    ]
    torch.testing.assert_close(
        got, torch.tensor(expected, dtype=torch.float64), rtol=1e-10, atol=1e-12
    )


def test_rk4_is_fourth_order_taylor_on_linear_ode() -> None:
    x = torch.tensor([1.0], dtype=torch.float64)
    dt = 0.1

    out = RungeKutta4Stepper().do_step(lambda y, _t: y, x, 0.0, dt)

    expected = 1.0 + dt + dt**2 / 2 + dt**3 / 6 + dt**4 / 24
    assert float(out[0]) == pytest.approx(expected, rel=1e-14)


def test_rk4_evaluates_stages_at_expected_times() -> None:
    seen: list[float] = []

    def rhs(y, t: float):
        seen.append(t)
        return torch.zeros_like(y)

    RungeKutta4Stepper().do_step(rhs, torch.zeros(2, dtype=torch.float64), 1.0, 0.5)

    assert seen == [1.0, 1.25, 1.25, 1.5]


def test_rk4_leaves_input_untouched() -> None:
    x = torch.tensor([[1.0, 2.0]], dtype=torch.float64)
    before = x.clone()

    out = RungeKutta4Stepper().do_step(lambda y, _t: -y, x, 0.0, 0.01)

    assert torch.equal(x, before)
    assert out.data_ptr() != x.data_ptr()
