from __future__ import annotations

import math

import pytest

from burstnet.biophysics.models.hh_reduced import (
    HHReducedModel,
    alpha_m,
    alpha_n,
    beta_m,
    beta_n,
    f_syn,
    m_inf,
)
from burstnet.contracts.neurons import HHReducedParams, StepContext, SynapticDrive
from tests.support import reference

pytestmark = pytest.mark.unit

torch = pytest.importorskip("torch")


def test_gating_rates_at_removable_singularities() -> None:
    v = torch.tensor([25.0, 10.0], dtype=torch.float64)
    am = alpha_m(v)
    an = alpha_n(v)

    assert float(am[0]) == pytest.approx(1.0, rel=1e-12)
    assert float(an[1]) == pytest.approx(0.1, rel=1e-12)
    assert bool(torch.isfinite(am).all())
    assert bool(torch.isfinite(an).all())


@pytest.mark.parametrize("offset", [1e-9, -1e-9, 1e-6, -1e-6, 1e-3])
def test_gating_rates_are_continuous_near_singularities(offset: float) -> None:
    v_m = torch.tensor([25.0 + offset], dtype=torch.float64)
    v_n = torch.tensor([10.0 + offset], dtype=torch.float64)

    assert float(alpha_m(v_m)[0]) == pytest.approx(reference.am(25.0 + offset), rel=1e-9)
    assert float(alpha_n(v_n)[0]) == pytest.approx(reference.an(10.0 + offset), rel=1e-9)


def test_gating_functions_match_scalar_formulas() -> None:
    volts = [-20.0, -3.5, 0.0, 7.25, 40.0, 96.0]
    v = torch.tensor(volts, dtype=torch.float64)

    expected = {
        "am": [reference.am(x) for x in volts],
        "bm": [reference.bm(x) for x in volts],
        "an": [reference.an(x) for x in volts],
        "bn": [reference.bn(x) for x in volts],
        "minf": [reference.minf(x) for x in volts],
        "fsyn": [reference.fsyn(x) for x in volts],
    }
    got = {
        "am": alpha_m(v),
        "bm": beta_m(v),
        "an": alpha_n(v),
        "bn": beta_n(v),
        "minf": m_inf(v),
        "fsyn": f_syn(v),
    }
    for key, values in expected.items():
        torch.testing.assert_close(
            got[key], torch.tensor(values, dtype=torch.float64), rtol=1e-12, atol=1e-15
        )


def test_synaptic_activation_is_half_at_threshold() -> None:
    v = torch.tensor([40.0, 1000.0, -1000.0], dtype=torch.float64)
    out = f_syn(v)
    assert float(out[0]) == pytest.approx(0.5)
    assert float(out[1]) == pytest.approx(1.0)
    assert float(out[2]) == pytest.approx(0.0)


def test_init_state_uses_documented_initial_values() -> None:
    model = HHReducedModel()
    state = model.init_state(3, ctx=StepContext(device="cpu", dtype="float64"))

    assert state.x.shape == (3, 4)
    assert state.x.dtype == torch.float64
    torch.testing.assert_close(state.v, torch.zeros(3, dtype=torch.float64))
    torch.testing.assert_close(state.n, torch.zeros(3, dtype=torch.float64))
    torch.testing.assert_close(state.a, torch.full((3,), 0.01, dtype=torch.float64))
    torch.testing.assert_close(state.s, torch.full((3,), 0.25, dtype=torch.float64))


def test_reset_state_restores_initial_values() -> None:
    model = HHReducedModel()
    state = model.init_state(2, ctx=StepContext(dtype="float64"))
    state.x.fill_(3.0)

    model.reset_state(state)

    torch.testing.assert_close(
        state.x[0], torch.tensor([0.0, 0.0, 0.01, 0.25], dtype=torch.float64)
    )


def test_derivatives_match_scalar_reference() -> None:
    params = HHReducedParams(v_inh=-5.0)
    model = HHReducedModel(params)
    rows = [
        [0.0, 0.0, 0.01, 0.25],
        [-4.2, 0.31, 0.2, 0.6],
        [55.0, 0.45, 0.7, 0.35],
    ]
    exc = [0.12, 0.08, 0.3]
    inh = [0.0, 0.05, 0.11]
    iapp = [-10.0, 0.5, 5.0]
    x = torch.tensor(rows, dtype=torch.float64)
    drive = SynapticDrive(
        exc=torch.tensor(exc, dtype=torch.float64), inh=torch.tensor(inh, dtype=torch.float64)
    )

    got = model.derivatives(x, drive, torch.tensor(iapp, dtype=torch.float64))

    expected = [
        reference.rhs(rows[i], exc[i], inh[i], iapp[i], len(rows), params) for i in range(3)
    ]
    torch.testing.assert_close(
        got, torch.tensor(expected, dtype=torch.float64), rtol=1e-12, atol=1e-12
    )


def test_derivatives_do_not_modify_state() -> None:
    model = HHReducedModel()
    x = torch.tensor([[12.0, 0.2, 0.1, 0.5]], dtype=torch.float64)
    before = x.clone()
    drive = _zero_drive()

    model.derivatives(x, drive, torch.zeros(1, dtype=torch.float64))

    assert torch.equal(x, before)


def test_derivatives_propagate_non_finite_without_raising() -> None:
    model = HHReducedModel()
    x = torch.tensor([[math.nan, 0.2, 0.1, 0.5]], dtype=torch.float64)
    drive = _zero_drive()

    out = model.derivatives(x, drive, torch.zeros(1, dtype=torch.float64))

    assert bool(torch.isnan(out[0, 0]))


def _zero_drive() -> SynapticDrive:
    return SynapticDrive(
        exc=torch.zeros(1, dtype=torch.float64), inh=torch.zeros(1, dtype=torch.float64)
    )
