"""Reduced Hodgkin-Huxley neuron with depressing synaptic output (batched, torch)."""

from __future__ import annotations

from dataclasses import dataclass

from burstnet.contracts.neurons import (
    A,
    HHReducedParams,
    INeuronModel,
    N,
    NeuronState,
    S,
    StepContext,
    SynapticDrive,
    V,
)
from burstnet.contracts.tensor import Tensor
from burstnet.core.torch_utils import require_torch, resolve_device_dtype

# Below this |x / y| the rate x / (exp(x / y) - 1) switches to its series expansion.
_VTRAP_EPS = 1e-6


@dataclass(frozen=True)
class _HHParamsTensors:
    g_leak: Tensor
    v_leak: Tensor
    g_na: Tensor
    v_na: Tensor
    g_k: Tensor
    v_k: Tensor
    h0: Tensor
    v_exc: Tensor
    v_inh: Tensor


def vtrap(x: Tensor, y: float) -> Tensor:
    """``x / (exp(x / y) - 1)`` with the removable singularity at ``x == 0`` filled in."""
    torch = require_torch()
    ratio = x / y
    small = ratio.abs() < _VTRAP_EPS
    safe_x = torch.where(small, torch.ones_like(x), x)
    regular = safe_x / torch.expm1(safe_x / y)
    return torch.where(small, y * (1.0 - ratio / 2.0), regular)


def alpha_m(v: Tensor) -> Tensor:
    # am(v) = .1*(25-v)/(exp(.1*(25-v))-1)
    return 0.1 * vtrap(25.0 - v, 10.0)


def beta_m(v: Tensor) -> Tensor:
    torch = require_torch()
    return 4.0 * torch.exp(-v / 18.0)


def m_inf(v: Tensor) -> Tensor:
    am = alpha_m(v)
    return am / (am + beta_m(v))


def alpha_n(v: Tensor) -> Tensor:
    # an(v) = .01*(10-v)/(exp(.1*(10-v))-1)
    return 0.01 * vtrap(10.0 - v, 10.0)


def beta_n(v: Tensor) -> Tensor:
    torch = require_torch()
    return 0.125 * torch.exp(-v / 80.0)


def f_syn(v: Tensor, v_thresh: float = 40.0, k_v: float = 1.0) -> Tensor:
    """Synaptic activation, a logistic sigmoid of ``v - v_thresh``."""
    torch = require_torch()
    return torch.sigmoid((v - v_thresh) / k_v)


class HHReducedModel(INeuronModel):
    """Population-level reduced HH model (v, n, a, s per neuron).

    Sodium inactivation is slaved to potassium activation (``h = h0 - n``) and
    ``m`` is taken at steady state. Each neuron's synaptic output ``a * s``
    has fast-rise/slow-decay kinetics and vesicle depression.
    """

    name = "hh_reduced"

    def __init__(self, params: HHReducedParams | None = None) -> None:
        self.params = params or HHReducedParams()
        self._param_cache: dict[tuple[object, object], _HHParamsTensors] = {}

    def init_state(self, n: int, *, ctx: StepContext) -> NeuronState:
        torch = require_torch()
        device, dtype = resolve_device_dtype(ctx)
        p = self.params
        row = torch.tensor([p.v0, p.n0, p.a0, p.s0], device=device, dtype=dtype)
        return NeuronState(x=row.repeat(n, 1))

    def reset_state(self, state: NeuronState) -> NeuronState:
        p = self.params
        state.v.fill_(p.v0)
        state.n.fill_(p.n0)
        state.a.fill_(p.a0)
        state.s.fill_(p.s0)
        return state

    def derivatives(self, x: Tensor, drive: SynapticDrive, i_app: Tensor) -> Tensor:
        torch = require_torch()
        p = self.params
        pt = self._params(x)
        v = x[:, V]
        n = x[:, N]
        a = x[:, A]
        s = x[:, S]

        g_syn = p.g_syn_total / x.shape[0]
        m = m_inf(v)
        fs = f_syn(v, p.v_thresh, p.k_v)

        dv = (
            -pt.g_leak * (v - pt.v_leak)
            - pt.g_na * m * m * m * (pt.h0 - n) * (v - pt.v_na)
            - pt.g_k * n * n * n * n * (v - pt.v_k)
            - g_syn * drive.exc * (v - pt.v_exc)
            - g_syn * drive.inh * (v - pt.v_inh)
            + i_app
        )
        an = alpha_n(v)
        dn = an - (an + beta_n(v)) * n
        da = fs * (1.0 - a) / p.tau_fast - a / p.tau_slow
        ds = p.alpha_depression * (1.0 - s) - p.beta_depression * fs * s
        return torch.stack((dv, dn, da, ds), dim=1)

    def _params(self, like: Tensor) -> _HHParamsTensors:
        key = (like.device, like.dtype)
        cached = self._param_cache.get(key)
        if cached is not None:
            return cached
        torch = require_torch()
        p = self.params

        def _t(value: float) -> Tensor:
            return torch.tensor(value, device=like.device, dtype=like.dtype)

        params = _HHParamsTensors(
            g_leak=_t(p.g_leak),
            v_leak=_t(p.v_leak),
            g_na=_t(p.g_na),
            v_na=_t(p.v_na),
            g_k=_t(p.g_k),
            v_k=_t(p.v_k),
            h0=_t(p.h0),
            v_exc=_t(p.v_exc),
            v_inh=_t(p.v_inh),
        )
        self._param_cache[key] = params
        return params


__all__ = [
    "HHReducedModel",
    "alpha_m",
    "alpha_n",
    "beta_m",
    "beta_n",
    "f_syn",
    "m_inf",
    "vtrap",
]
