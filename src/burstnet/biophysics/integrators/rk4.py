"""Classical fourth-order Runge-Kutta stepper."""

from __future__ import annotations

from collections.abc import Callable

from burstnet.contracts.tensor import Tensor

RhsFn = Callable[[Tensor, float], Tensor]


class RungeKutta4Stepper:
    """Explicit RK4 with a fixed step.

    ``rhs(x, t)`` must be pure. Inputs that are constant over the step
    (synaptic drive, applied current) are closed over by the caller, so the
    stepper itself knows nothing about coupling.
    """

    name = "rk4"
    order = 4

    def do_step(self, rhs: RhsFn, x: Tensor, t: float, dt: float) -> Tensor:
        """Return the state at ``t + dt``; ``x`` is left untouched."""
        half = 0.5 * dt
        k1 = rhs(x, t)
        k2 = rhs(x + half * k1, t + half)
        k3 = rhs(x + half * k2, t + half)
        k4 = rhs(x + dt * k3, t + dt)
        dt6 = dt / 6.0
        dt3 = dt / 3.0
        return x + dt6 * k1 + dt3 * k2 + dt3 * k3 + dt6 * k4


__all__ = ["RhsFn", "RungeKutta4Stepper"]
