"""Fixed-step ODE integrators."""

from burstnet.biophysics.integrators.rk4 import RhsFn, RungeKutta4Stepper

__all__ = ["RhsFn", "RungeKutta4Stepper"]
