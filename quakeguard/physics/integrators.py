"""
Numerical integrator for second-order mechanical systems.

Pure numerical level: no dependency on the engine.
Interface: step(f, x, u, t, dt) -> x_next, with state x = [pos, vel] and
f(x, u, t) -> [vel, acc].
"""

from typing import Callable

import numpy as np

# Type for the right-hand side: (x, u, t) -> [dpos/dt, dvel/dt]
RHS = Callable[[np.ndarray, np.ndarray, float], np.ndarray]


def euler_step(f: RHS, x: np.ndarray, u: np.ndarray, t: float, dt: float) -> np.ndarray:
    """
    Euler step, order 1: the acceleration is evaluated once at (x_n, t_n),
    velocity is advanced first and the updated velocity then moves the position:

        v_{n+1} = v_n + a_n * dt
        p_{n+1} = p_n + v_{n+1} * dt

    No stability check is performed.
    """
    acc = f(x, u, t)[1]
    vel = x[1] + acc * dt
    pos = x[0] + vel * dt
    return np.array([pos, vel])


class EulerIntegrator:
    """Euler integrator, order 1."""

    @staticmethod
    def step(f: RHS, x: np.ndarray, u: np.ndarray, t: float, dt: float) -> np.ndarray:
        return euler_step(f, x, u, t, dt)
