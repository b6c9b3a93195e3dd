"""
Base-isolated building: superstructure of mass m on a spring-damper isolation layer.

Equation of motion, with the ground displacement x_g as input:

    m * ddx = -k * (x - x_g) - b * dx

State [pos, vel]; rhs: dpos/dt = vel, dvel/dt = (-k*(pos - x_g) - b*vel) / m.
"""

import numpy as np


def natural_frequency(stiffness: float, mass: float) -> float:
    """
    Undamped natural frequency of a mass on a spring, in Hz:
    f_n = (1 / 2*pi) * sqrt(k / m).
    """
    if mass <= 0:
        raise ValueError(f"mass must be positive, got {mass}")
    if stiffness < 0:
        raise ValueError(f"stiffness must be non-negative, got {stiffness}")
    return float((1.0 / (2.0 * np.pi)) * np.sqrt(stiffness / mass))


class IsolatedBuilding:
    """
    Right-hand side of the isolated building's equation of motion.
    Ground displacement enters as input u[0].
    """

    def __init__(self, mass: float, stiffness: float, damping: float) -> None:
        if mass <= 0:
            raise ValueError(f"mass must be positive, got {mass}")
        self.m = float(mass)
        self.k = float(stiffness)
        self.b = float(damping)

    def spring_force(self, pos: float, ground: float) -> float:
        relative_displacement = pos - ground
        return -self.k * relative_displacement

    def damping_force(self, vel: float) -> float:
        return -self.b * vel

    def rhs(self, x: np.ndarray, u: np.ndarray, t: float) -> np.ndarray:
        pos, vel = x[0], x[1]
        ground = u[0]
        acc = (self.spring_force(pos, ground) + self.damping_force(vel)) / self.m
        return np.array([vel, acc])

    def natural_frequency(self) -> float:
        return natural_frequency(self.k, self.m)
