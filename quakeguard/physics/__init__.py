"""
Physics of the base-isolation model.

Hierarchy:
  - integrators: numerical integration (Euler)
  - forcing: sinusoidal ground motion (GroundMotion)
  - isolator: isolated building equation of motion, natural frequency
  - parameters: SimulationParameters and control ranges
  - engine: OscillatorEngine, one fixed time step per tick
"""

from quakeguard.physics.integrators import EulerIntegrator, euler_step
from quakeguard.physics.forcing import GroundMotion
from quakeguard.physics.isolator import IsolatedBuilding, natural_frequency
from quakeguard.physics.parameters import (
    BUILDING_MASS,
    CONTROL_RANGES,
    DAMPING_RANGE,
    FREQUENCY_RANGE,
    STIFFNESS_RANGE,
    TIME_STEP,
    ControlRange,
    SimulationParameters,
)
from quakeguard.physics.engine import FrameOutput, OscillatorEngine

__all__ = [
    # Integrator
    "EulerIntegrator",
    "euler_step",
    # Models
    "GroundMotion",
    "IsolatedBuilding",
    "natural_frequency",
    # Parameters
    "SimulationParameters",
    "ControlRange",
    "CONTROL_RANGES",
    "FREQUENCY_RANGE",
    "STIFFNESS_RANGE",
    "DAMPING_RANGE",
    "TIME_STEP",
    "BUILDING_MASS",
    # Engine
    "OscillatorEngine",
    "FrameOutput",
]
