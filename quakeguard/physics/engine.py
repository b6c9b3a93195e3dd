"""Oscillator engine: per-frame physics of the base-isolated building."""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import numpy as np

from quakeguard.physics.forcing import GroundMotion
from quakeguard.physics.integrators import EulerIntegrator
from quakeguard.physics.isolator import IsolatedBuilding, natural_frequency
from quakeguard.physics.parameters import SimulationParameters

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrameOutput:
    """Outputs of one tick, read by the display layer."""

    time: float
    ground_offset: float
    building_offset: float
    building_velocity: float

    @property
    def fixed_base_offset(self) -> float:
        """A fixed-base building moves rigidly with the ground."""
        return self.ground_offset

    @property
    def isolator_drift(self) -> float:
        """Shear deformation of the isolation layer (building minus ground)."""
        return self.building_offset - self.ground_offset

    def as_dict(self) -> Dict[str, float]:
        return {
            "time": self.time,
            "ground_offset": self.ground_offset,
            "building_offset": self.building_offset,
            "building_velocity": self.building_velocity,
        }


class OscillatorEngine:
    """
    Damped, forced harmonic oscillator advanced by one fixed time step per tick.

    The engine owns the simulation time and the isolated building's state
    [offset, velocity]; the ground offset is recomputed from the time on every
    tick. Parameters may be replaced between ticks.
    """

    def __init__(
        self,
        parameters: Optional[SimulationParameters] = None,
        integrator: Optional[Any] = None,
    ) -> None:
        """
        Args:
            parameters: physical parameters (default: SimulationParameters()).
            integrator: object with step(f, x, u, t, dt). Default: Euler.
        """
        self._parameters = parameters or SimulationParameters()
        self._parameters.validate()
        self.integrator = integrator or EulerIntegrator()
        self._time: float = 0.0
        self._ground_offset: float = 0.0
        self._x = np.zeros(2)

    @property
    def parameters(self) -> SimulationParameters:
        return self._parameters

    @parameters.setter
    def parameters(self, value: SimulationParameters) -> None:
        value.validate()
        self._parameters = value

    def reset(self) -> None:
        """Zero time, ground offset and building state. Parameters are kept."""
        self._time = 0.0
        self._ground_offset = 0.0
        self._x = np.zeros(2)
        logger.debug("Oscillator state reset")

    def tick(self, params: Optional[SimulationParameters] = None) -> FrameOutput:
        """
        Advance by one time step.

        Args:
            params: parameters for this tick; becomes the engine's parameter set.
                If None, the current parameters are used.

        Returns:
            FrameOutput with the updated offsets.
        """
        if params is not None:
            params.validate()
            self._parameters = params
        p = self._parameters
        dt = p.time_step

        self._time += dt
        ground = GroundMotion(p.earthquake_frequency, p.earthquake_amplitude)
        self._ground_offset = ground.offset(self._time)

        building = IsolatedBuilding(p.building_mass, p.isolator_stiffness, p.isolator_damping)
        u = np.array([self._ground_offset])
        self._x = self.integrator.step(building.rhs, self._x, u, self._time, dt)
        return self.output()

    def output(self) -> FrameOutput:
        """Current outputs, without advancing."""
        return FrameOutput(
            time=self._time,
            ground_offset=self._ground_offset,
            building_offset=float(self._x[0]),
            building_velocity=float(self._x[1]),
        )

    @property
    def time(self) -> float:
        return self._time

    @property
    def ground_offset(self) -> float:
        return self._ground_offset

    @property
    def building_offset(self) -> float:
        return float(self._x[0])

    @property
    def building_velocity(self) -> float:
        return float(self._x[1])

    @property
    def fixed_base_offset(self) -> float:
        return self._ground_offset

    def natural_frequency(self) -> float:
        """Natural frequency (Hz) of the isolated building for the current stiffness."""
        return natural_frequency(self._parameters.isolator_stiffness, self._parameters.building_mass)

    def frequency_ratio(self) -> float:
        """
        Driving frequency over natural frequency. Values near 1 mean resonance;
        isolation aims for a ratio well above 1.
        """
        fn = self.natural_frequency()
        if fn == 0.0:
            return float("inf")
        return self._parameters.earthquake_frequency / fn

    def state_dict(self) -> Dict[str, Any]:
        return {
            "time": self._time,
            "ground_offset": self._ground_offset,
            "state": self._x.copy(),
        }
