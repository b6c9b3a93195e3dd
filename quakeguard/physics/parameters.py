"""Physical parameters of the base-isolation model and the ranges of their controls."""

import logging
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict

import numpy as np

logger = logging.getLogger(__name__)

TIME_STEP: float = 1.0 / 60.0
BUILDING_MASS: float = 15.0


@dataclass(frozen=True)
class ControlRange:
    """Closed interval [low, high] accepted by a user control (slider)."""

    low: float
    high: float

    def __post_init__(self) -> None:
        if self.low > self.high:
            raise ValueError(f"Empty control range: [{self.low}, {self.high}]")

    def clamp(self, value: float) -> float:
        """Bring value inside the range."""
        return min(max(float(value), self.low), self.high)

    def __contains__(self, value: float) -> bool:
        return self.low <= value <= self.high


FREQUENCY_RANGE = ControlRange(0.2, 2.5)
STIFFNESS_RANGE = ControlRange(10.0, 100.0)
DAMPING_RANGE = ControlRange(0.0, 15.0)

CONTROL_RANGES: Dict[str, ControlRange] = {
    "earthquake_frequency": FREQUENCY_RANGE,
    "isolator_stiffness": STIFFNESS_RANGE,
    "isolator_damping": DAMPING_RANGE,
}


@dataclass(frozen=True)
class SimulationParameters:
    """
    Inputs of the oscillator engine.

    Attributes:
        earthquake_frequency: driving frequency of the ground motion (Hz).
        earthquake_amplitude: peak ground displacement (display units).
        isolator_stiffness: spring constant k of the isolation layer.
        isolator_damping: damping coefficient b of the isolation layer.
        building_mass: mass m of the superstructure.
        time_step: integration interval dt.
    """

    earthquake_frequency: float = 1.2
    earthquake_amplitude: float = 35.0
    isolator_stiffness: float = 30.0
    isolator_damping: float = 4.5
    building_mass: float = BUILDING_MASS
    time_step: float = TIME_STEP

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Raise ValueError if the parameters are outside the physical domain."""
        for f in fields(self):
            value = getattr(self, f.name)
            if not np.isfinite(value):
                raise ValueError(f"{f.name} must be finite, got {value}")
        if self.building_mass <= 0:
            raise ValueError(f"building_mass must be positive, got {self.building_mass}")
        if self.time_step <= 0:
            raise ValueError(f"time_step must be positive, got {self.time_step}")
        if self.earthquake_frequency <= 0:
            raise ValueError(
                f"earthquake_frequency must be positive, got {self.earthquake_frequency}"
            )
        if self.earthquake_amplitude < 0:
            raise ValueError(
                f"earthquake_amplitude must be non-negative, got {self.earthquake_amplitude}"
            )
        if self.isolator_stiffness < 0:
            raise ValueError(
                f"isolator_stiffness must be non-negative, got {self.isolator_stiffness}"
            )
        if self.isolator_damping < 0:
            raise ValueError(
                f"isolator_damping must be non-negative, got {self.isolator_damping}"
            )

    def with_changes(self, clamp: bool = False, **changes: Any) -> "SimulationParameters":
        """
        Return a copy with some fields replaced (validated).

        With clamp=True, values of controlled fields are first brought inside
        their control range, as a slider would do.
        """
        unknown = set(changes) - {f.name for f in fields(self)}
        if unknown:
            raise ValueError(f"Unknown parameters: {sorted(unknown)}")
        values = {k: float(v) for k, v in changes.items()}
        if clamp:
            for name, value in values.items():
                if name in CONTROL_RANGES:
                    clamped = CONTROL_RANGES[name].clamp(value)
                    if clamped != value:
                        logger.debug(f"Clamped {name} from {value} to {clamped}")
                    values[name] = clamped
        return replace(self, **values)

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SimulationParameters":
        """Build parameters from a (possibly partial) dict; missing keys use defaults."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown parameters: {sorted(unknown)}")
        return cls(**{k: float(v) for k, v in data.items()})
