"""Standardized description of the simulation outputs (name, unit)."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class SignalSpec:
    """Specification of a scalar output signal: name, unit."""

    name: str
    unit: str = ""
    description: str = ""


FRAME_SIGNALS: Tuple[SignalSpec, ...] = (
    SignalSpec("time", unit="s", description="Simulation time"),
    SignalSpec("ground_offset", unit="pt", description="Ground displacement"),
    SignalSpec("building_offset", unit="pt", description="Isolated building displacement"),
    SignalSpec("building_velocity", unit="pt/s", description="Isolated building velocity"),
)
