"""Core: orchestrator, output signals and in-memory trace."""

from quakeguard.core.signals import FRAME_SIGNALS, SignalSpec
from quakeguard.core.history import SimulationHistory
from quakeguard.core.simulation import BaseIsolationSimulation, SimulationStatus

__all__ = [
    "SignalSpec",
    "FRAME_SIGNALS",
    "SimulationHistory",
    "BaseIsolationSimulation",
    "SimulationStatus",
]
