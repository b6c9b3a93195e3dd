"""
quakeguard: base-isolation earthquake protection demo (fixed-base vs. isolated building).
"""

__version__ = "0.1.0"

from quakeguard.physics.engine import FrameOutput, OscillatorEngine
from quakeguard.physics.isolator import natural_frequency
from quakeguard.physics.parameters import SimulationParameters
from quakeguard.core.simulation import BaseIsolationSimulation, SimulationStatus

__all__ = [
    "__version__",
    "OscillatorEngine",
    "FrameOutput",
    "SimulationParameters",
    "natural_frequency",
    "BaseIsolationSimulation",
    "SimulationStatus",
]
