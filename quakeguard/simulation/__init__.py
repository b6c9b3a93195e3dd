"""
Simulation drivers: tickers that invoke the engine at a fixed cadence, and
visualization helpers (_utils) for recorded runs.
"""

from quakeguard.simulation.ticker import ManualTicker, PeriodicTicker
from quakeguard.simulation._utils import plot_isolator_drift, plot_offsets_vs_time

__all__ = [
    "PeriodicTicker",
    "ManualTicker",
    "plot_offsets_vs_time",
    "plot_isolator_drift",
]
