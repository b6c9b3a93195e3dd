"""Simulation orchestrator: start/stop state machine around the oscillator engine."""

import enum
import logging
from typing import Any, Callable, List, Optional

from quakeguard.core.history import SimulationHistory
from quakeguard.physics.engine import FrameOutput, OscillatorEngine
from quakeguard.physics.parameters import SimulationParameters
from quakeguard.simulation.ticker import PeriodicTicker

logger = logging.getLogger(__name__)

FrameListener = Callable[[FrameOutput], None]
TickerFactory = Callable[[float, Callable[[], None]], Any]

# Constants of the model, set at construction only.
FIXED_PARAMETERS = frozenset({"time_step", "building_mass"})


class SimulationStatus(enum.Enum):
    STOPPED = "stopped"
    RUNNING = "running"


class BaseIsolationSimulation:
    """
    Base-isolation demo orchestrator.
    Handles the run loop: ticker -> engine.tick -> history -> listeners.

    STOPPED -> RUNNING via start() (reset, then periodic ticks);
    RUNNING -> STOPPED via stop() (cancel ticks, then reset).
    """

    def __init__(
        self,
        parameters: Optional[SimulationParameters] = None,
        engine: Optional[OscillatorEngine] = None,
        ticker_factory: Optional[TickerFactory] = None,
        history: Optional[SimulationHistory] = None,
    ) -> None:
        """
        Args:
            parameters: initial physical parameters (ignored if engine is given).
            engine: oscillator engine (default: new OscillatorEngine(parameters)).
            ticker_factory: (interval, callback) -> ticker with start()/cancel().
                Default: PeriodicTicker, real-time on a background thread.
            history: optional in-memory trace, cleared on every start.
        """
        self.engine = engine or OscillatorEngine(parameters)
        self._ticker_factory = ticker_factory or PeriodicTicker
        self.history = history
        self._ticker: Optional[Any] = None
        self._listeners: List[FrameListener] = []
        self._status = SimulationStatus.STOPPED
        self._latest: FrameOutput = self.engine.output()

    @property
    def status(self) -> SimulationStatus:
        return self._status

    @property
    def is_running(self) -> bool:
        return self._status is SimulationStatus.RUNNING

    @property
    def parameters(self) -> SimulationParameters:
        return self.engine.parameters

    @property
    def ticker(self) -> Optional[Any]:
        """Active ticker while running (None when stopped)."""
        return self._ticker

    @property
    def latest(self) -> FrameOutput:
        """Most recent outputs (zeros when stopped)."""
        return self._latest

    def add_listener(self, listener: FrameListener) -> None:
        """Register a callback invoked with the FrameOutput of every tick."""
        self._listeners.append(listener)

    def remove_listener(self, listener: FrameListener) -> None:
        self._listeners.remove(listener)

    def update_parameters(self, clamp: bool = False, **changes: Any) -> SimulationParameters:
        """
        Replace some parameters; takes effect from the next tick.

        Args:
            clamp: bring controlled values inside their slider ranges first.
            **changes: field name -> new value.

        Returns:
            The new parameter set.

        Raises:
            ValueError: for fixed constants (time_step, building_mass) or
                out-of-domain values.
        """
        fixed = sorted(set(changes) & FIXED_PARAMETERS)
        if fixed:
            raise ValueError(f"Parameters {fixed} are fixed and cannot be updated")
        params = self.engine.parameters.with_changes(clamp=clamp, **changes)
        self.engine.parameters = params
        logger.debug(f"Parameters updated: {changes}")
        return params

    def start(self) -> None:
        """Reset the engine and begin periodic ticks."""
        if self.is_running:
            raise RuntimeError("Simulation already running: call stop() first.")
        self._reset()
        if self.history is not None:
            self.history.clear()
        dt = self.engine.parameters.time_step
        self._ticker = self._ticker_factory(dt, self._on_tick)
        self._status = SimulationStatus.RUNNING
        self._ticker.start()
        logger.info(
            f"Simulation started (f={self.parameters.earthquake_frequency} Hz, "
            f"f_n={self.engine.natural_frequency():.3f} Hz)"
        )

    def stop(self) -> None:
        """Cancel periodic ticks, then reset the engine. No-op when stopped."""
        if not self.is_running:
            return
        ticker, self._ticker = self._ticker, None
        if ticker is not None:
            ticker.cancel()
        self._status = SimulationStatus.STOPPED
        self._reset()
        logger.info("Simulation stopped")

    def toggle(self) -> bool:
        """Start when stopped, stop when running. Returns the new running flag."""
        if self.is_running:
            self.stop()
        else:
            self.start()
        return self.is_running

    def step(self) -> FrameOutput:
        """Run one tick now: advance the engine, record and notify. Only while running."""
        if not self.is_running:
            raise RuntimeError("Simulation not running: call start() before step().")
        frame = self.engine.tick()
        self._latest = frame
        if self.history is not None:
            self.history.record(frame)
        for listener in list(self._listeners):
            listener(frame)
            # stopped by a listener
            if not self.is_running:
                break
        return frame

    def _on_tick(self) -> None:
        self.step()

    def _reset(self) -> None:
        self.engine.reset()
        self._latest = self.engine.output()

    def natural_frequency(self) -> float:
        return self.engine.natural_frequency()
