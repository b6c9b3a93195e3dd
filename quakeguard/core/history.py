"""In-memory trace of simulation frames (no persistence)."""

from collections import deque
from typing import Any, Deque, Dict, Optional, Sequence

import numpy as np

from quakeguard.core.signals import FRAME_SIGNALS, SignalSpec


class SimulationHistory:
    """
    Bounded in-memory buffer of per-tick outputs, one column per signal.
    Cleared whenever the simulation starts over.
    """

    def __init__(
        self,
        max_length: Optional[int] = None,
        signals: Sequence[SignalSpec] = FRAME_SIGNALS,
    ) -> None:
        """
        Args:
            max_length: maximum number of frames kept (None = unlimited);
                the oldest frames are dropped first.
            signals: signals recorded; other keys passed to append() are ignored.
        """
        if max_length is not None and max_length <= 0:
            raise ValueError(f"max_length must be positive, got {max_length}")
        self._max_length = max_length
        self._signals = tuple(signals)
        self._data: Dict[str, Deque[float]] = {
            s.name: deque(maxlen=max_length) for s in self._signals
        }

    @property
    def signals(self) -> Sequence[SignalSpec]:
        return self._signals

    def append(self, **kwargs: Any) -> None:
        """Add one record (signal name -> value)."""
        for name, column in self._data.items():
            column.append(kwargs.get(name, np.nan))

    def record(self, frame: Any) -> None:
        """Append a frame exposing as_dict() (e.g. FrameOutput)."""
        self.append(**frame.as_dict())

    def clear(self) -> None:
        for column in self._data.values():
            column.clear()

    def get(self, key: str) -> np.ndarray:
        """Series for one signal as a numpy array."""
        if key not in self._data:
            raise KeyError(f"Unknown signal: {key}")
        return np.array(self._data[key], dtype=float)

    def to_dict(self) -> Dict[str, np.ndarray]:
        return {k: self.get(k) for k in self._data}

    def peak(self, key: str) -> float:
        """Largest absolute value of a signal (0 if empty)."""
        series = self.get(key)
        return float(np.max(np.abs(series))) if series.size else 0.0

    def __len__(self) -> int:
        if not self._data:
            return 0
        return len(next(iter(self._data.values())))
