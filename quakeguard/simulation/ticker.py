"""
Tickers: invoke a step function periodically, cancellable at any time.

Both tickers share the interface start() / cancel() / active. After cancel()
returns, the callback is never invoked again.
"""

import logging
import threading
import time
from typing import Callable, Optional

logger = logging.getLogger(__name__)

Callback = Callable[[], None]


class PeriodicTicker:
    """
    Calls `callback` every `interval` seconds on a background daemon thread.

    Calls never overlap. The schedule is fixed-rate: a late call does not shift
    the following deadlines, and missed deadlines are not made up in a burst.
    """

    def __init__(self, interval: float, callback: Callback, name: str = "quakeguard-ticker") -> None:
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self.interval = float(interval)
        self._callback = callback
        self._name = name
        self._stop = threading.Event()
        # Held while the callback runs; reentrant so the callback may cancel.
        self._lock = threading.RLock()
        self._thread: Optional[threading.Thread] = None

    @property
    def active(self) -> bool:
        return self._thread is not None and not self._stop.is_set()

    def start(self) -> None:
        if self._thread is not None:
            raise RuntimeError("Ticker already started; create a new one to restart.")
        self._thread = threading.Thread(target=self._run, name=self._name, daemon=True)
        self._thread.start()
        logger.debug(f"Ticker started (interval={self.interval:.4f}s)")

    def _run(self) -> None:
        deadline = time.monotonic() + self.interval
        while not self._stop.wait(timeout=max(0.0, deadline - time.monotonic())):
            with self._lock:
                if self._stop.is_set():
                    break
                try:
                    self._callback()
                except Exception:
                    logger.exception("Ticker callback failed; stopping ticker")
                    self._stop.set()
                    break
            deadline += self.interval
            now = time.monotonic()
            if deadline < now:
                deadline = now

    def cancel(self) -> None:
        """Stop the ticker; waits for an in-flight callback unless called from it."""
        self._stop.set()
        with self._lock:
            pass
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join()
        logger.debug("Ticker cancelled")


class ManualTicker:
    """
    Ticker driven by the embedding: the callback runs only when fire() is called,
    e.g. once per display frame. Deterministic; used for headless runs and tests.
    """

    def __init__(self, interval: float, callback: Callback) -> None:
        self.interval = float(interval)
        self._callback = callback
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    def start(self) -> None:
        if self._active:
            raise RuntimeError("Ticker already started.")
        self._active = True

    def cancel(self) -> None:
        self._active = False

    def fire(self, n: int = 1) -> int:
        """
        Invoke the callback up to n times; stops early if cancelled meanwhile.

        Returns:
            Number of callbacks actually run.
        """
        count = 0
        for _ in range(n):
            if not self._active:
                break
            self._callback()
            count += 1
        return count
