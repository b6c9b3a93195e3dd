"""
Visualization utilities: ground vs. building offsets over time.

Functions accept either a SimulationHistory (with keys 'time', 'ground_offset',
'building_offset') or raw arrays. Matplotlib is optional; if not installed,
functions raise ImportError.
"""

from typing import Any, Optional, Tuple

import numpy as np


def _get_series(
    history: Optional[Any] = None,
    time: Optional[np.ndarray] = None,
    ground: Optional[np.ndarray] = None,
    building: Optional[np.ndarray] = None,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Resolve (time, ground, building) from history or from raw arrays."""
    if history is not None:
        data = history.to_dict()
        try:
            return data["time"], data["ground_offset"], data["building_offset"]
        except KeyError as e:
            raise ValueError(f"History has no {e} signal.") from e
    if time is not None and ground is not None and building is not None:
        return np.asarray(time).ravel(), np.asarray(ground).ravel(), np.asarray(building).ravel()
    raise ValueError("Provide either history= or (time=, ground=, building=).")


def plot_offsets_vs_time(
    history: Optional[Any] = None,
    time: Optional[np.ndarray] = None,
    ground: Optional[np.ndarray] = None,
    building: Optional[np.ndarray] = None,
    ax: Optional[Any] = None,
    title: str = "Fixed-base vs. base-isolated response",
    **kwargs: Any,
) -> Any:
    """
    Plot ground offset (= fixed-base building) and isolated building offset vs time.

    Args:
        history: SimulationHistory with 'time', 'ground_offset', 'building_offset'.
        time, ground, building: raw arrays if history is not used.
        ax: matplotlib axes (if None, creates a new figure).
        title: axes title.
        **kwargs: passed to ax.plot().

    Returns:
        matplotlib axes.
    """
    try:
        import matplotlib.pyplot as plt
    except ImportError:
        raise ImportError("matplotlib is required for plot_offsets_vs_time.")
    t, g, b = _get_series(history=history, time=time, ground=ground, building=building)
    if ax is None:
        _, ax = plt.subplots(1, 1, figsize=(8, 4))
    ax.plot(t, g, label="fixed-base (ground)", color="tab:red", **kwargs)
    ax.plot(t, b, label="base-isolated", color="tab:blue", **kwargs)
    ax.set_xlabel("time")
    ax.set_ylabel("offset")
    ax.set_title(title)
    ax.legend(loc="upper right", fontsize=8)
    ax.grid(True, alpha=0.3)
    return ax


def plot_isolator_drift(
    history: Optional[Any] = None,
    time: Optional[np.ndarray] = None,
    ground: Optional[np.ndarray] = None,
    building: Optional[np.ndarray] = None,
    ax: Optional[Any] = None,
    title: str = "Isolator drift",
    **kwargs: Any,
) -> Any:
    """Plot building offset minus ground offset (shear of the isolation layer)."""
    try:
        import matplotlib.pyplot as plt
    except ImportError:
        raise ImportError("matplotlib is required for plot_isolator_drift.")
    t, g, b = _get_series(history=history, time=time, ground=ground, building=building)
    if ax is None:
        _, ax = plt.subplots(1, 1, figsize=(8, 3))
    ax.plot(t, b - g, color="tab:orange", **kwargs)
    ax.set_xlabel("time")
    ax.set_ylabel("drift")
    ax.set_title(title)
    ax.grid(True, alpha=0.3)
    return ax
