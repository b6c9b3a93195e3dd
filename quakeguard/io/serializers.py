"""Save and load simulation configurations as JSON."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

import numpy as np

from quakeguard.physics.parameters import SimulationParameters

logger = logging.getLogger(__name__)


def _convert(d: Any) -> Any:
    """Convert numpy values to plain Python types for JSON."""
    if isinstance(d, np.ndarray):
        return d.tolist()
    if isinstance(d, dict):
        return {k: _convert(v) for k, v in d.items()}
    if isinstance(d, (list, tuple)):
        return [_convert(x) for x in d]
    if isinstance(d, (np.floating, np.integer)):
        return float(d) if isinstance(d, np.floating) else int(d)
    return d


def save_config(config: Dict[str, Any], path: Union[str, Path]) -> None:
    """
    Save a configuration (dict) to JSON.
    Numpy arrays and scalars are converted to lists and numbers.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(_convert(config), f, indent=2, ensure_ascii=False)
    logger.debug(f"Configuration saved to {path}")


def load_config(path: Union[str, Path]) -> Dict[str, Any]:
    """Load a configuration from JSON."""
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Configuration in {path} must be a JSON object")
    return data


def save_parameters(parameters: SimulationParameters, path: Union[str, Path]) -> None:
    """Save simulation parameters to JSON."""
    save_config(parameters.to_dict(), path)
    logger.info(f"Parameters saved to {path}")


def load_parameters(path: Union[str, Path]) -> SimulationParameters:
    """
    Load simulation parameters from JSON. Missing keys take their defaults;
    unknown keys or out-of-domain values raise ValueError.
    """
    params = SimulationParameters.from_dict(load_config(path))
    logger.info(f"Parameters loaded from {path}")
    return params
