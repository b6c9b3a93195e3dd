"""Input/output: JSON configuration files."""

from quakeguard.io.serializers import load_config, load_parameters, save_config, save_parameters

__all__ = ["save_config", "load_config", "save_parameters", "load_parameters"]
