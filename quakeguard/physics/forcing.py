"""Ground motion driving the isolated building."""

import numpy as np


class GroundMotion:
    """
    Sinusoidal ground shaking: x_g(t) = amplitude * sin(2*pi*frequency*t).
    """

    def __init__(self, frequency: float, amplitude: float) -> None:
        self.frequency = float(frequency)
        self.amplitude = float(amplitude)

    @property
    def angular_frequency(self) -> float:
        """Driving angular frequency (rad/s)."""
        return 2.0 * np.pi * self.frequency

    def offset(self, t: float) -> float:
        """Ground displacement at time t."""
        return float(self.amplitude * np.sin(self.angular_frequency * t))

    def __call__(self, t: float) -> float:
        return self.offset(t)
