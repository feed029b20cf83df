"""
Noise color selection and the persistent per-run filter state.
"""

from enum import Enum

import numpy as np

from ..exceptions import ConfigurationError

PINK_TAP_COUNT = 7


class NoiseColor(Enum):
    """Noise colors the generator can produce."""
    WHITE = "white"
    PINK = "pink"
    BROWN = "brown"

    @classmethod
    def from_name(cls, name: str) -> "NoiseColor":
        """
        Look up a noise color by name, ignoring case.

        Raises:
            ConfigurationError: If the name is not white, pink or brown
        """
        try:
            return cls(name.strip().lower())
        except (ValueError, AttributeError):
            valid = "|".join(color.value for color in cls)
            raise ConfigurationError(f"Invalid noise type {name!r}, expected one of [{valid}]") from None

    def __str__(self) -> str:
        return self.value


class GeneratorState:
    """
    Random source plus the filter memory that carries across blocks.

    Pink noise keeps seven filter taps and brown noise keeps the last
    unscaled integrator output. Both start at zero and are only advanced
    by block fills.
    """

    def __init__(self, source):
        self.source = source
        self.pink_taps = np.zeros(PINK_TAP_COUNT, dtype=np.float64)
        self.brown_last_out = 0.0

    def reset(self) -> None:
        """Zero the filter memory. Only for starting an unrelated run."""
        self.pink_taps.fill(0.0)
        self.brown_last_out = 0.0

    def __repr__(self) -> str:
        return (f"GeneratorState(pink_taps={self.pink_taps.tolist()}, "
                f"brown_last_out={self.brown_last_out})")
