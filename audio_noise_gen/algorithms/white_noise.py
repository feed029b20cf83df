"""
White Noise Algorithm Implementation

Maps uniform draws in [0, 1) onto [-1, 1) with a flat spectrum.
"""

import numpy as np


def draw_white(source, n: int) -> np.ndarray:
    """
    Draw n white noise values from a uniform source.

    Args:
        source: Object with a draw(n) method returning values in [0, 1)
        n: Number of values

    Returns:
        np.ndarray: Values in [-1, 1)
    """
    return np.asarray(source.draw(n), dtype=np.float64) * 2.0 - 1.0


def fill_white_noise(block: np.ndarray, state) -> None:
    """Overwrite every sample of block with fresh white noise."""
    block[:] = draw_white(state.source, len(block))


ALGORITHM_INFO = {
    "name": "White Noise",
    "algorithm": "Uniform draw scaled to [-1, 1)",
    "distribution": "Uniform",
    "spectral_density": "Flat (1/f^0)",
    "gain": 1.0,
}
