"""
Brown Noise Algorithm Implementation

Leaky integration of white noise (a damped random walk) with
1/f² spectral density above roughly 140 Hz at 44.1 kHz.
"""

import numpy as np
from scipy.signal import lfilter

from .white_noise import draw_white

BROWN_LEAK = 1.02
BROWN_STEP = 0.02
BROWN_OUTPUT_GAIN = 3.5


def fill_brown_noise(block: np.ndarray, state) -> None:
    """
    Overwrite block with the next stretch of brown noise.

    Per sample: last_out = (last_out + 0.02 * w) / 1.02, emitted as
    last_out * 3.5. Only the unscaled value is fed back; the gain is
    applied to the output alone.

    Args:
        block: Float buffer to overwrite
        state: GeneratorState providing the source and brown_last_out
    """
    n = len(block)
    if n == 0:
        return
    white = draw_white(state.source, n)

    pole = 1.0 / BROWN_LEAK
    walk, _ = lfilter([BROWN_STEP / BROWN_LEAK], [1.0, -pole], white,
                      zi=np.array([pole * state.brown_last_out]))
    state.brown_last_out = float(walk[-1])

    block[:] = walk * BROWN_OUTPUT_GAIN


ALGORITHM_INFO = {
    "name": "Brown Noise",
    "algorithm": "Leaky integration",
    "distribution": "1/f² spectral density",
    "spectral_density": "1/f²",
    "leakage_factor": 1.0 / BROWN_LEAK,
    "gain": BROWN_OUTPUT_GAIN,
}
