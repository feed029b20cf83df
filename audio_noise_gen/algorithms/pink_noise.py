"""
Pink Noise Algorithm Implementation

Paul Kellet's refined pink noise filter: six parallel one-pole filters
plus a one-sample-delayed white term, summed and scaled back into range.
Accurate to about +/-0.05 dB above 9.2 Hz at 44.1 kHz.
"""

import numpy as np
from scipy.signal import lfilter

from .white_noise import draw_white

# (pole, white gain) for taps 0-5
PINK_POLES = (
    (0.99886, 0.0555179),
    (0.99332, 0.0750759),
    (0.96900, 0.1538520),
    (0.86650, 0.3104856),
    (0.55000, 0.5329522),
    (-0.7616, -0.0168980),
)
PINK_DIRECT_GAIN = 0.5362
PINK_DELAYED_GAIN = 0.115926
PINK_OUTPUT_GAIN = 0.11


def fill_pink_noise(block: np.ndarray, state) -> None:
    """
    Overwrite block with the next stretch of pink noise.

    Per sample n, with w = white[n]:
        b[k] = pole[k] * b[k] + gain[k] * w            for k in 0..5
        out  = (b[0] + ... + b[5] + b[6] + 0.5362 * w) * 0.11
        b[6] = 0.115926 * w
    so b[6] always holds the previous sample's contribution. The taps in
    state.pink_taps are advanced in place and carried into the next block.

    Args:
        block: Float buffer to overwrite
        state: GeneratorState providing the source and pink_taps
    """
    n = len(block)
    if n == 0:
        return
    taps = state.pink_taps
    white = draw_white(state.source, n)

    total = white * PINK_DIRECT_GAIN
    for k, (pole, gain) in enumerate(PINK_POLES):
        # y[n] = pole * y[n-1] + gain * w[n], resumed from the stored tap
        tap, _ = lfilter([gain], [1.0, -pole], white, zi=np.array([pole * taps[k]]))
        total += tap
        taps[k] = tap[-1]

    total[0] += taps[6]
    total[1:] += white[:-1] * PINK_DELAYED_GAIN
    taps[6] = white[-1] * PINK_DELAYED_GAIN

    block[:] = total * PINK_OUTPUT_GAIN


ALGORITHM_INFO = {
    "name": "Pink Noise",
    "algorithm": "Paul Kellet refined filter (7 taps)",
    "distribution": "1/f spectral density",
    "spectral_density": "1/f",
    "gain": PINK_OUTPUT_GAIN,
}
