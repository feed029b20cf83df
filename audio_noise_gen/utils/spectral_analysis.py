"""
Spectral slope estimation for generated noise.

Accumulates a Welch-style averaged periodogram one segment at a time so
files of any length can be checked in bounded memory, then fits a line
to log10(power) against log10(frequency). Expected slopes per decade:
white 0, pink -1, brown -2.
"""

from typing import Dict, Any, Tuple
import logging

import numpy as np

logger = logging.getLogger(__name__)

EXPECTED_SPECTRAL_SLOPES = {
    "white": 0.0,
    "pink": -1.0,
    "brown": -2.0,
}

DEFAULT_SEGMENT_SIZE = 4096
DEFAULT_BAND = (1000.0, 10000.0)


class SpectrumAccumulator:
    """Running average of Hann-windowed power spectra over fixed-size segments."""

    def __init__(self, sample_rate: int, segment_size: int = DEFAULT_SEGMENT_SIZE):
        self.sample_rate = sample_rate
        self.segment_size = segment_size
        self.window = np.hanning(segment_size)
        self.power_sum = np.zeros(segment_size // 2 + 1)
        self.segments = 0
        self._pending = np.zeros(0)

    def add(self, samples: np.ndarray) -> None:
        """Feed samples of any length; leftovers wait for the next call."""
        data = np.concatenate([self._pending, np.asarray(samples, dtype=np.float64).ravel()])
        whole = len(data) // self.segment_size
        for i in range(whole):
            segment = data[i * self.segment_size:(i + 1) * self.segment_size]
            self.power_sum += np.abs(np.fft.rfft(segment * self.window)) ** 2
        self.segments += whole
        self._pending = data[whole * self.segment_size:]

    def spectrum(self) -> Tuple[np.ndarray, np.ndarray]:
        """
        Returns:
            tuple: (frequencies in Hz, averaged power)
        """
        if self.segments == 0:
            raise ValueError(f"Need at least {self.segment_size} samples for a spectrum")
        freqs = np.fft.rfftfreq(self.segment_size, 1 / self.sample_rate)
        return freqs, self.power_sum / self.segments

    def slope(self, band: Tuple[float, float] = DEFAULT_BAND) -> float:
        """Least-squares slope of log10 power against log10 frequency within band."""
        freqs, power = self.spectrum()
        mask = (freqs >= band[0]) & (freqs <= band[1]) & (power > 0)
        if np.count_nonzero(mask) < 2:
            raise ValueError(f"Frequency band {band} holds too few bins")
        return float(np.polyfit(np.log10(freqs[mask]), np.log10(power[mask]), 1)[0])


def measure_spectral_slope(
    signal: np.ndarray,
    sample_rate: int,
    band: Tuple[float, float] = DEFAULT_BAND,
    segment_size: int = DEFAULT_SEGMENT_SIZE
) -> float:
    """
    Estimate the spectral slope of a signal in log-log space.

    Args:
        signal: 1-D samples
        sample_rate: Sample rate in Hz
        band: (low, high) frequency range to fit, in Hz
        segment_size: FFT segment length

    Returns:
        float: Slope in decades of power per decade of frequency
    """
    accumulator = SpectrumAccumulator(sample_rate, segment_size)
    accumulator.add(signal)
    return accumulator.slope(band)


def verify_spectral_slope(color: str, slope: float, tolerance: float = 0.4) -> Dict[str, Any]:
    """
    Compare a measured slope with the one expected for a noise color.

    Returns:
        dict: Spectral analysis results
    """
    expected = EXPECTED_SPECTRAL_SLOPES[color]
    error = abs(slope - expected)
    return {
        "spectral_slope": slope,
        "expected_slope": expected,
        "slope_error": error,
        "quality": "High" if error < tolerance / 2 else ("Medium" if error < tolerance else "Low"),
    }
