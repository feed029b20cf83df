"""Utility components."""

from .spectral_analysis import (
    EXPECTED_SPECTRAL_SLOPES,
    SpectrumAccumulator,
    measure_spectral_slope,
    verify_spectral_slope,
)

__all__ = [
    "EXPECTED_SPECTRAL_SLOPES",
    "SpectrumAccumulator",
    "measure_spectral_slope",
    "verify_spectral_slope",
]
