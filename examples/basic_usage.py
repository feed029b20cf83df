#!/usr/bin/env python3
"""
Basic Usage Example - Audio Noise Gen

Writes ten seconds of each noise color to WAV and reports its spectral slope.
"""

import sys
from pathlib import Path

# Add the parent directory to the path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import soundfile as sf

from audio_noise_gen import GenerationConfig, GenerationRequest, NoiseColor, write_noise_file
from audio_noise_gen.utils import SpectrumAccumulator, verify_spectral_slope


def main():
    """Basic usage demonstration."""
    print("Audio Noise Gen - Basic Usage Example")
    print("=" * 50)

    config = GenerationConfig(seed=42)

    for color in NoiseColor:
        output_file = f"{color.value}_noise_10s.wav"
        stats = write_noise_file(GenerationRequest(color, 10, output_file, config))

        accumulator = SpectrumAccumulator(config.sample_rate)
        for block in sf.blocks(output_file, blocksize=accumulator.segment_size, dtype='float64'):
            accumulator.add(block)
        report = verify_spectral_slope(color.value, accumulator.slope())

        print(f"Generated: {output_file}")
        print(f"  Samples: {stats.samples_written} ({stats.dropped_samples} dropped past last block)")
        print(f"  Time: {stats.elapsed_seconds:.2f}s")
        print(f"  Spectral slope: {report['spectral_slope']:.2f} (expected {report['expected_slope']:.1f})")
        print()


if __name__ == "__main__":
    main()
