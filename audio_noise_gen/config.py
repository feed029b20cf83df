"""
Generation configuration.

Holds the fixed audio format (44.1 kHz, 16-bit, mono, 4096-sample blocks)
as overridable defaults, plus the per-run request derived from user input.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

import numpy as np

from .exceptions import ConfigurationError

DEFAULT_SAMPLE_RATE = 44100
DEFAULT_BLOCK_SIZE = 4096
DEFAULT_BIT_DEPTH = 16
DEFAULT_CHANNELS = 1

# bit depth -> (max amplitude, min amplitude, soundfile subtype, numpy dtype)
_PCM_FORMATS = {
    16: (32767, -32768, 'PCM_16', np.int16),
    24: (8388607, -8388608, 'PCM_24', np.int32),
}


@dataclass
class GenerationConfig:
    """Configuration for noise generation"""
    sample_rate: int = DEFAULT_SAMPLE_RATE
    block_size: int = DEFAULT_BLOCK_SIZE
    bit_depth: int = DEFAULT_BIT_DEPTH
    channels: int = DEFAULT_CHANNELS
    include_tail: bool = False
    seed: Optional[int] = None

    def validate(self) -> None:
        """
        Check the configuration for unsupported values.

        Raises:
            ConfigurationError: If any setting is out of range
        """
        if self.sample_rate <= 0:
            raise ConfigurationError(f"Sample rate must be positive: {self.sample_rate}")
        if self.block_size <= 0:
            raise ConfigurationError(f"Block size must be positive: {self.block_size}")
        if self.bit_depth not in _PCM_FORMATS:
            raise ConfigurationError(f"Unsupported bit depth: {self.bit_depth}")
        if self.channels != 1:
            raise ConfigurationError(f"Only mono output is supported, got {self.channels} channels")
        if self.seed is not None and self.seed < 0:
            raise ConfigurationError(f"Seed must be non-negative: {self.seed}")

    @property
    def max_amplitude(self) -> int:
        return _PCM_FORMATS[self.bit_depth][0]

    @property
    def min_amplitude(self) -> int:
        return _PCM_FORMATS[self.bit_depth][1]

    @property
    def subtype(self) -> str:
        return _PCM_FORMATS[self.bit_depth][2]

    @property
    def dtype(self):
        return _PCM_FORMATS[self.bit_depth][3]


@dataclass
class GenerationRequest:
    """One noise file to produce: color, whole-second duration and destination."""
    color: "NoiseColor"
    duration_seconds: int
    output_path: Union[str, Path]
    config: GenerationConfig = field(default_factory=GenerationConfig)

    def __post_init__(self):
        if isinstance(self.duration_seconds, bool) or not isinstance(self.duration_seconds, (int, np.integer)):
            raise ConfigurationError(
                f"Duration must be a whole number of seconds: {self.duration_seconds!r}"
            )
        if self.duration_seconds < 0:
            raise ConfigurationError(f"Duration must not be negative: {self.duration_seconds}")
        self.duration_seconds = int(self.duration_seconds)
        self.config.validate()

    @property
    def total_samples(self) -> int:
        return self.config.sample_rate * self.duration_seconds

    @property
    def full_blocks(self) -> int:
        return self.total_samples // self.config.block_size

    @property
    def tail_samples(self) -> int:
        """Samples past the last full block; dropped unless include_tail is set."""
        return self.total_samples % self.config.block_size

    @property
    def samples_to_write(self) -> int:
        written = self.full_blocks * self.config.block_size
        if self.config.include_tail:
            written += self.tail_samples
        return written
