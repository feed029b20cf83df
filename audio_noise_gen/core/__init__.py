"""Core generation and streaming components."""

from .state import NoiseColor, GeneratorState
from .random_source import UniformSource
from .noise_generator import NoiseGenerator, fill
from .writer import WavSink, GenerationStats, quantize, stream_noise, write_noise_file

__all__ = [
    "NoiseColor",
    "GeneratorState",
    "UniformSource",
    "NoiseGenerator",
    "fill",
    "WavSink",
    "GenerationStats",
    "quantize",
    "stream_noise",
    "write_noise_file",
]
