"""
Audio Noise Gen: streaming white, pink and brown noise WAV generator

Generates arbitrarily long noise files block by block in constant memory.
"""

from .config import GenerationConfig, GenerationRequest
from .core.state import NoiseColor, GeneratorState
from .core.noise_generator import NoiseGenerator, fill
from .core.writer import WavSink, stream_noise, write_noise_file
from .exceptions import (
    NoiseGenError,
    ConfigurationError,
    SinkError,
    SinkOpenError,
    SinkWriteError,
    SinkFinalizeError,
)

__version__ = "1.0.0"
__author__ = "Audio Noise Gen Team"

__all__ = [
    "GenerationConfig",
    "GenerationRequest",
    "NoiseColor",
    "GeneratorState",
    "NoiseGenerator",
    "fill",
    "WavSink",
    "stream_noise",
    "write_noise_file",
    "NoiseGenError",
    "ConfigurationError",
    "SinkError",
    "SinkOpenError",
    "SinkWriteError",
    "SinkFinalizeError",
]
