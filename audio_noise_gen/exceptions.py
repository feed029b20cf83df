"""
Exception hierarchy for the noise generator.

Generation algorithms never raise; everything here comes from validating
input or from driving the WAV sink.
"""


class NoiseGenError(Exception):
    """Base class for all audio_noise_gen errors."""


class ConfigurationError(NoiseGenError, ValueError):
    """Invalid noise color, duration or audio format settings."""


class SinkError(NoiseGenError):
    """Base class for output sink failures."""

    def __init__(self, message: str, path=None):
        super().__init__(message)
        self.path = path


class SinkOpenError(SinkError):
    """The output file could not be created."""


class SinkWriteError(SinkError):
    """Appending samples to the output file failed."""


class SinkFinalizeError(SinkError):
    """Flushing or closing the output file failed."""
