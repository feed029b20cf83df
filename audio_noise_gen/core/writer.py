"""
Streaming WAV writer

Drives a NoiseGenerator block by block, quantizes each block to PCM and
appends it to an output sink, so memory use depends on the block size
and never on the requested duration.

A sink is any object with a write(samples) method accepting a 1-D integer
numpy array; WavSink is the soundfile-backed implementation.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union
import logging
import time

import numpy as np
import soundfile as sf

from ..config import GenerationConfig, GenerationRequest
from ..exceptions import SinkOpenError, SinkWriteError, SinkFinalizeError
from .noise_generator import NoiseGenerator
from .random_source import UniformSource

logger = logging.getLogger(__name__)

# libsndfile reads and writes int32 samples left-justified
_INT32_SHIFT = {16: 0, 24: 8}


@dataclass
class GenerationStats:
    """Summary of one generation run"""
    color: str
    blocks_written: int
    samples_written: int
    dropped_samples: int
    elapsed_seconds: float
    seed: Optional[int] = None


def quantize(block: np.ndarray, config: GenerationConfig, out: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Scale normalized samples to the configured integer PCM range.

    Values are multiplied by the maximum amplitude, truncated toward zero
    and clamped to the integer range, so pink/brown peaks beyond +/-1.0
    saturate instead of wrapping.

    Args:
        block: Normalized float samples
        config: Supplies bit depth and amplitude range
        out: Optional integer buffer of the same length to write into

    Returns:
        np.ndarray: Quantized samples (out, if given)
    """
    scaled = np.trunc(block * float(config.max_amplitude))
    np.clip(scaled, config.min_amplitude, config.max_amplitude, out=scaled)
    if out is None:
        return scaled.astype(config.dtype)
    out[:] = scaled
    return out


class WavSink:
    """
    Mono PCM WAV file opened for incremental writing.

    Use as a context manager; the file is finalized exactly once on exit,
    including when the run aborts with an exception.
    """

    def __init__(self, path: Union[str, Path], config: GenerationConfig):
        self.path = Path(path)
        self.config = config
        self.samples_written = 0
        self._file = None

    def open(self) -> "WavSink":
        """
        Create the output file.

        Raises:
            SinkOpenError: If the file cannot be created
        """
        try:
            self._file = sf.SoundFile(
                str(self.path),
                mode='w',
                samplerate=self.config.sample_rate,
                channels=self.config.channels,
                subtype=self.config.subtype,
                format='WAV'
            )
        except (RuntimeError, OSError) as e:
            raise SinkOpenError(f"Error opening file for writing: {self.path}\n {e}", self.path) from e
        logger.info(f"Opened {self.path} ({self.config.sample_rate} Hz, "
                    f"{self.config.bit_depth}-bit, {self.config.channels} channel)")
        return self

    def write(self, samples: np.ndarray) -> None:
        """
        Append quantized samples in playback order.

        Raises:
            SinkWriteError: If the sink is not open or the write fails
        """
        if self._file is None:
            raise SinkWriteError(f"Sink is not open: {self.path}", self.path)
        shift = _INT32_SHIFT[self.config.bit_depth]
        if shift:
            samples = samples.astype(np.int32) << shift
        try:
            self._file.write(samples)
        except (RuntimeError, OSError) as e:
            raise SinkWriteError(f"Error writing to file: {self.path}\n {e}", self.path) from e
        self.samples_written += len(samples)

    def close(self) -> None:
        """
        Finalize the file header and close it. Safe to call more than once.

        Raises:
            SinkFinalizeError: If flushing or closing fails
        """
        if self._file is None:
            return
        soundfile, self._file = self._file, None
        try:
            soundfile.close()
        except (RuntimeError, OSError) as e:
            raise SinkFinalizeError(f"Error closing written file: {self.path}\n {e}", self.path) from e
        logger.info(f"Finalized {self.path} with {self.samples_written} samples")

    @property
    def closed(self) -> bool:
        return self._file is None

    def __enter__(self) -> "WavSink":
        return self.open()

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        if exc_value is None:
            self.close()
            return
        # keep the error that aborted the run
        try:
            self.close()
        except SinkFinalizeError as e:
            logger.error(f"Could not finalize {self.path} after failed run: {e}")


def stream_noise(request: GenerationRequest, sink, source=None) -> GenerationStats:
    """
    Generate the requested noise and hand it to sink block by block.

    Only whole blocks are produced: the last total_samples % block_size
    samples are dropped unless config.include_tail is set, in which case
    one more block is generated and only its leading tail is written.

    Args:
        request: What to generate
        sink: Object with write(samples) accepting integer arrays
        source: Optional uniform source; defaults to UniformSource(config.seed)

    Returns:
        GenerationStats: Counts for the run
    """
    config = request.config
    start_time = time.time()

    if source is None:
        source = UniformSource(config.seed)
    generator = NoiseGenerator(request.color, config.block_size, source=source)
    pcm = np.empty(config.block_size, dtype=config.dtype)

    logger.info(f"Generating {request.duration_seconds} s of {request.color} noise "
                f"({request.full_blocks} blocks of {config.block_size} samples)")

    samples_written = 0
    for _ in range(request.full_blocks):
        quantize(generator.next_block(), config, out=pcm)
        sink.write(pcm)
        samples_written += config.block_size

    dropped = request.tail_samples
    if dropped and config.include_tail:
        quantize(generator.next_block(), config, out=pcm)
        sink.write(pcm[:dropped])
        samples_written += dropped
        dropped = 0
    elif dropped:
        logger.debug(f"Dropping {dropped} samples past the last full block")

    stats = GenerationStats(
        color=request.color.value,
        blocks_written=generator.blocks_generated,
        samples_written=samples_written,
        dropped_samples=dropped,
        elapsed_seconds=time.time() - start_time,
        seed=getattr(source, "seed", None)
    )
    logger.info(f"Wrote {stats.samples_written} samples in {stats.elapsed_seconds:.2f}s")
    return stats


def write_noise_file(request: GenerationRequest, source=None) -> GenerationStats:
    """
    Stream the requested noise into a WAV file at request.output_path.

    Raises:
        SinkOpenError: The file could not be created
        SinkWriteError: A block could not be appended
        SinkFinalizeError: The file could not be finalized
    """
    with WavSink(request.output_path, request.config) as sink:
        return stream_noise(request, sink, source)
