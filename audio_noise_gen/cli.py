"""
Command-line entry point.

    audio-noise-gen [white|pink|brown] duration_in_sec filename.wav
"""

import argparse
import logging
import sys

import soundfile as sf

from .config import (
    GenerationConfig,
    GenerationRequest,
    DEFAULT_SAMPLE_RATE,
    DEFAULT_BLOCK_SIZE,
    DEFAULT_BIT_DEPTH,
)
from .core.state import NoiseColor
from .core.writer import write_noise_file
from .exceptions import ConfigurationError, SinkError
from .utils.spectral_analysis import SpectrumAccumulator, verify_spectral_slope

logger = logging.getLogger(__name__)

USAGE = '   Usage: "audio-noise-gen [white|pink|brown] duration_in_sec filename.wav" .'


def _noise_color(value: str) -> NoiseColor:
    try:
        return NoiseColor.from_name(value)
    except ConfigurationError as e:
        raise argparse.ArgumentTypeError(str(e))


def _whole_seconds(value: str) -> int:
    try:
        seconds = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid duration in seconds: {value!r}")
    if seconds < 0:
        raise argparse.ArgumentTypeError(f"Duration must not be negative: {value}")
    return seconds


class NoiseArgumentParser(argparse.ArgumentParser):
    """Reports bad arguments with the usage line and exit status 1."""

    def error(self, message):
        if message.startswith("the following arguments are required"):
            message = f"Invalid insufficient parameters... ({message})"
        print(f" {message}")
        print(USAGE)
        sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = NoiseArgumentParser(
        prog="audio-noise-gen",
        description="Generate a white, pink or brown noise WAV file of n seconds.",
        epilog="ex: audio-noise-gen brown 10 brown_noise.wav"
    )
    parser.add_argument("color", type=_noise_color, metavar="{white,pink,brown}",
                        help="Noise color")
    parser.add_argument("duration", type=_whole_seconds, help="Duration in whole seconds")
    parser.add_argument("output", help="Output WAV filename")
    parser.add_argument("--sample-rate", type=int, default=DEFAULT_SAMPLE_RATE,
                        help=f"Sample rate in Hz (default: {DEFAULT_SAMPLE_RATE})")
    parser.add_argument("--block-size", type=int, default=DEFAULT_BLOCK_SIZE,
                        help=f"Samples generated per block (default: {DEFAULT_BLOCK_SIZE})")
    parser.add_argument("--bit-depth", type=int, choices=[16, 24], default=DEFAULT_BIT_DEPTH,
                        help=f"PCM bit depth (default: {DEFAULT_BIT_DEPTH})")
    parser.add_argument("--seed", type=int, help="Seed for reproducible output")
    parser.add_argument("--include-tail", action="store_true",
                        help="Also write the samples past the last full block")
    parser.add_argument("--analyze", action="store_true",
                        help="Measure the spectral slope of the written file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    return parser


def analyze_file(path, color: NoiseColor, sample_rate: int) -> dict:
    """Read the WAV back block by block and report its spectral slope."""
    accumulator = SpectrumAccumulator(sample_rate)
    for block in sf.blocks(str(path), blocksize=accumulator.segment_size, dtype='float64'):
        accumulator.add(block)
    return verify_spectral_slope(color.value, accumulator.slope())


def main(argv=None) -> int:
    """Main command-line function."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    print("Audio noise generator...")

    try:
        config = GenerationConfig(
            sample_rate=args.sample_rate,
            block_size=args.block_size,
            bit_depth=args.bit_depth,
            include_tail=args.include_tail,
            seed=args.seed
        )
        request = GenerationRequest(args.color, args.duration, args.output, config)
    except ConfigurationError as e:
        print(f" {e}")
        print(USAGE)
        return 1

    try:
        stats = write_noise_file(request)
    except SinkError as e:
        print(f" {e}")
        print(USAGE)
        return 1

    if stats.dropped_samples:
        logger.info(f"{stats.dropped_samples} samples past the last full block were not generated")

    if args.analyze:
        try:
            report = analyze_file(request.output_path, request.color, config.sample_rate)
        except ValueError as e:
            print(f" Could not analyze {request.output_path}: {e}")
        else:
            print(f" Spectral slope: {report['spectral_slope']:.2f} "
                  f"(expected: {report['expected_slope']:.1f}, quality: {report['quality']})")

    print("...ended generating WAV noise file.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
