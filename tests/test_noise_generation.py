"""
Test suite for noise generation algorithms and core functionality.
"""

import unittest
import numpy as np
from pathlib import Path
import sys

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from audio_noise_gen.core.noise_generator import NoiseGenerator, fill
from audio_noise_gen.core.random_source import UniformSource
from audio_noise_gen.core.state import GeneratorState, NoiseColor
from audio_noise_gen.algorithms.pink_noise import PINK_POLES
from audio_noise_gen.exceptions import ConfigurationError
from audio_noise_gen.utils.spectral_analysis import measure_spectral_slope


class FixedSource:
    """Uniform source replaying a fixed sequence, cycling when exhausted."""

    def __init__(self, values):
        self.values = np.asarray(values, dtype=np.float64)
        self.position = 0

    def draw(self, n):
        indices = np.arange(self.position, self.position + n)
        self.position += n
        return np.take(self.values, indices, mode='wrap')


def reference_pink(whites):
    """Per-sample pink filter, written out literally."""
    b = [0.0] * 7
    out = []
    for white in whites:
        b[0] = 0.99886 * b[0] + white * 0.0555179
        b[1] = 0.99332 * b[1] + white * 0.0750759
        b[2] = 0.96900 * b[2] + white * 0.1538520
        b[3] = 0.86650 * b[3] + white * 0.3104856
        b[4] = 0.55000 * b[4] + white * 0.5329522
        b[5] = -0.7616 * b[5] - white * 0.0168980
        sample = b[0] + b[1] + b[2] + b[3] + b[4] + b[5] + b[6] + white * 0.5362
        out.append(sample * 0.11)
        b[6] = white * 0.115926
    return np.array(out)


def reference_brown(whites):
    """Per-sample leaky integrator, written out literally."""
    last_out = 0.0
    out = []
    for white in whites:
        sample = (last_out + 0.02 * white) / 1.02
        last_out = sample
        out.append(sample * 3.5)
    return np.array(out)


class TestNoiseAlgorithms(unittest.TestCase):
    """Test individual noise generation algorithms."""

    def setUp(self):
        """Set up test fixtures."""
        rng = np.random.default_rng(1234)
        self.draws = rng.random(3000)
        self.whites = self.draws * 2.0 - 1.0

    def test_white_noise_exact_values(self):
        """Draws of 0.5, 0.0 and 1.0 map to 0.0, -1.0 and 1.0."""
        state = GeneratorState(FixedSource([0.5, 0.0, 1.0]))
        block = np.full(3, 99.0)

        fill(block, state, NoiseColor.WHITE)

        np.testing.assert_array_equal(block, [0.0, -1.0, 1.0])

    def test_pink_matches_per_sample_filter(self):
        """Vectorized pink fill equals the literal recurrence across block boundaries."""
        state = GeneratorState(FixedSource(self.draws))
        block = np.zeros(512)
        produced = []
        for _ in range(5):
            fill(block, state, NoiseColor.PINK)
            produced.append(block.copy())

        expected = reference_pink(self.whites[:2560])
        np.testing.assert_allclose(np.concatenate(produced), expected, rtol=1e-9, atol=1e-12)

    def test_pink_tap_six_lags_one_sample(self):
        """Tap 6 contributes the previous sample's white value, never the current one."""
        for block_size in (1, 2):
            state = GeneratorState(FixedSource([1.0, 0.5]))
            block = np.zeros(block_size)
            samples = []
            while len(samples) < 2:
                fill(block, state, NoiseColor.PINK)
                samples.extend(block.tolist())

            # white = 1.0, tap 6 still zero
            first = (sum(gain for _, gain in PINK_POLES) + 0.5362) * 0.11
            # white = 0.0, taps decay and tap 6 holds 1.0 * 0.115926
            second = (sum(pole * gain for pole, gain in PINK_POLES) + 0.115926) * 0.11
            without_lag = sum(pole * gain for pole, gain in PINK_POLES) * 0.11

            self.assertAlmostEqual(samples[0], first, places=12)
            self.assertAlmostEqual(samples[1], second, places=12)
            self.assertNotAlmostEqual(samples[1], without_lag, places=6)

    def test_brown_matches_per_sample_filter(self):
        """Vectorized brown fill equals the literal recurrence across block boundaries."""
        state = GeneratorState(FixedSource(self.draws))
        block = np.zeros(700)
        produced = []
        for _ in range(4):
            fill(block, state, NoiseColor.BROWN)
            produced.append(block.copy())

        expected = reference_brown(self.whites[:2800])
        np.testing.assert_allclose(np.concatenate(produced), expected, rtol=1e-9, atol=1e-12)

    def test_brown_feeds_back_pre_gain_value(self):
        """The integrator keeps the unscaled output; only the emitted sample is gained."""
        state = GeneratorState(FixedSource([1.0, 0.5]))
        block = np.zeros(1)

        fill(block, state, NoiseColor.BROWN)
        self.assertAlmostEqual(block[0], 0.02 / 1.02 * 3.5, places=12)
        self.assertAlmostEqual(block[0], 0.0686, places=4)
        self.assertAlmostEqual(state.brown_last_out, 0.02 / 1.02, places=12)
        self.assertAlmostEqual(state.brown_last_out, 0.0196, places=4)

        fill(block, state, NoiseColor.BROWN)
        self.assertAlmostEqual(block[0], (0.02 / 1.02) / 1.02 * 3.5, places=12)
        self.assertNotAlmostEqual(block[0], (0.02 / 1.02 * 3.5) / 1.02 * 3.5, places=3)

    def test_state_continuity_across_blocks(self):
        """Resetting state between blocks changes pink and brown output."""
        for color in (NoiseColor.PINK, NoiseColor.BROWN):
            continuous = GeneratorState(FixedSource(self.draws))
            restarted = GeneratorState(FixedSource(self.draws))
            block_a = np.zeros(256)
            block_b = np.zeros(256)

            fill(block_a, continuous, color)
            fill(block_b, restarted, color)
            np.testing.assert_array_equal(block_a, block_b)

            fill(block_a, continuous, color)
            restarted.reset()
            fill(block_b, restarted, color)
            self.assertFalse(np.allclose(block_a, block_b),
                             f"{color} output should depend on carried state")

    def test_block_size_does_not_change_signal(self):
        """Two half blocks from one state equal one full block."""
        for color in NoiseColor:
            halves = NoiseGenerator(color, block_size=512, source=FixedSource(self.draws))
            whole = NoiseGenerator(color, block_size=1024, source=FixedSource(self.draws))

            joined = np.concatenate([halves.next_block().copy(), halves.next_block().copy()])
            np.testing.assert_allclose(joined, whole.next_block(), rtol=1e-12, atol=1e-15)

    def test_every_sample_overwritten(self):
        """No stale values survive a fill."""
        for color in NoiseColor:
            state = GeneratorState(UniformSource(seed=5))
            block = np.full(4096, np.nan)
            fill(block, state, color)
            self.assertFalse(np.isnan(block).any(), f"{color} left unfilled samples")


class TestNoiseGenerator(unittest.TestCase):
    """Test the NoiseGenerator class and its random source."""

    def test_seeded_sources_are_reproducible(self):
        """Equal seeds give equal output."""
        first = NoiseGenerator(NoiseColor.PINK, block_size=1024, seed=42)
        second = NoiseGenerator(NoiseColor.PINK, block_size=1024, seed=42)
        for _ in range(3):
            np.testing.assert_array_equal(first.next_block(), second.next_block())

    def test_different_seeds_differ(self):
        """Different seeds give different output."""
        first = NoiseGenerator(NoiseColor.WHITE, seed=1).next_block().copy()
        second = NoiseGenerator(NoiseColor.WHITE, seed=2).next_block()
        self.assertFalse(np.array_equal(first, second))

    def test_uniform_source_range(self):
        """Draws lie in [0, 1)."""
        draws = UniformSource(seed=9).draw(100000)
        self.assertEqual(draws.shape, (100000,))
        self.assertGreaterEqual(draws.min(), 0.0)
        self.assertLess(draws.max(), 1.0)

    def test_block_is_reused(self):
        """next_block() overwrites the same buffer."""
        generator = NoiseGenerator(NoiseColor.BROWN, block_size=128, seed=3)
        first = generator.next_block()
        snapshot = first.copy()
        second = generator.next_block()

        self.assertIs(first, second)
        self.assertFalse(np.array_equal(snapshot, second))
        self.assertEqual(generator.blocks_generated, 2)

    def test_algorithm_info(self):
        """Algorithm metadata reports color and gain."""
        info = NoiseGenerator(NoiseColor.PINK, block_size=256, seed=0).get_algorithm_info()
        self.assertEqual(info["color"], "pink")
        self.assertEqual(info["spectral_density"], "1/f")
        self.assertEqual(info["gain"], 0.11)
        self.assertEqual(info["block_size"], 256)

    def test_color_from_name(self):
        """Color names are case-insensitive."""
        self.assertIs(NoiseColor.from_name("Brown"), NoiseColor.BROWN)
        self.assertIs(NoiseColor.from_name("PINK"), NoiseColor.PINK)
        with self.assertRaises(ConfigurationError):
            NoiseColor.from_name("purple")


class TestAudioQuality(unittest.TestCase):
    """Test amplitude and spectral characteristics."""

    sample_rate = 44100
    num_blocks = 60

    def _generate(self, color, seed=2024):
        generator = NoiseGenerator(color, block_size=4096, seed=seed)
        return np.concatenate([generator.next_block().copy() for _ in range(self.num_blocks)])

    def test_white_noise_range(self):
        """White noise stays in [-1, 1) and is centred on zero."""
        audio = self._generate(NoiseColor.WHITE)
        self.assertGreaterEqual(audio.min(), -1.0)
        self.assertLess(audio.max(), 1.0)
        self.assertLess(abs(np.mean(audio)), 0.01, "Mean should be close to 0")

    def test_colored_noise_amplitude(self):
        """Pink and brown noise sit mostly inside [-1, 1] after gain compensation."""
        for color in (NoiseColor.PINK, NoiseColor.BROWN):
            audio = self._generate(color)
            magnitude = np.percentile(np.abs(audio), 99.9)
            rms = np.sqrt(np.mean(audio ** 2))

            self.assertLess(magnitude, 1.0, f"{color} 99.9th percentile too high")
            self.assertGreater(rms, 0.01, f"{color} should not be silent")

    def test_no_invalid_values(self):
        """No NaN or infinite samples."""
        for color in NoiseColor:
            audio = self._generate(color)
            self.assertTrue(np.isfinite(audio).all(), f"{color} produced non-finite values")

    def test_spectral_slopes(self):
        """Each color has its characteristic spectral slope."""
        white = measure_spectral_slope(self._generate(NoiseColor.WHITE), self.sample_rate)
        pink = measure_spectral_slope(self._generate(NoiseColor.PINK), self.sample_rate)
        brown = measure_spectral_slope(self._generate(NoiseColor.BROWN), self.sample_rate)

        self.assertLess(abs(white), 0.15, "White noise should be flat")
        self.assertGreater(pink, -1.3)
        self.assertLess(pink, -0.7, "Pink noise should fall about 10 dB per decade")
        self.assertGreater(brown, -2.3)
        self.assertLess(brown, -1.4, "Brown noise should fall about 20 dB per decade")


if __name__ == '__main__':
    # Run tests with verbose output
    unittest.main(verbosity=2)
