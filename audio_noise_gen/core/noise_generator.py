"""
NoiseGenerator - block-wise noise synthesis

Fills a reusable float block with the next contiguous segment of white,
pink or brown noise. Filter state lives in a GeneratorState and is carried
across blocks so consecutive blocks join without discontinuities.
"""

from typing import Dict, Any, Optional
import logging

import numpy as np

from ..algorithms import white_noise, pink_noise, brown_noise
from ..config import DEFAULT_BLOCK_SIZE
from .random_source import UniformSource
from .state import GeneratorState, NoiseColor

logger = logging.getLogger(__name__)

_ALGORITHMS = {
    NoiseColor.WHITE: white_noise.fill_white_noise,
    NoiseColor.PINK: pink_noise.fill_pink_noise,
    NoiseColor.BROWN: brown_noise.fill_brown_noise,
}

_ALGORITHM_INFO = {
    NoiseColor.WHITE: white_noise.ALGORITHM_INFO,
    NoiseColor.PINK: pink_noise.ALGORITHM_INFO,
    NoiseColor.BROWN: brown_noise.ALGORITHM_INFO,
}


def fill(block: np.ndarray, state: GeneratorState, color: NoiseColor) -> None:
    """
    Overwrite block in place with the next segment of the given noise color.

    Args:
        block: Float buffer; every element is overwritten
        state: Generator state, advanced in place
        color: Noise color to produce
    """
    _ALGORITHMS[color](block, state)


class NoiseGenerator:
    """
    Owns one GeneratorState and one reusable sample block for a single run.

    The block returned by next_block() is overwritten by the following call;
    copy it if the values need to outlive the next fill.
    """

    def __init__(
        self,
        color: NoiseColor,
        block_size: int = DEFAULT_BLOCK_SIZE,
        seed: Optional[int] = None,
        source=None
    ):
        """
        Initialize the generator.

        Args:
            color: Noise color for the whole run
            block_size: Samples per block
            seed: Seed for the default UniformSource (ignored if source is given)
            source: Optional uniform source with a draw(n) method
        """
        self.color = color
        self.block_size = block_size
        self.state = GeneratorState(source if source is not None else UniformSource(seed))
        self.block = np.zeros(block_size, dtype=np.float64)
        self.blocks_generated = 0

        logger.debug(f"NoiseGenerator initialized - color: {color}, block size: {block_size}")

    def next_block(self) -> np.ndarray:
        """
        Fill the reusable block with the next segment of noise.

        Returns:
            np.ndarray: The generator's block, normalized to roughly [-1, 1]
        """
        fill(self.block, self.state, self.color)
        self.blocks_generated += 1
        return self.block

    def get_algorithm_info(self) -> Dict[str, Any]:
        """
        Get information about the algorithm in use.

        Returns:
            dict: Algorithm metadata
        """
        return {
            **_ALGORITHM_INFO[self.color],
            "color": self.color.value,
            "block_size": self.block_size,
            "blocks_generated": self.blocks_generated,
        }
