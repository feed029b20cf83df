"""
Uniform random source backed by an explicitly owned torch.Generator.
"""

from typing import Optional
import logging

import numpy as np
import torch

logger = logging.getLogger(__name__)


class UniformSource:
    """Draws independent float64 values uniformly distributed in [0, 1)."""

    def __init__(self, seed: Optional[int] = None):
        """
        Args:
            seed: Seed for reproducible output; None seeds from OS entropy
        """
        self.generator = torch.Generator(device='cpu')
        if seed is None:
            self.seed = self.generator.seed()
        else:
            self.generator.manual_seed(seed)
            self.seed = seed
        logger.debug(f"UniformSource seeded with {self.seed}")

    def draw(self, n: int) -> np.ndarray:
        """
        Draw the next n values of the sequence.

        Args:
            n: Number of values to draw

        Returns:
            np.ndarray: float64 array of shape (n,)
        """
        return torch.rand(n, generator=self.generator, dtype=torch.float64).numpy()
