"""Noise coloring algorithms."""

from .white_noise import fill_white_noise, draw_white
from .pink_noise import fill_pink_noise
from .brown_noise import fill_brown_noise

__all__ = ["fill_white_noise", "draw_white", "fill_pink_noise", "fill_brown_noise"]
