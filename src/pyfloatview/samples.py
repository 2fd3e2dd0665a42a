"""Reproducible sample boxes for demos and headless dumps."""

import numpy as np

from pyfloatview.layout.box import SizedBox

DEFAULT_MIN_SIZE = 24
DEFAULT_MAX_SIZE = 96


def generate_tile_sizes(
    count: int,
    seed: int | None = None,
    min_size: int = DEFAULT_MIN_SIZE,
    max_size: int = DEFAULT_MAX_SIZE,
) -> np.ndarray:
    """Draw random tile sizes.

    Args:
        count: Number of tiles
        seed: RNG seed; the same seed always yields the same sizes
        min_size: Smallest width/height (inclusive)
        max_size: Largest width/height (inclusive)

    Returns:
        int64 array of shape ``(count, 2)`` holding ``[width, height]``
    """
    rng = np.random.default_rng(seed)
    return rng.integers(min_size, max_size, size=(count, 2), endpoint=True)


def sample_boxes(count: int, seed: int | None = None) -> list[SizedBox]:
    """Create boxes with preferred sizes drawn by :func:`generate_tile_sizes`."""
    sizes = generate_tile_sizes(count, seed)
    return [SizedBox.preferred(float(w), float(h)) for w, h in sizes]
