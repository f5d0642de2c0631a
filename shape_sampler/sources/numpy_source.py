"""Numpy-backed uniform source."""

from __future__ import annotations

import numpy as np
from numpy.random import PCG64, Generator

DEFAULT_BLOCK_SIZE = 4096


class NumpyUniformSource:
    """Uniform source drawing blocks of doubles from a PCG64 generator.

    Draws are served one at a time in generation order, so a seeded source is
    fully reproducible regardless of the block size.
    """

    def __init__(self, seed: int | None = None, *, block_size: int = DEFAULT_BLOCK_SIZE) -> None:
        if block_size <= 0:
            raise ValueError("block_size must be > 0")
        self.seed = seed
        self._rng = Generator(PCG64(seed)) if seed is not None else np.random.default_rng()
        self._block_size = block_size
        self._block = np.empty(0, dtype=np.float64)
        self._pos = 0

    def next_uniform(self) -> float:
        if self._pos >= self._block.size:
            self._block = self._rng.random(self._block_size)
            self._pos = 0
        value = float(self._block[self._pos])
        self._pos += 1
        return value


__all__ = ["NumpyUniformSource", "DEFAULT_BLOCK_SIZE"]
