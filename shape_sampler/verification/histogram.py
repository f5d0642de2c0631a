"""Equal-width histogram with a residual counter for out-of-window samples."""

from __future__ import annotations

import numpy as np

from shape_sampler.exceptions import VerificationError


class Histogram:
    """K half-open bins regularly spaced over `[low, high)`.

    Samples falling outside the window are accumulated into `residual`.
    """

    def __init__(self, low: float, high: float, bin_count: int) -> None:
        if bin_count < 1:
            raise VerificationError("Histogram must contain at least one bin")
        if not (np.isfinite(low) and np.isfinite(high)) or low >= high:
            raise VerificationError(f"Invalid histogram window [{low}, {high})")
        self.low = float(low)
        self.high = float(high)
        self.bin_count = int(bin_count)
        self._scale = self.bin_count / (self.high - self.low)
        self.counts = np.zeros(self.bin_count, dtype=np.int64)
        self.residual = 0

    @property
    def edges(self) -> np.ndarray:
        edges = np.linspace(self.low, self.high, self.bin_count + 1)
        edges[-1] = self.high
        return edges

    @property
    def total(self) -> int:
        return int(self.counts.sum()) + self.residual

    def add(self, values) -> None:
        values = np.atleast_1d(np.asarray(values, dtype=float))
        idx = np.floor((values - self.low) * self._scale)
        inside = (idx >= 0) & (idx < self.bin_count)
        self.counts += np.bincount(idx[inside].astype(np.int64), minlength=self.bin_count)
        self.residual += int((~inside).sum())

    @classmethod
    def from_samples(cls, values, low: float, high: float, bin_count: int) -> "Histogram":
        hist = cls(low, high, bin_count)
        hist.add(values)
        return hist


__all__ = ["Histogram"]
