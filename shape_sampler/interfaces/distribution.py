"""Distribution interface for the bounded shape families."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, Literal, Tuple

import numpy as np

from shape_sampler.interfaces.uniform_source import UniformSource

ShapeKind = Literal["any", "any_tailed", "central", "central_tailed"]

# Offsets from each peak, in units of each component scale.
BREAKPOINT_SCALES = (0.0, 1.0, 4.0, 16.0, 64.0)


class ShapeDistribution(ABC):
    """Base class for the four shape families.

    Concrete variants are frozen dataclasses: parameters are validated once at
    construction and never change, and each `sample()` call is an independent
    draw whose only side effect is consuming uniforms from the injected source.
    """

    shape_kind: ClassVar[ShapeKind]
    center: float
    spread: float

    @abstractmethod
    def sample(self, source: UniformSource) -> float:
        """Draw one finite value from the distribution."""

    @abstractmethod
    def density(self, x):
        """Closed-form probability density at `x` (scalar or array)."""

    @abstractmethod
    def cdf(self, x):
        """Closed-form cumulative distribution at `x` (scalar or array)."""

    @property
    @abstractmethod
    def domain(self) -> Tuple[float, float]:
        """Support of the distribution as (low, high); infinite where unbounded."""

    @property
    @abstractmethod
    def window(self) -> Tuple[float, float]:
        """Finite interval holding all but a negligible fraction of the mass."""

    @property
    @abstractmethod
    def modes(self) -> Tuple[float, ...]:
        """Locations of the density peaks."""

    @property
    @abstractmethod
    def scales(self) -> Tuple[float, ...]:
        """Length scales of the mixture components, narrowest first."""

    @property
    def breakpoints(self) -> Tuple[float, ...]:
        """Points around each peak, at multiples of each scale, where quadrature should split.

        A narrow lobe inside a much wider window is invisible to adaptive
        quadrature unless an interval boundary lands near it.
        """

        points = {
            m + sign * f * s for m in self.modes for s in self.scales for f in BREAKPOINT_SCALES for sign in (-1.0, 1.0)
        }
        return tuple(sorted(p for p in points if np.isfinite(p)))

    @property
    @abstractmethod
    def mean(self) -> float:
        ...

    @property
    @abstractmethod
    def variance(self) -> float:
        ...

    @abstractmethod
    def describe(self) -> Dict[str, Any]:
        """Return the shape kind and parameters as a plain dict."""

    def sample_batch(self, source: UniformSource, n: int) -> np.ndarray:
        """Return `n` independent draws as a float array."""

        out = np.empty(n, dtype=np.float64)
        for i in range(n):
            out[i] = self.sample(source)
        return out


__all__ = ["BREAKPOINT_SCALES", "ShapeDistribution", "ShapeKind"]
