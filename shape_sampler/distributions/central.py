"""Central family: raised-cosine density on a finite symmetric interval."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, ClassVar, Dict, Tuple

from shape_sampler.distributions.validation import require_positive, require_real, require_representable
from shape_sampler.interfaces.distribution import ShapeDistribution, ShapeKind
from shape_sampler.interfaces.uniform_source import UniformSource
from shape_sampler.transforms.draws import draw_with_retry
from shape_sampler.transforms.raised_cosine import (
    RAISED_COSINE_VARIANCE,
    raised_cosine_cdf,
    raised_cosine_inverse_cdf,
    raised_cosine_pdf,
)


def sample_raised_cosine(source: UniformSource, center: float, spread: float) -> float:
    return draw_with_retry(source, lambda u: raised_cosine_inverse_cdf(u, center, spread), label="shape")


@dataclass(frozen=True)
class CentralDistribution(ShapeDistribution):
    """Raised cosine `(1 + cos(π(x - center)/spread)) / (2 spread)` on `[center - spread, center + spread]`."""

    center: float = 0.0
    spread: float = 1.0

    shape_kind: ClassVar[ShapeKind] = "central"

    def __post_init__(self) -> None:
        object.__setattr__(self, "center", require_real("center", self.center))
        object.__setattr__(self, "spread", require_positive("spread", self.spread))
        require_representable(self.domain)

    def sample(self, source: UniformSource) -> float:
        return sample_raised_cosine(source, self.center, self.spread)

    def density(self, x):
        return raised_cosine_pdf(x, self.center, self.spread)

    def cdf(self, x):
        return raised_cosine_cdf(x, self.center, self.spread)

    @property
    def domain(self) -> Tuple[float, float]:
        return (self.center - self.spread, self.center + self.spread)

    @property
    def window(self) -> Tuple[float, float]:
        return self.domain

    @property
    def modes(self) -> Tuple[float, ...]:
        return (self.center,)

    @property
    def scales(self) -> Tuple[float, ...]:
        return (self.spread,)

    @property
    def mean(self) -> float:
        return self.center

    @property
    def variance(self) -> float:
        return RAISED_COSINE_VARIANCE * self.spread**2

    def describe(self) -> Dict[str, Any]:
        return {"shape_kind": self.shape_kind, **asdict(self)}


__all__ = ["CentralDistribution", "sample_raised_cosine"]
