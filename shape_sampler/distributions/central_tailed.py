"""CentralTailed family: raised cosine mixed with a wide normal excursion branch."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any, ClassVar, Dict, Tuple

from shape_sampler.distributions.any_tailed import DEFAULT_TAIL_SCALE
from shape_sampler.distributions.central import sample_raised_cosine
from shape_sampler.distributions.validation import (
    require_inflation,
    require_open_unit,
    require_positive,
    require_real,
    require_representable,
)
from shape_sampler.interfaces.distribution import ShapeDistribution, ShapeKind
from shape_sampler.interfaces.uniform_source import UniformSource
from shape_sampler.transforms.draws import bernoulli_gate, draw_with_retry, ensure_finite
from shape_sampler.transforms.normal import normal_cdf, normal_inverse_cdf, normal_pdf
from shape_sampler.transforms.raised_cosine import RAISED_COSINE_VARIANCE, raised_cosine_cdf, raised_cosine_pdf

# Half-width of the sampling window in tail standard deviations.
NORMAL_WINDOW_SIGMAS = 12.0


@dataclass(frozen=True)
class CentralTailedDistribution(ShapeDistribution):
    """Raised cosine with probability `tail_weight` of a normal draw with sd `spread * tail_scale`.

    The base branch lives on `[center - spread, center + spread]`; the tail branch
    extends the support to all reals. Both branches are symmetric about `center`.
    """

    center: float = 0.0
    spread: float = 1.0
    tail_weight: float = 0.1
    tail_scale: float = DEFAULT_TAIL_SCALE

    shape_kind: ClassVar[ShapeKind] = "central_tailed"

    def __post_init__(self) -> None:
        object.__setattr__(self, "center", require_real("center", self.center))
        object.__setattr__(self, "spread", require_positive("spread", self.spread))
        object.__setattr__(self, "tail_weight", require_open_unit("tail_weight", self.tail_weight))
        object.__setattr__(self, "tail_scale", require_inflation("tail_scale", self.tail_scale))
        require_representable(self.window)

    @property
    def tail_spread(self) -> float:
        return self.spread * self.tail_scale

    def sample(self, source: UniformSource) -> float:
        if bernoulli_gate(source, self.tail_weight, label="tail_gate"):
            return draw_with_retry(
                source,
                lambda u: ensure_finite(normal_inverse_cdf(u, self.center, self.tail_spread)),
                label="tail",
            )
        return sample_raised_cosine(source, self.center, self.spread)

    def density(self, x):
        base = raised_cosine_pdf(x, self.center, self.spread)
        tail = normal_pdf(x, self.center, self.tail_spread)
        return (1.0 - self.tail_weight) * base + self.tail_weight * tail

    def cdf(self, x):
        base = raised_cosine_cdf(x, self.center, self.spread)
        tail = normal_cdf(x, self.center, self.tail_spread)
        return (1.0 - self.tail_weight) * base + self.tail_weight * tail

    @property
    def domain(self) -> Tuple[float, float]:
        return (-math.inf, math.inf)

    @property
    def base_domain(self) -> Tuple[float, float]:
        return (self.center - self.spread, self.center + self.spread)

    @property
    def window(self) -> Tuple[float, float]:
        half = NORMAL_WINDOW_SIGMAS * self.tail_spread
        return (self.center - half, self.center + half)

    @property
    def modes(self) -> Tuple[float, ...]:
        return (self.center,)

    @property
    def scales(self) -> Tuple[float, ...]:
        return (self.spread, self.tail_spread)

    @property
    def mean(self) -> float:
        return self.center

    @property
    def variance(self) -> float:
        w = self.tail_weight
        return (1.0 - w) * RAISED_COSINE_VARIANCE * self.spread**2 + w * self.tail_spread**2

    def describe(self) -> Dict[str, Any]:
        return {"shape_kind": self.shape_kind, **asdict(self)}


__all__ = ["CentralTailedDistribution", "NORMAL_WINDOW_SIGMAS"]
