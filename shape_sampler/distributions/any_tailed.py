"""AnyTailed family: Any shape mixed with a wide logistic excursion branch."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any, ClassVar, Dict, Tuple

from shape_sampler.distributions.any import LOGISTIC_WINDOW_SCALES, lobe_centers, lobes_cdf, lobes_pdf, sample_lobes
from shape_sampler.distributions.validation import (
    require_closed_unit,
    require_inflation,
    require_non_negative,
    require_open_unit,
    require_positive,
    require_real,
    require_representable,
)
from shape_sampler.interfaces.distribution import ShapeDistribution, ShapeKind
from shape_sampler.interfaces.uniform_source import UniformSource
from shape_sampler.transforms.draws import bernoulli_gate, draw_with_retry, ensure_finite
from shape_sampler.transforms.logistic import LOGISTIC_VARIANCE, logistic_cdf, logistic_inverse_cdf, logistic_pdf

DEFAULT_TAIL_SCALE = 3.0


@dataclass(frozen=True)
class AnyTailedDistribution(ShapeDistribution):
    """Any shape with probability `tail_weight` of a logistic draw at `spread * tail_scale`.

    The tail gate consumes its own uniform before the shape draw, so the branch
    choice is independent of the value drawn within the branch.
    """

    center: float = 0.0
    spread: float = 1.0
    separation: float = 0.0
    symmetry: float = 0.5
    tail_weight: float = 0.1
    tail_scale: float = DEFAULT_TAIL_SCALE

    shape_kind: ClassVar[ShapeKind] = "any_tailed"

    def __post_init__(self) -> None:
        object.__setattr__(self, "center", require_real("center", self.center))
        object.__setattr__(self, "spread", require_positive("spread", self.spread))
        object.__setattr__(self, "separation", require_non_negative("separation", self.separation))
        object.__setattr__(self, "symmetry", require_closed_unit("symmetry", self.symmetry))
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
                lambda u: ensure_finite(logistic_inverse_cdf(u, self.center, self.tail_spread)),
                label="tail",
            )
        return sample_lobes(source, self.center, self.spread, self.separation, self.symmetry)

    def density(self, x):
        base = lobes_pdf(x, self.center, self.spread, self.separation, self.symmetry)
        tail = logistic_pdf(x, self.center, self.tail_spread)
        return (1.0 - self.tail_weight) * base + self.tail_weight * tail

    def cdf(self, x):
        base = lobes_cdf(x, self.center, self.spread, self.separation, self.symmetry)
        tail = logistic_cdf(x, self.center, self.tail_spread)
        return (1.0 - self.tail_weight) * base + self.tail_weight * tail

    @property
    def domain(self) -> Tuple[float, float]:
        return (-math.inf, math.inf)

    @property
    def window(self) -> Tuple[float, float]:
        half = max(
            self.separation + LOGISTIC_WINDOW_SCALES * self.spread,
            LOGISTIC_WINDOW_SCALES * self.tail_spread,
        )
        return (self.center - half, self.center + half)

    @property
    def modes(self) -> Tuple[float, ...]:
        return tuple(sorted(set(lobe_centers(self.center, self.separation, self.symmetry)) | {self.center}))

    @property
    def scales(self) -> Tuple[float, ...]:
        return (self.spread, self.tail_spread)

    @property
    def mean(self) -> float:
        return self.center + (1.0 - self.tail_weight) * self.separation * (2.0 * self.symmetry - 1.0)

    @property
    def variance(self) -> float:
        w = self.tail_weight
        base_second = LOGISTIC_VARIANCE * self.spread**2 + self.separation**2
        tail_second = LOGISTIC_VARIANCE * self.tail_spread**2
        shift = self.mean - self.center
        return (1.0 - w) * base_second + w * tail_second - shift**2

    def describe(self) -> Dict[str, Any]:
        return {"shape_kind": self.shape_kind, **asdict(self)}


__all__ = ["AnyTailedDistribution", "DEFAULT_TAIL_SCALE"]
