"""Any family: logistic lobes mirrored about the center (optionally bimodal)."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any, ClassVar, Dict, Tuple

from shape_sampler.distributions.validation import (
    require_closed_unit,
    require_non_negative,
    require_positive,
    require_real,
    require_representable,
)
from shape_sampler.interfaces.distribution import ShapeDistribution, ShapeKind
from shape_sampler.interfaces.uniform_source import UniformSource
from shape_sampler.transforms.draws import bernoulli_gate, draw_with_retry, ensure_finite
from shape_sampler.transforms.logistic import LOGISTIC_VARIANCE, logistic_cdf, logistic_pdf, logit

# Half-width of the sampling window in logistic scale units (tail mass ~ e^-40).
LOGISTIC_WINDOW_SCALES = 40.0


def sample_lobes(source: UniformSource, center: float, spread: float, separation: float, symmetry: float) -> float:
    """Draw from the base Any shape: one shape uniform, then one lobe uniform."""

    offset = draw_with_retry(source, lambda u: ensure_finite(separation + spread * logit(u)), label="shape")
    if bernoulli_gate(source, symmetry, label="lobe"):
        return center + offset
    # Reflect about the center onto the lower lobe.
    return center - offset


def lobes_pdf(x, center: float, spread: float, separation: float, symmetry: float):
    upper = logistic_pdf(x, center + separation, spread)
    lower = logistic_pdf(x, center - separation, spread)
    return symmetry * upper + (1.0 - symmetry) * lower


def lobes_cdf(x, center: float, spread: float, separation: float, symmetry: float):
    upper = logistic_cdf(x, center + separation, spread)
    lower = logistic_cdf(x, center - separation, spread)
    return symmetry * upper + (1.0 - symmetry) * lower


def lobe_centers(center: float, separation: float, symmetry: float) -> Tuple[float, ...]:
    if separation == 0.0:
        return (center,)
    lobes = []
    if symmetry < 1.0:
        lobes.append(center - separation)
    if symmetry > 0.0:
        lobes.append(center + separation)
    return tuple(lobes)


@dataclass(frozen=True)
class AnyDistribution(ShapeDistribution):
    """Logistic shape with an optional second lobe.

    A logit draw scaled by `spread` is placed `separation` above `center`; a
    second, independent uniform reflects it about `center` with probability
    `1 - symmetry`. With `separation=0` this is a plain logistic distribution.
    """

    center: float = 0.0
    spread: float = 1.0
    separation: float = 0.0
    symmetry: float = 0.5

    shape_kind: ClassVar[ShapeKind] = "any"

    def __post_init__(self) -> None:
        object.__setattr__(self, "center", require_real("center", self.center))
        object.__setattr__(self, "spread", require_positive("spread", self.spread))
        object.__setattr__(self, "separation", require_non_negative("separation", self.separation))
        object.__setattr__(self, "symmetry", require_closed_unit("symmetry", self.symmetry))
        require_representable(self.window)

    def sample(self, source: UniformSource) -> float:
        return sample_lobes(source, self.center, self.spread, self.separation, self.symmetry)

    def density(self, x):
        return lobes_pdf(x, self.center, self.spread, self.separation, self.symmetry)

    def cdf(self, x):
        return lobes_cdf(x, self.center, self.spread, self.separation, self.symmetry)

    @property
    def domain(self) -> Tuple[float, float]:
        return (-math.inf, math.inf)

    @property
    def window(self) -> Tuple[float, float]:
        half = self.separation + LOGISTIC_WINDOW_SCALES * self.spread
        return (self.center - half, self.center + half)

    @property
    def modes(self) -> Tuple[float, ...]:
        return lobe_centers(self.center, self.separation, self.symmetry)

    @property
    def scales(self) -> Tuple[float, ...]:
        return (self.spread,)

    @property
    def mean(self) -> float:
        return self.center + self.separation * (2.0 * self.symmetry - 1.0)

    @property
    def variance(self) -> float:
        lobe_spread = 4.0 * self.symmetry * (1.0 - self.symmetry) * self.separation**2
        return LOGISTIC_VARIANCE * self.spread**2 + lobe_spread

    def describe(self) -> Dict[str, Any]:
        return {"shape_kind": self.shape_kind, **asdict(self)}


__all__ = ["AnyDistribution", "LOGISTIC_WINDOW_SCALES", "lobe_centers", "lobes_cdf", "lobes_pdf", "sample_lobes"]
