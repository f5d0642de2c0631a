"""Numerical integration of closed-form densities."""

from __future__ import annotations

import math
from typing import Tuple

import numpy as np
from scipy.integrate import quad
from scipy.optimize import brentq

from shape_sampler.exceptions import VerificationError
from shape_sampler.interfaces.distribution import ShapeDistribution

QUAD_LIMIT = 200


def _quad(distribution: ShapeDistribution, a: float, b: float) -> float:
    value, _ = quad(lambda x: float(distribution.density(x)), a, b, limit=QUAD_LIMIT)
    return float(value)


def integrate_density(distribution: ShapeDistribution, low: float, high: float) -> float:
    """Integrate `distribution.density` over [low, high]; either bound may be infinite.

    The range is split at the distribution's finite window so that quadrature
    over infinite intervals only ever sees the decaying tails. Inside the window
    it is cut at `distribution.breakpoints`, so a lobe far narrower than the
    window still gets its own subintervals.
    """

    if not high > low:
        return 0.0
    w_lo, w_hi = distribution.window
    total = 0.0
    if low < w_lo:
        total += _quad(distribution, low, min(high, w_lo))
    a, b = max(low, w_lo), min(high, w_hi)
    if a < b:
        cuts = [a, *(p for p in distribution.breakpoints if a < p < b), b]
        total += sum(_quad(distribution, lo, hi) for lo, hi in zip(cuts[:-1], cuts[1:]))
    if high > w_hi:
        total += _quad(distribution, max(low, w_hi), high)
    return total


def interval_probability(distribution: ShapeDistribution, low: float, high: float) -> float:
    """Mass of [low, high] from the closed-form CDF; either bound may be infinite."""

    if not high > low:
        return 0.0
    return max(float(distribution.cdf(high)) - float(distribution.cdf(low)), 0.0)


def bin_probabilities(distribution: ShapeDistribution, edges) -> np.ndarray:
    """Mass between each consecutive pair of edges, from the closed-form CDF.

    The CDFs are exact antiderivatives of the densities, so this needs no
    quadrature and cannot miss a narrow peak. `integrate_density` checks the
    two against each other.
    """

    edges = np.asarray(edges, dtype=float)
    return np.maximum(np.diff(np.asarray(distribution.cdf(edges), dtype=float)), 0.0)


def central_interval(distribution: ShapeDistribution, coverage: float) -> Tuple[float, float]:
    """Equal-tailed interval holding `coverage` of the mass, from the closed-form CDF."""

    if not 0.0 < coverage < 1.0:
        raise VerificationError("coverage must be within (0, 1)")
    tail = 0.5 * (1.0 - coverage)
    w_lo, w_hi = distribution.window
    lo = brentq(lambda x: float(distribution.cdf(x)) - tail, w_lo, w_hi, xtol=1e-12)
    hi = brentq(lambda x: float(distribution.cdf(x)) - (1.0 - tail), w_lo, w_hi, xtol=1e-12)
    return lo, hi


def resolve_window(
    distribution: ShapeDistribution,
    low: float | None,
    high: float | None,
    coverage: float,
) -> Tuple[float, float]:
    """Fill in missing window bounds: the finite domain if there is one, else a central interval."""

    d_lo, d_hi = distribution.domain
    if low is None or high is None:
        if math.isfinite(d_lo) and math.isfinite(d_hi):
            default_lo, default_hi = d_lo, d_hi
        else:
            default_lo, default_hi = central_interval(distribution, coverage)
        low = default_lo if low is None else low
        high = default_hi if high is None else high
    if not (math.isfinite(low) and math.isfinite(high)) or low >= high:
        raise VerificationError(f"Invalid verification window [{low}, {high}]")
    return float(low), float(high)


__all__ = [
    "QUAD_LIMIT",
    "bin_probabilities",
    "central_interval",
    "integrate_density",
    "interval_probability",
    "resolve_window",
]
