"""Collision verifiers.

`collision_test` counts colliding pairs among samples discretized into
equal-width buckets whose probabilities come from the closed-form CDF, and
checks the count against the exact mean and variance of that statistic.
`knuth_collision_test` is the sparse-occupancy variant: samples are mapped
through the CDF into 2^d equiprobable urns and the number of collisions is
compared to its exact distribution (Knuth, TAOCP vol. 2, 3.3.2).
"""

from __future__ import annotations

import math
from typing import Tuple

import numpy as np
from scipy.stats import norm

from shape_sampler.exceptions import InternalError, VerificationError
from shape_sampler.interfaces.distribution import ShapeDistribution
from shape_sampler.interfaces.uniform_source import UniformSource
from shape_sampler.utils.logging import get_logger
from shape_sampler.verification.batch import draw_batch
from shape_sampler.verification.integration import bin_probabilities, resolve_window
from shape_sampler.verification.models import CollisionReport, KnuthCollisionReport

DEFAULT_SAMPLES = 5_000
DEFAULT_BUCKETS = 64
DEFAULT_CONFIDENCE = 0.95
DEFAULT_COVERAGE = 0.99
PROBABILITY_TOLERANCE = 1e-6

KNUTH_DIMENSION = 16
KNUTH_URN_TO_BALL_RATIO = 64
KNUTH_REPEATS = 10
KNUTH_THRESHOLD = 0.05
_KNUTH_EPSILON = 1e-20

log = get_logger(__name__, component="collisions")


def bucket_edges(low: float, high: float, n_buckets: int) -> np.ndarray:
    """Equal-width edges over [low, high], with the outer buckets extended to ±inf."""

    edges = np.linspace(low, high, n_buckets + 1)
    edges[0], edges[-1] = -math.inf, math.inf
    return edges


def bucket_counts(values: np.ndarray, edges: np.ndarray) -> np.ndarray:
    n_buckets = len(edges) - 1
    idx = np.searchsorted(edges[1:-1], values, side="right")
    return np.bincount(idx, minlength=n_buckets)


def count_pair_collisions(counts: np.ndarray) -> int:
    counts = np.asarray(counts, dtype=np.int64)
    return int((counts * (counts - 1) // 2).sum())


def collision_moments(probabilities, n_samples: int) -> Tuple[float, float]:
    """Mean and variance of the number of colliding pairs among `n_samples` iid draws."""

    p = np.asarray(probabilities, dtype=float)
    q2 = float((p**2).sum())
    q3 = float((p**3).sum())
    pairs = n_samples * (n_samples - 1) / 2.0
    triples = n_samples * (n_samples - 1) * (n_samples - 2) / 6.0
    mean = pairs * q2
    variance = pairs * q2 * (1.0 - q2) + 6.0 * triples * (q3 - q2 * q2)
    return mean, max(variance, 0.0)


def collision_test(
    distribution: ShapeDistribution,
    source: UniformSource,
    *,
    n_samples: int = DEFAULT_SAMPLES,
    n_buckets: int = DEFAULT_BUCKETS,
    low: float | None = None,
    high: float | None = None,
    confidence: float = DEFAULT_CONFIDENCE,
) -> CollisionReport:
    """Check the pairwise bucket-collision count against its expected interval."""

    if n_buckets < 2:
        raise VerificationError("n_buckets must be >= 2")
    if n_samples < 2:
        raise VerificationError("n_samples must be >= 2")
    if not 0.0 < confidence < 1.0:
        raise VerificationError("confidence must be within (0, 1)")

    low, high = resolve_window(distribution, low, high, DEFAULT_COVERAGE)
    edges = bucket_edges(low, high, n_buckets)
    probabilities = bin_probabilities(distribution, edges)
    total = float(probabilities.sum())
    if abs(total - 1.0) > PROBABILITY_TOLERANCE:
        raise InternalError(f"bucket probabilities sum to {total!r}, not 1")

    batch = draw_batch(distribution, source, n_samples)
    observed = count_pair_collisions(bucket_counts(batch, edges))

    mean, variance = collision_moments(probabilities, n_samples)
    std = math.sqrt(variance)
    z = float(norm.ppf(0.5 + 0.5 * confidence))
    expected_range = (mean - z * std, mean + z * std)
    passed = expected_range[0] <= observed <= expected_range[1]

    (log.info if passed else log.warning)(
        "Collision verdict",
        extra={
            "shape_kind": distribution.shape_kind,
            "n_samples": n_samples,
            "observed": observed,
            "expected": mean,
            "passed": passed,
        },
    )
    return CollisionReport(
        observed_collisions=observed,
        expected_range=expected_range,
        passed=passed,
        expected_collisions=mean,
        std_collisions=std,
        confidence=confidence,
        n_samples=n_samples,
        bucket_probabilities=[float(p) for p in probabilities],
    )


def knuth_p_value(urns: int, balls: int, collisions: int) -> float:
    """Upper-tail probability of more than `collisions` collisions when throwing `balls` into `urns`."""

    k = float(urns)
    a = [0.0] * (balls + 1)
    a[1] = 1.0
    j0 = j1 = 1
    for _ in range(1, balls):
        j1 += 1
        for j in range(j1, j0 - 1, -1):
            v = j / k
            a[j] = a[j] * v + a[j - 1] * (1.0 + 1.0 / k - v)
        if a[j0] < _KNUTH_EPSILON:
            a[j0] = 0.0
            j0 += 1
        if a[j1] < _KNUTH_EPSILON:
            a[j1] = 0.0
            j1 -= 1
    occupied = balls - collisions
    if occupied > j1:
        return 1.0
    if occupied < j0:
        return 0.0
    return 1.0 - sum(a[occupied : j1 + 1])


def knuth_collision_test(
    distribution: ShapeDistribution,
    source: UniformSource,
    *,
    dimension: int = KNUTH_DIMENSION,
    urn_to_ball_ratio: int = KNUTH_URN_TO_BALL_RATIO,
    repeats: int = KNUTH_REPEATS,
    threshold: float = KNUTH_THRESHOLD,
) -> KnuthCollisionReport:
    """Repeat the sparse collision test and require the mean p-value to exceed `threshold`."""

    urns = 1 << dimension
    balls = urns // urn_to_ball_ratio
    if balls < 2:
        raise VerificationError("urn_to_ball_ratio leaves fewer than two balls")
    if repeats < 1:
        raise VerificationError("repeats must be >= 1")

    collisions = []
    p_values = []
    for _ in range(repeats):
        batch = draw_batch(distribution, source, balls)
        r = np.asarray(distribution.cdf(batch), dtype=float)
        urn = np.minimum((r * urns).astype(np.int64), urns - 1)
        c = balls - int(np.unique(urn).size)
        collisions.append(c)
        p_values.append(knuth_p_value(urns, balls, c))

    mean_p = float(np.mean(p_values))
    passed = mean_p > threshold
    (log.info if passed else log.warning)(
        "Knuth collision verdict",
        extra={"shape_kind": distribution.shape_kind, "mean_p_value": mean_p, "passed": passed},
    )
    return KnuthCollisionReport(
        mean_p_value=mean_p,
        threshold=threshold,
        passed=passed,
        urns=urns,
        balls=balls,
        collisions=collisions,
        p_values=p_values,
    )


__all__ = [
    "DEFAULT_BUCKETS",
    "DEFAULT_CONFIDENCE",
    "DEFAULT_SAMPLES",
    "bucket_counts",
    "bucket_edges",
    "collision_moments",
    "collision_test",
    "count_pair_collisions",
    "knuth_collision_test",
    "knuth_p_value",
]
