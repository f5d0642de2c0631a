"""Chi-squared goodness-of-fit verifier."""

from __future__ import annotations

import math

import numpy as np
from scipy.stats import chi2

from shape_sampler.exceptions import InternalError, VerificationError
from shape_sampler.interfaces.distribution import ShapeDistribution
from shape_sampler.interfaces.uniform_source import UniformSource
from shape_sampler.utils.logging import get_logger
from shape_sampler.verification.batch import draw_batch
from shape_sampler.verification.histogram import Histogram
from shape_sampler.verification.integration import bin_probabilities, interval_probability, resolve_window
from shape_sampler.verification.models import GoodnessOfFitReport

DEFAULT_SAMPLES = 10_000
DEFAULT_BINS = 20
DEFAULT_ALPHA = 0.01
# Share of mass outside the default window for unbounded shapes.
DEFAULT_COVERAGE = 0.998
MIN_EXPECTED_COUNT = 5.0
PROBABILITY_TOLERANCE = 1e-6

log = get_logger(__name__, component="goodness_of_fit")


def chi_squared_test(
    distribution: ShapeDistribution,
    histogram: Histogram,
    *,
    alpha: float = DEFAULT_ALPHA,
    fitted_params: int = 0,
) -> GoodnessOfFitReport:
    """Compare a filled histogram against the distribution's bin probabilities."""

    if not 0.0 < alpha < 1.0:
        raise VerificationError("alpha must be within (0, 1)")
    n = histogram.total
    if n <= 0:
        raise VerificationError("histogram is empty")

    edges = histogram.edges
    probabilities = bin_probabilities(distribution, edges)
    residual_p = interval_probability(distribution, -math.inf, histogram.low) + interval_probability(
        distribution, histogram.high, math.inf
    )
    total = float(probabilities.sum()) + residual_p
    if abs(total - 1.0) > PROBABILITY_TOLERANCE:
        log.error(
            "Bin table probabilities do not sum to one",
            extra={"shape_kind": distribution.shape_kind, "total": total},
        )
        raise InternalError(f"expected bin probabilities sum to {total!r}, not 1")

    expected = probabilities * n
    observed = histogram.counts.astype(float)
    residual_expected = residual_p * n
    residual_in_statistic = residual_expected >= MIN_EXPECTED_COUNT
    if residual_in_statistic:
        expected = np.append(expected, residual_expected)
        observed = np.append(observed, float(histogram.residual))

    # Cells the density gives no mass are dropped unless something landed there.
    live = expected > 0.0
    if (observed[~live] > 0).any():
        statistic = math.inf
    else:
        statistic = float((((observed[live] - expected[live]) ** 2) / expected[live]).sum())

    sparse_bins = int((expected[live] < MIN_EXPECTED_COUNT).sum())
    if sparse_bins:
        log.warning(
            "Bins below the chi-squared expected-count rule",
            extra={"shape_kind": distribution.shape_kind, "sparse_bins": sparse_bins, "n_samples": n},
        )

    dof = int(live.sum()) - 1 - fitted_params
    if dof < 1:
        raise VerificationError(f"not enough populated bins for a chi-squared test (dof={dof})")
    critical_value = float(chi2.ppf(1.0 - alpha, dof))
    p_value = float(chi2.sf(statistic, dof))
    passed = statistic <= critical_value

    report = GoodnessOfFitReport(
        statistic=statistic,
        critical_value=critical_value,
        passed=passed,
        bins=[(float(p), int(c)) for p, c in zip(probabilities, histogram.counts)],
        edges=[float(e) for e in edges],
        p_value=p_value,
        degrees_of_freedom=dof,
        alpha=alpha,
        n_samples=n,
        residual_expected=float(residual_expected),
        residual_observed=histogram.residual,
        residual_in_statistic=bool(residual_in_statistic),
        sparse_bins=sparse_bins,
    )
    (log.info if passed else log.warning)(
        "Goodness-of-fit verdict",
        extra={
            "shape_kind": distribution.shape_kind,
            "n_samples": n,
            "statistic": statistic,
            "critical_value": critical_value,
            "passed": passed,
        },
    )
    return report


def goodness_of_fit(
    distribution: ShapeDistribution,
    source: UniformSource,
    *,
    n_samples: int = DEFAULT_SAMPLES,
    n_bins: int = DEFAULT_BINS,
    low: float | None = None,
    high: float | None = None,
    alpha: float = DEFAULT_ALPHA,
    fitted_params: int = 0,
) -> GoodnessOfFitReport:
    """Draw a batch, bin it over [low, high) and run the chi-squared test.

    Bounded shapes default to their full domain; unbounded ones to the central
    interval holding DEFAULT_COVERAGE of the mass, with the remainder tested as
    a residual cell when its expected count allows.
    """

    if n_bins < 2:
        raise VerificationError("n_bins must be >= 2")
    low, high = resolve_window(distribution, low, high, DEFAULT_COVERAGE)
    batch = draw_batch(distribution, source, n_samples)
    histogram = Histogram.from_samples(batch, low, high, n_bins)
    return chi_squared_test(distribution, histogram, alpha=alpha, fitted_params=fitted_params)


__all__ = [
    "DEFAULT_ALPHA",
    "DEFAULT_BINS",
    "DEFAULT_SAMPLES",
    "MIN_EXPECTED_COUNT",
    "chi_squared_test",
    "goodness_of_fit",
]
