"""Two-sample symmetry verifier."""

from __future__ import annotations

from scipy.stats import ks_2samp

from shape_sampler.exceptions import VerificationError
from shape_sampler.interfaces.distribution import ShapeDistribution
from shape_sampler.interfaces.uniform_source import UniformSource
from shape_sampler.utils.logging import get_logger
from shape_sampler.verification.batch import draw_batch
from shape_sampler.verification.models import SymmetryReport

DEFAULT_SAMPLES = 10_000
DEFAULT_ALPHA = 0.01

log = get_logger(__name__, component="symmetry")


def symmetry_test(
    distribution: ShapeDistribution,
    source: UniformSource,
    *,
    n_samples: int = DEFAULT_SAMPLES,
    alpha: float = DEFAULT_ALPHA,
    center: float | None = None,
) -> SymmetryReport:
    """Compare `x - c` with `c - y` for two independent batches via Kolmogorov-Smirnov."""

    if not 0.0 < alpha < 1.0:
        raise VerificationError("alpha must be within (0, 1)")
    c = distribution.center if center is None else float(center)
    first = draw_batch(distribution, source, n_samples)
    second = draw_batch(distribution, source, n_samples)
    result = ks_2samp(first - c, c - second)
    statistic, p_value = float(result.statistic), float(result.pvalue)
    passed = p_value > alpha
    (log.info if passed else log.warning)(
        "Symmetry verdict",
        extra={"shape_kind": distribution.shape_kind, "n_samples": n_samples, "p_value": p_value, "passed": passed},
    )
    return SymmetryReport(
        statistic=statistic,
        p_value=p_value,
        alpha=alpha,
        passed=passed,
        center=c,
        n_samples=n_samples,
    )


__all__ = ["symmetry_test"]
