"""End-to-end statistical checks across every shape family."""

import numpy as np
import pytest

from shape_sampler.distributions import (
    AnyDistribution,
    AnyTailedDistribution,
    CentralDistribution,
    CentralTailedDistribution,
)
from shape_sampler.distributions.factory import get_distribution
from shape_sampler.exceptions import ConfigError
from shape_sampler.sources import NumpyUniformSource
from shape_sampler.verification import collision_test, goodness_of_fit, symmetry_test

pytestmark = pytest.mark.statistical

SHAPES = [
    AnyDistribution(center=0.0, spread=1.0),
    AnyDistribution(center=1.0, spread=0.5, separation=2.0, symmetry=0.3),
    AnyTailedDistribution(center=-2.0, spread=1.0, tail_weight=0.2),
    CentralDistribution(center=5.0, spread=3.0),
    CentralTailedDistribution(center=0.0, spread=1.0, tail_weight=0.1),
]


@pytest.mark.parametrize("dist", SHAPES, ids=repr)
def test_goodness_of_fit_for_every_shape(dist):
    report = goodness_of_fit(dist, NumpyUniformSource(seed=101), n_samples=10_000, n_bins=20, alpha=0.001)
    assert report.passed, report.to_frame().to_string()


@pytest.mark.parametrize("dist", SHAPES, ids=repr)
def test_collisions_for_every_shape(dist):
    report = collision_test(dist, NumpyUniformSource(seed=202), n_samples=5_000, n_buckets=64, confidence=0.999)
    assert report.passed, report.to_dict()


@pytest.mark.parametrize("kind", ["central", "central_tailed"])
def test_symmetry_about_center(kind):
    dist = get_distribution(kind, center=3.0, spread=2.0)
    assert symmetry_test(dist, NumpyUniformSource(seed=303), n_samples=10_000, alpha=0.001).passed


@pytest.mark.parametrize("kind", ["any_tailed", "central_tailed"])
def test_variance_increases_with_tail_weight(kind):
    variances = []
    for weight in (0.1, 0.5):
        dist = get_distribution(kind, center=0.0, spread=1.0, tail_weight=weight)
        batch = dist.sample_batch(NumpyUniformSource(seed=404), 10_000)
        assert np.isfinite(batch).all()
        variances.append(float(np.var(batch, ddof=1)))
    assert variances[1] > variances[0]


def test_empirical_moments_track_closed_forms():
    for dist in SHAPES:
        batch = dist.sample_batch(NumpyUniformSource(seed=505), 20_000)
        sd = np.sqrt(dist.variance)
        assert abs(batch.mean() - dist.mean) < 5.0 * sd / np.sqrt(batch.size)
        assert np.var(batch, ddof=1) == pytest.approx(dist.variance, rel=0.15)


@pytest.mark.parametrize("kind", ["any", "any_tailed", "central", "central_tailed"])
@pytest.mark.parametrize("spread", [0.0, -1.0])
def test_degenerate_spread_is_rejected(kind, spread):
    with pytest.raises(ConfigError):
        get_distribution(kind, spread=spread)
