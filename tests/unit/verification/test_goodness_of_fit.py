import numpy as np
import pytest

from shape_sampler.distributions import AnyDistribution, CentralDistribution, CentralTailedDistribution
from shape_sampler.exceptions import VerificationError
from shape_sampler.sources import NumpyUniformSource
from shape_sampler.verification.goodness_of_fit import chi_squared_test, goodness_of_fit
from shape_sampler.verification.histogram import Histogram


@pytest.mark.statistical
def test_central_passes_chi_squared_over_its_support():
    dist = CentralDistribution(center=0.0, spread=1.0)
    report = goodness_of_fit(
        dist, NumpyUniformSource(seed=42), n_samples=10_000, n_bins=20, low=-1.0, high=1.0, alpha=0.01
    )
    assert report.degrees_of_freedom == 19
    assert report.passed, report.to_dict()
    assert report.residual_observed == 0
    assert not report.residual_in_statistic
    assert sum(p for p, _ in report.bins) == pytest.approx(1.0, abs=1e-6)


@pytest.mark.statistical
def test_unbounded_shape_uses_default_window_and_residual_cell():
    dist = AnyDistribution(center=0.0, spread=1.0)
    report = goodness_of_fit(dist, NumpyUniformSource(seed=3), n_samples=10_000, n_bins=20, alpha=0.001)
    assert report.passed, report.to_dict()
    assert report.residual_expected == pytest.approx(20.0, rel=1e-3)
    assert report.residual_in_statistic
    assert report.degrees_of_freedom == 20


def test_uniform_histogram_fails_against_raised_cosine():
    dist = CentralDistribution(center=0.0, spread=1.0)
    hist = Histogram(-1.0, 1.0, 20)
    hist.counts[:] = 500
    report = chi_squared_test(dist, hist, alpha=0.01)
    assert not report.passed
    assert report.statistic > report.critical_value
    assert report.p_value < 0.01


def test_observation_in_zero_probability_cell_is_infinite_statistic():
    dist = CentralDistribution(center=0.0, spread=0.5)
    hist = Histogram(-1.0, 1.0, 4)
    hist.add(np.array([-0.9, -0.2, 0.1, 0.2]))
    report = chi_squared_test(dist, hist)
    assert report.statistic == float("inf")
    assert not report.passed


def test_sparse_bins_are_reported(caplog):
    dist = CentralTailedDistribution(center=0.0, spread=1.0, tail_weight=0.1)
    hist = Histogram.from_samples(np.zeros(50), -10.0, 10.0, 20)
    report = chi_squared_test(dist, hist)
    assert report.sparse_bins > 0
    assert any("expected-count" in r.message for r in caplog.records)


def test_report_frame_lists_every_bin():
    dist = CentralDistribution(center=0.0, spread=1.0)
    hist = Histogram.from_samples(np.linspace(-0.99, 0.99, 400), -1.0, 1.0, 8)
    frame = chi_squared_test(dist, hist).to_frame()
    assert list(frame.columns) == ["low", "high", "expected_probability", "observed", "expected_count"]
    assert len(frame) == 8
    assert frame["observed"].sum() == 400
    assert frame["expected_count"].sum() == pytest.approx(400.0, rel=1e-6)


def test_rejects_bad_alpha_and_empty_histogram():
    dist = CentralDistribution()
    with pytest.raises(VerificationError):
        chi_squared_test(dist, Histogram(-1.0, 1.0, 4))
    hist = Histogram.from_samples([0.0], -1.0, 1.0, 4)
    with pytest.raises(VerificationError):
        chi_squared_test(dist, hist, alpha=1.5)


@pytest.mark.parametrize(
    "dist",
    [
        CentralTailedDistribution(center=0.0, spread=1.0, tail_weight=0.01, tail_scale=1e4),
        AnyDistribution(center=0.0, spread=1e-6, separation=1.0, symmetry=0.3),
    ],
    ids=repr,
)
def test_narrow_peaks_in_wide_window_keep_probabilities_normalized(dist):
    report = goodness_of_fit(dist, NumpyUniformSource(seed=11), n_samples=2_000, n_bins=20, alpha=0.001)
    mass = sum(p for p, _ in report.bins) + report.residual_expected / report.n_samples
    assert mass == pytest.approx(1.0, abs=1e-9)
    assert max(p for p, _ in report.bins) > 0.4
