import math

import numpy as np
import pytest
from scipy import stats

from shape_sampler.exceptions import DomainError
from shape_sampler.transforms.logistic import logistic_cdf, logistic_inverse_cdf, logistic_pdf, logit
from shape_sampler.transforms.normal import normal_cdf, normal_inverse_cdf, normal_pdf


@pytest.mark.parametrize("u", [0.0, 1.0, -0.1, 1.5])
def test_logit_rejects_singular_points(u):
    with pytest.raises(DomainError):
        logit(u)


def test_logit_matches_closed_form():
    for u in (1e-12, 0.2, 0.5, 0.8, 1 - 1e-12):
        assert logit(u) == pytest.approx(math.log(u / (1 - u)), rel=1e-9, abs=1e-12)


def test_logistic_closed_forms_match_scipy():
    xs = np.linspace(-10, 10, 41)
    np.testing.assert_allclose(logistic_pdf(xs, 1.5, 2.0), stats.logistic.pdf(xs, loc=1.5, scale=2.0), rtol=1e-10)
    np.testing.assert_allclose(logistic_cdf(xs, 1.5, 2.0), stats.logistic.cdf(xs, loc=1.5, scale=2.0), rtol=1e-10)
    assert logistic_inverse_cdf(0.5, 1.5, 2.0) == pytest.approx(1.5)


def test_logistic_pdf_has_no_overflow_far_in_tails():
    with np.errstate(over="raise"):
        values = logistic_pdf(np.array([-1e4, 1e4]), 0.0, 1.0)
    assert np.all(values == 0.0)


def test_normal_transform_matches_scipy():
    assert normal_inverse_cdf(0.975, 0.0, 2.0) == pytest.approx(2.0 * stats.norm.ppf(0.975))
    xs = np.linspace(-5, 5, 11)
    np.testing.assert_allclose(normal_pdf(xs, 0.5, 1.5), stats.norm.pdf(xs, loc=0.5, scale=1.5), rtol=1e-12)
    np.testing.assert_allclose(normal_cdf(xs, 0.5, 1.5), stats.norm.cdf(xs, loc=0.5, scale=1.5), rtol=1e-12)


def test_normal_transform_rejects_zero():
    with pytest.raises(DomainError):
        normal_inverse_cdf(0.0, 0.0, 1.0)
