import math

import numpy as np
import pytest

from shape_sampler.exceptions import InternalError, RootFindError
from shape_sampler.transforms import raised_cosine
from shape_sampler.transforms.raised_cosine import (
    ROOT_TOLERANCE,
    invert_raised_cosine,
    raised_cosine_cdf,
    raised_cosine_inverse_cdf,
    raised_cosine_pdf,
)


def _normalized_cdf(t: float) -> float:
    return (t + math.sin(t)) / (2.0 * math.pi) + 0.5


def test_inversion_hits_center_and_edges():
    assert invert_raised_cosine(0.5) == 0.0
    assert invert_raised_cosine(0.0) == -math.pi
    assert -math.pi < invert_raised_cosine(1.0 - 2.0**-53) <= math.pi


@pytest.mark.parametrize("u", [0.01, 0.1, 0.25, 0.4, 0.49, 0.51, 0.6, 0.75, 0.9, 0.99])
def test_inversion_within_tolerance_in_interior(u):
    t = invert_raised_cosine(u)
    assert _normalized_cdf(t - ROOT_TOLERANCE) <= u <= _normalized_cdf(t + ROOT_TOLERANCE)


@pytest.mark.parametrize("u", [2.0**-53, 2.0**-40, 2.0**-30, 2.0**-20])
def test_inversion_is_accurate_near_support_edges(u):
    # Near t = -π the CDF behaves like (π + t)^3 / (12π), so π + t ≈ (12πu)^(1/3).
    t = invert_raised_cosine(u)
    assert t + math.pi == pytest.approx((12.0 * math.pi * u) ** (1.0 / 3.0), rel=1e-3)
    assert invert_raised_cosine(1.0 - u) == pytest.approx(-t, abs=ROOT_TOLERANCE)


def test_inverse_cdf_roundtrips_through_cdf():
    grid = np.linspace(0.001, 0.999, 101)
    xs = np.array([raised_cosine_inverse_cdf(u, 2.0, 0.5) for u in grid])
    assert np.all(xs >= 1.5) and np.all(xs <= 2.5)
    np.testing.assert_allclose(raised_cosine_cdf(xs, 2.0, 0.5), grid, atol=1e-9)


def test_pdf_is_zero_outside_support_and_peaks_at_center():
    assert raised_cosine_pdf(1.01, 0.0, 1.0) == 0.0
    assert raised_cosine_pdf(-3.0, 0.0, 1.0) == 0.0
    assert raised_cosine_pdf(0.0, 0.0, 2.0) == pytest.approx(0.5)
    assert raised_cosine_cdf(-5.0, 0.0, 1.0) == 0.0
    assert raised_cosine_cdf(5.0, 0.0, 1.0) == 1.0


def test_iteration_cap_raises_root_find_error(monkeypatch):
    monkeypatch.setattr(raised_cosine, "ROOT_MAX_ITERATIONS", 1)
    with pytest.raises(RootFindError) as excinfo:
        invert_raised_cosine(0.3)
    assert excinfo.value.iterations == 1
    assert isinstance(excinfo.value, InternalError)
