import math

import pytest

from shape_sampler.distributions import (
    AnyDistribution,
    AnyTailedDistribution,
    CentralDistribution,
    CentralTailedDistribution,
)
from shape_sampler.exceptions import ConfigError, ConfigValidationError

ALL_VARIANTS = [AnyDistribution, AnyTailedDistribution, CentralDistribution, CentralTailedDistribution]
TAILED_VARIANTS = [AnyTailedDistribution, CentralTailedDistribution]
LOBED_VARIANTS = [AnyDistribution, AnyTailedDistribution]


@pytest.mark.parametrize("cls", ALL_VARIANTS)
@pytest.mark.parametrize("spread", [0.0, -1.0, math.nan, math.inf])
def test_rejects_non_positive_spread(cls, spread):
    with pytest.raises(ConfigError):
        cls(center=0.0, spread=spread)


@pytest.mark.parametrize("cls", ALL_VARIANTS)
@pytest.mark.parametrize("center", [math.nan, -math.inf, "0", True, None])
def test_rejects_non_real_center(cls, center):
    with pytest.raises(ConfigValidationError):
        cls(center=center, spread=1.0)


@pytest.mark.parametrize("cls", TAILED_VARIANTS)
@pytest.mark.parametrize("tail_weight", [0.0, 1.0, -0.2, 1.5])
def test_rejects_tail_weight_outside_open_unit(cls, tail_weight):
    with pytest.raises(ConfigValidationError, match="tail_weight"):
        cls(tail_weight=tail_weight)


@pytest.mark.parametrize("cls", TAILED_VARIANTS)
@pytest.mark.parametrize("tail_scale", [1.0, 0.5, -3.0])
def test_rejects_tail_scale_that_does_not_inflate(cls, tail_scale):
    with pytest.raises(ConfigValidationError, match="tail_scale"):
        cls(tail_scale=tail_scale)


@pytest.mark.parametrize("cls", LOBED_VARIANTS)
def test_rejects_negative_separation_and_bad_symmetry(cls):
    with pytest.raises(ConfigValidationError, match="separation"):
        cls(separation=-0.1)
    with pytest.raises(ConfigValidationError, match="symmetry"):
        cls(symmetry=1.01)


@pytest.mark.parametrize("cls", ALL_VARIANTS)
def test_rejects_windows_that_overflow(cls):
    with pytest.raises(ConfigValidationError):
        cls(center=1e308, spread=1e308)


def test_parameters_are_coerced_to_float_and_frozen():
    dist = CentralDistribution(center=1, spread=2)
    assert isinstance(dist.center, float) and dist.spread == 2.0
    with pytest.raises(AttributeError):
        dist.spread = 3.0  # type: ignore[misc]


def test_describe_reports_kind_and_parameters():
    described = AnyTailedDistribution(center=1.0, spread=0.5, tail_weight=0.2).describe()
    assert described["shape_kind"] == "any_tailed"
    assert described["tail_weight"] == 0.2
    assert described["tail_scale"] == 3.0


def test_defaults_and_domains():
    assert CentralDistribution(center=2.0, spread=0.5).domain == (1.5, 2.5)
    assert AnyDistribution().domain == (-math.inf, math.inf)
    tailed = CentralTailedDistribution(center=1.0, spread=2.0)
    assert tailed.domain == (-math.inf, math.inf)
    assert tailed.base_domain == (-1.0, 3.0)
    assert tailed.tail_spread == pytest.approx(6.0)
