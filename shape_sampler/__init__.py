"""Configurable bounded-shape sampling engine with a statistical verification harness."""

from shape_sampler.distributions import (
    AnyDistribution,
    AnyTailedDistribution,
    CentralDistribution,
    CentralTailedDistribution,
    Distribution,
    get_distribution,
)
from shape_sampler.exceptions import ConfigError, DomainError, InternalError, ShapeSamplerError
from shape_sampler.interfaces.uniform_source import UniformSource
from shape_sampler.sources.numpy_source import NumpyUniformSource

__version__ = "0.1.0"

__all__ = [
    "AnyDistribution",
    "AnyTailedDistribution",
    "CentralDistribution",
    "CentralTailedDistribution",
    "ConfigError",
    "Distribution",
    "DomainError",
    "InternalError",
    "NumpyUniformSource",
    "ShapeSamplerError",
    "UniformSource",
    "get_distribution",
]
