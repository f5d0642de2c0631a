"""Factory for shape distributions."""

from __future__ import annotations

from typing import Any, Dict, Type

from shape_sampler.config.factories import FactoryBase
from shape_sampler.distributions.any import AnyDistribution
from shape_sampler.distributions.any_tailed import AnyTailedDistribution
from shape_sampler.distributions.central import CentralDistribution
from shape_sampler.distributions.central_tailed import CentralTailedDistribution
from shape_sampler.exceptions import ConfigValidationError, DependencyError
from shape_sampler.interfaces.distribution import ShapeDistribution

_ALIASES: Dict[str, Type[ShapeDistribution]] = {
    "any": AnyDistribution,
    "logistic": AnyDistribution,
    "any_tailed": AnyTailedDistribution,
    "anytailed": AnyTailedDistribution,
    "central": CentralDistribution,
    "raised_cosine": CentralDistribution,
    "central_tailed": CentralTailedDistribution,
    "centraltailed": CentralTailedDistribution,
}


def _normalize(name: str) -> str:
    return name.strip().lower().replace("-", "_")


def resolve_distribution_class(name: str) -> Type[ShapeDistribution]:
    try:
        return _ALIASES[_normalize(name)]
    except KeyError:
        raise DependencyError(f"Unknown distribution: {name}") from None


def get_distribution(name: str, **params: Any) -> ShapeDistribution:
    cls = resolve_distribution_class(name)
    try:
        return cls(**params)
    except TypeError as exc:
        raise ConfigValidationError(f"Invalid parameters for {cls.shape_kind}: {exc}") from exc


def distribution_factory(name: str, **params: Any) -> FactoryBase[ShapeDistribution]:
    return FactoryBase(name=name, builder=lambda: get_distribution(name, **params))


__all__ = ["distribution_factory", "get_distribution", "resolve_distribution_class"]
