"""Shape distribution variants.

`Distribution` is the closed union of the four families; each case carries only
the parameters valid for its shape.
"""

from typing import Union

from shape_sampler.distributions.any import AnyDistribution
from shape_sampler.distributions.any_tailed import AnyTailedDistribution
from shape_sampler.distributions.central import CentralDistribution
from shape_sampler.distributions.central_tailed import CentralTailedDistribution
from shape_sampler.distributions.factory import distribution_factory, get_distribution

Distribution = Union[AnyDistribution, AnyTailedDistribution, CentralDistribution, CentralTailedDistribution]

__all__ = [
    "AnyDistribution",
    "AnyTailedDistribution",
    "CentralDistribution",
    "CentralTailedDistribution",
    "Distribution",
    "distribution_factory",
    "get_distribution",
]
