"""Normal inverse-CDF transform used by the central tail branch."""

from __future__ import annotations

import math

import numpy as np
from scipy.special import ndtr, ndtri

from shape_sampler.exceptions import DomainError

_INV_SQRT_2PI = 1.0 / math.sqrt(2.0 * math.pi)


def normal_inverse_cdf(u: float, loc: float, scale: float) -> float:
    if u <= 0.0 or u >= 1.0:
        raise DomainError(f"inverse normal undefined at u={u!r}")
    return loc + scale * float(ndtri(u))


def normal_pdf(x, loc: float, scale: float):
    z = (np.asarray(x, dtype=float) - loc) / scale
    return _INV_SQRT_2PI * np.exp(-0.5 * z * z) / scale


def normal_cdf(x, loc: float, scale: float):
    return ndtr((np.asarray(x, dtype=float) - loc) / scale)


__all__ = ["normal_cdf", "normal_inverse_cdf", "normal_pdf"]
