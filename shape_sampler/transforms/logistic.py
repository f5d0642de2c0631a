"""Logistic (logit) inverse-CDF transform and closed forms."""

from __future__ import annotations

import math

import numpy as np
from scipy.special import expit

from shape_sampler.exceptions import DomainError

# Variance of the standard logistic distribution.
LOGISTIC_VARIANCE = math.pi**2 / 3.0


def logit(u: float) -> float:
    """ln(u / (1 - u)); DomainError at the singular endpoints."""
    if u <= 0.0 or u >= 1.0:
        raise DomainError(f"logit undefined at u={u!r}")
    return math.log(u) - math.log1p(-u)


def logistic_inverse_cdf(u: float, loc: float, scale: float) -> float:
    return loc + scale * logit(u)


def logistic_pdf(x, loc: float, scale: float):
    z = np.abs((np.asarray(x, dtype=float) - loc) / scale)
    e = np.exp(-z)
    return e / (scale * (1.0 + e) ** 2)


def logistic_cdf(x, loc: float, scale: float):
    return expit((np.asarray(x, dtype=float) - loc) / scale)


__all__ = ["LOGISTIC_VARIANCE", "logistic_cdf", "logistic_inverse_cdf", "logistic_pdf", "logit"]
