"""Parameter validation for distribution variants.

Every check raises ConfigValidationError naming the offending parameter; values
are never clamped into range.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Iterable

from shape_sampler.exceptions import ConfigValidationError


def require_real(name: str, value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ConfigValidationError(f"{name} must be a real number, got {value!r}")
    value = float(value)
    if not math.isfinite(value):
        raise ConfigValidationError(f"{name} must be finite, got {value!r}")
    return value


def require_positive(name: str, value: object) -> float:
    value = require_real(name, value)
    if value <= 0.0:
        raise ConfigValidationError(f"{name} must be > 0, got {value!r}")
    return value


def require_non_negative(name: str, value: object) -> float:
    value = require_real(name, value)
    if value < 0.0:
        raise ConfigValidationError(f"{name} must be >= 0, got {value!r}")
    return value


def require_open_unit(name: str, value: object) -> float:
    value = require_real(name, value)
    if not 0.0 < value < 1.0:
        raise ConfigValidationError(f"{name} must satisfy 0 < {name} < 1, got {value!r}")
    return value


def require_closed_unit(name: str, value: object) -> float:
    value = require_real(name, value)
    if not 0.0 <= value <= 1.0:
        raise ConfigValidationError(f"{name} must be within [0, 1], got {value!r}")
    return value


def require_inflation(name: str, value: object) -> float:
    value = require_real(name, value)
    if value <= 1.0:
        raise ConfigValidationError(f"{name} must be > 1 to inflate the tail, got {value!r}")
    return value


def require_representable(bounds: Iterable[float]) -> None:
    """Raise if the derived sampling window overflows the double range."""
    if not all(math.isfinite(b) for b in bounds):
        raise ConfigValidationError("parameters overflow the representable double range")


__all__ = [
    "require_closed_unit",
    "require_inflation",
    "require_non_negative",
    "require_open_unit",
    "require_positive",
    "require_real",
    "require_representable",
]
