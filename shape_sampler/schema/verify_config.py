"""Verification run configuration schema and validation."""

from __future__ import annotations

from dataclasses import dataclass, field
from numbers import Integral
from typing import Any, Dict, Optional

from shape_sampler.distributions.validation import require_open_unit, require_real
from shape_sampler.exceptions import ConfigConflictError, ConfigValidationError


def _require_int(name: str, value: object, minimum: Optional[int] = None) -> int:
    # bool is Integral; reject it anyway
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise ConfigValidationError(f"{name} must be an integer, got {value!r}")
    value = int(value)
    if minimum is not None and value < minimum:
        raise ConfigValidationError(f"{name} must be >= {minimum}, got {value!r}")
    return value


@dataclass(slots=True)
class VerificationConfig:
    distribution: str
    params: Dict[str, Any] = field(default_factory=dict)
    seed: int = 42
    n_samples: int = 10_000
    n_bins: int = 20
    alpha: float = 0.01
    collision_samples: int = 5_000
    n_buckets: int = 64
    confidence: float = 0.95
    low: Optional[float] = None
    high: Optional[float] = None

    def __post_init__(self) -> None:
        if not isinstance(self.distribution, str) or not self.distribution.strip():
            raise ConfigValidationError("distribution is required")
        if not isinstance(self.params, dict):
            raise ConfigValidationError("params must be a mapping")
        if self.seed is None:
            raise ConfigValidationError("seed is required for reproducibility")
        self.seed = _require_int("seed", self.seed)
        self.n_samples = _require_int("n_samples", self.n_samples, minimum=1)
        self.n_bins = _require_int("n_bins", self.n_bins, minimum=2)
        self.alpha = require_open_unit("alpha", self.alpha)
        self.collision_samples = _require_int("collision_samples", self.collision_samples, minimum=2)
        self.n_buckets = _require_int("n_buckets", self.n_buckets, minimum=2)
        self.confidence = require_open_unit("confidence", self.confidence)
        if self.low is not None:
            self.low = require_real("low", self.low)
        if self.high is not None:
            self.high = require_real("high", self.high)
        if self.low is not None and self.high is not None and self.low >= self.high:
            raise ConfigConflictError("low must be < high when both are set")

    @classmethod
    def from_dict(cls, data: dict) -> "VerificationConfig":
        known = set(cls.__dataclass_fields__)
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigValidationError(f"Unknown configuration keys: {', '.join(unknown)}")
        return cls(**data)

    def to_dict(self) -> dict:
        return {
            "distribution": self.distribution,
            "params": dict(self.params),
            "seed": self.seed,
            "n_samples": self.n_samples,
            "n_bins": self.n_bins,
            "alpha": self.alpha,
            "collision_samples": self.collision_samples,
            "n_buckets": self.n_buckets,
            "confidence": self.confidence,
            "low": self.low,
            "high": self.high,
        }


__all__ = ["VerificationConfig"]
