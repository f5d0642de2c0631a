"""Verifier report models."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Tuple

import pandas as pd


@dataclass
class GoodnessOfFitReport:
    statistic: float
    critical_value: float
    passed: bool
    bins: List[Tuple[float, int]]
    edges: List[float]
    p_value: float
    degrees_of_freedom: int
    alpha: float
    n_samples: int
    residual_expected: float
    residual_observed: int
    residual_in_statistic: bool
    sparse_bins: int = 0

    def to_frame(self) -> pd.DataFrame:
        """Bin table with expected probabilities, expected counts and observed counts."""

        expected, observed = zip(*self.bins) if self.bins else ((), ())
        frame = pd.DataFrame(
            {
                "low": self.edges[:-1],
                "high": self.edges[1:],
                "expected_probability": expected,
                "observed": observed,
            }
        )
        frame["expected_count"] = frame["expected_probability"] * self.n_samples
        return frame

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class CollisionReport:
    observed_collisions: int
    expected_range: Tuple[float, float]
    passed: bool
    expected_collisions: float
    std_collisions: float
    confidence: float
    n_samples: int
    bucket_probabilities: List[float] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class KnuthCollisionReport:
    mean_p_value: float
    threshold: float
    passed: bool
    urns: int
    balls: int
    collisions: List[int] = field(default_factory=list)
    p_values: List[float] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class SymmetryReport:
    statistic: float
    p_value: float
    alpha: float
    passed: bool
    center: float
    n_samples: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["CollisionReport", "GoodnessOfFitReport", "KnuthCollisionReport", "SymmetryReport"]
