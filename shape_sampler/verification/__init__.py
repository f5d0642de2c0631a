"""Statistical verification harness for the shape families."""

from shape_sampler.verification.batch import draw_batch
from shape_sampler.verification.collisions import collision_test, knuth_collision_test
from shape_sampler.verification.goodness_of_fit import chi_squared_test, goodness_of_fit
from shape_sampler.verification.histogram import Histogram
from shape_sampler.verification.integration import integrate_density
from shape_sampler.verification.models import (
    CollisionReport,
    GoodnessOfFitReport,
    KnuthCollisionReport,
    SymmetryReport,
)
from shape_sampler.verification.symmetry import symmetry_test

__all__ = [
    "CollisionReport",
    "GoodnessOfFitReport",
    "Histogram",
    "KnuthCollisionReport",
    "SymmetryReport",
    "chi_squared_test",
    "collision_test",
    "draw_batch",
    "goodness_of_fit",
    "integrate_density",
    "knuth_collision_test",
    "symmetry_test",
]
