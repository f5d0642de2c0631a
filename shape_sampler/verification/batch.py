"""Sample batch generation for the verifiers."""

from __future__ import annotations

import numpy as np

from shape_sampler.exceptions import InternalError, VerificationError
from shape_sampler.interfaces.distribution import ShapeDistribution
from shape_sampler.interfaces.uniform_source import UniformSource
from shape_sampler.utils.profiling import track_time


def draw_batch(distribution: ShapeDistribution, source: UniformSource, n_samples: int) -> np.ndarray:
    """Draw `n_samples` independent values; every one must be finite."""

    if n_samples <= 0:
        raise VerificationError("n_samples must be > 0")
    with track_time("draw_batch", shape_kind=distribution.shape_kind, n_samples=n_samples):
        batch = distribution.sample_batch(source, n_samples)
    if not np.isfinite(batch).all():
        raise InternalError(f"{distribution.shape_kind} produced non-finite samples")
    return batch


__all__ = ["draw_batch"]
