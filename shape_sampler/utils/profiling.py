"""Timing helpers for verifier batches."""

from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from shape_sampler.utils.logging import get_logger

log = get_logger(__name__, component="profiling")


@dataclass
class Timing:
    wall: float
    cpu: float


def _now() -> Timing:
    return Timing(wall=time.perf_counter(), cpu=time.process_time())


@contextmanager
def track_time(name: str, *, warn_budget: float | None = None, **context) -> Iterator[Timing]:
    """Log wall/cpu time of the wrapped block; warn when `warn_budget` seconds is exceeded.

    Extra keyword arguments are attached to the record. When they include
    `n_samples` the record also carries the draw throughput.
    """

    start = _now()
    try:
        yield start
    finally:
        end = _now()
        wall_elapsed = end.wall - start.wall
        extra = {
            "segment": name,
            "duration_ms": round(wall_elapsed * 1000.0, 3),
            "cpu_seconds": round(end.cpu - start.cpu, 4),
            **context,
        }
        n_samples = context.get("n_samples")
        if n_samples and wall_elapsed > 0.0:
            extra["samples_per_second"] = round(n_samples / wall_elapsed, 1)
        if warn_budget is not None and wall_elapsed >= warn_budget:
            log.warning("Performance budget exceeded", extra=extra)
        else:
            log.info("Segment timing", extra=extra)


__all__ = ["Timing", "track_time"]
