"""Draw helpers shared by the shape transforms: validation, retries and the Bernoulli gate."""

from __future__ import annotations

import math
from typing import Callable, TypeVar

from shape_sampler.exceptions import DomainError, InternalError
from shape_sampler.interfaces.uniform_source import UniformSource
from shape_sampler.utils.logging import get_logger

T = TypeVar("T")

MAX_DOMAIN_RETRIES = 8

log = get_logger(__name__, component="transforms")


def check_uniform(u: float) -> float:
    """Return `u` unchanged if it honours the [0, 1) source contract."""
    if not math.isfinite(u) or u < 0.0 or u >= 1.0:
        raise DomainError(f"uniform draw outside [0, 1): {u!r}")
    return u


def ensure_finite(value: float) -> float:
    """Reject transform outputs that overflowed the double range."""
    if not math.isfinite(value):
        raise DomainError(f"transform produced a non-finite value: {value!r}")
    return value


def draw_with_retry(
    source: UniformSource,
    transform: Callable[[float], T],
    *,
    label: str,
    retries: int = MAX_DOMAIN_RETRIES,
) -> T:
    """Apply `transform` to a fresh uniform, retrying on DomainError up to `retries` times."""

    last: DomainError | None = None
    for attempt in range(1, retries + 1):
        try:
            return transform(check_uniform(float(source.next_uniform())))
        except DomainError as exc:
            last = exc
            log.debug("Domain error, redrawing", extra={"draw": label, "attempt": attempt, "error": str(exc)})
    log.error("Uniform source exhausted domain retries", extra={"draw": label, "retries": retries})
    raise InternalError(
        f"{label} draw failed {retries} consecutive times; the uniform source looks broken"
    ) from last


def bernoulli_gate(source: UniformSource, probability: float, *, label: str = "gate") -> bool:
    """Consume one dedicated uniform and return True with the given probability."""
    return draw_with_retry(source, lambda u: u < probability, label=label)


__all__ = ["MAX_DOMAIN_RETRIES", "bernoulli_gate", "check_uniform", "draw_with_retry", "ensure_finite"]
