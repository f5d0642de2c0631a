"""Uniform source contract consumed by every shape transform."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class UniformSource(Protocol):
    """Supplies independent uniform draws in [0, 1).

    Successive calls must be independent; callers never reuse a draw across two
    logical decisions (gate, shape, lobe).
    """

    def next_uniform(self) -> float:
        ...


__all__ = ["UniformSource"]
