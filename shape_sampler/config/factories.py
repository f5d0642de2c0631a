"""Deferred construction of configured components."""

from __future__ import annotations

from typing import Any, Callable, Dict, Generic, TypeVar

from shape_sampler.utils.logging import get_logger

T = TypeVar("T")

log = get_logger(__name__, component="factory")


class FactoryBase(Generic[T]):
    """Holds a builder so validation errors surface at `create()`, not at lookup."""

    def __init__(self, name: str, builder: Callable[[], T]) -> None:
        self.name = name
        self.builder = builder

    def create(self) -> T:
        component = self.builder()
        describe = getattr(component, "describe", None)
        details: Dict[str, Any] = describe() if callable(describe) else {}
        log.info(
            "Component loaded",
            extra={
                "type": component.__class__.__name__,
                "factory": self.name,
                "shape_kind": details.get("shape_kind"),
                "params": {k: v for k, v in details.items() if k != "shape_kind"},
            },
        )
        return component


__all__ = ["FactoryBase"]
