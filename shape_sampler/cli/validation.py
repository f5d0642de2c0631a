"""CLI validation helpers."""

from __future__ import annotations

from typing import Dict, Iterable

from shape_sampler.exceptions import ConfigValidationError


def require_positive(name: str, value: int | float) -> None:
    if value <= 0:
        raise ConfigValidationError(f"{name} must be > 0")


def parse_params(pairs: Iterable[str] | None) -> Dict[str, float]:
    """Parse repeated `--param key=value` flags into a float mapping."""

    params: Dict[str, float] = {}
    for pair in pairs or []:
        key, sep, raw = pair.partition("=")
        key = key.strip()
        if not sep or not key:
            raise ConfigValidationError(f"Parameter must look like key=value, got {pair!r}")
        try:
            params[key] = float(raw)
        except ValueError:
            raise ConfigValidationError(f"Parameter {key} must be numeric, got {raw!r}") from None
    return params


__all__ = ["parse_params", "require_positive"]
