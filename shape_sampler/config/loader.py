"""Config file loading with CLI > file > defaults precedence."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

from shape_sampler.exceptions import ConfigValidationError
from shape_sampler.utils.logging import get_logger

log = get_logger(__name__, component="config")


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        content = yaml.safe_load(path.read_text())
    except yaml.YAMLError as exc:
        raise ConfigValidationError(f"Invalid YAML in {path}: {exc}") from exc
    return content or {}


def _load_json(path: Path) -> Dict[str, Any]:
    try:
        return json.loads(path.read_text())
    except json.JSONDecodeError as exc:
        raise ConfigValidationError(f"Invalid JSON in {path}: {exc}") from exc


def load_config_file(path: Path) -> Dict[str, Any]:
    path = Path(path)
    if not path.exists():
        raise ConfigValidationError(f"Config file not found: {path}")
    if path.suffix.lower() in {".yml", ".yaml"}:
        data = _load_yaml(path)
    elif path.suffix.lower() == ".json":
        data = _load_json(path)
    else:
        raise ConfigValidationError(f"Unsupported config format: {path.suffix}")
    if not isinstance(data, dict):
        raise ConfigValidationError(f"Config root must be a mapping: {path}")
    return data


def load_config_with_precedence(
    path: Path | None,
    cli_values: Mapping[str, Any],
    defaults: Mapping[str, Any],
) -> Dict[str, Any]:
    """Merge defaults, then file values, then explicitly-set CLI values (None means unset).

    `params` mappings are merged key by key so a CLI override of one parameter
    keeps the others from the file.
    """

    merged: Dict[str, Any] = dict(defaults)
    sources = {key: "default" for key in merged}
    file_values = load_config_file(path) if path is not None else {}
    for layer, name in ((file_values, "file"), (cli_values, "cli")):
        for key, value in layer.items():
            if value is None:
                continue
            if key == "params" and isinstance(value, dict):
                merged["params"] = {**(merged.get("params") or {}), **value}
            else:
                merged[key] = value
            sources[key] = name
    log.debug("Resolved configuration", extra={"sources": sources})
    return merged


__all__ = ["load_config_file", "load_config_with_precedence"]
