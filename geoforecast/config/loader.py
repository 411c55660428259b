"""YAML config loader with dotted-key lookup."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel

from geoforecast.config.schema import ServiceConfig


def load_config(path: str | Path | None = None) -> ServiceConfig:
    """Load and validate config from a YAML file.

    A missing path or an empty file yields the built-in defaults.
    """
    if path is None:
        return ServiceConfig()

    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    return ServiceConfig(**raw)


def get_config_value(config: ServiceConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'geocoder.benchmark'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if isinstance(obj, list):
            obj = obj[int(part)]
        elif isinstance(obj, dict):
            obj = obj[part]
        elif isinstance(obj, BaseModel) and part in type(obj).model_fields:
            obj = getattr(obj, part)
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj
