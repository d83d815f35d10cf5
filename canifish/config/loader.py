"""YAML config loader with runtime get/set."""

import hashlib
import json
from pathlib import Path
from typing import Any

import yaml

from canifish.config.defaults import DEFAULT_LOCATION
from canifish.config.schema import CanIFishConfig


class ConfigError(Exception):
    """Raised when required runtime configuration is missing."""


def load_config(path: str | Path) -> CanIFishConfig:
    """Load and validate config from a YAML file.

    If no location is specified in the YAML, injects DEFAULT_LOCATION.
    """
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    if not raw.get("location"):
        raw["location"] = DEFAULT_LOCATION.model_dump()

    return CanIFishConfig(**raw)


def config_hash(config: CanIFishConfig) -> str:
    """Compute a deterministic SHA256 hash of the config."""
    data = config.model_dump_json(indent=None)
    return hashlib.sha256(data.encode()).hexdigest()[:16]


def get_config_value(config: CanIFishConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'thresholds.tide_height_m.pass_max'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if isinstance(obj, dict):
            obj = obj[part]
        elif hasattr(obj, part):
            obj = getattr(obj, part)
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def set_config_value(config: CanIFishConfig, dotted_key: str, value: Any) -> CanIFishConfig:
    """Set a config value by dotted key path and re-validate.

    Returns a new CanIFishConfig instance.
    """
    data = json.loads(config.model_dump_json())
    parts = dotted_key.split(".")
    target = data
    for part in parts[:-1]:
        target = target[part]
    # Attempt type coercion for common cases
    old_value = target.get(parts[-1])
    if isinstance(old_value, bool) and isinstance(value, str):
        value = value.lower() in ("1", "true", "yes", "on")
    elif isinstance(old_value, int) and isinstance(value, str):
        value = int(value)
    elif isinstance(old_value, float) and isinstance(value, str):
        value = float(value)
    elif isinstance(old_value, list) and isinstance(value, str):
        value = [v.strip() for v in value.split(",") if v.strip()]
    target[parts[-1]] = value
    return CanIFishConfig(**data)
