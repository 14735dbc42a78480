"""YAML config loader with first-run bootstrap, env overrides and runtime get/set."""

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from raijin.config.defaults import LOCATION_ENV_OVERRIDES
from raijin.config.schema import AppConfig

logger = logging.getLogger(__name__)


def load_config(
    path: str | Path, environ: Mapping[str, str] | None = None
) -> AppConfig:
    """Load and validate config from a YAML file.

    LATITUDE, LONGITUDE and TIMEZONE in the environment take precedence over
    the file's location section.
    """
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    if environ is None:
        environ = os.environ
    location = dict(raw.get("location") or {})
    for env_key, field_name in LOCATION_ENV_OVERRIDES.items():
        value = environ.get(env_key)
        if value:
            location[field_name] = value
    if location:
        raw["location"] = location

    return AppConfig(**raw)


def ensure_config_file(path: str | Path) -> Path:
    """Write a default config to ``path`` unless one already exists."""
    path = Path(path).expanduser()
    if not path.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
        save_config(AppConfig(), path)
        logger.info("Wrote default config to %s", path)
    return path


def save_config(config: AppConfig, path: str | Path) -> None:
    data = json.loads(config.model_dump_json())
    with open(path, "w") as f:
        yaml.safe_dump(data, f, sort_keys=False)


def get_config_value(config: AppConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'location.latitude'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def set_config_value(config: AppConfig, dotted_key: str, value: Any) -> AppConfig:
    """Set a config value by dotted key path and re-validate.

    Returns a new AppConfig instance.
    """
    data = json.loads(config.model_dump_json())
    parts = dotted_key.split(".")
    target = data
    for part in parts[:-1]:
        if part not in target:
            raise KeyError(f"Config key not found: {dotted_key}")
        target = target[part]
    if parts[-1] not in target:
        raise KeyError(f"Config key not found: {dotted_key}")
    # Attempt type coercion for common cases
    old_value = target[parts[-1]]
    if isinstance(old_value, int) and isinstance(value, str):
        value = int(value)
    elif isinstance(old_value, float) and isinstance(value, str):
        value = float(value)
    target[parts[-1]] = value
    return AppConfig(**data)
