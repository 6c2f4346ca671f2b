from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from keyed_store.config.models import StoreAppConfig


class ConfigError(ValueError):
    # Raised for invalid configuration (fail fast).
    pass


def load_yaml_config(path: Path) -> dict[str, object]:
    # Raw YAML loader; returns a mapping for validation.
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Config file {path} cannot be read: {exc}") from exc
    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Config file {path} is not valid YAML: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigError("Config root must be a mapping")
    return raw


def parse_config(raw: dict[str, object]) -> StoreAppConfig:
    try:
        return StoreAppConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


def load_config(path: Path) -> StoreAppConfig:
    return parse_config(load_yaml_config(path))
