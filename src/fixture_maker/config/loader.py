from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from fixture_maker.config.models import AppConfig


# ConfigError is raised for invalid configuration (fail fast).
class ConfigError(ValueError):
    pass


def load_config(path: Path) -> AppConfig:
    # YAML loader for fixture files; structure is validated by the pydantic models.
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    return parse_config(raw)


def parse_config(raw: Any) -> AppConfig:
    if not isinstance(raw, dict):
        raise ConfigError("Config root must be a mapping")
    try:
        return AppConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(f"Invalid fixture config: {exc}") from exc
