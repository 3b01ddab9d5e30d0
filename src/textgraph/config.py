"""Render configuration for textgraph.

Options are an immutable pydantic model. Per-call overrides are merged
onto ``DEFAULT_CONFIG`` to produce a new model; nothing is mutated in place.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from textgraph.exceptions import ConfigError

CONFIG_FILE = "textgraph.json"


class RenderConfig(BaseModel):
    """Glyphs, canvas bounds and label switches for one render call."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    node_char: str = Field(default="●", min_length=1)
    edge_char: str = Field(default="─", min_length=1)
    vertex_char: str = Field(default="│", min_length=1)
    corner_char: str = Field(default="└", min_length=1)
    max_width: int = Field(default=80, ge=1)
    max_height: int = Field(default=20, ge=1)
    show_properties: bool = True
    show_labels: bool = True


DEFAULT_CONFIG = RenderConfig()

ConfigOverrides = Mapping[str, Any] | RenderConfig | None


def merge_config(
    overrides: ConfigOverrides = None, base: RenderConfig = DEFAULT_CONFIG
) -> RenderConfig:
    """Merge caller overrides onto `base` and return a new config."""
    if overrides is None:
        return base
    if isinstance(overrides, RenderConfig):
        return overrides
    data = base.model_dump()
    data.update(overrides)
    try:
        return RenderConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid render options: {e}") from e


def load_config(path: str | Path) -> RenderConfig:
    """Load a JSON object of overrides from `path` and merge onto the defaults."""
    config_path = Path(path)
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        raise ConfigError(f"Config file is not valid UTF-8: {config_path}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Config file is not valid JSON: {config_path}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a JSON object: {config_path}")
    return merge_config(data)


def save_config(path: str | Path, config: RenderConfig) -> None:
    """Save a config as JSON."""
    config_path = Path(path)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(
        json.dumps(config.model_dump(), indent=2, ensure_ascii=False), encoding="utf-8"
    )


def set_config_value(config: RenderConfig, key: str, value: Any) -> RenderConfig:
    """Return a copy of `config` with a single option replaced."""
    if key not in RenderConfig.model_fields:
        raise KeyError(f"Invalid config key: {key}")
    return merge_config({key: value}, base=config)
