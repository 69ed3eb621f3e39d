"""Configuration models and loading for hookbus."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field

from hookbus.dispatcher import DEFAULT_PRIORITY

CONFIG_FILENAME = ".hookbus.yaml"


class DispatcherConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    default_priority: int = DEFAULT_PRIORITY


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
    trace_dispatch: bool = False


class HookBinding(BaseModel):
    """A callback referenced as ``package.module:attribute``."""

    model_config = ConfigDict(extra="forbid")

    tag: str = Field(min_length=1)
    callback: str = Field(pattern=r"^[\w.]+:[\w.]+$")
    priority: int | None = None


class HookbusConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    dispatcher: DispatcherConfig = Field(default_factory=DispatcherConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    hooks: list[HookBinding] = Field(default_factory=list)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Overlay one config layer on another.

    Nested sections such as ``dispatcher`` and ``logging`` merge key by key so
    a project file can change one field of a section; a ``hooks`` list in the
    higher layer replaces the lower one instead of appending to it.
    """
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_yaml_dict(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    data = yaml.safe_load(path.read_text())
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"YAML at {path} must decode to a mapping")
    return data


def load_effective_config(
    project_path: str | Path,
    system_defaults: dict[str, Any] | None = None,
    runtime_override: dict[str, Any] | None = None,
) -> HookbusConfig:
    """Load config with precedence runtime > project .hookbus.yaml > system.

    Mappings are merged key by key; lists such as ``hooks`` are replaced
    wholesale by the higher-precedence layer.
    """
    project_config = load_yaml_dict(Path(project_path) / CONFIG_FILENAME)

    merged: dict[str, Any] = {}
    for layer in (system_defaults, project_config, runtime_override):
        if layer:
            merged = _deep_merge(merged, layer)

    return HookbusConfig.model_validate(merged)
