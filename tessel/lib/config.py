"""Configuration management for tessel.

Schema of tessel.yaml (every key optional):
- directories: where components, pages and assets live, and where output goes
- watch: rebuild on changes after the first build
- verbose: debug logging
- watch_interval: seconds between file-system polls in watch mode
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from .errors import ConfigError

CONFIG_FILE_NAMES = ("tessel.yaml", "tessel.yml", ".tesselrc.json", ".tesselrc")


class DirectoriesConfig(BaseModel):
    """Source and output directories, relative to the project root."""

    components: str = Field(default="src/components/", description="Component fragments")
    pages: str = Field(default="src/pages/", description="Page templates")
    assets: str = Field(default="src/assets/", description="Static files copied as-is")
    output: str = Field(default="public/", description="Build output")


class TesselConfig(BaseModel):
    """Main tessel.yaml configuration."""

    directories: DirectoriesConfig = Field(default_factory=DirectoriesConfig)
    watch: bool = Field(default=False, description="Keep rebuilding on changes")
    verbose: bool = Field(default=False, description="Enable debug logging")
    watch_interval: float = Field(
        default=0.5, gt=0, description="Seconds between polls in watch mode"
    )


def find_config_file(cwd: Optional[Path] = None) -> Optional[Path]:
    """Return the first known config file in `cwd`, if any."""
    cwd = cwd or Path.cwd()
    for file_name in CONFIG_FILE_NAMES:
        candidate = cwd / file_name
        if candidate.is_file():
            return candidate
    return None


def load_config(path: Optional[Path] = None, cwd: Optional[Path] = None) -> TesselConfig:
    """Load configuration from `path`, or from the first config file in `cwd`.

    With no explicit path and no config file, all defaults apply.

    Raises:
        ConfigError: If the file is missing (explicit path), unparsable or invalid.
    """
    if path is None:
        path = find_config_file(cwd)
        if path is None:
            return TesselConfig()
    elif not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Could not load config from {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    try:
        return TesselConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config in {path}: {e}") from e


def save_config(config: TesselConfig, path: Path) -> None:
    """Save config as YAML."""
    path.parent.mkdir(parents=True, exist_ok=True)

    data = config.model_dump()

    with open(path, "w") as f:
        yaml.safe_dump(data, f, sort_keys=False, default_flow_style=False)


def get_value(config: TesselConfig, key: str) -> Any:
    """Look up a dotted key like ``directories.pages``; None if unknown."""
    value: Any = config.model_dump()
    for part in key.split("."):
        if isinstance(value, dict) and part in value:
            value = value[part]
        else:
            return None
    return value


def resolve_dir(config: TesselConfig, key: str, root: Path) -> Path:
    """Resolve one of the configured directories against the project root."""
    value = getattr(config.directories, key)
    return root / value
