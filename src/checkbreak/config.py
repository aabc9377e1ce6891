"""Configuration file loading.

The configuration lives in the working path as YAML::

    excluded:
      path:
        - vendor/
        - docs/
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = ".break.yml"


class ConfigurationError(RuntimeError):
    """The configuration file exists but cannot be used."""


class Excluded(BaseModel):
    """Exclusion rules."""

    path: list[str] = []


class Config(BaseModel):
    """Run configuration, read-only once loaded."""

    model_config = {"frozen": True}

    excluded: Excluded = Excluded()

    @property
    def excluded_paths(self) -> list[str]:
        return list(self.excluded.path)


def load_configuration(
    working_path: str | Path,
    filename: str = DEFAULT_CONFIG_FILENAME,
) -> Config | None:
    """Load the configuration file from *working_path*.

    Returns None when there is no such file.
    """
    path = Path(working_path) / filename
    if not path.is_file():
        logger.debug("No configuration at %s", path)
        return None

    try:
        data = yaml.safe_load(path.read_text()) or {}
    except (OSError, yaml.YAMLError) as exc:
        msg = f"Unreadable configuration {path}: {exc}"
        raise ConfigurationError(msg) from exc

    if not isinstance(data, dict):
        msg = f"Configuration {path} must be a mapping"
        raise ConfigurationError(msg)

    # An empty `excluded:` or `path:` key parses to None
    if data.get("excluded") is None:
        data.pop("excluded", None)
    elif isinstance(data["excluded"], dict) and data["excluded"].get("path") is None:
        data["excluded"].pop("path", None)

    try:
        return Config.model_validate(data)
    except ValidationError as exc:
        msg = f"Invalid configuration {path}: {exc}"
        raise ConfigurationError(msg) from exc
