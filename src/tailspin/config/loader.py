"""YAML configuration file loading with Pydantic validation."""

from pathlib import Path
from typing import Any, TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from .models import WebConfig

T = TypeVar("T", bound=BaseModel)


class ConfigError(Exception):
    """Raised when configuration loading or validation fails."""


def load_yaml(path: Path) -> Any:
    """Load a YAML file and return its parsed contents.

    Args:
        path: Path to the YAML file.

    Returns:
        Parsed YAML contents, or an empty dict for an empty file.

    Raises:
        ConfigError: If the file cannot be read or parsed.
    """
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
            if data is None:
                return {}
            return data
    except FileNotFoundError:
        raise ConfigError(f"Configuration file not found: {path}") from None
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e


def load_config(path: Path, model_class: type[T]) -> T:
    """Load and validate a YAML config file against a Pydantic model.

    Raises:
        ConfigError: If the file is not a mapping or validation fails.
    """
    data = load_yaml(path)
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration in {path} must be a mapping")
    try:
        return model_class(**data)
    except ValidationError as e:
        raise ConfigError(f"Configuration validation failed for {path}: {e}") from e


def load_web_config(path: Path | None = None) -> WebConfig:
    """Load the web configuration, or the defaults when no file is given.

    A relative ``seed_file`` is resolved against the config file's directory.
    """
    if path is None:
        return WebConfig()

    config = load_config(path, WebConfig)
    if config.seed_file is not None and not config.seed_file.is_absolute():
        config.seed_file = Path(path).parent / config.seed_file
    return config
