"""Configuration loading for Tailspin."""

from .loader import ConfigError, load_config, load_web_config, load_yaml
from .models import WebConfig

__all__ = ["ConfigError", "WebConfig", "load_config", "load_web_config", "load_yaml"]
