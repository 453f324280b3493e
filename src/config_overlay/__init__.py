"""Typed configuration loading from JSON/YAML files with environment variable overrides."""

from config_overlay.environment import overlay_env
from config_overlay.errors import (
    ConfigError,
    FieldTypeError,
    InvalidTargetError,
    NotFoundError,
    ParseError,
    ReadError,
)
from config_overlay.files import load_file
from config_overlay.interfaces import ConfigLoader
from config_overlay.loader import LayeredConfigLoader, load_and_overlay
from config_overlay.models import ConfigLoadRequest
from config_overlay.naming import derive_env_name

__all__ = [
    "ConfigError",
    "ConfigLoader",
    "ConfigLoadRequest",
    "FieldTypeError",
    "InvalidTargetError",
    "LayeredConfigLoader",
    "NotFoundError",
    "ParseError",
    "ReadError",
    "derive_env_name",
    "load_and_overlay",
    "load_file",
    "overlay_env",
]
