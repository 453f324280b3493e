from __future__ import annotations

from typing import Optional


class ConfigError(Exception):
    """Base class for every error raised while loading configuration."""


class InvalidTargetError(ConfigError, TypeError):
    """The target is not a mutable dataclass or pydantic model instance."""


class NotFoundError(ConfigError, FileNotFoundError):
    pass


class ReadError(ConfigError, OSError):
    pass


class ParseError(ConfigError, ValueError):
    def __init__(self, message: str, *, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


class FieldTypeError(ConfigError, ValueError):
    """An environment value could not be parsed into its field's declared type."""

    def __init__(self, *, field_name: str, env_name: str, value: str, reason: str) -> None:
        super().__init__(f"Error loading config field {field_name} from {env_name}: {reason}")
        self.field_name = field_name
        self.env_name = env_name
        self.value = value
        self.reason = reason
