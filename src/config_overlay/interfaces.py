from __future__ import annotations

from typing import Any, Protocol

from config_overlay.models import ConfigLoadRequest


class ConfigLoader(Protocol):
    def load(self, request: ConfigLoadRequest, target: Any) -> None:
        """
        Populate target from the request's file, then from the environment.

        Implementations mutate target in place and raise ConfigError subclasses.
        """
