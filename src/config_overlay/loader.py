from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Optional

from dotenv import load_dotenv

from config_overlay.environment import overlay_env
from config_overlay.files import PathLike, load_file
from config_overlay.models import ConfigLoadRequest

logger = logging.getLogger(__name__)


def load_and_overlay(path: PathLike, target: Any, *, environ: Optional[Mapping[str, str]] = None) -> None:
    """
    Load configuration from path into target, then override it from the environment.

    Not atomic: if the overlay fails, target keeps the file values and any fields
    overlaid before the failing one.
    """
    load_file(path, target)
    overlay_env(target, environ=environ)


class LayeredConfigLoader:
    def __init__(self, *, environ: Optional[Mapping[str, str]] = None) -> None:
        self._environ = environ

    def _apply_dotenv(self, dotenv_path: Path) -> bool:
        # Variables already present in the process environment win over the file.
        if not dotenv_path.is_file():
            logger.debug("config.dotenv_skipped path=%s", dotenv_path)
            return False
        applied = load_dotenv(dotenv_path=dotenv_path, override=False)
        logger.debug("config.dotenv_loaded path=%s applied=%s", dotenv_path, applied)
        return applied

    def load(self, request: ConfigLoadRequest, target: Any) -> None:
        if request.dotenv_path:
            self._apply_dotenv(Path(request.dotenv_path))
        load_and_overlay(request.path, target, environ=self._environ)
