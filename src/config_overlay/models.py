from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict


class LoggingSettings(BaseModel):
    """
    Logging settings for the command line runner.

    Mutable so that LOG_LEVEL, LOG_FILE and LOG_BACKUP_COUNT can be overlaid from the
    environment. File logging rotates daily.
    """

    model_config = ConfigDict(extra="forbid")

    log_level: str = "WARNING"
    log_file: str = ""
    log_backup_count: int = 5


@dataclass(frozen=True, slots=True)
class ConfigLoadRequest:
    """
    Inputs for a layered configuration load.

    dotenv_path, when set, names a .env file whose variables are added to the process
    environment before the overlay. Variables already set in the environment win.
    """

    path: str
    dotenv_path: Optional[str] = None
