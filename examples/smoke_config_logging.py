from __future__ import annotations

import logging
from dataclasses import dataclass

from config_overlay import ConfigLoadRequest, LayeredConfigLoader
from config_overlay.logging import init_logging
from config_overlay.models import LoggingSettings


@dataclass
class AppConfig:
    AppName: str = "smoke"
    Port: int = 8080
    DryRun: bool = False


def main() -> None:
    logging_settings = LoggingSettings(log_level="DEBUG")
    init_logging(logging_settings)

    config = AppConfig()
    LayeredConfigLoader().load(ConfigLoadRequest(path="examples/config.yaml", dotenv_path=".env"), config)

    logger = logging.getLogger("smoke")
    logger.info("Config loaded app_name=%s port=%s dry_run=%s", config.AppName, config.Port, config.DryRun)


if __name__ == "__main__":
    main()
