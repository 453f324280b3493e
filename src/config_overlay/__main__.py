from __future__ import annotations

import argparse
import dataclasses
import importlib
import json
import logging
import sys
from typing import Any, Optional, Sequence

from pydantic import BaseModel

from config_overlay.environment import overlay_env
from config_overlay.errors import ConfigError, InvalidTargetError
from config_overlay.interfaces import ConfigLoader
from config_overlay.loader import LayeredConfigLoader
from config_overlay.logging import init_logging
from config_overlay.models import ConfigLoadRequest, LoggingSettings
from config_overlay.naming import derive_env_name
from config_overlay.records import check_record, record_fields

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="config-overlay",
        description="Resolve typed configuration from a file and environment variables",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (default: LOG_LEVEL from the environment, else WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True, help="Command to run")

    # Command: resolve
    resolve_parser = subparsers.add_parser("resolve", help="Print the resolved configuration as JSON")
    resolve_parser.add_argument("record", help="Record type as package.module:ClassName")
    resolve_parser.add_argument("--config", required=True, help="Path to a .json, .yml or .yaml file")
    resolve_parser.add_argument("--dotenv", default=None, help="Optional .env file loaded before the overlay")

    # Command: env-names
    names_parser = subparsers.add_parser("env-names", help="List the environment variable for each field")
    names_parser.add_argument("record", help="Record type as package.module:ClassName")

    return parser


def _instantiate_record(record_path: str) -> Any:
    module_name, sep, attr = record_path.partition(":")
    if not sep or not module_name or not attr:
        raise InvalidTargetError(f"Record must be given as package.module:ClassName, got: {record_path}")
    try:
        record_type = getattr(importlib.import_module(module_name), attr)
    except (ImportError, AttributeError) as exc:
        raise InvalidTargetError(f"Cannot import record type {record_path}: {exc}") from exc
    if not isinstance(record_type, type):
        raise InvalidTargetError(f"{record_path} is not a class")
    try:
        record = record_type()
    except Exception as exc:
        raise InvalidTargetError(f"{record_path} cannot be created without arguments: {exc}") from exc
    check_record(record)
    return record


def _record_to_dict(record: Any) -> dict:
    if isinstance(record, BaseModel):
        return record.model_dump(mode="json")
    return dataclasses.asdict(record)


def _resolve(args: argparse.Namespace) -> None:
    record = _instantiate_record(args.record)
    request = ConfigLoadRequest(path=args.config, dotenv_path=args.dotenv)
    loader: ConfigLoader = LayeredConfigLoader()
    loader.load(request, record)
    logger.info("Configuration resolved. record=%s path=%s", args.record, args.config)
    json.dump(_record_to_dict(record), sys.stdout, indent=2, default=str)
    sys.stdout.write("\n")


def _env_names(args: argparse.Namespace) -> None:
    record = _instantiate_record(args.record)
    for field in record_fields(record):
        sys.stdout.write(f"{field.name}\t{derive_env_name(field.name)}\t{field.kind}\n")


def _init_cli_logging(args: argparse.Namespace) -> None:
    settings = LoggingSettings()
    overlay_env(settings)
    if args.log_level:
        settings.log_level = args.log_level
    init_logging(settings)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        _init_cli_logging(args)
        if args.command == "resolve":
            _resolve(args)
        elif args.command == "env-names":
            _env_names(args)
    except (ConfigError, ValueError) as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
