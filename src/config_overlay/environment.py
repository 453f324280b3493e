from __future__ import annotations

import logging
import os
import re
from typing import Any, Callable, Dict, Mapping, Optional

from config_overlay.errors import FieldTypeError
from config_overlay.naming import derive_env_name
from config_overlay.records import FieldKind, record_fields

logger = logging.getLogger(__name__)

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_TRUE_VALUES = frozenset({"1", "t", "true"})
_FALSE_VALUES = frozenset({"0", "f", "false"})


def parse_int(value: str) -> int:
    """Parse a base-10 signed integer. Whitespace and digit separators are rejected."""
    if not _INT_PATTERN.fullmatch(value):
        raise ValueError(f"invalid integer literal: {value!r}")
    return int(value)


def parse_bool(value: str) -> bool:
    """Parse 1/t/true or 0/f/false, case-insensitively."""
    lowered = value.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"invalid boolean literal: {value!r}")


_PARSERS: Dict[FieldKind, Callable[[str], Any]] = {
    "string": str,
    "integer": parse_int,
    "boolean": parse_bool,
}


def overlay_env(target: Any, *, environ: Optional[Mapping[str, str]] = None) -> None:
    """
    Override target's field values with those set in the environment.

    Environment variable names are derived from field names by splitting on case
    boundaries, upper-casing and joining with underscores, e.g. AppName -> APP_NAME.
    Unset and empty variables are skipped. Only str, int and bool fields are
    overridden; fields of any other type are ignored.

    Fields are processed in declaration order and assigned as they go. On the first
    value that fails to parse, FieldTypeError is raised and the remaining fields are
    not visited; fields overlaid before it keep their new values.
    """
    fields = record_fields(target)
    env = os.environ if environ is None else environ

    applied = 0
    for field in fields:
        env_name = derive_env_name(field.name)
        raw = env.get(env_name)
        if not raw:
            continue

        parser = _PARSERS.get(field.kind)
        if parser is None:
            continue

        try:
            value = parser(raw)
        except ValueError as exc:
            raise FieldTypeError(
                field_name=field.name, env_name=env_name, value=raw, reason=str(exc)
            ) from exc
        setattr(target, field.name, value)
        applied += 1
        logger.debug("config.env_applied field=%s env=%s", field.name, env_name)

    logger.debug("config.env_overlay_done fields=%d applied=%d", len(fields), applied)
