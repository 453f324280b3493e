from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, Union

import yaml
from pydantic import PydanticUserError, TypeAdapter, ValidationError

from config_overlay.errors import NotFoundError, ParseError, ReadError
from config_overlay.records import RecordField, allows_none, record_fields

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]
Decoder = Callable[[bytes], Any]


def _decode_json(data: bytes) -> Any:
    return json.loads(data.decode("utf-8"))


def _decode_yaml(data: bytes) -> Any:
    document = yaml.safe_load(data.decode("utf-8"))
    if document is None:
        return {}
    return document


_DECODERS: Dict[str, Decoder] = {
    ".json": _decode_json,
    ".yml": _decode_yaml,
    ".yaml": _decode_yaml,
}


def decoder_for(path: PathLike) -> Optional[Decoder]:
    """Return the decoder registered for the file extension, or None if it is not supported."""
    return _DECODERS.get(Path(path).suffix.lower())


def _read_bytes(path: Path) -> bytes:
    if not path.is_file():
        raise NotFoundError(f"Config file not found: {path}")
    try:
        return path.read_bytes()
    except FileNotFoundError as exc:
        raise NotFoundError(f"Config file not found: {path}") from exc
    except OSError as exc:
        raise ReadError(f"Failed to read config file {path}: {exc}") from exc


def _match_field(key: str, by_name: Mapping[str, RecordField]) -> Optional[RecordField]:
    field = by_name.get(key)
    if field is not None:
        return field
    folded = key.casefold()
    for name, candidate in by_name.items():
        if name.casefold() == folded:
            return candidate
    return None


def _validate_values(document: Mapping[str, Any], fields: Mapping[str, RecordField], path: Path) -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    for key, raw in document.items():
        field = _match_field(str(key), fields)
        if field is None:
            continue
        # null leaves the field untouched unless the field accepts None.
        if raw is None and not allows_none(field.annotation):
            continue
        try:
            adapter = TypeAdapter(field.validation_type)
        except PydanticUserError as exc:
            raise ParseError(
                f"Cannot validate config key '{key}' in {path}: unsupported field type {field.annotation!r}",
                path=str(path),
            ) from exc
        try:
            values[field.name] = adapter.validate_python(raw, strict=True)
        except ValidationError as exc:
            raise ParseError(
                f"Invalid value for config key '{key}' in {path}: {exc}", path=str(path)
            ) from exc
    return values


def load_file(path: PathLike, target: Any) -> None:
    """
    Read configuration from path and store it into target.

    The format is deduced from the file extension:
    - .json is decoded as JSON
    - .yml / .yaml is decoded as YAML

    Any other extension leaves target untouched. Keys are matched to field names exactly,
    falling back to a case-insensitive match; unknown keys are ignored and missing keys
    keep the field's current value.
    """
    fields = {f.name: f for f in record_fields(target)}

    file_path = Path(path)
    data = _read_bytes(file_path)

    decoder = decoder_for(file_path)
    if decoder is None:
        logger.debug("config.file_skipped path=%s reason=unsupported_extension", file_path)
        return

    try:
        document = decoder(data)
    except (ValueError, yaml.YAMLError) as exc:
        raise ParseError(f"Failed to parse config file {file_path}: {exc}", path=str(file_path)) from exc

    if not isinstance(document, Mapping):
        raise ParseError(
            f"Top-level config value must be a mapping, got: {type(document).__name__}",
            path=str(file_path),
        )

    values = _validate_values(document, fields, file_path)
    for name, value in values.items():
        setattr(target, name, value)
    logger.debug("config.file_loaded path=%s fields=%d", file_path, len(values))
