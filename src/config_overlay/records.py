from __future__ import annotations

import dataclasses
import types
import typing
from dataclasses import dataclass
from typing import Annotated, Any, Literal, Tuple, Union

from pydantic import BaseModel

from config_overlay.errors import InvalidTargetError

FieldKind = Literal["string", "integer", "boolean", "other"]

_INVALID_TARGET = "Configuration target must be a mutable dataclass or pydantic model instance"


@dataclass(frozen=True, slots=True)
class RecordField:
    name: str
    annotation: Any
    kind: FieldKind
    metadata: Tuple[Any, ...] = ()

    @property
    def validation_type(self) -> Any:
        """The annotation with any field constraints (e.g. Field(ge=1)) attached."""
        if not self.metadata:
            return self.annotation
        return Annotated[(self.annotation, *self.metadata)]


def _is_frozen(target: Any) -> bool:
    if isinstance(target, BaseModel):
        model_type = type(target)
        if model_type.model_config.get("frozen", False):
            return True
        return any(info.frozen for info in model_type.model_fields.values())
    return bool(type(target).__dataclass_params__.frozen)


def check_record(target: Any) -> None:
    """Raise InvalidTargetError unless target is a mutable record instance."""
    if target is None or isinstance(target, type):
        raise InvalidTargetError(f"{_INVALID_TARGET}, got: {target!r}")
    if not (isinstance(target, BaseModel) or dataclasses.is_dataclass(target)):
        raise InvalidTargetError(f"{_INVALID_TARGET}, got: {type(target).__name__}")
    if _is_frozen(target):
        raise InvalidTargetError(f"{_INVALID_TARGET}, {type(target).__name__} is frozen")


def allows_none(annotation: Any) -> bool:
    if annotation is Any or annotation is None or annotation is type(None):
        return True
    if typing.get_origin(annotation) in (Union, types.UnionType):
        return type(None) in typing.get_args(annotation)
    return False


def _unwrap_optional(annotation: Any) -> Any:
    if typing.get_origin(annotation) in (Union, types.UnionType):
        args = [a for a in typing.get_args(annotation) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def field_kind(annotation: Any) -> FieldKind:
    annotation = _unwrap_optional(annotation)
    # bool is a subclass of int, so it is matched by identity first.
    if annotation is bool:
        return "boolean"
    if annotation is int:
        return "integer"
    if annotation is str:
        return "string"
    return "other"


def record_fields(target: Any) -> Tuple[RecordField, ...]:
    """
    Return the top-level fields of a record in declaration order.

    Nested records are reported as a single field of kind "other"; they are never
    recursed into.
    """
    check_record(target)
    record_type = type(target)

    if isinstance(target, BaseModel):
        return tuple(
            RecordField(
                name=name,
                annotation=info.annotation,
                kind=field_kind(info.annotation),
                metadata=tuple(info.metadata),
            )
            for name, info in record_type.model_fields.items()
        )

    try:
        hints = typing.get_type_hints(record_type)
    except Exception as exc:
        raise InvalidTargetError(
            f"Cannot resolve field annotations of {record_type.__name__}: {exc}"
        ) from exc
    return tuple(
        RecordField(name=f.name, annotation=hints[f.name], kind=field_kind(hints[f.name]))
        for f in dataclasses.fields(record_type)
    )
