from __future__ import annotations

import unittest
from dataclasses import dataclass, field
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from config_overlay.errors import InvalidTargetError
from config_overlay.records import check_record, field_kind, record_fields


@dataclass
class ServiceConfig:
    AppName: str = ""
    Port: int = 0
    Debug: bool = False
    Ratio: float = 0.5
    Tags: List[str] = field(default_factory=list)
    Timeout: Optional[int] = None


@dataclass(frozen=True)
class FrozenConfig:
    AppName: str = ""


class ModelConfig(BaseModel):
    app_name: str = ""
    port: int = 0
    debug: bool = False


class FrozenModelConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    app_name: str = ""


class FrozenFieldConfig(BaseModel):
    app_name: str = Field("x", frozen=True)
    port: int = 0


class CheckRecordTests(unittest.TestCase):
    def test_accepts_dataclass_and_model_instances(self) -> None:
        check_record(ServiceConfig())
        check_record(ModelConfig())

    def test_rejects_none(self) -> None:
        with self.assertRaises(InvalidTargetError):
            check_record(None)

    def test_rejects_record_class(self) -> None:
        with self.assertRaises(InvalidTargetError):
            check_record(ServiceConfig)
        with self.assertRaises(InvalidTargetError):
            check_record(ModelConfig)

    def test_rejects_non_records(self) -> None:
        for value in ({"AppName": "x"}, "config", 42, object()):
            with self.subTest(value=value):
                with self.assertRaises(InvalidTargetError):
                    check_record(value)

    def test_rejects_frozen_records(self) -> None:
        with self.assertRaises(InvalidTargetError):
            check_record(FrozenConfig())
        with self.assertRaises(InvalidTargetError):
            check_record(FrozenModelConfig())

    def test_rejects_model_with_frozen_field(self) -> None:
        with self.assertRaises(InvalidTargetError):
            check_record(FrozenFieldConfig())

    def test_invalid_target_is_a_type_error(self) -> None:
        with self.assertRaises(TypeError):
            check_record(None)


class RecordFieldsTests(unittest.TestCase):
    def test_dataclass_fields_in_declaration_order(self) -> None:
        fields = record_fields(ServiceConfig())
        self.assertEqual(
            [(f.name, f.kind) for f in fields],
            [
                ("AppName", "string"),
                ("Port", "integer"),
                ("Debug", "boolean"),
                ("Ratio", "other"),
                ("Tags", "other"),
                ("Timeout", "integer"),
            ],
        )

    def test_model_fields_in_declaration_order(self) -> None:
        fields = record_fields(ModelConfig())
        self.assertEqual(
            [(f.name, f.kind) for f in fields],
            [("app_name", "string"), ("port", "integer"), ("debug", "boolean")],
        )

    def test_bool_is_not_classified_as_integer(self) -> None:
        self.assertEqual(field_kind(bool), "boolean")
        self.assertEqual(field_kind(int), "integer")
        self.assertEqual(field_kind(Optional[bool]), "boolean")
        self.assertEqual(field_kind(str | None), "string")
        self.assertEqual(field_kind(int | str), "other")


if __name__ == "__main__":
    unittest.main()
