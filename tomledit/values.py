"""TOML value nodes and the conversion of Python objects into them."""

from __future__ import annotations

import datetime
from collections.abc import Mapping
from dataclasses import fields, is_dataclass
from pathlib import Path
from typing import Any, TypeAlias

from tomledit.config.base import get_field_mappings, get_field_serializers, is_registered
from tomledit.errors import InvalidValueError

Scalar: TypeAlias = "str | int | float | bool | datetime.datetime | datetime.date | datetime.time"
Value: TypeAlias = "Scalar | Array | Table"
Array: TypeAlias = "list[Value]"
Table: TypeAlias = "dict[str, Value]"

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_SCALAR_TYPES = (str, float, bool, datetime.datetime, datetime.date, datetime.time)


def is_table(node: Any) -> bool:
    return isinstance(node, dict)


def type_name(node: Any) -> str:
    match node:
        case None:
            return "nil"
        case dict():
            return "table"
        case list():
            return "array"
        case bool():
            return "boolean"
        case int():
            return "integer"
        case float():
            return "float"
        case str():
            return "string"
        case datetime.datetime() | datetime.date() | datetime.time():
            return "datetime"
        case _:
            return type(node).__name__


def to_value(obj: Any) -> Value:
    """
    Convert a Python object into a freshly built TOML value node.

    Containers are rebuilt, so the result never shares structure with *obj*.
    Dataclass instances become tables, using the registered field mappings and
    serializers when the class is a registered config. ``None`` fields of a
    dataclass are left out since TOML has no null.

    Raises:
        InvalidValueError: If *obj* (or anything nested in it) has no TOML
            representation.
    """
    if obj is None:
        raise InvalidValueError(obj, "TOML has no null value")
    if isinstance(obj, _SCALAR_TYPES):
        return obj
    if isinstance(obj, int):
        if not INT64_MIN <= obj <= INT64_MAX:
            raise InvalidValueError(obj, "integer out of 64-bit range")
        return obj
    if isinstance(obj, Path):
        return str(obj)
    if is_dataclass(obj) and not isinstance(obj, type):
        return _dataclass_to_table(obj)
    if isinstance(obj, Mapping):
        table: Table = {}
        for key, item in obj.items():
            if not isinstance(key, str):
                raise InvalidValueError(obj, f"table key {key!r} is not a string")
            table[key] = to_value(item)
        return table
    if isinstance(obj, (list, tuple)):
        return [to_value(item) for item in obj]

    raise InvalidValueError(obj, f"unsupported type {type(obj).__name__}")


def _dataclass_to_table(obj: Any) -> Table:
    config_class = type(obj)
    field_mappings: dict[str, str] = {}
    field_serializers: dict[str, Any] = {}
    if is_registered(config_class):
        field_mappings = get_field_mappings(config_class)
        field_serializers = get_field_serializers(config_class)

    table: Table = {}
    for field in fields(obj):
        value = getattr(obj, field.name)
        if value is None:
            continue
        if field.name in field_serializers:
            value = field_serializers[field.name](value)
            if value is None:
                continue
        table[field_mappings.get(field.name, field.name)] = to_value(value)

    return table
