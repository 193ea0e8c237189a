import types
from dataclasses import MISSING, Field, fields, is_dataclass
from typing import Any, Union, cast, get_args, get_origin, get_type_hints

from tomledit.config.base import (
    DataclassInstance,
    get_all_registered,
    get_field_mappings,
    get_field_serializers,
    is_registered,
)
from tomledit.values import Table, to_value

NO_DEFAULT_PLACEHOLDER = "No default value exists, needs to be provided manually"


def default_table(config_class: type[DataclassInstance]) -> Table:
    """Build the TOML table holding the defaults of a config dataclass."""
    if not is_dataclass(config_class):
        raise ValueError(f"{config_class.__name__} is not a dataclass")

    field_mappings: dict[str, str] = {}
    field_serializers: dict[str, Any] = {}
    if is_registered(config_class):
        field_mappings = get_field_mappings(config_class)
        field_serializers = get_field_serializers(config_class)

    hints = field_types(config_class)
    table: Table = {}

    for field in fields(config_class):
        value = _field_default_value(field, hints.get(field.name, field.type))
        if value is not None and field.name in field_serializers:
            value = field_serializers[field.name](value)
        if value is None:
            continue

        table[field_mappings.get(field.name, field.name)] = to_value(value)

    return table


def root_configs() -> list[type[DataclassInstance]]:
    """Registered configs that are not used as the type of another config's field."""
    all_configs = get_all_registered()
    nested_configs: set[type] = set()
    for config_class in all_configs:
        for field_type in field_types(config_class).values():
            field_type = unwrap_optional(field_type)
            if is_dataclass(field_type):
                nested_configs.add(cast(type, field_type))

    return [c for c in all_configs if c not in nested_configs]


def has_default(field: Field) -> bool:
    return field.default is not MISSING or field.default_factory is not MISSING


def field_types(config_class: type) -> dict[str, Any]:
    try:
        return get_type_hints(config_class)
    except (NameError, TypeError):
        return {
            field.name: _resolve_field_type(config_class, field) for field in fields(config_class)
        }


def _resolve_field_type(config_class: type, field: Field) -> Any:
    """Resolve one annotation against the module globals, leaving it as a string if that fails."""
    holder = type(
        config_class.__name__,
        (),
        {"__annotations__": {field.name: field.type}, "__module__": config_class.__module__},
    )
    try:
        return get_type_hints(holder)[field.name]
    except (NameError, TypeError):
        return field.type


def unwrap_optional(field_type: Any) -> Any:
    origin = get_origin(field_type)
    if origin is Union or origin is types.UnionType:
        type_args = [t for t in get_args(field_type) if t is not type(None)]
        if type_args:
            return type_args[0]
    return field_type


def _field_default_value(field: Field, field_type: Any) -> Any:
    if field.default is not MISSING:
        return field.default
    if field.default_factory is not MISSING:
        return field.default_factory()

    field_type = unwrap_optional(field_type)
    if is_dataclass(field_type):
        return default_table(cast(type[DataclassInstance], field_type))
    return NO_DEFAULT_PLACEHOLDER
