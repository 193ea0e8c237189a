from __future__ import annotations

import copy
import datetime
import types
from dataclasses import fields, is_dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Literal, TypeVar, Union, get_args, get_origin

from tomledit.config.base import get_field_mappings, get_field_parsers, is_registered
from tomledit.config.defaults import field_types, has_default
from tomledit.errors import DecodeError
from tomledit.values import type_name

if TYPE_CHECKING:
    from tomledit.document import TomlDocument

T = TypeVar("T")


class NodeDecoder:
    """
    Decodes TOML value nodes into Python types.

    Supported targets are the TOML scalars, ``Path``, ``list``/``tuple``/``dict``
    generics, ``Literal``, unions and dataclasses. Registered config dataclasses
    honour their field mappings and field parsers; parsers are called as
    ``parser(value, decoder)`` so they can reach other sections through
    ``decoder.document``.

    Annotations are resolved against the module globals of the dataclass. A
    string annotation naming a class that only exists in a function scope
    cannot be resolved; decoding a value into such a field raises
    ``DecodeError``.
    """

    def __init__(self, document: TomlDocument | None = None) -> None:
        self.document = document

    def decode(self, node: Any, target: Any, key: str = "") -> Any:
        if isinstance(target, str):
            raise DecodeError(f"unresolved type annotation {target!r}", key or None)
        if target is Any or target is object:
            return copy.deepcopy(node)

        origin = get_origin(target)

        if origin is Union or origin is types.UnionType:
            return self._decode_union(node, target, key)
        if origin is Literal:
            return self._decode_literal(node, target, key)
        if origin in (list, tuple, dict):
            return self._decode_generic(node, origin, get_args(target), key)
        if is_dataclass(target) and isinstance(target, type):
            return self.decode_dataclass(target, node, key)
        if isinstance(target, type):
            return self._decode_plain(node, target, key)

        raise DecodeError(f"unsupported target type {target!r}", key or None)

    def decode_dataclass(self, config_class: type[T], node: Any, key: str = "") -> T:
        if not isinstance(node, dict):
            raise _mismatch(node, config_class, key)

        field_mappings: dict[str, str] = {}
        field_parsers: dict[str, Any] = {}
        if is_registered(config_class):
            field_mappings = get_field_mappings(config_class)
            field_parsers = get_field_parsers(config_class)

        hints = field_types(config_class)
        kwargs = {}

        for field in fields(config_class):  # type: ignore[arg-type]
            if not field.init:
                continue

            toml_key = field_mappings.get(field.name, field.name)
            child_key = _child(key, toml_key)

            if toml_key not in node:
                if not has_default(field):
                    raise DecodeError(f"missing field '{toml_key}'", key or None)
                continue

            value = node[toml_key]

            if field.name in field_parsers:
                value = self._run_parser(field_parsers[field.name], value, child_key)
            else:
                value = self.decode(value, hints.get(field.name, field.type), child_key)

            kwargs[field.name] = value

        return config_class(**kwargs)

    def _run_parser(self, parser: Any, value: Any, key: str) -> Any:
        try:
            return parser(value, self)
        except DecodeError:
            raise
        except (TypeError, ValueError) as exc:
            raise DecodeError(str(exc), key) from exc

    def _decode_union(self, node: Any, target: Any, key: str) -> Any:
        members = [t for t in get_args(target) if t is not type(None)]
        for member in members:
            try:
                return self.decode(node, member, key)
            except DecodeError:
                continue
        raise _mismatch(node, target, key)

    def _decode_literal(self, node: Any, target: Any, key: str) -> Any:
        for choice in get_args(target):
            if type(choice) is type(node) and choice == node:
                return node
        choices = ", ".join(repr(c) for c in get_args(target))
        raise DecodeError(f"expected one of {choices}, found {node!r}", key or None)

    def _decode_generic(self, node: Any, origin: type, args: tuple[Any, ...], key: str) -> Any:
        if origin is dict:
            if not isinstance(node, dict):
                raise _mismatch(node, dict, key)
            value_type = args[1] if len(args) == 2 else Any
            return {k: self.decode(v, value_type, _child(key, k)) for k, v in node.items()}

        if not isinstance(node, list):
            raise _mismatch(node, origin, key)

        if origin is list:
            item_type = args[0] if args else Any
            return [self.decode(v, item_type, f"{key}[{i}]") for i, v in enumerate(node)]

        if len(args) == 2 and args[1] is Ellipsis:
            return tuple(self.decode(v, args[0], f"{key}[{i}]") for i, v in enumerate(node))
        if args and len(args) != len(node):
            raise DecodeError(f"expected {len(args)} items, found {len(node)}", key or None)
        item_types = args or (Any,) * len(node)
        return tuple(
            self.decode(v, t, f"{key}[{i}]") for i, (v, t) in enumerate(zip(node, item_types))
        )

    def _decode_plain(self, node: Any, target: type, key: str) -> Any:
        if target is bool:
            if isinstance(node, bool):
                return node
        elif target is int:
            if isinstance(node, int) and not isinstance(node, bool):
                return node
        elif target is float:
            if isinstance(node, (int, float)) and not isinstance(node, bool):
                return float(node)
        elif target is str:
            if isinstance(node, str):
                return node
        elif target is Path:
            if isinstance(node, str):
                return Path(node)
        elif target is datetime.datetime:
            if isinstance(node, datetime.datetime):
                return node
        elif target is datetime.date:
            if isinstance(node, datetime.date) and not isinstance(node, datetime.datetime):
                return node
        elif target is datetime.time:
            if isinstance(node, datetime.time):
                return node
        elif target in (list, dict, tuple):
            return self._decode_generic(node, target, (), key)
        else:
            raise DecodeError(f"unsupported target type {target.__name__}", key or None)

        raise _mismatch(node, target, key)


def _child(key: str, name: str) -> str:
    return f"{key}.{name}" if key else name


def _mismatch(node: Any, target: Any, key: str) -> DecodeError:
    expected = getattr(target, "__name__", None) or repr(target)
    return DecodeError(f"expected {expected}, found {type_name(node)}", key or None)
