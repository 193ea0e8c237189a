import datetime
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from tomledit import InvalidValueError, register_config
from tomledit.values import INT64_MAX, INT64_MIN, to_value, type_name


@pytest.mark.parametrize(
    "obj",
    [
        "text",
        0,
        INT64_MAX,
        INT64_MIN,
        1.5,
        True,
        datetime.datetime(2024, 1, 2, 3, 4, 5),
        datetime.date(2024, 1, 2),
        datetime.time(3, 4, 5),
    ],
)
def test_scalars_pass_through(obj):
    assert to_value(obj) == obj


def test_containers_are_rebuilt():
    nested = {"a": [1, 2, {"b": "c"}]}

    value = to_value(nested)

    assert value == nested
    assert value is not nested
    assert value["a"] is not nested["a"]
    assert value["a"][2] is not nested["a"][2]


def test_tuples_become_arrays_and_paths_become_strings():
    assert to_value((1, Path("a/b"))) == [1, "a/b"]


@pytest.mark.parametrize(
    "obj",
    [None, INT64_MAX + 1, INT64_MIN - 1, {"a": None}, {("x",): 1}, {1, 2}, b"bytes", object()],
)
def test_unrepresentable_values_rejected(obj):
    with pytest.raises(InvalidValueError):
        to_value(obj)


def test_plain_dataclass_becomes_table_without_none_fields():
    @dataclass
    class Endpoint:
        host: str = "localhost"
        port: int = 80
        path: Path | None = None
        aliases: list[str] = field(default_factory=list)

    assert to_value(Endpoint()) == {"host": "localhost", "port": 80, "aliases": []}
    assert to_value(Endpoint(path=Path("/x")))["path"] == "/x"


def test_registered_dataclass_uses_mappings_and_serializers():
    @register_config(
        name="values_test",
        field_mappings={"level": "log_level"},
        field_serializers={"level": lambda x: x.lower()},
    )
    @dataclass
    class LevelConfig:
        level: str = "DEBUG"
        count: int = 3

    assert to_value(LevelConfig()) == {"log_level": "debug", "count": 3}


def test_dataclass_class_object_is_rejected():
    @dataclass
    class Empty:
        pass

    with pytest.raises(InvalidValueError):
        to_value(Empty)


@pytest.mark.parametrize(
    "node, expected",
    [
        ({}, "table"),
        ([], "array"),
        (True, "boolean"),
        (1, "integer"),
        (1.0, "float"),
        ("s", "string"),
        (datetime.date(2024, 1, 1), "datetime"),
        (None, "nil"),
        (b"x", "bytes"),
    ],
)
def test_type_name(node, expected: str):
    assert type_name(node) == expected
