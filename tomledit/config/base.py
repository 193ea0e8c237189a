from typing import Any, Callable, ClassVar, Protocol, TypeAlias, TypeVar, runtime_checkable


@runtime_checkable
class DataclassInstance(Protocol):
    __dataclass_fields__: ClassVar[dict[str, Any]]


FieldParser: TypeAlias = Callable[..., Any]
FieldSerializer: TypeAlias = Callable[[Any], Any]

T_Decorator = TypeVar("T_Decorator")


class _Registration:
    __slots__ = ("name", "field_mappings", "field_parsers", "field_serializers")

    def __init__(
        self,
        name: str,
        field_mappings: dict[str, str],
        field_parsers: dict[str, FieldParser],
        field_serializers: dict[str, FieldSerializer],
    ) -> None:
        self.name = name
        self.field_mappings = field_mappings
        self.field_parsers = field_parsers
        self.field_serializers = field_serializers


_REGISTRY: dict[type, _Registration] = {}


def register_config(
    name: str,
    field_mappings: dict[str, str] | None = None,
    field_parsers: dict[str, FieldParser] | None = None,
    field_serializers: dict[str, FieldSerializer] | None = None,
):
    """
    Decorator to register a config dataclass as the schema of a TOML table.

    Args:
        name: Top-level TOML section the dataclass is read from
        field_mappings: Map dataclass field names to TOML keys
        field_parsers: Custom parsers ``(value, decoder) -> Any`` for specific fields
        field_serializers: Custom serializers ``(value) -> Any`` used when the
            dataclass is written back into a document

    Example:
        @register_config("logging", field_mappings={"output": "log_output"})
        @dataclass
        class LoggerConfig:
            output: list[str] = field(default_factory=lambda: ["stdout"])
    """

    def decorator(config_class: type[T_Decorator]) -> type[T_Decorator]:
        _REGISTRY[config_class] = _Registration(
            name, field_mappings or {}, field_parsers or {}, field_serializers or {}
        )
        return config_class

    return decorator


def _registration(config_class: type) -> _Registration:
    if config_class not in _REGISTRY:
        raise ValueError(f"Config class {config_class.__name__} is not registered")
    return _REGISTRY[config_class]


def is_registered(config_class: type) -> bool:
    return config_class in _REGISTRY


def get_all_registered() -> list[type]:
    return list(_REGISTRY.keys())


def get_section_name(config_class: type) -> str:
    return _registration(config_class).name


def get_field_mappings(config_class: type) -> dict[str, str]:
    return _registration(config_class).field_mappings


def get_field_parsers(config_class: type) -> dict[str, FieldParser]:
    return _registration(config_class).field_parsers


def get_field_serializers(config_class: type) -> dict[str, FieldSerializer]:
    return _registration(config_class).field_serializers
