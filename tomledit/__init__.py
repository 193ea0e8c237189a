"""tomledit — dot-notation access, editing and typed decoding of TOML files."""

from tomledit.config import DocumentFormat, TOMLFormat, register_config
from tomledit.config.decoder import NodeDecoder
from tomledit.document import TomlDocument
from tomledit.errors import (
    DecodeError,
    EmptyKeyError,
    EncodeError,
    InvalidValueError,
    LoadError,
    LoadIOError,
    MissingSectionError,
    NotATableError,
    ParseError,
    PathNotFoundError,
    SaveError,
    SaveIOError,
    SetError,
    TomlEditError,
)
from tomledit.keypath import KeyPath
from tomledit.values import Table, Value

__all__ = [
    "TomlDocument",
    "KeyPath",
    "Value",
    "Table",
    "NodeDecoder",
    "DocumentFormat",
    "TOMLFormat",
    "register_config",
    "TomlEditError",
    "LoadError",
    "LoadIOError",
    "ParseError",
    "SetError",
    "EmptyKeyError",
    "PathNotFoundError",
    "NotATableError",
    "InvalidValueError",
    "SaveError",
    "EncodeError",
    "SaveIOError",
    "DecodeError",
    "MissingSectionError",
]
