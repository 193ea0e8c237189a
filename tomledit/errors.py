from pathlib import Path
from typing import Any


class TomlEditError(Exception):
    pass


class LoadError(TomlEditError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to load {path}: {reason}")
        self.path = path


class LoadIOError(LoadError):
    pass


class ParseError(LoadError):
    pass


class SetError(TomlEditError, ValueError):
    pass


class EmptyKeyError(SetError):
    def __init__(self, key: str) -> None:
        super().__init__(f"Invalid key {key!r}: keys must be non-empty with no empty segments")
        self.key = key


class PathNotFoundError(SetError):
    def __init__(self, segment: str) -> None:
        super().__init__(f"Path '{segment}' does not exist")
        self.segment = segment


class NotATableError(SetError):
    def __init__(self, segment: str) -> None:
        super().__init__(f"'{segment}' is not a table")
        self.segment = segment


class InvalidValueError(SetError):
    def __init__(self, value: Any, reason: str = "not representable in TOML") -> None:
        super().__init__(f"Invalid value {value!r}: {reason}")
        self.value = value


class SaveError(TomlEditError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to save {path}: {reason}")
        self.path = path


class EncodeError(SaveError):
    pass


class SaveIOError(SaveError):
    pass


class DecodeError(TomlEditError, ValueError):
    def __init__(self, message: str, key: str | None = None) -> None:
        super().__init__(f"{key}: {message}" if key else message)
        self.key = key


class MissingSectionError(DecodeError):
    def __init__(self, section: str) -> None:
        super().__init__(f"Missing [{section}] section from config file")
        self.section = section
