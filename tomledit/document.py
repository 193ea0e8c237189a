"""Dot-notation editor over a TOML document bound to a file."""

from __future__ import annotations

import datetime
import logging
from pathlib import Path
from typing import Any, TypeVar

from tomledit.config.base import DataclassInstance, get_section_name
from tomledit.config.decoder import NodeDecoder
from tomledit.config.defaults import default_table, root_configs
from tomledit.config.format import DocumentFormat, TOMLFormat
from tomledit.errors import (
    DecodeError,
    EncodeError,
    LoadIOError,
    MissingSectionError,
    NotATableError,
    ParseError,
    PathNotFoundError,
    SaveIOError,
)
from tomledit.keypath import KeyPath
from tomledit.values import Table, Value, to_value

T = TypeVar("T")
C = TypeVar("C", bound=DataclassInstance)

logger = logging.getLogger(__name__)


class TomlDocument:
    """
    A TOML document held in memory together with the file it is saved to.

    Keys are dotted paths (``"server.database.host"``) resolved one table at a
    time from the root. Reads never raise: a missing key, a malformed key or a
    value of the wrong type all read as ``None``. Writes return the document so
    they can be chained, and raise a ``SetError`` on the first failure::

        doc = TomlDocument.load("config.toml")
        doc.set("server.port", 9090).create("server.tls.enabled", True).delete("debug")
        doc.save()

    Values returned by ``get`` and ``get_data`` are the live nodes of the tree;
    do not hold on to them across writes.
    """

    def __init__(
        self, data: Table, path: Path | str, format: DocumentFormat | None = None
    ) -> None:
        self._data = data
        self._path = Path(path)
        self._format = format if format is not None else TOMLFormat()

    @classmethod
    def load(cls, path: Path | str, format: DocumentFormat | None = None) -> TomlDocument:
        """
        Read and parse the file at *path*.

        Raises:
            LoadIOError: If the file cannot be read.
            ParseError: If the content is not valid TOML.
        """
        path = Path(path)
        format = format if format is not None else TOMLFormat()

        try:
            data = format.read(path)
        except OSError as exc:
            logger.error(f"Cannot read {path}: {exc}")
            raise LoadIOError(path, str(exc)) from exc
        except ValueError as exc:
            logger.error(f"Cannot parse {path}: {exc}")
            raise ParseError(path, str(exc)) from exc

        logger.debug(f"Loaded {path} ({len(data)} top-level keys)")
        return cls(data, path, format)

    @classmethod
    def new(cls, path: Path | str, format: DocumentFormat | None = None) -> TomlDocument:
        """Empty document that is written to *path* on the first ``save``."""
        return cls({}, path, format)

    @classmethod
    def load_or_init(
        cls,
        path: Path | str,
        *config_classes: type[DataclassInstance],
        format: DocumentFormat | None = None,
    ) -> TomlDocument:
        """
        Load *path*, or write it from config defaults when it does not exist yet.

        The new file holds one section per config class, filled with the
        dataclass defaults. Without explicit classes every registered config
        that is not nested inside another one is used.
        """
        path = Path(path)
        if path.exists():
            return cls.load(path, format)

        document = cls.new(path, format)
        for config_class in config_classes or root_configs():
            document.create(get_section_name(config_class), default_table(config_class))

        logger.info(f"Config file {path} not found, created it from defaults")
        document.save()
        return document

    # -- Reads -----------------------------------------------------------

    def get(self, key: str) -> Value | None:
        keypath = KeyPath.try_parse(key)
        if keypath is None:
            return None

        current: Any = self._data
        for segment in keypath.segments:
            if not isinstance(current, dict) or segment not in current:
                return None
            current = current[segment]
        return current

    def get_str(self, key: str) -> str | None:
        value = self.get(key)
        return value if isinstance(value, str) else None

    def get_int(self, key: str) -> int | None:
        value = self.get(key)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        return None

    def get_float(self, key: str) -> float | None:
        value = self.get(key)
        return value if isinstance(value, float) else None

    def get_bool(self, key: str) -> bool | None:
        value = self.get(key)
        return value if isinstance(value, bool) else None

    def get_datetime(self, key: str) -> datetime.datetime | datetime.date | datetime.time | None:
        value = self.get(key)
        if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
            return value
        return None

    def get_array(self, key: str) -> list[Value] | None:
        value = self.get(key)
        return value if isinstance(value, list) else None

    def get_table(self, key: str) -> Table | None:
        value = self.get(key)
        return value if isinstance(value, dict) else None

    def contains(self, key: str) -> bool:
        return self.get(key) is not None

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.contains(key)

    def get_of_type(self, key: str, target: type[T]) -> T | None:
        """
        Decode the value at *key* into *target*.

        Returns ``None`` both when the key is missing and when the value does
        not decode; use ``decode`` to tell the two apart.
        """
        try:
            return self.decode(key, target)
        except DecodeError as exc:
            logger.debug(f"No {getattr(target, '__name__', target)} at {key!r}: {exc}")
            return None

    def decode(self, key: str, target: type[T]) -> T:
        """
        Decode the value at *key* into *target*.

        Raises:
            DecodeError: If the key is missing or the value does not decode.
        """
        value = self.get(key)
        if value is None:
            raise DecodeError("key not found", key)
        return NodeDecoder(self).decode(value, target, key)

    def get_config(self, config_class: type[C]) -> C:
        """
        Decode the section registered for *config_class*.

        Example:
            doc = TomlDocument.load("config.toml")
            logger_config = doc.get_config(LoggerConfig)
        """
        section_name = get_section_name(config_class)
        section = self.get(section_name)
        if section is None:
            raise MissingSectionError(section_name)
        return NodeDecoder(self).decode_dataclass(config_class, section, section_name)

    # -- Writes ----------------------------------------------------------

    def set(self, key: str, value: Any) -> TomlDocument:
        """
        Insert or overwrite the value at *key*. All parent tables must exist.

        Raises:
            EmptyKeyError: If the key is empty or has an empty segment.
            PathNotFoundError: If a parent segment does not exist.
            NotATableError: If a parent segment is not a table.
            InvalidValueError: If *value* has no TOML representation.
        """
        keypath = KeyPath.parse(key)
        node = to_value(value)
        self._walk_existing(keypath)[keypath.leaf] = node
        return self

    def create(self, key: str, value: Any) -> TomlDocument:
        """
        Insert or overwrite the value at *key*, creating missing parent tables.

        Raises:
            EmptyKeyError: If the key is empty or has an empty segment.
            NotATableError: If an existing parent segment is not a table.
            InvalidValueError: If *value* has no TOML representation.
        """
        keypath = KeyPath.parse(key)
        node = to_value(value)
        parents = keypath.parents

        current = self._data
        depth = 0
        while depth < len(parents) and parents[depth] in current:
            child = current[parents[depth]]
            if not isinstance(child, dict):
                raise NotATableError(parents[depth])
            current = child
            depth += 1

        # Everything below the first missing segment is new.
        for segment in parents[depth:]:
            logger.debug(f"Creating table '{segment}' for '{keypath}'")
            current[segment] = {}
            current = current[segment]

        current[keypath.leaf] = node
        return self

    def delete(self, key: str) -> TomlDocument:
        """
        Remove the value at *key*. Removing a key that is already gone succeeds.

        Raises:
            EmptyKeyError: If the key is empty or has an empty segment.
            PathNotFoundError: If a parent segment does not exist.
            NotATableError: If a parent segment is not a table.
        """
        keypath = KeyPath.parse(key)
        self._walk_existing(keypath).pop(keypath.leaf, None)
        return self

    def _walk_existing(self, keypath: KeyPath) -> Table:
        current = self._data
        for segment in keypath.parents:
            if segment not in current:
                raise PathNotFoundError(segment)
            child = current[segment]
            if not isinstance(child, dict):
                raise NotATableError(segment)
            current = child
        return current

    # -- Persistence -----------------------------------------------------

    def save(self) -> None:
        """
        Serialize the whole document and overwrite the origin file.

        The file is replaced through a temporary sibling, so a failed save
        leaves the previous content in place.

        Raises:
            EncodeError: If the tree cannot be written as TOML.
            SaveIOError: If the file cannot be written.
        """
        try:
            self._format.write(self._path, self._data)
        except OSError as exc:
            logger.error(f"Cannot write {self._path}: {exc}")
            raise SaveIOError(self._path, str(exc)) from exc
        except (TypeError, ValueError) as exc:
            logger.error(f"Cannot serialize {self._path}: {exc}")
            raise EncodeError(self._path, str(exc)) from exc

        logger.info(f"Saved {self._path}")

    def get_path(self) -> Path:
        return self._path

    def get_data(self) -> Table:
        return self._data

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={str(self._path)!r}, keys={list(self._data)!r})"
