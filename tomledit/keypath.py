"""Dotted key paths (``server.database.host``) used to address document nodes."""

from __future__ import annotations

from dataclasses import dataclass

from tomledit.errors import EmptyKeyError

SEPARATOR = "."


@dataclass(frozen=True)
class KeyPath:
    segments: tuple[str, ...]

    @classmethod
    def parse(cls, key: str) -> KeyPath:
        """
        Split a dotted key into its segments.

        Raises:
            EmptyKeyError: If the key is empty or contains an empty segment
                (``"a..b"``, ``".a"``, ``"a."``).
        """
        segments = tuple(key.split(SEPARATOR))
        if not key or any(not segment for segment in segments):
            raise EmptyKeyError(key)
        return cls(segments)

    @classmethod
    def try_parse(cls, key: str) -> KeyPath | None:
        try:
            return cls.parse(key)
        except EmptyKeyError:
            return None

    @property
    def parents(self) -> tuple[str, ...]:
        return self.segments[:-1]

    @property
    def leaf(self) -> str:
        return self.segments[-1]

    def __str__(self) -> str:
        return SEPARATOR.join(self.segments)
