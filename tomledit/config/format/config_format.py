from pathlib import Path
from typing import Any, Protocol


class DocumentFormat(Protocol):
    extension: str

    def parse(self, content: bytes) -> dict[str, Any]: ...

    def serialize(self, data: dict[str, Any]) -> bytes: ...

    def read(self, path: Path) -> dict[str, Any]: ...

    def write(self, path: Path, data: dict[str, Any]) -> None: ...
