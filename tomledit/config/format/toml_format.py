import os
import shutil
import tempfile
from pathlib import Path
from typing import Any

import tomli_w
import tomllib


class TOMLFormat:
    """
    TOML text collaborator: ``tomllib`` for reading, ``tomli_w`` for writing.

    ``parse`` raises ``tomllib.TOMLDecodeError`` (or ``UnicodeDecodeError``) on
    malformed input, ``serialize`` raises ``TypeError``/``ValueError`` for trees
    TOML cannot express, and ``read``/``write`` raise ``OSError`` on I/O
    failure. Callers translate these into their own error types.
    """

    extension = ".toml"

    def parse(self, content: bytes) -> dict[str, Any]:
        return tomllib.loads(content.decode("utf-8"))

    def serialize(self, data: dict[str, Any]) -> bytes:
        return tomli_w.dumps(data).encode("utf-8")

    def read(self, path: Path) -> dict[str, Any]:
        with open(path, "rb") as f:
            return self.parse(f.read())

    def write(self, path: Path, data: dict[str, Any]) -> None:
        content = self.serialize(data)
        write_atomic(path, content)


def write_atomic(path: Path, content: bytes) -> None:
    """
    Overwrite *path* with *content* through a temporary file next to its target.

    Symlinks are followed, so the link stays in place and its target is
    updated, and the existing file mode is kept. New files, and files whose
    directory does not allow creating the temporary file, are written in place.
    """
    target = Path(path).resolve()
    if not target.exists():
        _write_in_place(target, content)
        return

    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{target.name}.", suffix=".tmp", dir=target.parent
        )
    except PermissionError:
        _write_in_place(target, content)
        return

    try:
        with os.fdopen(fd, "wb") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
        shutil.copymode(target, tmp_name)
        os.replace(tmp_name, target)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def _write_in_place(path: Path, content: bytes) -> None:
    with open(path, "wb") as f:
        f.write(content)
