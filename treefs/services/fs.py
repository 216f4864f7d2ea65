from __future__ import annotations

import os
import stat as statmod
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from treefs.models.enums import EntryKind


@dataclass(slots=True, frozen=True)
class StatResult:
    path: str
    kind: EntryKind
    size: int = 0

    def is_directory(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    def is_file(self) -> bool:
        return self.kind is EntryKind.FILE


class FileSystem(Protocol):
    def exists(self, path: str) -> bool: ...

    def stat(self, path: str) -> StatResult: ...

    def readdir(self, path: str) -> list[str]: ...

    def realpath(self, path: str) -> str: ...

    def read_file(self, path: str, encoding: str | None = None) -> str: ...

    def write_file(self, path: str, content: str, encoding: str | None = None) -> None: ...

    def mkdir(self, path: str) -> None: ...


class OsFileSystem:
    def exists(self, path: str) -> bool:
        return Path(path).exists()

    def stat(self, path: str) -> StatResult:
        st = os.stat(path)
        is_dir = statmod.S_ISDIR(st.st_mode)
        return StatResult(
            path=str(Path(path).absolute()),
            kind=EntryKind.DIRECTORY if is_dir else EntryKind.FILE,
            size=0 if is_dir else st.st_size,
        )

    def readdir(self, path: str) -> list[str]:
        return os.listdir(path)

    def realpath(self, path: str) -> str:
        return os.path.realpath(os.path.expanduser(path))

    def read_file(self, path: str, encoding: str | None = None) -> str:
        return Path(path).read_text(encoding=encoding or "utf-8")

    def write_file(self, path: str, content: str, encoding: str | None = None) -> None:
        Path(path).write_text(content, encoding=encoding or "utf-8")

    def mkdir(self, path: str) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)


DEFAULT_FS: FileSystem = OsFileSystem()
