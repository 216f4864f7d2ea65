from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar, TypeAlias

from treefs.models.enums import EntryKind


@dataclass(slots=True, eq=False)
class Directory:
    name: str
    children: list[Entry] = field(default_factory=list)

    kind: ClassVar[EntryKind] = EntryKind.DIRECTORY

    def is_file(self) -> bool:
        return False

    def is_directory(self) -> bool:
        return True

    def add_child(self, *entries: Entry) -> Directory:
        self.children.extend(entries)
        return self


@dataclass(slots=True, eq=False)
class File:
    name: str
    content: str = ""

    kind: ClassVar[EntryKind] = EntryKind.FILE

    def __post_init__(self) -> None:
        # Mapping content becomes compact JSON here, once.
        self.content = _coerce_content(self.content)

    @classmethod
    def create(cls, name: str, content: str | Mapping[str, Any] | None = None) -> File:
        return cls(name=name, content=content)  # type: ignore[arg-type]

    def is_file(self) -> bool:
        return True

    def is_directory(self) -> bool:
        return False

    def set_content(self, content: str) -> None:
        # Stored verbatim; JSON coercion only happens at construction.
        self.content = content


Entry: TypeAlias = Directory | File


def _coerce_content(content: str | Mapping[str, Any] | None) -> str:
    if content is None:
        return ""
    if isinstance(content, str):
        return content
    if isinstance(content, Mapping):
        return json.dumps(dict(content), separators=(",", ":"), ensure_ascii=False)
    raise TypeError(f"File content must be a string or a mapping, got {type(content).__name__}")


def make_directory(name: str, *children: Entry) -> Directory:
    return Directory(name=name, children=list(children))


def make_file(name: str, content: str | Mapping[str, Any] | None = None) -> File:
    return File.create(name, content)
