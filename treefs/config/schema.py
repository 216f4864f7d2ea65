from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from treefs.models.entry import Directory, Entry, File
from treefs.models.enums import DuplicatePolicy
from treefs.services.paths import DEFAULT_ROOT


@dataclass(slots=True)
class TreeConfig:
    root: str = DEFAULT_ROOT
    duplicate_policy: DuplicatePolicy = DuplicatePolicy.KEEP_FIRST

    def to_dict(self) -> dict[str, Any]:
        return {
            "root": self.root,
            "duplicatePolicy": self.duplicate_policy.value,
        }


@dataclass(slots=True)
class FixtureSpec:
    config: TreeConfig
    entries: list[Entry] = field(default_factory=list)


def _parse_policy(value: Any, default: DuplicatePolicy) -> DuplicatePolicy:
    try:
        return DuplicatePolicy(str(value))
    except ValueError:
        return default


def from_dict(data: dict[str, Any], defaults: TreeConfig) -> TreeConfig:
    return TreeConfig(
        root=str(data.get("root", defaults.root)),
        duplicate_policy=_parse_policy(
            data.get("duplicatePolicy", defaults.duplicate_policy.value), defaults.duplicate_policy
        ),
    )


def entry_from_dict(payload: dict[str, Any]) -> Entry:
    name = str(payload["name"])
    children = payload.get("children")
    if children is not None:
        if not isinstance(children, list):
            raise ValueError(f"Children of {name!r} must be a list.")
        return Directory(name=name, children=[entry_from_dict(child) for child in children])
    return File.create(name, payload.get("content"))


def entry_to_dict(entry: Entry) -> dict[str, Any]:
    if isinstance(entry, Directory):
        return {"name": entry.name, "children": [entry_to_dict(child) for child in entry.children]}
    return {"name": entry.name, "content": entry.content}


def fixture_from_dict(data: dict[str, Any], defaults: TreeConfig) -> FixtureSpec:
    raw_entries = data.get("entries", [])
    if not isinstance(raw_entries, list):
        raise ValueError("Fixture entries must be a list.")
    return FixtureSpec(
        config=from_dict(data, defaults),
        entries=[entry_from_dict(x) for x in raw_entries],
    )


def fixture_to_dict(fixture: FixtureSpec) -> dict[str, Any]:
    return {
        **fixture.config.to_dict(),
        "entries": [entry_to_dict(entry) for entry in fixture.entries],
    }
