from __future__ import annotations

import json
from typing import Any

from result import Err, Ok, Result

from treefs.config.defaults import default_config, sample_fixture
from treefs.config.schema import TreeConfig, fixture_from_dict, fixture_to_dict, from_dict
from treefs.services.fs import DEFAULT_FS, FileSystem
from treefs.services.tree import Tree

CONFIG_PATH = "~/.config/treefs/config.json"


def _read_json_object(path: str, fs: FileSystem, label: str) -> Result[dict[str, Any], str]:
    try:
        payload = json.loads(fs.read_file(path, "utf-8"))
    except Exception as exc:  # noqa: BLE001
        return Err(f"Failed reading {label} at {path}: {exc}.")
    if not isinstance(payload, dict):
        return Err(f"{label.capitalize()} at {path} must be a JSON object.")
    return Ok(payload)


def load_config(path: str | None = None, fs: FileSystem = DEFAULT_FS) -> Result[TreeConfig, str]:
    resolved = path or fs.realpath(CONFIG_PATH)
    if not fs.exists(resolved):
        return Ok(default_config())

    payload = _read_json_object(resolved, fs, "config")
    if isinstance(payload, Err):
        return payload
    return Ok(from_dict(payload.unwrap(), default_config()))


def load_fixture(
    path: str, config: TreeConfig | None = None, fs: FileSystem = DEFAULT_FS
) -> Result[Tree, str]:
    if not fs.exists(path):
        return Err(f"Fixture {path} does not exist.")

    payload = _read_json_object(path, fs, "fixture")
    if isinstance(payload, Err):
        return payload
    try:
        fixture = fixture_from_dict(payload.unwrap(), config or default_config())
        tree = Tree(
            fixture.entries,
            root=fixture.config.root,
            duplicate_policy=fixture.config.duplicate_policy,
        )
    except Exception as exc:  # noqa: BLE001
        return Err(f"Invalid fixture at {path}: {exc}.")
    return Ok(tree)


def sample_fixture_json() -> str:
    return json.dumps(fixture_to_dict(sample_fixture()), indent=2)
