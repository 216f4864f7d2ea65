from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeAlias

from treefs.models.entry import File
from treefs.services.fs import StatResult
from treefs.services.recorder import Spy
from treefs.services.tree import Tree

logger = logging.getLogger(__name__)

Callback: TypeAlias = Callable[..., Any]

OPERATIONS = (
    "exists",
    "stat",
    "stat_callback",
    "readdir",
    "readdir_callback",
    "realpath",
    "realpath_callback",
    "read_file",
    "read_file_callback",
    "write_file",
    "write_file_callback",
    "mkdir",
    "mkdir_callback",
)


class MockFileSystem:
    """Filesystem operations backed by a :class:`Tree`, every call recorded.

    Each operation is an instance attribute holding a :class:`Spy`, so tests
    can assert on ``fs.read_file.call_count`` or ``fs.write_file.calls``.
    Callback forms run to completion and invoke their callback exactly once
    before returning; failures are raised before the callback would run.
    """

    exists: Spy[[str], bool]
    stat: Spy[[str], StatResult]
    stat_callback: Spy[[str, Callback], None]
    readdir: Spy[[str], list[str]]
    readdir_callback: Spy[[str, Callback], None]
    realpath: Spy[[str], str]
    realpath_callback: Spy[[str, Callback], None]
    read_file: Spy[..., str]
    read_file_callback: Spy[..., None]
    write_file: Spy[..., None]
    write_file_callback: Spy[..., None]
    mkdir: Spy[..., None]
    mkdir_callback: Spy[..., None]

    def __init__(self, tree: Tree) -> None:
        self._tree = tree
        self.spies: dict[str, Spy[..., Any]] = {}
        self.rebind()

    @property
    def tree(self) -> Tree:
        return self._tree

    def rebind(self, tree: Tree | None = None) -> None:
        """Install fresh spies for every operation, optionally over a new tree."""
        if tree is not None:
            self._tree = tree
        self.spies = {}
        for name in OPERATIONS:
            spy: Spy[..., Any] = Spy(getattr(self, f"_{name}"), name=name, callback=name.endswith("_callback"))
            self.spies[name] = spy
            setattr(self, name, spy)
        logger.debug("Mock filesystem bound to tree at %s", self._tree.root)

    def total_calls(self) -> int:
        return sum(spy.call_count for spy in self.spies.values())

    # -- operations --------------------------------------------------------

    def _exists(self, path: str) -> bool:
        return self._tree.exists(path)

    def _stat(self, path: str) -> StatResult:
        entry = self._tree.get(path)
        size = len(entry.content) if isinstance(entry, File) else 0
        return StatResult(path=self._tree.resolve(path), kind=entry.kind, size=size)

    def _stat_callback(self, path: str, callback: Callback) -> None:
        callback(self._stat(path))

    def _readdir(self, path: str) -> list[str]:
        return [child.name for child in self._tree.get_directory(path).children]

    def _readdir_callback(self, path: str, callback: Callback) -> None:
        callback(self._readdir(path))

    def _realpath(self, path: str) -> str:
        return self._tree.resolve(path)

    def _realpath_callback(self, path: str, callback: Callback) -> None:
        callback(self._realpath(path))

    def _read_file(self, path: str, encoding: str | None = None) -> str:
        return self._tree.get_file(path).content

    def _read_file_callback(self, path: str, encoding: str | None, callback: Callback) -> None:
        callback(self._read_file(path, encoding))

    def _write_file(self, path: str, content: str, encoding: str | None = None) -> None:
        self._tree.get_file(path).set_content(content)

    def _write_file_callback(self, path: str, content: str, encoding: str | None, callback: Callback) -> None:
        self._write_file(path, content, encoding)
        callback()

    def _mkdir(self, path: str, *args: Any, **kwargs: Any) -> None:
        return None

    def _mkdir_callback(self, path: str, *args: Any, callback: Callback | None = None) -> None:
        # Options such as a mode may sit between the path and the callback.
        if callback is None and args and callable(args[-1]):
            callback = args[-1]
        if callback is not None:
            callback()
