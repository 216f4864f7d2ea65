from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator

from treefs.models.entry import Directory, Entry, File
from treefs.models.enums import DuplicatePolicy
from treefs.models.errors import DuplicateEntryError, EntryNotFoundError, WrongKindError
from treefs.services.paths import DEFAULT_ROOT, normalize_root, resolve_path

logger = logging.getLogger(__name__)


def iter_entries(entry: Entry, path: str, resolve: Callable[[str], str]) -> Iterator[tuple[str, Entry]]:
    """Yield ``(absolute_path, entry)`` for *entry* and its subtree, depth-first.

    Children are visited in insertion order, each at
    ``resolve(parent_path + "/" + child.name)``. A directory that contains
    itself raises ``ValueError``; the same directory shared by two parents is
    walked under both.
    """
    stack: list[tuple[str, Entry, frozenset[int]]] = [(path, entry, frozenset())]
    while stack:
        current_path, current, ancestors = stack.pop()
        yield current_path, current
        if isinstance(current, Directory):
            if id(current) in ancestors:
                raise ValueError(f"Directory {current.name!r} at {current_path} contains itself")
            inner = ancestors | {id(current)}
            stack.extend(
                (resolve(f"{current_path}/{child.name}"), child, inner) for child in reversed(current.children)
            )


class Tree:
    def __init__(
        self,
        entries: Entry | Iterable[Entry] | None = None,
        *,
        root: str = DEFAULT_ROOT,
        duplicate_policy: DuplicatePolicy = DuplicatePolicy.KEEP_FIRST,
    ) -> None:
        self._root = normalize_root(root)
        self._duplicate_policy = duplicate_policy
        self._root_dir = Directory(name=self._root)
        self._entries: dict[str, Entry] = {self._root: self._root_dir}
        self._files: dict[str, File] = {}
        if entries is not None:
            self.add(entries)

    @property
    def root(self) -> str:
        return self._root

    @property
    def root_directory(self) -> Directory:
        return self._root_dir

    @property
    def duplicate_policy(self) -> DuplicatePolicy:
        return self._duplicate_policy

    def resolve(self, name: str) -> str:
        return resolve_path(self._root, name)

    def add(self, entries: Entry | Iterable[Entry]) -> None:
        batch = [entries] if isinstance(entries, (Directory, File)) else list(entries)

        planned: list[tuple[str, Entry]] = []
        for entry in batch:
            planned.extend(iter_entries(entry, self.resolve(entry.name), self.resolve))

        if self._duplicate_policy is DuplicatePolicy.FAIL:
            seen: set[str] = set()
            for path, _ in planned:
                if path in self._entries or path in seen:
                    raise DuplicateEntryError(path)
                seen.add(path)

        self._root_dir.add_child(*batch)
        indexed = 0
        for path, entry in planned:
            if self._index(path, entry):
                indexed += 1
        logger.debug("Added %d entries under %s, %d paths indexed", len(batch), self._root, indexed)

    def _index(self, path: str, entry: Entry) -> bool:
        # The root directory is never replaced, whatever the policy.
        keep_existing = path == self._root or self._duplicate_policy is not DuplicatePolicy.OVERWRITE
        if path in self._entries and keep_existing:
            logger.warning("Path %s is already indexed; keeping the first entry", path)
            return False
        self._entries[path] = entry
        if isinstance(entry, File):
            self._files[path] = entry
        else:
            self._files.pop(path, None)
        return True

    def exists(self, name: str) -> bool:
        return self.resolve(name) in self._entries

    def get(self, name: str) -> Entry:
        entry = self._entries.get(self.resolve(name))
        if entry is None:
            raise EntryNotFoundError(name)
        return entry

    def get_directory(self, name: str) -> Directory:
        entry = self.get(name)
        if not isinstance(entry, Directory):
            raise WrongKindError.not_a_directory(name)
        return entry

    def get_file(self, name: str) -> File:
        entry = self.get(name)
        if not isinstance(entry, File):
            raise WrongKindError.not_a_file(name)
        return entry

    def list_all(self) -> dict[str, Entry]:
        return dict(self._entries)

    def list_files(self) -> dict[str, File]:
        return dict(self._files)
