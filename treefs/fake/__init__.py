from __future__ import annotations

from treefs.models.entry import Directory, Entry, File, make_directory, make_file
from treefs.models.enums import DuplicatePolicy, EntryKind
from treefs.models.errors import DuplicateEntryError, EntryNotFoundError, TreeFsError, WrongKindError
from treefs.services.fs import FileSystem, StatResult
from treefs.services.mock_fs import MockFileSystem
from treefs.services.recorder import Call, Spy
from treefs.services.tree import Tree

__all__ = [
    "Call",
    "Directory",
    "DuplicateEntryError",
    "DuplicatePolicy",
    "Entry",
    "EntryKind",
    "EntryNotFoundError",
    "File",
    "FileSystem",
    "MockFileSystem",
    "Spy",
    "StatResult",
    "Tree",
    "TreeFsError",
    "WrongKindError",
    "make_directory",
    "make_file",
]
