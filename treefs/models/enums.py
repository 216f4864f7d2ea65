from __future__ import annotations

from enum import Enum


class EntryKind(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"


class DuplicatePolicy(str, Enum):
    KEEP_FIRST = "keep_first"
    OVERWRITE = "overwrite"
    FAIL = "fail"
