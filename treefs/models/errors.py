from __future__ import annotations


class TreeFsError(AssertionError):
    """Base for failures raised by the fake tree and the mock filesystem.

    These are assertion-style failures: code under test is not expected to
    recover from them, a harness calls ``Tree.exists`` first when it needs
    existence-safe behaviour.
    """


class EntryNotFoundError(TreeFsError):
    def __init__(self, name: str) -> None:
        super().__init__(f"ENOENT {name} no such file or directory.")
        self.name = name


class WrongKindError(TreeFsError):
    def __init__(self, path: str, message: str) -> None:
        super().__init__(message)
        self.path = path

    @classmethod
    def not_a_directory(cls, path: str) -> WrongKindError:
        return cls(path, f"{path} is not a directory")

    @classmethod
    def not_a_file(cls, path: str) -> WrongKindError:
        return cls(path, f"EISDIR {path} is not a file.")


class DuplicateEntryError(TreeFsError):
    def __init__(self, path: str) -> None:
        super().__init__(f"EEXIST {path} is already indexed.")
        self.path = path
