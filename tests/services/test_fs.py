from __future__ import annotations

from pathlib import Path

import pytest

from treefs.models.enums import EntryKind
from treefs.services.fs import OsFileSystem


def test_read_and_write_round_trip(tmp_path: Path) -> None:
    fs = OsFileSystem()
    target = tmp_path / "out.txt"

    fs.write_file(str(target), "Hello, World!")

    assert fs.read_file(str(target)) == "Hello, World!"
    assert target.read_text() == "Hello, World!"


def test_read_missing_raises_file_not_found(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        OsFileSystem().read_file(str(tmp_path / "missing.txt"))


def test_stat_file_and_directory(tmp_path: Path) -> None:
    fs = OsFileSystem()
    (tmp_path / "data.bin").write_bytes(b"12345")

    file_stat = fs.stat(str(tmp_path / "data.bin"))
    dir_stat = fs.stat(str(tmp_path))

    assert file_stat.kind is EntryKind.FILE
    assert file_stat.size == 5
    assert not file_stat.is_directory()
    assert dir_stat.is_directory()
    assert dir_stat.size == 0


def test_exists_and_readdir(tmp_path: Path) -> None:
    fs = OsFileSystem()
    (tmp_path / "a.txt").touch()
    (tmp_path / "sub").mkdir()

    assert fs.exists(str(tmp_path / "a.txt"))
    assert not fs.exists(str(tmp_path / "b.txt"))
    assert sorted(fs.readdir(str(tmp_path))) == ["a.txt", "sub"]


def test_mkdir_creates_parents(tmp_path: Path) -> None:
    fs = OsFileSystem()
    nested = tmp_path / "a" / "b"

    fs.mkdir(str(nested))
    fs.mkdir(str(nested))

    assert nested.is_dir()


def test_realpath_is_absolute(tmp_path: Path) -> None:
    assert OsFileSystem().realpath(str(tmp_path / "x" / ".." / "y")) == str((tmp_path / "y").resolve())
