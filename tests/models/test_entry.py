from __future__ import annotations

import pytest

from treefs.models.entry import Directory, File, make_directory, make_file
from treefs.models.enums import EntryKind


def test_directory_flags_are_exclusive() -> None:
    d = make_directory("src")
    assert d.is_directory() is True
    assert d.is_file() is False
    assert d.kind is EntryKind.DIRECTORY


def test_file_flags_are_exclusive() -> None:
    f = make_file("a.txt")
    assert f.is_file() is True
    assert f.is_directory() is False
    assert f.kind is EntryKind.FILE


def test_directory_keeps_initial_children_in_order() -> None:
    a = make_file("a.txt")
    b = make_directory("b")
    c = make_file("c.txt")
    d = make_directory("root", a, b, c)
    assert [child.name for child in d.children] == ["a.txt", "b", "c.txt"]


def test_add_child_appends_and_chains() -> None:
    d = make_directory("root", make_file("first"))
    returned = d.add_child(make_file("second"), make_file("third")).add_child(make_directory("fourth"))
    assert returned is d
    assert [child.name for child in d.children] == ["first", "second", "third", "fourth"]


def test_children_is_live_view() -> None:
    d = make_directory("root")
    children = d.children
    d.add_child(make_file("late.txt"))
    assert [child.name for child in children] == ["late.txt"]


def test_mapping_content_serialized_to_compact_json() -> None:
    assert make_file("a.json", {"k": 1}).content == '{"k":1}'


def test_nested_mapping_content_keeps_key_order() -> None:
    f = make_file("cfg.json", {"b": [1, 2], "a": {"x": None, "y": True}})
    assert f.content == '{"b":[1,2],"a":{"x":null,"y":true}}'


def test_non_ascii_mapping_content_kept_verbatim() -> None:
    assert make_file("i18n.json", {"greeting": "héllo"}).content == '{"greeting":"héllo"}'


def test_missing_content_defaults_to_empty_string() -> None:
    assert make_file("b.txt").content == ""
    assert make_file("c.txt", None).content == ""


def test_string_content_stored_verbatim() -> None:
    raw = '{"already": "json"}'
    assert make_file("raw.json", raw).content == raw


def test_invalid_content_type_rejected() -> None:
    with pytest.raises(TypeError, match="string or a mapping"):
        make_file("bad.bin", 42)  # type: ignore[arg-type]


def test_set_content_never_reserializes() -> None:
    f = make_file("a.json", {"k": 1})
    f.set_content('{"k": 2}')
    assert f.content == '{"k": 2}'


def test_file_create_matches_factory() -> None:
    f = File.create("x.json", {"a": 1})
    assert f.name == "x.json"
    assert f.content == '{"a":1}'


def test_entries_compare_by_identity() -> None:
    assert make_file("same") != make_file("same")
    assert isinstance(make_directory("x"), Directory)


def test_direct_constructor_applies_coercion() -> None:
    assert File("a.json", {"k": 1}).content == '{"k":1}'  # type: ignore[arg-type]
    assert File("plain.txt", "text").content == "text"
    assert File("empty.txt").content == ""
    assert File("none.txt", None).content == ""  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        File("x", 5)  # type: ignore[arg-type]
