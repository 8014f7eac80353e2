"""Tests for relkit.core.structured module."""

from __future__ import annotations

from relkit.core.structured import (
    as_obj_list,
    as_str_dict,
    get_bool,
    get_list,
    get_str,
    get_str_list,
    get_table,
)


def test_as_str_dict() -> None:
    assert as_str_dict({"a": 1}) == {"a": 1}
    assert as_str_dict({1: "a"}) is None
    assert as_str_dict(["a"]) is None


def test_as_obj_list() -> None:
    assert as_obj_list([1, "a"]) == [1, "a"]
    assert as_obj_list(("a",)) is None


def test_get_str_strips_and_treats_blank_as_missing() -> None:
    table = {"name": "  relkit ", "blank": "   ", "num": 3}
    assert get_str(table, "name") == "relkit"
    assert get_str(table, "blank") is None
    assert get_str(table, "num") is None
    assert get_str(table, "missing") is None


def test_get_bool_rejects_non_bools() -> None:
    assert get_bool({"full": False}, "full") is False
    assert get_bool({"full": 0}, "full") is None


def test_get_table_and_list() -> None:
    table = {"paths": {"dist": "out"}, "bundles": [{"output": "a.js"}]}
    assert get_table(table, "paths") == {"dist": "out"}
    assert get_table(table, "bundles") is None
    assert get_list(table, "bundles") == [{"output": "a.js"}]
    assert get_list(table, "paths") is None


def test_get_str_list() -> None:
    assert get_str_list({"files": ["*.js", "*.d.ts"]}, "files") == ("*.js", "*.d.ts")
    assert get_str_list({"files": ["*.js", 1]}, "files") is None
    assert get_str_list({}, "files") is None
