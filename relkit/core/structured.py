"""Typed reads from parsed relkit.toml and package.json data.

``tomllib`` and ``json`` hand back plain objects; these accessors check the
shape of one value at a time and return None when it does not match.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import cast

StrDict = dict[str, object]
ObjList = list[object]


def as_str_dict(obj: object) -> StrDict | None:
    """obj as a table, or None unless it is a dict keyed by strings."""
    if not isinstance(obj, dict):
        return None
    table = cast(dict[object, object], obj)
    if not all(isinstance(key, str) for key in table):
        return None
    return cast(StrDict, table)


def as_obj_list(obj: object) -> ObjList | None:
    return cast(ObjList, obj) if isinstance(obj, list) else None


def get_str(table: Mapping[str, object], key: str) -> str | None:
    """Stripped string at key; blank strings count as missing."""
    value = table.get(key)
    if not isinstance(value, str):
        return None
    return value.strip() or None


def get_bool(table: Mapping[str, object], key: str) -> bool | None:
    value = table.get(key)
    return value if isinstance(value, bool) else None


def get_table(table: Mapping[str, object], key: str) -> StrDict | None:
    return as_str_dict(table.get(key))


def get_list(table: Mapping[str, object], key: str) -> ObjList | None:
    return as_obj_list(table.get(key))


def get_str_list(table: Mapping[str, object], key: str) -> tuple[str, ...] | None:
    """Strings at key as a tuple; None if missing or any item is not a str."""
    items = get_list(table, key)
    if items is None or not all(isinstance(item, str) for item in items):
        return None
    return tuple(cast(list[str], items))
