"""Helpers for reading untyped TOML tables.

Each getter returns None when the key is missing and raises TypeError when the
key is present with the wrong type, so a typo in vplan.toml is reported instead
of silently falling back to a default.
"""

from __future__ import annotations

from typing import Mapping, TypeGuard, cast

StrDict = dict[str, object]


def is_str_dict(obj: object) -> TypeGuard[StrDict]:
    """Return True if obj is a dict with string keys."""
    if not isinstance(obj, dict):
        return False
    d = cast(dict[object, object], obj)
    return all(isinstance(k, str) for k in d.keys())


def as_str_dict(obj: object) -> StrDict | None:
    if is_str_dict(obj):
        return obj
    return None


def get_table(table: Mapping[str, object], key: str) -> StrDict | None:
    value = table.get(key)
    if value is None:
        return None
    d = as_str_dict(value)
    if d is None:
        raise TypeError(f"'{key}' must be a table")
    return d


def get_str(table: Mapping[str, object], key: str) -> str | None:
    """Get a string value, stripped. Empty strings are returned as ''."""
    value = table.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise TypeError(f"'{key}' must be a string")
    return value.strip()


def get_bool(table: Mapping[str, object], key: str) -> bool | None:
    value = table.get(key)
    if value is None:
        return None
    if not isinstance(value, bool):
        raise TypeError(f"'{key}' must be true or false")
    return value


def get_str_list(table: Mapping[str, object], key: str) -> tuple[str, ...] | None:
    """Get a list of strings as a tuple."""
    value = table.get(key)
    if value is None:
        return None
    if not isinstance(value, list):
        raise TypeError(f"'{key}' must be a list of strings")
    items = cast(list[object], value)
    out: list[str] = []
    for item in items:
        if not isinstance(item, str):
            raise TypeError(f"'{key}' must be a list of strings")
        out.append(item.strip())
    return tuple(out)
