from __future__ import annotations

import pytest

from vplan.core.structured import as_str_dict, get_bool, get_str, get_str_list, get_table


def test_as_str_dict_rejects_non_string_keys() -> None:
    assert as_str_dict({1: "a"}) is None
    assert as_str_dict({"a": 1}) == {"a": 1}


def test_get_str_strips() -> None:
    assert get_str({"k": "  v  "}, "k") == "v"
    assert get_str({}, "k") is None


def test_get_str_rejects_wrong_type() -> None:
    with pytest.raises(TypeError, match="'k' must be a string"):
        get_str({"k": 3}, "k")


def test_get_bool() -> None:
    assert get_bool({"k": False}, "k") is False
    assert get_bool({}, "k") is None
    with pytest.raises(TypeError):
        get_bool({"k": "yes"}, "k")


def test_get_str_list_keeps_empty_list() -> None:
    assert get_str_list({"k": []}, "k") == ()
    assert get_str_list({"k": ["a", " b "]}, "k") == ("a", "b")


def test_get_str_list_rejects_mixed_items() -> None:
    with pytest.raises(TypeError):
        get_str_list({"k": ["a", 1]}, "k")


def test_get_table_rejects_scalar() -> None:
    with pytest.raises(TypeError, match="must be a table"):
        get_table({"abi": "arm64"}, "abi")
