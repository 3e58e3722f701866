"""Tests for vplan.core.result module."""

import pytest

from vplan.core.result import Err, Ok, is_err, is_ok


def test_ok_frozen() -> None:
    result = Ok(42)
    with pytest.raises(AttributeError):
        result.value = 0  # type: ignore[misc]


def test_equality() -> None:
    assert Ok(42) == Ok(42)
    assert Ok(42) != Ok(0)
    assert Err("x") != Ok("x")


def test_repr() -> None:
    assert repr(Ok("arm64-v8a")) == "Ok('arm64-v8a')"
    assert repr(Err("no keystore")) == "Err('no keystore')"


def test_type_guards() -> None:
    assert is_ok(Ok(1)) and not is_err(Ok(1))
    assert is_err(Err("x")) and not is_ok(Err("x"))


def test_pattern_matching() -> None:
    match Err("bad"):
        case Ok(_):
            pytest.fail("expected Err")
        case Err(error):
            assert error == "bad"
