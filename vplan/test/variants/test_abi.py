from __future__ import annotations

from vplan.core.result import Err, Ok
from vplan.variants.abi import resolve_abi_set
from vplan.variants.errors import EmptyAbiSet, UnsupportedAbi
from vplan.variants.model import Abi, AbiSet


def test_resolves_short_names() -> None:
    result = resolve_abi_set(["arm64", "armv7"])
    assert result == Ok(AbiSet((Abi.ARM64_V8A, Abi.ARMEABI_V7A)))


def test_order_is_not_significant() -> None:
    assert resolve_abi_set(["x86_64", "arm64"]) == resolve_abi_set(["arm64", "x86_64"])


def test_duplicates_collapse() -> None:
    result = resolve_abi_set(["arm64", "arm64-v8a", "arm64"])
    assert isinstance(result, Ok)
    assert result.value.abis == (Abi.ARM64_V8A,)


def test_unknown_entries_are_all_reported() -> None:
    result = resolve_abi_set(["arm64", "mips", "x86"])
    assert isinstance(result, Err)
    assert isinstance(result.error, UnsupportedAbi)
    assert result.error.entries == ("mips", "x86")
    assert "arm64-v8a" in result.error.supported


def test_empty_set_is_rejected() -> None:
    assert resolve_abi_set([]) == Err(EmptyAbiSet())
