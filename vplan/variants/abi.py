"""ABI set resolution."""

from __future__ import annotations

from collections.abc import Iterable

from vplan.core.result import Err, Ok, Result

from .errors import EmptyAbiSet, UnsupportedAbi
from .model import Abi, AbiSet

__all__ = ["SUPPORTED_ABIS", "resolve_abi_set"]

SUPPORTED_ABIS: tuple[Abi, ...] = tuple(Abi)


def resolve_abi_set(declared: Iterable[str]) -> Result[AbiSet, UnsupportedAbi | EmptyAbiSet]:
    """Turn declared ABI names into an AbiSet.

    Every unknown entry is reported at once. Duplicates (including an alias
    next to its canonical name) collapse to the first occurrence.
    """
    names = list(declared)
    if not names:
        return Err(EmptyAbiSet())

    abis: list[Abi] = []
    unknown: list[str] = []
    for name in names:
        abi = Abi.parse(name)
        if abi is None:
            unknown.append(name)
        elif abi not in abis:
            abis.append(abi)

    if unknown:
        return Err(
            UnsupportedAbi(
                entries=tuple(unknown),
                supported=tuple(abi.value for abi in SUPPORTED_ABIS),
            )
        )
    return Ok(AbiSet(tuple(abis)))
