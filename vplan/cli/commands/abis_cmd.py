"""Abis command - show the supported ABI universe."""

from __future__ import annotations

import typer

from vplan.variants.abi import SUPPORTED_ABIS


def abis() -> None:
    """List supported ABIs and their short aliases."""
    for abi in SUPPORTED_ABIS:
        if abi.short_name != abi.value:
            typer.echo(f"{abi.value} ({abi.short_name})")
        else:
            typer.echo(abi.value)
