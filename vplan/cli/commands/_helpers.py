"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import typer

from vplan.core.errors import ErrorCode
from vplan.output.console import Style
from vplan.variants.signing import SigningOverrides

if TYPE_CHECKING:
    from vplan.cli.context import CLIContext


def parse_properties(values: list[str] | None) -> dict[str, str]:
    """Parse repeated -P key=value options.

    Raises:
        typer.BadParameter: An entry has no '='.
    """
    out: dict[str, str] = {}
    for item in values or []:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            raise typer.BadParameter(f"expected key=value, got {item!r}", param_hint="-P")
        out[key.strip()] = value
    return out


def signing_overrides(
    *,
    properties: list[str] | None,
    key_alias: str | None,
    key_password: str | None,
    store_file: str | None,
    store_password: str | None,
) -> SigningOverrides:
    """Merge -P properties with the dedicated options; dedicated options win."""
    base = SigningOverrides.from_properties(parse_properties(properties))
    return SigningOverrides(
        alias=key_alias or base.alias,
        password=key_password or base.password,
        keystore_path=store_file or base.keystore_path,
        keystore_password=store_password or base.keystore_password,
    )


def exit_with_error(ctx: CLIContext, message: str, hint: str | None, code: ErrorCode) -> NoReturn:
    ctx.console.error(message)
    if hint:
        ctx.console.print(f"hint: {hint}", Style.DIM)
    raise typer.Exit(code=int(code))


PROPERTY_OPTION = typer.Option(
    None,
    "--property",
    "-P",
    help="Build property key=value (keyAlias, keyPassword, storeFile, storePassword)",
    show_default=False,
)
KEY_ALIAS_OPTION = typer.Option(None, "--key-alias", help="Signing key alias", show_default=False)
KEY_PASSWORD_OPTION = typer.Option(
    None, "--key-password", help="Signing key password", show_default=False
)
STORE_FILE_OPTION = typer.Option(None, "--store-file", help="Keystore path", show_default=False)
STORE_PASSWORD_OPTION = typer.Option(
    None, "--store-password", help="Keystore password", show_default=False
)
JSON_OPTION = typer.Option(False, "--json", help="Print the plan as JSON")
