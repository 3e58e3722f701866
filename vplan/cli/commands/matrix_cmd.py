"""Matrix command - resolve every build type independently."""

from __future__ import annotations

import json

import typer

from vplan.cli.commands._helpers import (
    JSON_OPTION,
    KEY_ALIAS_OPTION,
    KEY_PASSWORD_OPTION,
    PROPERTY_OPTION,
    STORE_FILE_OPTION,
    STORE_PASSWORD_OPTION,
    signing_overrides,
)
from vplan.cli.context import build_context
from vplan.core.errors import ErrorCode
from vplan.core.result import Err, Ok
from vplan.output.errors import print_validation_error, validation_error_exit_code
from vplan.output.plan_view import render_plan
from vplan.variants.plan_file import plan_to_dict
from vplan.variants.resolver import resolve_matrix


def matrix(
    properties: list[str] | None = PROPERTY_OPTION,
    key_alias: str | None = KEY_ALIAS_OPTION,
    key_password: str | None = KEY_PASSWORD_OPTION,
    store_file: str | None = STORE_FILE_OPTION,
    store_password: str | None = STORE_PASSWORD_OPTION,
    json_output: bool = JSON_OPTION,
) -> None:
    """Resolve debug and release plans side by side."""
    ctx = build_context()
    overrides = signing_overrides(
        properties=properties,
        key_alias=key_alias,
        key_password=key_password,
        store_file=store_file,
        store_password=store_password,
    )
    name = ctx.declaration.app.artifact_name
    outcomes = resolve_matrix(ctx.declaration, overrides, ctx.environment)

    exit_code = ErrorCode.OK.value
    payload: list[dict[str, object]] = []

    for outcome in outcomes:
        variant = outcome.build_type.value
        match outcome.result:
            case Ok(resolved):
                if json_output:
                    payload.append(
                        {
                            "build_type": variant,
                            "ok": True,
                            "plan": plan_to_dict(resolved, artifact_name=name),
                        }
                    )
                else:
                    render_plan(resolved, ctx.console, artifact_name=name)
            case Err(error):
                if exit_code == ErrorCode.OK.value:
                    exit_code = validation_error_exit_code(error)
                if json_output:
                    payload.append(
                        {
                            "build_type": variant,
                            "ok": False,
                            "error": {"kind": type(error).__name__, "message": error.message},
                        }
                    )
                else:
                    print_validation_error(error, ctx.console, variant=variant)

    if json_output:
        typer.echo(json.dumps(payload, indent=2))
    elif exit_code == ErrorCode.OK.value:
        ctx.console.success(f"{len(outcomes)} variants valid")

    if exit_code != ErrorCode.OK.value:
        raise typer.Exit(code=exit_code)
