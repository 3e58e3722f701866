"""Plan command - resolve and validate one build variant."""

from __future__ import annotations

import json
from pathlib import Path

import typer

from vplan.cli.commands._helpers import (
    JSON_OPTION,
    KEY_ALIAS_OPTION,
    KEY_PASSWORD_OPTION,
    PROPERTY_OPTION,
    STORE_FILE_OPTION,
    STORE_PASSWORD_OPTION,
    exit_with_error,
    signing_overrides,
)
from vplan.cli.context import build_context
from vplan.core.errors import ErrorCode
from vplan.core.result import Err, Ok
from vplan.output.errors import print_validation_error, validation_error_exit_code
from vplan.output.plan_view import render_plan
from vplan.variants.model import BuildType
from vplan.variants.plan_file import plan_to_dict, write_plan_file
from vplan.variants.resolver import resolve_variant


def plan(
    build_type: BuildType = typer.Argument(BuildType.RELEASE, help="Build type"),
    properties: list[str] | None = PROPERTY_OPTION,
    key_alias: str | None = KEY_ALIAS_OPTION,
    key_password: str | None = KEY_PASSWORD_OPTION,
    store_file: str | None = STORE_FILE_OPTION,
    store_password: str | None = STORE_PASSWORD_OPTION,
    json_output: bool = JSON_OPTION,
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Write the plan as JSON to this file", show_default=False
    ),
) -> None:
    """Resolve the packaging plan for a build type."""
    ctx = build_context()
    overrides = signing_overrides(
        properties=properties,
        key_alias=key_alias,
        key_password=key_password,
        store_file=store_file,
        store_password=store_password,
    )

    match resolve_variant(build_type, ctx.declaration, overrides, ctx.environment):
        case Err(error):
            print_validation_error(error, ctx.console, variant=build_type.value)
            raise typer.Exit(code=validation_error_exit_code(error))
        case Ok(resolved):
            pass

    name = ctx.declaration.app.artifact_name

    if output is not None:
        written = write_plan_file(path=output, plan=resolved, artifact_name=name)
        if isinstance(written, Err):
            exit_with_error(ctx, written.error.message, str(written.error.path), ErrorCode.IO_ERROR)

    if json_output:
        typer.echo(json.dumps(plan_to_dict(resolved, artifact_name=name), indent=2))
        return

    render_plan(resolved, ctx.console, artifact_name=name)
    if output is not None:
        ctx.console.success(f"plan written to {output}")
    else:
        ctx.console.success(f"{build_type.value} plan is valid")
