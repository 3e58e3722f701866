"""Artifacts command - list expected output files for a variant."""

from __future__ import annotations

import typer

from vplan.cli.commands._helpers import (
    KEY_ALIAS_OPTION,
    PROPERTY_OPTION,
    STORE_FILE_OPTION,
    signing_overrides,
)
from vplan.cli.context import build_context
from vplan.core.result import Err
from vplan.output.errors import print_validation_error, validation_error_exit_code
from vplan.variants.artifacts import expected_artifacts
from vplan.variants.model import BuildType
from vplan.variants.resolver import resolve_variant


def artifacts(
    build_type: BuildType = typer.Argument(BuildType.RELEASE, help="Build type"),
    properties: list[str] | None = PROPERTY_OPTION,
    key_alias: str | None = KEY_ALIAS_OPTION,
    store_file: str | None = STORE_FILE_OPTION,
) -> None:
    """Print expected artifact file names, one per line."""
    ctx = build_context()
    overrides = signing_overrides(
        properties=properties,
        key_alias=key_alias,
        key_password=None,
        store_file=store_file,
        store_password=None,
    )

    result = resolve_variant(build_type, ctx.declaration, overrides, ctx.environment)
    if isinstance(result, Err):
        print_validation_error(result.error, ctx.console, variant=build_type.value)
        raise typer.Exit(code=validation_error_exit_code(result.error))

    for artifact in expected_artifacts(result.value, name=ctx.declaration.app.artifact_name):
        typer.echo(artifact.file_name)
