from __future__ import annotations

import os
from pathlib import Path

import typer

from vplan import __version__
from vplan.cli.commands.abis_cmd import abis
from vplan.cli.commands.artifacts_cmd import artifacts
from vplan.cli.commands.matrix_cmd import matrix
from vplan.cli.commands.plan_cmd import plan
from vplan.cli.context import CONFIG_ENV_VAR
from vplan.core.errors import ErrorCode


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# Commands
app.command()(plan)
app.command()(matrix)
app.command()(artifacts)
app.command()(abis)


@app.callback(invoke_without_command=True)
def _main(  # pyright: ignore[reportUnusedFunction]
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
    config: Path | None = typer.Option(
        None,
        "--config",
        help="Path to vplan.toml (default: ./vplan.toml)",
    ),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    if config is not None:
        path = config.expanduser()
        if not path.is_file():
            typer.echo(f"error: --config '{path}' does not exist", err=True)
            raise typer.Exit(code=int(ErrorCode.CONFIG_ERROR))
        os.environ[CONFIG_ENV_VAR] = str(path.resolve())

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


def main() -> None:
    app()
