from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

import typer

from vplan.core.config import CONFIG_FILENAME, Declaration, load_declaration_or_default
from vplan.core.errors import ErrorCode
from vplan.core.result import Err
from vplan.output.console import ConsoleProtocol, RichConsole, Style

CONFIG_ENV_VAR = "VPLAN_CONFIG"


@dataclass(frozen=True, slots=True)
class CLIContext:
    declaration: Declaration
    config_path: Path
    environment: Mapping[str, str]
    console: ConsoleProtocol


def config_path() -> Path:
    """Config file: $VPLAN_CONFIG if set, else vplan.toml in the working directory."""
    env = os.environ.get(CONFIG_ENV_VAR)
    if env:
        return Path(env).expanduser()
    return Path.cwd() / CONFIG_FILENAME


def build_context() -> CLIContext:
    console = RichConsole()
    path = config_path()

    result = load_declaration_or_default(path)
    if isinstance(result, Err):
        console.error(result.error.message)
        if result.error.hint:
            console.print(f"hint: {result.error.hint}", Style.DIM)
        raise typer.Exit(code=int(ErrorCode.CONFIG_ERROR))

    return CLIContext(
        declaration=result.value,
        config_path=path,
        environment=dict(os.environ),
        console=console,
    )
