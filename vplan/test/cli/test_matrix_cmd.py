from __future__ import annotations

import json
from pathlib import Path

import pytest
import typer

from vplan.core.errors import ErrorCode
from vplan.output.console import MockConsole

from ._support import make_ctx


def _run_matrix(*, store_file: str | None = None, json_output: bool = False) -> None:
    import vplan.cli.commands.matrix_cmd as matrix_cmd

    matrix_cmd.matrix(
        properties=None,
        key_alias=None,
        key_password=None,
        store_file=store_file,
        store_password=None,
        json_output=json_output,
    )


def test_rejected_release_fails_the_matrix(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import vplan.cli.commands.matrix_cmd as matrix_cmd

    ctx = make_ctx(tmp_path)
    monkeypatch.setattr(matrix_cmd, "build_context", lambda: ctx)

    with pytest.raises(typer.Exit) as exc:
        _run_matrix()

    assert exc.value.exit_code == int(ErrorCode.SIGNING_ERROR)
    console = ctx.console
    assert isinstance(console, MockConsole)
    # debug still rendered
    assert console.messages[0] == "debug (com.example.app.debug)"
    assert console.find("release: missing signing credential")


def test_all_variants_valid(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import vplan.cli.commands.matrix_cmd as matrix_cmd

    keystore = tmp_path / "release.jks"
    keystore.write_bytes(b"\x00")
    ctx = make_ctx(tmp_path)
    monkeypatch.setattr(matrix_cmd, "build_context", lambda: ctx)

    _run_matrix(store_file=str(keystore))

    assert isinstance(ctx.console, MockConsole)
    assert ctx.console.messages[-1] == "OK 2 variants valid"


def test_json_reports_errors(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    import vplan.cli.commands.matrix_cmd as matrix_cmd

    ctx = make_ctx(tmp_path)
    monkeypatch.setattr(matrix_cmd, "build_context", lambda: ctx)

    with pytest.raises(typer.Exit):
        _run_matrix(json_output=True)

    data = json.loads(capsys.readouterr().out)
    assert [entry["ok"] for entry in data] == [True, False]
    assert data[1]["error"]["kind"] == "MissingCredential"
