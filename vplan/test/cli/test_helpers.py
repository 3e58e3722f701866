from __future__ import annotations

import pytest
import typer

from vplan.cli.commands._helpers import parse_properties, signing_overrides
from vplan.variants.signing import SigningOverrides


def test_parse_properties() -> None:
    assert parse_properties(["keyAlias=upload", "storePassword=a=b"]) == {
        "keyAlias": "upload",
        "storePassword": "a=b",
    }
    assert parse_properties(None) == {}


def test_parse_properties_rejects_bare_key() -> None:
    with pytest.raises(typer.BadParameter):
        parse_properties(["keyAlias"])


def test_dedicated_options_win_over_properties() -> None:
    overrides = signing_overrides(
        properties=["keyAlias=from-prop", "storeFile=/prop.jks"],
        key_alias="from-option",
        key_password=None,
        store_file=None,
        store_password=None,
    )
    assert overrides == SigningOverrides(alias="from-option", keystore_path="/prop.jks")
