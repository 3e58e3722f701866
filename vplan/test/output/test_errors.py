from __future__ import annotations

from pathlib import Path

import pytest

from vplan.core.errors import ErrorCode
from vplan.output.console import MockConsole, Style
from vplan.output.errors import print_validation_error, validation_error_exit_code
from vplan.variants.errors import (
    EmptyAbiSet,
    EmptyTarget,
    MissingCredential,
    UnsupportedAbi,
    UnsupportedFormat,
    ValidationError,
)


@pytest.mark.parametrize(
    ("error", "code"),
    [
        (MissingCredential(build_type="release"), ErrorCode.SIGNING_ERROR),
        (UnsupportedAbi(entries=("mips",), supported=("arm64-v8a",)), ErrorCode.USER_ERROR),
        (UnsupportedFormat(entries=("ipa",), supported=("apk",)), ErrorCode.USER_ERROR),
        (EmptyAbiSet(), ErrorCode.USER_ERROR),
        (EmptyTarget(), ErrorCode.USER_ERROR),
    ],
)
def test_exit_codes(error: ValidationError, code: ErrorCode) -> None:
    assert validation_error_exit_code(error) == int(code)


def test_missing_credential_message() -> None:
    console = MockConsole()
    print_validation_error(
        MissingCredential(build_type="release", keystore_path=Path("/keys/release.jks")),
        console,
        variant="release",
    )

    assert console.outputs[0].message == (
        "error: release: missing signing credential (release: keystore not found: /keys/release.jks)"
    )
    assert console.outputs[1].style == Style.DIM
    assert "STORE_FILE" in console.outputs[1].message


def test_unsupported_abi_lists_supported() -> None:
    console = MockConsole()
    print_validation_error(UnsupportedAbi(entries=("mips",), supported=("arm64-v8a", "x86_64")), console)

    assert console.messages == ["error: unsupported ABI: mips", "hint: Supported: arm64-v8a, x86_64"]
