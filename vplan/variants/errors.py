"""Validation failures for variant resolution.

All of these are deterministic input problems: none is retried, and the
caller has to correct the input and resolve again.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

__all__ = [
    "EmptyAbiSet",
    "EmptyTarget",
    "MissingCredential",
    "UnsupportedAbi",
    "UnsupportedFormat",
    "ValidationError",
]


@dataclass(frozen=True, slots=True)
class MissingCredential:
    """Release build without a usable keystore."""

    build_type: str
    keystore_path: Path | None = None

    @property
    def message(self) -> str:
        if self.keystore_path is None:
            return f"{self.build_type}: no keystore path resolved"
        return f"{self.build_type}: keystore not found: {self.keystore_path}"

    @property
    def hint(self) -> str:
        return "Pass --store-file or set STORE_FILE to an existing keystore"


@dataclass(frozen=True, slots=True)
class UnsupportedAbi:
    entries: tuple[str, ...]
    supported: tuple[str, ...]

    @property
    def message(self) -> str:
        return f"unsupported ABI: {', '.join(self.entries)}"

    @property
    def hint(self) -> str:
        return f"Supported: {', '.join(self.supported)}"


@dataclass(frozen=True, slots=True)
class EmptyAbiSet:
    @property
    def message(self) -> str:
        return "no ABI selected"

    @property
    def hint(self) -> str:
        return "Declare at least one entry in [abi].filters"


@dataclass(frozen=True, slots=True)
class EmptyTarget:
    """Neither APK nor bundle packaging was requested."""

    @property
    def message(self) -> str:
        return "no packaging format requested"

    @property
    def hint(self) -> str:
        return 'Set [packaging].formats to include "apk" and/or "bundle"'


@dataclass(frozen=True, slots=True)
class UnsupportedFormat:
    entries: tuple[str, ...]
    supported: tuple[str, ...]

    @property
    def message(self) -> str:
        return f"unsupported packaging format: {', '.join(self.entries)}"

    @property
    def hint(self) -> str:
        return f"Supported: {', '.join(self.supported)}"


ValidationError = MissingCredential | UnsupportedAbi | EmptyAbiSet | EmptyTarget | UnsupportedFormat
