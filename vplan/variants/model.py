"""Value types for build-variant resolution.

Everything here is frozen: a PackagingPlan is built once per invocation and
handed downstream unchanged.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path

__all__ = [
    "Abi",
    "AbiSet",
    "BuildType",
    "CredentialSource",
    "PackagingFormat",
    "PackagingPlan",
    "PlanWarning",
    "ShrinkFlags",
    "SigningIdentity",
    "SigningSources",
    "SplitFlags",
    "VariantPolicy",
]


class BuildType(StrEnum):
    DEBUG = "debug"
    RELEASE = "release"


class Abi(StrEnum):
    """Supported native ABI universe."""

    ARM64_V8A = "arm64-v8a"
    ARMEABI_V7A = "armeabi-v7a"
    X86_64 = "x86_64"

    @property
    def short_name(self) -> str:
        return _SHORT_NAMES[self]

    @classmethod
    def parse(cls, name: str) -> Abi | None:
        """Parse a canonical ABI name or a short alias (arm64, armv7)."""
        key = name.strip().lower()
        for abi in cls:
            if key == abi.value or key == abi.short_name:
                return abi
        return None


_SHORT_NAMES = {
    Abi.ARM64_V8A: "arm64",
    Abi.ARMEABI_V7A: "armv7",
    Abi.X86_64: "x86_64",
}


@dataclass(frozen=True, slots=True, eq=False)
class AbiSet:
    """A set of ABIs that remembers declaration order.

    Iteration follows declaration order; equality ignores it.
    """

    abis: tuple[Abi, ...]

    def __iter__(self) -> Iterator[Abi]:
        return iter(self.abis)

    def __len__(self) -> int:
        return len(self.abis)

    def __contains__(self, abi: object) -> bool:
        return abi in self.abis

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AbiSet):
            return NotImplemented
        return frozenset(self.abis) == frozenset(other.abis)

    def __hash__(self) -> int:
        return hash(frozenset(self.abis))

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(abi.value for abi in self.abis)


class CredentialSource(StrEnum):
    """Where a signing attribute's value came from."""

    OVERRIDE = "override"
    ENVIRONMENT = "environment"
    DEFAULT = "default"
    DEVELOPMENT = "development"
    UNSET = "unset"


@dataclass(frozen=True, slots=True)
class SigningSources:
    alias: CredentialSource
    password: CredentialSource
    keystore_path: CredentialSource
    keystore_password: CredentialSource


@dataclass(frozen=True, slots=True)
class SigningIdentity:
    """Credential set used to sign an artifact.

    Passwords are excluded from repr so plans can be printed safely.
    keystore_path is None when nothing resolved.
    """

    alias: str
    password: str = field(repr=False)
    keystore_path: Path | None = None
    keystore_password: str = field(default="", repr=False)
    sources: SigningSources = field(
        default_factory=lambda: SigningSources(
            alias=CredentialSource.UNSET,
            password=CredentialSource.UNSET,
            keystore_path=CredentialSource.UNSET,
            keystore_password=CredentialSource.UNSET,
        )
    )

    @property
    def is_development(self) -> bool:
        return self.sources.keystore_path == CredentialSource.DEVELOPMENT


@dataclass(frozen=True, slots=True)
class ShrinkFlags:
    minify_code: bool = False
    shrink_resources: bool = False


@dataclass(frozen=True, slots=True)
class SplitFlags:
    """Split policy.

    split_by_abi and universal_artifact_requested are independent: per-ABI
    artifacts and a universal catch-all can be requested together.
    """

    split_by_abi: bool = False
    split_by_density: bool = False
    split_by_language: bool = False
    universal_artifact_requested: bool = False


class PackagingFormat(StrEnum):
    APK = "apk"
    BUNDLE = "bundle"


@dataclass(frozen=True, slots=True)
class VariantPolicy:
    """Per-build-type settings that ride along with the plan."""

    application_id: str
    debuggable: bool = False
    debug_symbol_level: str | None = None
    proguard_files: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class PlanWarning:
    kind: str
    message: str


@dataclass(frozen=True, slots=True)
class PackagingPlan:
    """Concrete artifact-generation plan for one build invocation."""

    build_type: BuildType
    signing_identity: SigningIdentity
    abi_set: AbiSet
    splits: SplitFlags
    shrink: ShrinkFlags
    formats: tuple[PackagingFormat, ...]
    policy: VariantPolicy
    warnings: tuple[PlanWarning, ...] = ()

    @property
    def split_by_abi(self) -> bool:
        return self.splits.split_by_abi

    @property
    def split_by_density(self) -> bool:
        return self.splits.split_by_density

    @property
    def split_by_language(self) -> bool:
        return self.splits.split_by_language

    @property
    def universal_artifact_requested(self) -> bool:
        return self.splits.universal_artifact_requested

    @property
    def minify_code(self) -> bool:
        return self.shrink.minify_code

    @property
    def shrink_resources(self) -> bool:
        return self.shrink.shrink_resources
