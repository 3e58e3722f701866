"""Signing identity resolution.

Release attributes each go through the same fallback chain: explicit
override, then environment variable, then literal default. Debug builds never
consult overrides or the environment; they always sign with the development
identity.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from vplan.core.result import Err, Ok, Result

from .errors import MissingCredential
from .model import BuildType, CredentialSource, SigningIdentity, SigningSources

__all__ = [
    "DEVELOPMENT_IDENTITY",
    "ENV_KEY_ALIAS",
    "ENV_KEY_PASSWORD",
    "ENV_STORE_FILE",
    "ENV_STORE_PASSWORD",
    "ResolvedAttribute",
    "SigningDefaults",
    "SigningOverrides",
    "resolve_attribute",
    "resolve_signing_identity",
]

ENV_KEY_ALIAS = "KEY_ALIAS"
ENV_KEY_PASSWORD = "KEY_PASSWORD"
ENV_STORE_FILE = "STORE_FILE"
ENV_STORE_PASSWORD = "STORE_PASSWORD"

# Gradle-style property names accepted by SigningOverrides.from_properties.
_PROPERTY_NAMES = {
    "keyAlias": "alias",
    "keyPassword": "password",
    "storeFile": "keystore_path",
    "storePassword": "keystore_password",
}

DEVELOPMENT_IDENTITY = SigningIdentity(
    alias="androiddebugkey",
    password="android",
    keystore_path=Path("~/.android/debug.keystore"),
    keystore_password="android",
    sources=SigningSources(
        alias=CredentialSource.DEVELOPMENT,
        password=CredentialSource.DEVELOPMENT,
        keystore_path=CredentialSource.DEVELOPMENT,
        keystore_password=CredentialSource.DEVELOPMENT,
    ),
)


@dataclass(frozen=True, slots=True)
class SigningOverrides:
    """Explicit build parameters. None or '' means "not given"."""

    alias: str | None = None
    password: str | None = field(default=None, repr=False)
    keystore_path: str | None = None
    keystore_password: str | None = field(default=None, repr=False)

    @classmethod
    def from_properties(cls, properties: Mapping[str, str]) -> SigningOverrides:
        """Build overrides from keyAlias/keyPassword/storeFile/storePassword.

        Unknown keys are ignored.
        """
        values = {attr: properties[key] for key, attr in _PROPERTY_NAMES.items() if key in properties}
        return cls(**values)


@dataclass(frozen=True, slots=True)
class SigningDefaults:
    keystore_path: str = "debug.keystore"
    base_dir: Path = field(default_factory=lambda: Path("."))


@dataclass(frozen=True, slots=True)
class ResolvedAttribute:
    value: str
    source: CredentialSource


def resolve_attribute(
    override: str | None,
    environment: Mapping[str, str],
    env_var: str,
    default: str = "",
) -> ResolvedAttribute:
    """Resolve one attribute: non-empty override, then non-empty env value, then default."""
    if override:
        return ResolvedAttribute(override, CredentialSource.OVERRIDE)
    env_value = environment.get(env_var, "")
    if env_value:
        return ResolvedAttribute(env_value, CredentialSource.ENVIRONMENT)
    if default:
        return ResolvedAttribute(default, CredentialSource.DEFAULT)
    return ResolvedAttribute("", CredentialSource.UNSET)


def resolve_signing_identity(
    build_type: BuildType,
    overrides: SigningOverrides,
    environment: Mapping[str, str],
    defaults: SigningDefaults,
) -> Result[SigningIdentity, MissingCredential]:
    """Resolve the signing identity for a build type.

    Debug returns DEVELOPMENT_IDENTITY even when overrides are given.
    Release fails with MissingCredential when no keystore path resolves at
    all, or when a leading ~user names an unknown user. Whether the file
    exists is checked later, by validate().
    """
    if build_type is BuildType.DEBUG:
        return Ok(DEVELOPMENT_IDENTITY)

    alias = resolve_attribute(overrides.alias, environment, ENV_KEY_ALIAS)
    password = resolve_attribute(overrides.password, environment, ENV_KEY_PASSWORD)
    store_file = resolve_attribute(
        overrides.keystore_path, environment, ENV_STORE_FILE, defaults.keystore_path
    )
    store_password = resolve_attribute(
        overrides.keystore_password, environment, ENV_STORE_PASSWORD
    )

    if not store_file.value:
        return Err(MissingCredential(build_type=build_type.value))

    try:
        path = Path(store_file.value).expanduser()
    except RuntimeError:
        # ~user with no such user
        return Err(
            MissingCredential(build_type=build_type.value, keystore_path=Path(store_file.value))
        )

    if not path.is_absolute():
        path = defaults.base_dir / path

    return Ok(
        SigningIdentity(
            alias=alias.value,
            password=password.value,
            keystore_path=path,
            keystore_password=store_password.value,
            sources=SigningSources(
                alias=alias.source,
                password=password.source,
                keystore_path=store_file.source,
                keystore_password=store_password.source,
            ),
        )
    )
