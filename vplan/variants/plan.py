"""PackagingPlan composition and validation."""

from __future__ import annotations

from collections.abc import Iterable

from vplan.core.config import Declaration
from vplan.core.result import Err, Ok, Result

from .errors import EmptyAbiSet, EmptyTarget, MissingCredential, UnsupportedFormat, ValidationError
from .model import (
    AbiSet,
    BuildType,
    PackagingFormat,
    PackagingPlan,
    PlanWarning,
    ShrinkFlags,
    SigningIdentity,
    SplitFlags,
    VariantPolicy,
)

__all__ = [
    "build_plan",
    "policy_for",
    "resolve_formats",
    "shrink_for",
    "splits_for",
    "validate",
]


def resolve_formats(declared: Iterable[str]) -> Result[tuple[PackagingFormat, ...], UnsupportedFormat]:
    """Parse declared format names into canonical order (apk, bundle).

    An empty result is not an error here; validate() rejects it as EmptyTarget.
    """
    wanted: set[PackagingFormat] = set()
    unknown: list[str] = []
    for name in declared:
        try:
            wanted.add(PackagingFormat(name.strip().lower()))
        except ValueError:
            unknown.append(name)

    if unknown:
        return Err(
            UnsupportedFormat(
                entries=tuple(unknown),
                supported=tuple(f.value for f in PackagingFormat),
            )
        )
    return Ok(tuple(f for f in PackagingFormat if f in wanted))


def shrink_for(build_type: BuildType, declaration: Declaration) -> ShrinkFlags:
    cfg = declaration.release if build_type is BuildType.RELEASE else declaration.debug
    return ShrinkFlags(minify_code=cfg.minify, shrink_resources=cfg.shrink_resources)


def splits_for(declaration: Declaration) -> SplitFlags:
    s = declaration.splits
    return SplitFlags(
        split_by_abi=s.abi,
        split_by_density=s.density,
        split_by_language=s.language,
        universal_artifact_requested=s.universal,
    )


def policy_for(build_type: BuildType, declaration: Declaration) -> VariantPolicy:
    """Application id, debuggability and symbol handling for a build type."""
    app = declaration.app
    if build_type is BuildType.DEBUG:
        return VariantPolicy(
            application_id=app.application_id + app.debug_suffix,
            debuggable=True,
            debug_symbol_level=declaration.debug.debug_symbol_level,
            proguard_files=declaration.debug.proguard_files,
        )
    return VariantPolicy(
        application_id=app.application_id,
        debuggable=False,
        debug_symbol_level=declaration.release.debug_symbol_level,
        proguard_files=declaration.release.proguard_files,
    )


def _warnings_for(
    build_type: BuildType,
    signing_identity: SigningIdentity,
    shrink: ShrinkFlags,
) -> tuple[PlanWarning, ...]:
    warnings: list[PlanWarning] = []

    if shrink.shrink_resources and not shrink.minify_code:
        warnings.append(
            PlanWarning(
                kind="shrink_without_minify",
                message=(
                    "resource shrinking is enabled without code minification; "
                    "unused resources are only detected reliably after minify"
                ),
            )
        )

    if build_type is BuildType.RELEASE:
        unset = [
            name
            for name, value in (
                ("key alias", signing_identity.alias),
                ("key password", signing_identity.password),
                ("keystore password", signing_identity.keystore_password),
            )
            if not value
        ]
        if unset:
            warnings.append(
                PlanWarning(
                    kind="empty_signing_secret",
                    message=f"signing attributes resolved empty: {', '.join(unset)}",
                )
            )

    return tuple(warnings)


def build_plan(
    build_type: BuildType,
    abi_set: AbiSet,
    signing_identity: SigningIdentity,
    shrink: ShrinkFlags,
    splits: SplitFlags,
    formats: tuple[PackagingFormat, ...],
    policy: VariantPolicy,
) -> PackagingPlan:
    """Compose a PackagingPlan. Pure: identical inputs give equal plans.

    Suboptimal combinations are recorded as plan warnings, never rejected.
    """
    return PackagingPlan(
        build_type=build_type,
        signing_identity=signing_identity,
        abi_set=abi_set,
        splits=splits,
        shrink=shrink,
        formats=formats,
        policy=policy,
        warnings=_warnings_for(build_type, signing_identity, shrink),
    )


def validate(plan: PackagingPlan) -> Result[None, ValidationError]:
    """Check a plan before it is handed to the artifact generator.

    Checks run in order and stop at the first failure:
    ABI set non-empty, release keystore exists, at least one format.
    """
    if len(plan.abi_set) == 0:
        return Err(EmptyAbiSet())

    if plan.build_type is BuildType.RELEASE:
        path = plan.signing_identity.keystore_path
        if path is None or not path.is_file():
            return Err(MissingCredential(build_type=plan.build_type.value, keystore_path=path))

    if not plan.formats:
        return Err(EmptyTarget())

    return Ok(None)
