"""Variant resolution: declaration + build type -> validated PackagingPlan.

Each call starts from scratch: signing and ABI resolution, plan composition,
then validation. The result is either a validated plan or the first error;
nothing is repaired or retried, and no state is kept between calls.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from vplan.core.config import Declaration
from vplan.core.result import Err, Ok, Result, is_ok

from .abi import resolve_abi_set
from .errors import ValidationError
from .model import BuildType, PackagingPlan
from .plan import build_plan, policy_for, resolve_formats, shrink_for, splits_for, validate
from .signing import SigningDefaults, SigningOverrides, resolve_signing_identity

__all__ = ["VariantOutcome", "resolve_matrix", "resolve_variant"]


@dataclass(frozen=True, slots=True)
class VariantOutcome:
    build_type: BuildType
    result: Result[PackagingPlan, ValidationError]

    @property
    def ok(self) -> bool:
        return is_ok(self.result)


def resolve_variant(
    build_type: BuildType,
    declaration: Declaration,
    overrides: SigningOverrides,
    environment: Mapping[str, str],
) -> Result[PackagingPlan, ValidationError]:
    """Resolve and validate the plan for one build type."""
    signing = resolve_signing_identity(
        build_type,
        overrides,
        environment,
        SigningDefaults(
            keystore_path=declaration.signing.default_store_file,
            base_dir=declaration.project_dir,
        ),
    )
    if isinstance(signing, Err):
        return signing

    abis = resolve_abi_set(declaration.abi.filters)
    if isinstance(abis, Err):
        return abis

    formats = resolve_formats(declaration.packaging.formats)
    if isinstance(formats, Err):
        return formats

    plan = build_plan(
        build_type,
        abis.value,
        signing.value,
        shrink_for(build_type, declaration),
        splits_for(declaration),
        formats.value,
        policy_for(build_type, declaration),
    )

    checked = validate(plan)
    if isinstance(checked, Err):
        return checked
    return Ok(plan)


def resolve_matrix(
    declaration: Declaration,
    overrides: SigningOverrides,
    environment: Mapping[str, str],
    build_types: Iterable[BuildType] = tuple(BuildType),
) -> tuple[VariantOutcome, ...]:
    """Resolve several build types independently of one another."""
    return tuple(
        VariantOutcome(bt, resolve_variant(bt, declaration, overrides, dict(environment)))
        for bt in build_types
    )
