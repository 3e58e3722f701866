"""Build-variant resolution: signing, ABIs, splits and packaging formats."""

from .abi import SUPPORTED_ABIS, resolve_abi_set
from .artifacts import Artifact, expected_artifacts
from .errors import (
    EmptyAbiSet,
    EmptyTarget,
    MissingCredential,
    UnsupportedAbi,
    UnsupportedFormat,
    ValidationError,
)
from .model import (
    Abi,
    AbiSet,
    BuildType,
    CredentialSource,
    PackagingFormat,
    PackagingPlan,
    PlanWarning,
    ShrinkFlags,
    SigningIdentity,
    SplitFlags,
    VariantPolicy,
)
from .plan import build_plan, validate
from .resolver import VariantOutcome, resolve_matrix, resolve_variant
from .signing import (
    DEVELOPMENT_IDENTITY,
    SigningDefaults,
    SigningOverrides,
    resolve_attribute,
    resolve_signing_identity,
)

__all__ = [
    # abi
    "SUPPORTED_ABIS",
    "resolve_abi_set",
    # artifacts
    "Artifact",
    "expected_artifacts",
    # errors
    "EmptyAbiSet",
    "EmptyTarget",
    "MissingCredential",
    "UnsupportedAbi",
    "UnsupportedFormat",
    "ValidationError",
    # model
    "Abi",
    "AbiSet",
    "BuildType",
    "CredentialSource",
    "PackagingFormat",
    "PackagingPlan",
    "PlanWarning",
    "ShrinkFlags",
    "SigningIdentity",
    "SplitFlags",
    "VariantPolicy",
    # plan
    "build_plan",
    "validate",
    # resolver
    "VariantOutcome",
    "resolve_matrix",
    "resolve_variant",
    # signing
    "DEVELOPMENT_IDENTITY",
    "SigningDefaults",
    "SigningOverrides",
    "resolve_attribute",
    "resolve_signing_identity",
]
