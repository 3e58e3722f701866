"""JSON rendering of a validated plan, for the artifact generator.

Signing secrets never leave the process: only the alias, keystore path and
the source of each attribute are written.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from vplan.core.result import Err, Ok, Result
from vplan.platform.files import atomic_write_json

from .artifacts import expected_artifacts
from .model import PackagingPlan

PLAN_SCHEMA = 1


@dataclass(frozen=True, slots=True)
class PlanWriteError:
    message: str
    path: Path
    hint: str | None = None


def plan_to_dict(plan: PackagingPlan, *, artifact_name: str = "app") -> dict[str, object]:
    identity = plan.signing_identity
    return {
        "schema": PLAN_SCHEMA,
        "build_type": plan.build_type.value,
        "application_id": plan.policy.application_id,
        "debuggable": plan.policy.debuggable,
        "debug_symbol_level": plan.policy.debug_symbol_level,
        "proguard_files": list(plan.policy.proguard_files),
        "abis": list(plan.abi_set.names),
        "formats": [f.value for f in plan.formats],
        "splits": {
            "abi": plan.split_by_abi,
            "density": plan.split_by_density,
            "language": plan.split_by_language,
            "universal": plan.universal_artifact_requested,
        },
        "shrink": {
            "minify_code": plan.minify_code,
            "shrink_resources": plan.shrink_resources,
        },
        "signing": {
            "alias": identity.alias,
            "keystore_path": str(identity.keystore_path) if identity.keystore_path else None,
            "sources": {
                "alias": identity.sources.alias.value,
                "password": identity.sources.password.value,
                "keystore_path": identity.sources.keystore_path.value,
                "keystore_password": identity.sources.keystore_password.value,
            },
        },
        "warnings": [{"kind": w.kind, "message": w.message} for w in plan.warnings],
        "artifacts": [
            {
                "format": a.format.value,
                "file_name": a.file_name,
                "abi": a.abi.value if a.abi else None,
                "slices": [abi.value for abi in a.slices],
            }
            for a in expected_artifacts(plan, name=artifact_name)
        ],
    }


def write_plan_file(
    *, path: Path, plan: PackagingPlan, artifact_name: str = "app"
) -> Result[None, PlanWriteError]:
    try:
        atomic_write_json(path, plan_to_dict(plan, artifact_name=artifact_name))
    except OSError as e:
        return Err(PlanWriteError(message=f"failed to write plan file: {e}", path=path))
    return Ok(None)
