"""Human-readable rendering of a PackagingPlan."""

from __future__ import annotations

from typing import TYPE_CHECKING

from vplan.output.console import Style
from vplan.variants.artifacts import expected_artifacts
from vplan.variants.model import PackagingPlan

if TYPE_CHECKING:
    from vplan.output.console import ConsoleProtocol

__all__ = ["render_artifacts", "render_plan"]


def _on_off(value: bool) -> str:
    return "on" if value else "off"


def render_plan(plan: PackagingPlan, console: ConsoleProtocol, *, artifact_name: str = "app") -> None:
    identity = plan.signing_identity
    sources = identity.sources

    console.header(f"{plan.build_type.value} ({plan.policy.application_id})")
    console.field("abis", ", ".join(plan.abi_set.names))
    console.field("formats", ", ".join(f.value for f in plan.formats))
    console.field("split by abi", _on_off(plan.split_by_abi))
    console.field("universal apk", _on_off(plan.universal_artifact_requested))
    console.field("split by density", _on_off(plan.split_by_density))
    console.field("split by language", _on_off(plan.split_by_language))
    console.field("minify", _on_off(plan.minify_code))
    console.field("shrink resources", _on_off(plan.shrink_resources))
    console.field("debuggable", _on_off(plan.policy.debuggable))
    if plan.policy.debug_symbol_level:
        console.field("debug symbols", plan.policy.debug_symbol_level)
    console.field("signing alias", f"{identity.alias or '-'} ({sources.alias})")
    console.field("keystore", f"{identity.keystore_path or '-'} ({sources.keystore_path})")

    render_artifacts(plan, console, artifact_name=artifact_name)

    for warning in plan.warnings:
        console.warning(warning.message)


def render_artifacts(plan: PackagingPlan, console: ConsoleProtocol, *, artifact_name: str = "app") -> None:
    artifacts = expected_artifacts(plan, name=artifact_name)
    console.print(f"  artifacts ({len(artifacts)}):", Style.DIM)
    for artifact in artifacts:
        slices = ", ".join(abi.value for abi in artifact.slices)
        console.print(f"    {artifact.file_name}  [{slices}]")
