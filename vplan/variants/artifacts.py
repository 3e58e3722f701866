"""Expected output artifacts for a validated plan.

The same AbiSet is read two ways: the APK path with ABI splitting emits one
artifact per ABI, while a bundle embeds every ABI as a slice of one container.
"""

from __future__ import annotations

from dataclasses import dataclass

from .model import Abi, PackagingFormat, PackagingPlan

__all__ = ["Artifact", "expected_artifacts"]


@dataclass(frozen=True, slots=True)
class Artifact:
    format: PackagingFormat
    file_name: str
    abi: Abi | None
    slices: tuple[Abi, ...]

    @property
    def is_universal(self) -> bool:
        return self.format is PackagingFormat.APK and self.abi is None


def _apk_artifacts(plan: PackagingPlan, name: str) -> list[Artifact]:
    variant = plan.build_type.value
    abis = tuple(plan.abi_set)

    if not plan.split_by_abi:
        return [Artifact(PackagingFormat.APK, f"{name}-{variant}.apk", None, abis)]

    out = [Artifact(PackagingFormat.APK, f"{name}-{abi.value}-{variant}.apk", abi, (abi,)) for abi in abis]
    if plan.universal_artifact_requested:
        out.append(Artifact(PackagingFormat.APK, f"{name}-universal-{variant}.apk", None, abis))
    return out


def expected_artifacts(plan: PackagingPlan, *, name: str = "app") -> tuple[Artifact, ...]:
    """List the artifacts the generator is expected to produce, in a stable order."""
    artifacts: list[Artifact] = []
    if PackagingFormat.APK in plan.formats:
        artifacts.extend(_apk_artifacts(plan, name))
    if PackagingFormat.BUNDLE in plan.formats:
        artifacts.append(
            Artifact(
                PackagingFormat.BUNDLE,
                f"{name}-{plan.build_type.value}.aab",
                None,
                tuple(plan.abi_set),
            )
        )
    return tuple(artifacts)
