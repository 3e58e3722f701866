from __future__ import annotations

from vplan.output.console import MockConsole
from vplan.output.plan_view import render_plan
from vplan.variants.model import (
    Abi,
    AbiSet,
    BuildType,
    PackagingFormat,
    ShrinkFlags,
    SplitFlags,
    VariantPolicy,
)
from vplan.variants.plan import build_plan
from vplan.variants.signing import DEVELOPMENT_IDENTITY


def test_render_debug_plan() -> None:
    plan = build_plan(
        BuildType.DEBUG,
        AbiSet((Abi.ARM64_V8A,)),
        DEVELOPMENT_IDENTITY,
        ShrinkFlags(minify_code=False, shrink_resources=True),
        SplitFlags(split_by_abi=True, universal_artifact_requested=True),
        (PackagingFormat.APK,),
        VariantPolicy(application_id="com.example.app.debug", debuggable=True),
    )
    console = MockConsole()

    render_plan(plan, console, artifact_name="game")

    assert console.messages[0] == "debug (com.example.app.debug)"
    assert "abis: arm64-v8a" in console.messages
    assert "debuggable: on" in console.messages
    assert "signing alias: androiddebugkey (development)" in console.messages
    assert any("game-arm64-v8a-debug.apk" in m for m in console.messages)
    assert any("game-universal-debug.apk" in m for m in console.messages)
    assert console.has_warning()
