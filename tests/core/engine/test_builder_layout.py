# tests/core/engine/test_builder_layout.py
"""
Testes da montagem de pipelines por layout declarativo.

Os testes asseguram que:
- nomes e grupos paralelos (inclusive aninhados) são montados na ordem
- layouts inválidos são rejeitados antes de qualquer execução
- nomes desconhecidos invalidam o pipeline inteiro, mesmo desabilitados
- `steps.<nome>.enabled: false` remove o Step do pipeline
"""

import pytest

from ssr_pipeline.core.engine.builder import InvalidLayoutError, build_pipeline
from ssr_pipeline.core.engine.parallel import ParallelStep
from ssr_pipeline.core.pipeline.registry import StepRegistry, UnknownStepError
from ssr_pipeline.core.pipeline.types import Props


@pytest.fixture
def registry(make_step):
    reg = StepRegistry()
    reg.add("auth", lambda: make_step("auth", Props({"user": "u1"})))
    reg.add("subscription", lambda: make_step("subscription", Props({"subscription": "s"})))
    reg.add("albums", lambda: make_step("albums", Props({"albums": []})))
    return reg


@pytest.mark.asyncio
async def test_build_sequential_and_parallel(registry, calls, request_ctx):
    pipeline = build_pipeline(
        ["auth", {"parallel": ["subscription", "albums"]}],
        registry,
        pipeline_id="index",
    )

    assert pipeline.id == "index"
    assert isinstance(pipeline.steps[1], ParallelStep)
    assert await pipeline(request_ctx) == Props(
        {"user": "u1", "subscription": "s", "albums": []}
    )
    assert calls[0] == ("auth", {})


@pytest.mark.asyncio
async def test_build_nested_groups(registry, request_ctx):
    pipeline = build_pipeline(
        [{"parallel": ["auth", {"parallel": ["subscription", "albums"]}]}],
        registry,
    )
    result = await pipeline(request_ctx)
    assert set(result.data) == {"user", "subscription", "albums"}


@pytest.mark.asyncio
async def test_disabled_steps_are_left_out(registry, calls, request_ctx):
    config = {"steps": {"albums": {"enabled": False}, "subscription": {"enabled": False}}}
    pipeline = build_pipeline(
        ["auth", {"parallel": ["subscription", "albums"]}],
        registry,
        config=config,
    )

    assert await pipeline(request_ctx) == Props({"user": "u1"})
    assert [name for name, _ in calls] == ["auth"]
    assert pipeline.steps[1].steps == ()


@pytest.mark.parametrize(
    "layout",
    [
        "auth",
        [42],
        [""],
        [{"parallel": "auth"}],
        [{"parallel": ["auth"], "extra": []}],
        [{"sequence": ["auth"]}],
    ],
)
def test_invalid_layouts(registry, layout):
    with pytest.raises(InvalidLayoutError):
        build_pipeline(layout, registry)


def test_unknown_step_fails_even_when_disabled(registry):
    config = {"steps": {"ghost": {"enabled": False}}}
    with pytest.raises(UnknownStepError) as exc_info:
        build_pipeline(["auth", {"parallel": ["ghost"]}], registry, config=config)
    assert "layout[1].parallel[0]" in str(exc_info.value)


@pytest.mark.parametrize(
    "steps_cfg",
    [
        {"auth": False},
        {"auth": "off"},
        {"auth": {"enabled": "no"}},
        ["auth"],
    ],
)
def test_malformed_step_entries_are_rejected(registry, calls, steps_cfg):
    with pytest.raises(InvalidLayoutError):
        build_pipeline(["auth"], registry, config={"steps": steps_cfg})
    assert calls == []


@pytest.mark.asyncio
async def test_step_without_enabled_key_stays_enabled(registry, calls, request_ctx):
    pipeline = build_pipeline(["auth"], registry, config={"steps": {"auth": {}}})
    await pipeline(request_ctx)
    assert [name for name, _ in calls] == ["auth"]
