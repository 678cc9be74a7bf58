# tests/core/engine/test_pipeline_tracing.py
"""
Testes do registro opt-in de invocações em PipelineTrace.

Os testes asseguram que:
- sem trace, nenhum evento é produzido e o resultado é o mesmo
- cada Step recebe step_started e step_finished, com desfecho
- Steps internos de grupos paralelos são registrados por caminho
- falhas são registradas e a exceção original é relançada
- Steps interrompidos por curto-circuito não aparecem no trace
"""

from datetime import datetime, timezone

import pytest

from ssr_pipeline.core.engine.parallel import pipes_exec_parallel
from ssr_pipeline.core.engine.sequencer import pipe
from ssr_pipeline.core.errors import STEP_EXECUTION_ERROR
from ssr_pipeline.core.pipeline.types import NotFound, Props
from ssr_pipeline.core.traceability.trace import create_trace


@pytest.fixture
def trace():
    return create_trace(
        pipeline_id="index",
        started_at=datetime(2026, 1, 16, tzinfo=timezone.utc),
        config_hash="abc",
    )


@pytest.mark.asyncio
async def test_trace_records_each_sequential_step(make_step, request_ctx, trace):
    pipeline = pipe(
        make_step("with_user", Props({"user": "u1"})),
        make_step("with_flags", Props({"flags": []})),
        pipeline_id="index",
    )

    result = await pipeline(request_ctx, trace=trace)

    assert result == Props({"user": "u1", "flags": []})
    assert trace.event_types() == [
        "step_started",
        "step_finished",
        "step_started",
        "step_finished",
        "pipeline_finished",
    ]
    assert list(trace.steps) == ["0:with_user", "1:with_flags"]
    assert trace.steps["0:with_user"]["status"] == "success"
    assert trace.steps["0:with_user"]["outcome"] == {"kind": "props", "keys": ["user"]}
    assert trace.run["status"] == "success"
    assert trace.run["outcome"]["keys"] == ["flags", "user"]


@pytest.mark.asyncio
async def test_trace_records_parallel_children_by_path(make_step, request_ctx, trace):
    pipeline = pipe(
        make_step("with_auth", Props({"user": "u1"})),
        pipes_exec_parallel(
            make_step("with_subscription", Props({"subscription": None})),
            make_step("with_albums", Props({"albums": []})),
        ),
    )

    await pipeline(request_ctx, trace=trace)

    assert set(trace.steps) == {
        "0:with_auth",
        "1:parallel",
        "1:parallel/0:with_subscription",
        "1:parallel/1:with_albums",
    }
    assert trace.steps["1:parallel"]["outcome"]["keys"] == ["albums", "subscription"]
    assert all(s["status"] == "success" for s in trace.steps.values())


@pytest.mark.asyncio
async def test_trace_stops_at_terminal_result(make_step, request_ctx, trace):
    pipeline = pipe(
        make_step("with_auth", NotFound()),
        make_step("with_albums", Props({"albums": []})),
    )

    await pipeline(request_ctx, trace=trace)

    assert list(trace.steps) == ["0:with_auth"]
    assert trace.steps["0:with_auth"]["outcome"] == {"kind": "not_found"}
    assert trace.run["outcome"] == {"kind": "not_found"}


@pytest.mark.asyncio
async def test_trace_records_failure_and_reraises(make_step, failing_step, request_ctx, trace):
    boom = RuntimeError("boom")
    pipeline = pipe(
        make_step("with_auth", Props({"user": "u1"})),
        pipes_exec_parallel(failing_step("with_albums", boom)),
    )

    with pytest.raises(RuntimeError) as exc_info:
        await pipeline(request_ctx, trace=trace)

    assert exc_info.value is boom
    failed = trace.steps["1:parallel/0:with_albums"]
    assert failed["status"] == "failed"
    assert failed["error"]["type"] == STEP_EXECUTION_ERROR
    assert failed["error"]["details"] == {"exception_class": "RuntimeError"}
    assert trace.steps["1:parallel"]["status"] == "failed"
    assert trace.run["status"] == "failed"
    assert trace.event_types()[-1] == "pipeline_finished"


@pytest.mark.asyncio
async def test_no_trace_means_no_events(make_step, request_ctx, trace):
    pipeline = pipe(make_step("with_auth", Props({"user": "u1"})))

    assert await pipeline(request_ctx) == Props({"user": "u1"})
    assert trace.events == []
