# src/ssr_pipeline/core/engine/invoke.py
"""
Invocação de um Step dentro do engine, com registro opcional em trace.

Compartilhado pelo Sequencer e pelo combinador paralelo para que ambos
registrem eventos exatamente da mesma forma.

Regras:
- Sem trace, a invocação é direta (nenhum evento, nenhum custo extra).
- Com trace, cada Step recebe `step_started` e depois `step_finished`
  ou `step_failed`. A falha é registrada e a exceção original é
  relançada sem alteração.
- Steps compostos (ex.: grupo paralelo) expõem `invoke_traced` para que
  seus Steps internos também sejam registrados.
"""

from __future__ import annotations

from typing import Any, Optional

from ssr_pipeline.core.errors import exception_to_error
from ssr_pipeline.core.pipeline.step import Step, invoke_step, step_id
from ssr_pipeline.core.pipeline.types import Props, Result, describe_result, ensure_result
from ssr_pipeline.core.traceability.trace import (
    PipelineTrace,
    step_failed,
    step_finished,
    step_started,
    utc_now,
)


def child_path(parent: Optional[str], index: int, step: Any) -> str:
    """Caminho posicional de um Step: "<idx>:<nome>", aninhado com "/"."""
    own = f"{index}:{step_id(step)}"
    return f"{parent}/{own}" if parent else own


async def run_step(
    step: Step,
    context: Any,
    input: Props,
    *,
    trace: Optional[PipelineTrace] = None,
    path: Optional[str] = None,
) -> Result:
    if trace is None:
        return await invoke_step(step, context, input)

    sid = path or step_id(step)
    step_started(trace, step_id=sid, name=step_id(step), ts=utc_now())
    try:
        traced = getattr(step, "invoke_traced", None)
        if callable(traced):
            result = ensure_result(
                await traced(context, input, trace=trace, path=sid),
                step_id=step_id(step),
            )
        else:
            result = await invoke_step(step, context, input)
    except Exception as exc:
        step_failed(trace, step_id=sid, ts=utc_now(), error=exception_to_error(exc).to_dict())
        raise

    step_finished(trace, step_id=sid, ts=utc_now(), outcome=describe_result(result))
    return result
