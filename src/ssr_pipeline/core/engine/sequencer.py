# src/ssr_pipeline/core/engine/sequencer.py
"""
Sequencer do pipeline de carregamento (`pipe`).

Executa Steps um após o outro, repassando a cada Step o acumulador
formado pelos resultados anteriores, e interrompe no primeiro resultado
terminal.

Algoritmo:
    1. acumulador = Props vazio
    2. para cada Step, na ordem de declaração: invoca com
       (context, acumulador) e aguarda se o Step suspender
    3. Props → mescla sobre o acumulador (last-write-wins) e continua
    4. NotFound / Redirect → retorna imediatamente; os Steps seguintes
       não são invocados
    5. todos Props → retorna o acumulador final

Invariantes:
    - Steps executam estritamente na ordem de declaração
    - No máximo um resultado terminal é observado pelo chamador
    - Cada Step vê exatamente a mescla de todos os Props anteriores

Limites explícitos:
    - Não captura exceções de Steps (são propagadas ao chamador)
    - Não faz retry nem aplica timeout
    - Não mantém estado entre invocações
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Tuple

from ssr_pipeline.core.errors import exception_to_error
from ssr_pipeline.core.pipeline.step import Step
from ssr_pipeline.core.pipeline.types import (
    Props,
    Result,
    ResultKind,
    describe_result,
    result_kind,
)
from ssr_pipeline.core.traceability.trace import PipelineTrace, pipeline_finished, utc_now

from .invoke import child_path, run_step


def _check_steps(steps: Sequence[Any]) -> Tuple[Step, ...]:
    for index, step in enumerate(steps):
        if not callable(step):
            raise TypeError(
                f"step at position {index} must be callable, got {type(step).__name__}"
            )
    return tuple(steps)


class Pipeline:
    """
    Invocação composta produzida por `pipe`.

    `await pipeline(context)` executa os Steps em sequência e retorna o
    Result final. Um `PipelineTrace` opcional registra cada Step.
    """

    def __init__(self, steps: Sequence[Step], *, pipeline_id: str = "pipeline"):
        self.steps: Tuple[Step, ...] = _check_steps(steps)
        self.id = pipeline_id

    def __repr__(self) -> str:
        return f"Pipeline(id={self.id!r}, steps={len(self.steps)})"

    async def __call__(self, context: Any, *, trace: Optional[PipelineTrace] = None) -> Result:
        if trace is None:
            return await self._run(context, None)

        try:
            result = await self._run(context, trace)
        except Exception as exc:
            pipeline_finished(trace, ts=utc_now(), error=exception_to_error(exc).to_dict())
            raise

        pipeline_finished(trace, ts=utc_now(), outcome=describe_result(result))
        return result

    async def _run(self, context: Any, trace: Optional[PipelineTrace]) -> Result:
        current = Props()
        for index, step in enumerate(self.steps):
            result = await run_step(
                step,
                context,
                current,
                trace=trace,
                path=child_path(None, index, step),
            )
            if result_kind(result) is not ResultKind.PROPS:
                return result
            current = current.merged(result.data)
        return current


def pipe(*steps: Step, pipeline_id: str = "pipeline") -> Pipeline:
    """
    Compõe Steps em sequência.

    Args:
        *steps: Steps na ordem em que devem executar.
        pipeline_id: Identificador usado em traces.

    Returns:
        Pipeline: chamável assíncrono `(context) -> Result`.

    Raises:
        TypeError: Se algum Step não for chamável.
    """
    return Pipeline(steps, pipeline_id=pipeline_id)
