# src/ssr_pipeline/core/engine/parallel.py
"""
Combinador paralelo (`pipes_exec_parallel`).

Produz um Step que executa um grupo fixo de Steps concorrentemente
sobre o MESMO input e consolida seus resultados.

Algoritmo:
    1. despacha todos os Steps internos com o mesmo input
    2. aguarda todos (fan-out/fan-in via asyncio.gather); se algum
       levantar exceção, o combinador a propaga
    3. percorre TODOS os resultados na ordem de declaração:
         - Props → mescla num acumulador vazio (o último declarado vence)
         - guarda o primeiro NotFound e o primeiro Redirect
    4. precedência: NotFound > Redirect > Props mesclado

Decisões arquiteturais:
    - A leitura é feita sobre a lista já resolvida, na ordem de
      declaração, portanto o resultado independe da ordem de conclusão
    - A detecção de terminais é uma passada completa: um Redirect
      declarado antes de um NotFound não o esconde
    - Não há curto-circuito pelo primeiro a terminar nem cancelamento
      de Steps irmãos: a latência é a do Step mais lento

Limites explícitos:
    - Não faz retry nem aplica timeout
    - Não permite que Steps do grupo vejam resultados uns dos outros
"""

from __future__ import annotations

import asyncio
from typing import Any, Dict, Iterable, Optional, Sequence, Tuple

from ssr_pipeline.core.pipeline.step import Step
from ssr_pipeline.core.pipeline.types import (
    NotFound,
    Props,
    Redirect,
    Result,
    ResultKind,
    result_kind,
)
from ssr_pipeline.core.traceability.trace import PipelineTrace

from .invoke import child_path, run_step
from .sequencer import _check_steps


def resolve_parallel_results(results: Iterable[Result]) -> Result:
    """
    Consolida resultados já resolvidos, na ordem de declaração.

    Returns:
        Result: NotFound se houver algum; senão o primeiro Redirect;
        senão Props com a mescla de todos os Props (last-write-wins).
    """
    merged: Dict[str, Any] = {}
    not_found: Optional[NotFound] = None
    redirect: Optional[Redirect] = None

    for result in results:
        kind = result_kind(result)
        if kind is ResultKind.PROPS:
            merged.update(result.data)
        elif kind is ResultKind.NOT_FOUND:
            if not_found is None:
                not_found = result
        elif redirect is None:
            redirect = result

    if not_found is not None:
        return not_found
    if redirect is not None:
        return redirect
    return Props(merged)


class ParallelStep:
    """Step composto que executa seus Steps internos concorrentemente."""

    id = "parallel"

    def __init__(self, steps: Sequence[Step]):
        self.steps: Tuple[Step, ...] = _check_steps(steps)

    def __repr__(self) -> str:
        return f"ParallelStep(steps={len(self.steps)})"

    async def __call__(self, context: Any, input: Props) -> Result:
        return await self._run(context, input, None, None)

    async def invoke_traced(
        self,
        context: Any,
        input: Props,
        *,
        trace: PipelineTrace,
        path: str,
    ) -> Result:
        return await self._run(context, input, trace, path)

    async def _run(
        self,
        context: Any,
        input: Props,
        trace: Optional[PipelineTrace],
        path: Optional[str],
    ) -> Result:
        if not self.steps:
            return Props()

        results = await asyncio.gather(
            *(
                run_step(step, context, input, trace=trace, path=child_path(path, index, step))
                for index, step in enumerate(self.steps)
            )
        )
        return resolve_parallel_results(results)


def pipes_exec_parallel(*steps: Step) -> ParallelStep:
    """
    Agrupa Steps para execução concorrente, retornando um único Step.

    O Step retornado pode ser usado em `pipe` ou dentro de outro grupo
    paralelo.

    Raises:
        TypeError: Se algum Step não for chamável.
    """
    return ParallelStep(steps)
