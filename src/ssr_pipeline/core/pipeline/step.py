# src/ssr_pipeline/core/pipeline/step.py
"""
Contrato canônico de Step do pipeline de carregamento.

Um Step é a menor unidade executável do pipeline: recebe o contexto da
requisição e o resultado acumulado até aqui e produz um novo resultado,
de forma síncrona ou assíncrona.

Responsabilidades de um Step:
    - buscar ou derivar seus próprios dados
    - decidir se o pipeline continua (Props) ou termina (NotFound/Redirect)

Princípios fundamentais:
    - Steps não conhecem o Sequencer nem o combinador paralelo
    - Steps não controlam ordem de execução
    - Conformidade é garantida por duck typing (@runtime_checkable)
    - Closures e classes pequenas são igualmente válidas

Limites explícitos:
    - Não contém lógica de composição
    - Não define políticas de retry ou timeout
    - Não registra eventos de rastreabilidade
"""

from __future__ import annotations

import inspect
from typing import Any, Awaitable, Protocol, Union, runtime_checkable

from .types import Props, Result, ensure_result


@runtime_checkable
class Step(Protocol):
    """
    Contrato canônico de um Step.

    Qualquer chamável com a assinatura `(context, input)` satisfaz o
    protocolo. O retorno pode ser um `Result` ou um awaitable que resolve
    para um `Result`.

    Invariantes:
        - `input` é sempre um `Props` (o acumulador visto pelo Step)
        - O retorno é exatamente um de Props | NotFound | Redirect
        - O Step não altera `context` nem `input`

    Limites explícitos:
        - Não define lógica de retry ou tratamento de exceções
        - Não recebe token de cancelamento ou timeout
    """

    def __call__(self, context: Any, input: Props) -> Union[Result, Awaitable[Result]]:
        ...


def step_id(step: Any) -> str:
    """
    Nome estável de um Step para diagnóstico e rastreabilidade.

    Ordem de resolução: atributo `id`, `__name__` (funções e closures),
    nome da classe.
    """
    sid = getattr(step, "id", None)
    if isinstance(sid, str) and sid.strip():
        return sid
    name = getattr(step, "__name__", None)
    if isinstance(name, str) and name:
        return name
    return type(step).__name__


async def invoke_step(step: Step, context: Any, input: Props) -> Result:
    """
    Invoca um Step e aguarda seu resultado quando ele suspende.

    Exceções levantadas pelo Step são propagadas sem alteração.

    Raises:
        MalformedStepResultError: Se o Step retornar algo que não é Result.
    """
    value = step(context, input)
    if inspect.isawaitable(value):
        value = await value
    return ensure_result(value, step_id=step_id(step))
