# src/ssr_pipeline/core/pipeline/__init__.py
"""
# Pipeline Core — ssr-pipeline

Este pacote define os **contratos canônicos** compartilhados pelo
Sequencer, pelo combinador paralelo e pelos Steps de carregamento.

## Componentes

- **types**
  - `Props`, `NotFound`, `Redirect`: as três formas de resultado
  - `ResultKind`: tag textual de cada forma
  - `result_kind`, `is_terminal`, `ensure_result`: leitura exaustiva

- **step**
  - `Step` (Protocol): chamável `(context, input) -> Result | Awaitable[Result]`
  - `invoke_step`: invoca e aguarda quando o Step suspende

- **context**
  - `RequestContext`: metadados somente leitura da requisição

- **registry**
  - `StepRegistry`: fábricas de Steps por nome, para layouts declarativos

## Princípios Fundamentais

- Steps **não conhecem** o Sequencer nem o combinador paralelo
- `Props` é a única forma não terminal
- O contexto é opaco e nunca é alterado por Steps
"""

from .context import RequestContext
from .registry import DuplicateStepIdError, StepRegistry, UnknownStepError
from .step import Step, invoke_step, step_id
from .types import (
    NotFound,
    Props,
    Redirect,
    Result,
    ResultKind,
    describe_result,
    ensure_result,
    is_terminal,
    result_kind,
)

__all__ = [
    "RequestContext",
    "DuplicateStepIdError",
    "StepRegistry",
    "UnknownStepError",
    "Step",
    "invoke_step",
    "step_id",
    "NotFound",
    "Props",
    "Redirect",
    "Result",
    "ResultKind",
    "describe_result",
    "ensure_result",
    "is_terminal",
    "result_kind",
]
