"""
ssr-pipeline — Estruturas canônicas de erro (v1)

Este módulo define o formato serializável com que falhas de Steps são
registradas em traces de execução.

O pipeline NÃO converte exceções em resultados: toda falha é propagada
ao chamador da invocação. O `ErrorPayload` existe apenas para que a
falha fique registrada de forma:

- explícita
- serializável
- sem stack trace cru
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, Optional

from ssr_pipeline.core.config.errors import ConfigError
from ssr_pipeline.core.exceptions import MalformedStepResultError, PipelineException
from ssr_pipeline.core.pipeline.registry import DuplicateStepIdError, UnknownStepError


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ErrorPayload:
    """
    Payload canônico de erro.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida a quem monta o pipeline
    """

    type: str
    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

STEP_EXECUTION_ERROR = "STEP_EXECUTION_ERROR"
STEP_RESULT_MALFORMED = "STEP_RESULT_MALFORMED"
PIPELINE_CONFIGURATION_ERROR = "PIPELINE_CONFIGURATION_ERROR"


def exception_to_error(exc: BaseException) -> ErrorPayload:
    """Converte uma exceção em ErrorPayload (serializável).

    Regras:
    - MalformedStepResultError: STEP_RESULT_MALFORMED, com os details da exceção.
    - Erros de configuração, layout e registro: PIPELINE_CONFIGURATION_ERROR.
    - Outras PipelineException: o nome da classe é o código.
    - Demais exceções: STEP_EXECUTION_ERROR, sem expor stack trace.
    """
    if isinstance(exc, MalformedStepResultError):
        return ErrorPayload(
            type=STEP_RESULT_MALFORMED,
            message=exc.message,
            details=dict(exc.details),
            hint=exc.hint,
        )

    if isinstance(exc, (ConfigError, DuplicateStepIdError, UnknownStepError)):
        return ErrorPayload(
            type=PIPELINE_CONFIGURATION_ERROR,
            message=str(exc) or "Configuração inválida do pipeline",
            details={"exception_class": exc.__class__.__name__},
            hint="Revise o layout e os nomes registrados",
        )

    if isinstance(exc, PipelineException):
        return ErrorPayload(
            type=exc.__class__.__name__,
            message=exc.message or "Erro de execução",
            details=dict(exc.details),
            hint=exc.hint,
        )

    return ErrorPayload(
        type=STEP_EXECUTION_ERROR,
        message=str(exc) or "Erro inesperado durante execução do Step",
        details={"exception_class": exc.__class__.__name__},
        hint=None,
    )
