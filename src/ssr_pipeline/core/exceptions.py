"""
ssr-pipeline — Exceções canônicas (v1)

Este módulo define exceções tipadas internas do pipeline de carregamento.

Objetivo:
- Permitir que o Sequencer e o combinador paralelo levantem exceções
  semânticas tipadas quando um Step viola o contrato de resultado
- Facilitar o mapeamento determinístico para ErrorPayload

Regras:
- Falhas da lógica própria de um Step NÃO passam por aqui: elas são
  propagadas sem alteração ao chamador da invocação.
- Exceções devem carregar apenas dados estruturados (serializáveis).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True, eq=False)
class PipelineException(Exception):
    """Base class para exceções internas do pipeline.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Mensagem deve ser curta e humana
    """

    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message)

    def __reduce__(self):
        return (self.__class__, (self.message, dict(self.details), self.hint))

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, eq=False)
class MalformedStepResultError(PipelineException, TypeError):
    """Um Step retornou algo fora das formas Props | NotFound | Redirect.

    Tratado como erro de configuração do pipeline: o Step precisa ser
    corrigido, não existe descarte silencioso do valor.
    """
