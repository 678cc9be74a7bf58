# src/ssr_pipeline/core/pipeline/types.py
"""
Tipos canônicos de resultado do pipeline de carregamento.

Este módulo define a união discriminada que todo Step produz ao ser
invocado. Um resultado é sempre exatamente uma das três formas:

    - Props     → dados nomeados a serem mesclados no acumulador
    - NotFound  → sinal terminal de recurso ausente
    - Redirect  → sinal terminal de redirecionamento

Componentes principais:
    - ResultKind → enum com a tag textual de cada forma
    - Props, NotFound, Redirect → formas imutáveis de resultado
    - result_kind / is_terminal / ensure_result → leitura exaustiva da tag

Princípios fundamentais:
    - Resultados são imutáveis (frozen dataclasses)
    - `Props` é a única forma não terminal
    - Toda leitura do tipo passa por `result_kind`, que rejeita formas
      desconhecidas em vez de ignorá-las

Limites explícitos:
    - Não executa Steps
    - Não decide ordem nem precedência entre resultados
    - Não contém lógica de domínio

Este módulo existe para que Sequencer, combinador paralelo e
consumidores leiam resultados sempre da mesma forma.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

from ssr_pipeline.core.exceptions import MalformedStepResultError


class ResultKind(str, Enum):
    """
    Tag semântica de um resultado de Step.

    Os valores são strings para facilitar:
        - serialização em JSON
        - registro em PipelineTrace
        - inspeção em testes

    Invariantes:
        - Todo resultado válido possui exatamente um `ResultKind`
        - Apenas PROPS é não terminal
    """
    PROPS = "props"
    NOT_FOUND = "not_found"
    REDIRECT = "redirect"


@dataclass(frozen=True)
class Props:
    """
    Resultado não terminal: dados nomeados para o acumulador.

    `data` é exposto como mapeamento somente leitura. Steps executados em
    paralelo recebem a mesma instância de `Props` como input, portanto
    nenhum deles pode alterar o que os demais leem.

    Campos:
        - data: valores nomeados (ex.: user, subscription, albums)
    """
    data: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", MappingProxyType(dict(self.data)))

    def __getitem__(self, key: str) -> Any:
        return self.data[key]

    def __contains__(self, key: object) -> bool:
        return key in self.data

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def merged(self, other: Mapping[str, Any]) -> "Props":
        """Retorna um NOVO Props com `other` sobreposto (last-write-wins)."""
        combined = dict(self.data)
        combined.update(other)
        return Props(combined)

    def to_dict(self) -> Dict[str, Any]:
        return dict(self.data)


@dataclass(frozen=True)
class NotFound:
    """Resultado terminal: o recurso solicitado não existe."""


@dataclass(frozen=True)
class Redirect:
    """
    Resultado terminal: a requisição deve ser enviada a outro destino.

    Campos:
        - destination: caminho ou URL de destino
        - permanent: redirecionamento permanente (308) ou temporário (307)
    """
    destination: str
    permanent: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.destination, str) or not self.destination.strip():
            raise ValueError("Redirect.destination must be a non-empty string")


Result = Union[Props, NotFound, Redirect]


def result_kind(result: Any) -> ResultKind:
    """
    Retorna a tag de um resultado, rejeitando formas desconhecidas.

    Raises:
        MalformedStepResultError: Se `result` não for Props, NotFound ou Redirect.
    """
    if isinstance(result, Props):
        return ResultKind.PROPS
    if isinstance(result, NotFound):
        return ResultKind.NOT_FOUND
    if isinstance(result, Redirect):
        return ResultKind.REDIRECT
    raise MalformedStepResultError(
        message="Resultado de Step com forma inválida",
        details={
            "expected": "Props | NotFound | Redirect",
            "received": type(result).__name__,
        },
        hint="Ajuste o Step para retornar Props, NotFound ou Redirect",
    )


def is_terminal(result: Any) -> bool:
    return result_kind(result) is not ResultKind.PROPS


def ensure_result(value: Any, *, step_id: Optional[str] = None) -> Result:
    """
    Valida o retorno de um Step e o devolve inalterado.

    Diferente de `result_kind`, a exceção levantada aqui identifica o
    Step responsável, o que torna o erro acionável para quem monta o
    pipeline.

    Args:
        value: Valor retornado pela invocação do Step.
        step_id: Identificador do Step (apenas para diagnóstico).

    Returns:
        Result: O próprio `value`, quando válido.

    Raises:
        MalformedStepResultError: Se `value` não for um Result.
    """
    try:
        result_kind(value)
    except MalformedStepResultError as exc:
        details = dict(exc.details)
        details["step_id"] = step_id
        raise MalformedStepResultError(
            message=f"Step '{step_id}' retornou tipo inválido" if step_id else exc.message,
            details=details,
            hint=exc.hint,
        ) from None
    return value


def describe_result(result: Result) -> Dict[str, Any]:
    """Representação serializável e compacta de um resultado (para traces)."""
    kind = result_kind(result)
    if kind is ResultKind.PROPS:
        return {"kind": kind.value, "keys": sorted(str(k) for k in result.data)}
    if kind is ResultKind.REDIRECT:
        return {
            "kind": kind.value,
            "destination": result.destination,
            "permanent": result.permanent,
        }
    return {"kind": kind.value}
