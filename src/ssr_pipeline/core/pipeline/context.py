# src/ssr_pipeline/core/pipeline/context.py
"""
Contexto de requisição repassado a todos os Steps de uma invocação.

Para o core o contexto é opaco: o Sequencer e o combinador paralelo
apenas o repassam, sem ler nem alterar seu conteúdo. Qualquer objeto
pode ser usado como contexto.

Este módulo oferece o `RequestContext`, uma forma conveniente e
imutável para os metadados típicos de uma requisição de página.

Invariantes:
    - O contexto é o mesmo objeto para todos os Steps de uma invocação
    - Steps nunca alteram o contexto
    - Nenhum estado sobrevive entre invocações

Limites explícitos:
    - Não executa Steps
    - Não carrega dados
    - Não realiza I/O
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping


def _frozen(mapping: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(dict(mapping or {}))


@dataclass(frozen=True)
class RequestContext:
    """
    Metadados somente leitura de uma requisição.

    Campos:
        - path: caminho solicitado (ex.: "/")
        - params: parâmetros de rota
        - query: parâmetros de query string
        - headers: cabeçalhos da requisição
        - cookies: cookies da requisição
        - meta: metadados livres do host (ex.: locale, request_id)

    Todos os mapeamentos são convertidos para visões somente leitura na
    criação, de modo que nenhum Step consegue alterá-los.
    """
    path: str = "/"
    params: Mapping[str, Any] = field(default_factory=dict)
    query: Mapping[str, Any] = field(default_factory=dict)
    headers: Mapping[str, str] = field(default_factory=dict)
    cookies: Mapping[str, str] = field(default_factory=dict)
    meta: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for name in ("params", "query", "headers", "cookies", "meta"):
            object.__setattr__(self, name, _frozen(getattr(self, name)))

    def header(self, name: str, default: Any = None) -> Any:
        """Lê um cabeçalho sem diferenciar maiúsculas de minúsculas."""
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return default
