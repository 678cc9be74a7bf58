# src/ssr_pipeline/pages/index.py
"""
Página inicial: composição do pipeline e interpretação do resultado.

Este módulo é o consumidor do core: monta o pipeline de carregamento da
página, invoca-o no momento da requisição e traduz o Result em uma
decisão de resposta (renderizar, redirecionar ou 404).

Composições disponíveis:
    - paralela (padrão): with_auth → [with_subscription ∥ with_albums]
      latência ≈ 2 × delay do backend
    - sequencial: with_auth → with_subscription → with_albums
      latência ≈ 3 × delay do backend

Limites explícitos:
    - Não renderiza HTML
    - Não fala HTTP: apenas produz a decisão para o framework hospedeiro
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from ssr_pipeline.core.config.settings import PipelineSettings
from ssr_pipeline.core.engine import Pipeline, build_pipeline, pipe, pipes_exec_parallel
from ssr_pipeline.core.pipeline.types import Props, Result, ResultKind, result_kind
from ssr_pipeline.core.traceability.trace import PipelineTrace, create_trace, utc_now
from ssr_pipeline.steps import (
    SimulatedBackend,
    default_registry,
    with_albums,
    with_auth,
    with_subscription,
)
from ssr_pipeline.steps.models import Album, Subscription, User


RENDER = "render"
REDIRECT = "redirect"
NOT_FOUND = "not_found"


@dataclass(frozen=True)
class IndexPageProps:
    user: User
    subscription: Optional[Subscription]
    albums: List[Album]

    @classmethod
    def from_props(cls, props: Props) -> "IndexPageProps":
        return cls(
            user=props["user"],
            subscription=props.get("subscription"),
            albums=list(props.get("albums") or []),
        )


@dataclass(frozen=True)
class PageDecision:
    """
    Decisão de resposta derivada do Result final do pipeline.

    Campos:
        - action: "render", "redirect" ou "not_found"
        - status_code: 200, 307/308 ou 404
        - props: props para renderização (apenas em "render")
        - destination: destino do redirecionamento (apenas em "redirect")
    """
    action: str
    status_code: int
    props: Dict[str, Any] = field(default_factory=dict)
    destination: Optional[str] = None


def interpret_result(result: Result) -> PageDecision:
    kind = result_kind(result)
    if kind is ResultKind.NOT_FOUND:
        return PageDecision(action=NOT_FOUND, status_code=404)
    if kind is ResultKind.REDIRECT:
        return PageDecision(
            action=REDIRECT,
            status_code=308 if result.permanent else 307,
            destination=result.destination,
        )
    return PageDecision(action=RENDER, status_code=200, props=result.to_dict())


def index_pipeline(backend: SimulatedBackend, *, parallel: bool = True) -> Pipeline:
    if parallel:
        return pipe(
            with_auth(backend),
            pipes_exec_parallel(
                with_subscription(backend),
                with_albums(backend),
            ),
            pipeline_id="index",
        )
    return pipe(
        with_auth(backend),
        with_subscription(backend),
        with_albums(backend),
        pipeline_id="index",
    )


async def get_server_side_props(
    context: Any,
    backend: SimulatedBackend,
    *,
    parallel: bool = True,
    trace: Optional[PipelineTrace] = None,
) -> PageDecision:
    result = await index_pipeline(backend, parallel=parallel)(context, trace=trace)
    return interpret_result(result)


def configured_index_pipeline(
    settings: PipelineSettings,
    backend: Optional[SimulatedBackend] = None,
) -> Tuple[Pipeline, SimulatedBackend]:
    """
    Monta o pipeline da página a partir de `PipelineSettings`.

    O backend é criado a partir de `settings` quando não informado.
    """
    if backend is None:
        backend = SimulatedBackend(
            delay_seconds=settings.backend_delay_seconds,
            authenticated=settings.backend_authenticated,
        )
    pipeline = build_pipeline(
        settings.layout,
        default_registry(backend),
        config=settings.raw,
        pipeline_id=settings.pipeline_id,
    )
    return pipeline, backend


async def load_index_page(
    context: Any,
    settings: PipelineSettings,
    backend: Optional[SimulatedBackend] = None,
) -> Tuple[PageDecision, Optional[PipelineTrace]]:
    """
    Executa o pipeline configurado; cria um trace quando `settings.trace`.

    Returns:
        Tuple[PageDecision, Optional[PipelineTrace]]: decisão e trace (ou None).
    """
    pipeline, _ = configured_index_pipeline(settings, backend)
    trace = None
    if settings.trace:
        trace = create_trace(
            pipeline_id=settings.pipeline_id,
            started_at=utc_now(),
            config_hash=settings.config_hash or None,
        )
    result = await pipeline(context, trace=trace)
    return interpret_result(result), trace
