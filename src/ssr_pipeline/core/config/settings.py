# src/ssr_pipeline/core/config/settings.py
"""
Visão tipada das chaves de configuração usadas pelo ssr-pipeline.

Estrutura esperada (todas as seções são opcionais):

    pipeline:
      id: index
      trace: false
      layout:
        - with_auth
        - parallel: [with_subscription, with_albums]
    steps:
      with_auth: {enabled: true}
    backend:
      delay_ms: 500
      authenticated: true

Chaves desconhecidas são preservadas em `raw` e ignoradas aqui.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .errors import InvalidSettingsError
from .hashing import compute_config_hash


DEFAULT_LAYOUT: List[Any] = [
    "with_auth",
    {"parallel": ["with_subscription", "with_albums"]},
]


@dataclass(frozen=True)
class PipelineSettings:
    pipeline_id: str = "index"
    trace: bool = False
    layout: List[Any] = field(default_factory=lambda: list(DEFAULT_LAYOUT))
    backend_delay_seconds: float = 0.5
    backend_authenticated: bool = True
    config_hash: str = ""
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)


def _section(config: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = config.get(name, {})
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise InvalidSettingsError(
            f"Seção '{name}' deve ser dict, recebido: {type(value).__name__}"
        )
    return value


def _bool(section: Dict[str, Any], key: str, where: str, default: bool) -> bool:
    value = section.get(key, default)
    if not isinstance(value, bool):
        raise InvalidSettingsError(f"'{where}.{key}' deve ser booleano, recebido: {value!r}")
    return value


def resolve_settings(config: Dict[str, Any]) -> PipelineSettings:
    """
    Valida e converte a configuração efetiva em `PipelineSettings`.

    Raises:
        InvalidSettingsError: Se alguma chave conhecida tiver valor inválido.
    """
    if not isinstance(config, dict):
        raise InvalidSettingsError(f"Config deve ser dict, recebido: {type(config).__name__}")

    pipeline_cfg = _section(config, "pipeline")
    backend_cfg = _section(config, "backend")
    steps_cfg = _section(config, "steps")
    for name, step_cfg in steps_cfg.items():
        if not isinstance(step_cfg, dict):
            raise InvalidSettingsError(
                f"'steps.{name}' deve ser dict, recebido: {type(step_cfg).__name__}"
            )
        _bool(step_cfg, "enabled", f"steps.{name}", True)

    pipeline_id = pipeline_cfg.get("id", "index")
    if not isinstance(pipeline_id, str) or not pipeline_id.strip():
        raise InvalidSettingsError("'pipeline.id' deve ser uma string não vazia")

    layout = pipeline_cfg.get("layout", DEFAULT_LAYOUT)
    if not isinstance(layout, list):
        raise InvalidSettingsError(
            f"'pipeline.layout' deve ser lista, recebido: {type(layout).__name__}"
        )

    delay_ms = backend_cfg.get("delay_ms", 500)
    if isinstance(delay_ms, bool) or not isinstance(delay_ms, (int, float)) or delay_ms < 0:
        raise InvalidSettingsError(f"'backend.delay_ms' deve ser número >= 0, recebido: {delay_ms!r}")

    return PipelineSettings(
        pipeline_id=pipeline_id,
        trace=_bool(pipeline_cfg, "trace", "pipeline", False),
        layout=list(layout),
        backend_delay_seconds=float(delay_ms) / 1000.0,
        backend_authenticated=_bool(backend_cfg, "authenticated", "backend", True),
        config_hash=compute_config_hash(config),
        raw=config,
    )
