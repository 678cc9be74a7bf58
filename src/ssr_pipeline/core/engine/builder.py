# src/ssr_pipeline/core/engine/builder.py
"""
Montagem de pipelines a partir de um layout declarativo.

O layout é uma lista cujos itens são:
    - o nome de um Step registrado no `StepRegistry`, ou
    - `{"parallel": [itens...]}`, um grupo paralelo (recursivo)

Exemplo:

    ["with_auth", {"parallel": ["with_subscription", "with_albums"]}]

Decisões arquiteturais:
    - Toda a estrutura é validada antes de qualquer Step ser criado:
      um nome desconhecido invalida o pipeline inteiro
    - Steps com `steps.<nome>.enabled: false` ficam de fora; um grupo
      paralelo que fica vazio continua válido (resolve para Props vazio)
    - Erros estruturais são tratados como falhas fatais

Limites explícitos:
    - Não executa Steps
    - Não carrega arquivos de configuração
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ssr_pipeline.core.config.errors import ConfigError
from ssr_pipeline.core.pipeline.registry import StepRegistry, UnknownStepError
from ssr_pipeline.core.pipeline.step import Step

from .parallel import pipes_exec_parallel
from .sequencer import Pipeline, pipe


PARALLEL_KEY = "parallel"


class InvalidLayoutError(ConfigError, ValueError):
    """
    Exceção levantada quando o layout não segue a estrutura esperada.

    Exemplos: layout que não é lista, item que não é string nem
    `{"parallel": [...]}`, nome vazio.
    """


def _is_enabled(config: Optional[Dict[str, Any]], name: str) -> bool:
    steps_cfg = (config or {}).get("steps") or {}
    if not isinstance(steps_cfg, dict):
        raise InvalidLayoutError(f"'steps' must be a dict, got {type(steps_cfg).__name__}")

    step_cfg = steps_cfg.get(name)
    if step_cfg is None:
        return True
    if not isinstance(step_cfg, dict):
        raise InvalidLayoutError(
            f"'steps.{name}' must be a dict, got {type(step_cfg).__name__}"
        )

    enabled = step_cfg.get("enabled", True)
    if not isinstance(enabled, bool):
        raise InvalidLayoutError(f"'steps.{name}.enabled' must be a bool, got {enabled!r}")
    return enabled


def validate_layout(layout: Any, registry: StepRegistry, *, where: str = "layout") -> None:
    """
    Valida a estrutura do layout e a existência de todos os nomes.

    Raises:
        InvalidLayoutError: Se a estrutura for inválida.
        UnknownStepError: Se algum nome não estiver registrado.
    """
    if not isinstance(layout, list):
        raise InvalidLayoutError(f"{where} must be a list, got {type(layout).__name__}")

    for index, item in enumerate(layout):
        at = f"{where}[{index}]"
        if isinstance(item, str):
            if not item.strip():
                raise InvalidLayoutError(f"{at}: step name must be a non-empty string")
            if not registry.has(item):
                raise UnknownStepError(f"{at}: unknown step '{item}'")
        elif isinstance(item, dict):
            if set(item) != {PARALLEL_KEY}:
                raise InvalidLayoutError(
                    f"{at}: group must have exactly one key '{PARALLEL_KEY}', got {sorted(item)}"
                )
            validate_layout(item[PARALLEL_KEY], registry, where=f"{at}.{PARALLEL_KEY}")
        else:
            raise InvalidLayoutError(
                f"{at}: expected step name or parallel group, got {type(item).__name__}"
            )


def _build_steps(
    layout: List[Any],
    registry: StepRegistry,
    config: Optional[Dict[str, Any]],
) -> List[Step]:
    steps: List[Step] = []
    for item in layout:
        if isinstance(item, str):
            if _is_enabled(config, item):
                steps.append(registry.create(item))
        else:
            inner = _build_steps(item[PARALLEL_KEY], registry, config)
            steps.append(pipes_exec_parallel(*inner))
    return steps


def build_pipeline(
    layout: List[Any],
    registry: StepRegistry,
    *,
    config: Optional[Dict[str, Any]] = None,
    pipeline_id: str = "pipeline",
) -> Pipeline:
    """
    Valida o layout e compõe o pipeline correspondente.

    Args:
        layout: Lista de nomes e grupos paralelos.
        registry: Fábricas de Steps por nome.
        config: Configuração efetiva (usada para `steps.<nome>.enabled`).
        pipeline_id: Identificador usado em traces.

    Returns:
        Pipeline: Pipeline pronto para invocação.

    Raises:
        InvalidLayoutError: Se o layout for estruturalmente inválido.
        UnknownStepError: Se o layout citar um Step não registrado.
    """
    validate_layout(layout, registry)
    return pipe(*_build_steps(layout, registry, config), pipeline_id=pipeline_id)
