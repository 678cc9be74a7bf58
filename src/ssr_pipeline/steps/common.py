# src/ssr_pipeline/steps/common.py
"""Utilitários compartilhados pelos Steps de carregamento."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ssr_pipeline.core.exceptions import PipelineException
from ssr_pipeline.core.pipeline.types import Props


@dataclass(frozen=True, eq=False)
class MissingPropError(PipelineException):
    """Um Step depende de uma prop que nenhum Step anterior produziu."""


def require_prop(input: Props, key: str, *, step: str) -> Any:
    """
    Lê uma prop obrigatória do acumulador.

    Raises:
        MissingPropError: Se `key` não estiver presente.
    """
    if key not in input:
        raise MissingPropError(
            message=f"Step '{step}' requer a prop '{key}'",
            details={"step_id": step, "missing": key, "available": sorted(input.data)},
            hint=f"Posicione um Step que produza '{key}' antes de '{step}'",
        )
    return input[key]
