# src/ssr_pipeline/core/config/merge.py
"""
Deep-merge de configuração (defaults + override local).

Política de merge (v1):
    - dict + dict → merge recursivo por chave
    - list        → sobrescrita total (o layout do pipeline nunca é
                    mesclado elemento a elemento)
    - escalar     → sobrescrita direta
    - conflito de tipos → ConfigTypeConflictError

O merge é puramente funcional: nenhum input é mutado.
"""

from copy import deepcopy
from typing import Any, Dict

from .errors import ConfigTypeConflictError


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _merge_value(key: str, base_value: Any, override_value: Any) -> Any:
    if isinstance(base_value, dict) and isinstance(override_value, dict):
        return deep_merge(base_value, override_value)

    # uma seção nunca é trocada por um valor de outra forma
    if isinstance(base_value, dict) and override_value is not None:
        raise ConfigTypeConflictError(
            f"Conflito de tipo na chave '{key}': "
            f"dict vs {type(override_value).__name__}"
        )

    if isinstance(override_value, list):
        return deepcopy(override_value)

    # None no override desliga explicitamente a chave
    if override_value is not None and base_value is not None:
        if _is_number(base_value) and _is_number(override_value):
            return override_value
        if type(base_value) is not type(override_value):
            raise ConfigTypeConflictError(
                f"Conflito de tipo na chave '{key}': "
                f"{type(base_value).__name__} vs {type(override_value).__name__}"
            )

    return deepcopy(override_value)


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Combina `override` sobre `base` e retorna um novo dicionário.

    Args:
        base (Dict[str, Any]): Configuração base (defaults).
        override (Dict[str, Any]): Overrides explícitos.

    Returns:
        Dict[str, Any]: Nova configuração resultante.

    Raises:
        ConfigTypeConflictError: Se a raiz não for dict ou se houver
            conflito de tipo em alguma chave.
    """
    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            f"Deep-merge requer dicts no nível raiz, recebido: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )

    result: Dict[str, Any] = deepcopy(base)
    for key, override_value in override.items():
        if key in result:
            result[key] = _merge_value(key, result[key], override_value)
        else:
            result[key] = deepcopy(override_value)
    return result
