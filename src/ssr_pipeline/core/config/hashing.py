# src/ssr_pipeline/core/config/hashing.py
"""
Hash determinístico da configuração efetiva.

O hash identifica estruturalmente a configuração usada em uma invocação
e é gravado em `PipelineTrace.inputs["config_hash"]`.

Política (v1): JSON canônico (chaves ordenadas, separadores compactos,
UTF-8) + SHA-256. Configurações estruturalmente equivalentes produzem
o mesmo hash, independente da ordem original das chaves.
"""

import hashlib
import json
from typing import Any, Dict


def compute_config_hash(config: Dict[str, Any]) -> str:
    """
    Gera o hash SHA-256 (hex, 64 caracteres) da configuração.

    Raises:
        TypeError: Se `config` não for um dicionário.
    """
    if not isinstance(config, dict):
        raise TypeError(
            f"Config para hashing deve ser dict, recebido: {type(config).__name__}"
        )

    canonical = json.dumps(config, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()
