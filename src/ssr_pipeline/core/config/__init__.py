# src/ssr_pipeline/core/config/__init__.py

"""
Camada de configuração do ssr-pipeline.

Responsabilidades do pacote:
    - Carregamento de arquivos de configuração (defaults + overrides locais)
    - Resolução da configuração final via deep-merge determinístico
    - Hash canônico para rastreabilidade (PipelineTrace)
    - Visão tipada das chaves usadas pelo pacote (`PipelineSettings`)

Limites explícitos:
    - Não executa pipelines
    - Não depende de Steps concretos
"""

from .errors import (
    ConfigError,
    ConfigTypeConflictError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    InvalidSettingsError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_config_hash
from .loader import load_config
from .merge import deep_merge
from .settings import DEFAULT_LAYOUT, PipelineSettings, resolve_settings

__all__ = [
    "ConfigError",
    "ConfigTypeConflictError",
    "DefaultsNotFoundError",
    "InvalidConfigRootTypeError",
    "InvalidSettingsError",
    "UnsupportedConfigFormatError",
    "compute_config_hash",
    "load_config",
    "deep_merge",
    "DEFAULT_LAYOUT",
    "PipelineSettings",
    "resolve_settings",
]
