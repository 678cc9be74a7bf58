# src/ssr_pipeline/core/config/errors.py
"""
Exceções da camada de configuração do ssr-pipeline.

Representam violações estruturais explícitas da configuração, nunca
falhas de execução de Steps.

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma delas realiza fallback ou recovery
"""


class ConfigError(Exception):
    """
    Exceção base para erros de configuração.

    Permite captura genérica de falhas de configuração, separando-as
    claramente de falhas de Steps durante uma invocação.
    """


class DefaultsNotFoundError(ConfigError):
    """O arquivo de configuração base (defaults) não existe no caminho informado."""


class UnsupportedConfigFormatError(ConfigError):
    """A extensão do arquivo não é YAML (.yaml/.yml) nem JSON (.json)."""


class InvalidConfigRootTypeError(ConfigError):
    """O conteúdo raiz do arquivo não é um dicionário."""


class ConfigTypeConflictError(ConfigError):
    """
    Conflito de tipo entre defaults e override na mesma chave.

    Exemplo: `pipeline` é um dicionário nos defaults e uma string no
    override local. O merge não tenta adivinhar a intenção.
    """


class InvalidSettingsError(ConfigError):
    """Uma chave conhecida da configuração possui valor inválido."""
