# tests/conftest.py
"""
Fixtures compartilhados para testes do ssr-pipeline.

Este módulo define fixtures reutilizáveis que fornecem:
- contexto de requisição determinístico
- Steps de teste com resultado e atraso controlados
- registro de invocações para asserts de ordem e contagem
- YAMLs de configuração (defaults + local) como string

Decisões arquiteturais:
    - Steps de teste são closures simples, sem herança
    - Atrasos são explícitos (asyncio.sleep) para controlar a ordem
      de conclusão em testes do combinador paralelo
    - Nenhuma fixture realiza I/O de rede

Limites explícitos:
    - Não substituir testes de integração da página
    - Não conter lógica condicional complexa
"""

import asyncio

import pytest

from ssr_pipeline.core.pipeline.context import RequestContext
from ssr_pipeline.core.pipeline.types import Props


@pytest.fixture
def request_ctx():
    """Contexto de requisição fixo e somente leitura."""
    return RequestContext(
        path="/",
        query={"page": "1"},
        headers={"X-Request-Id": "req-test-001"},
        meta={"source": "pytest"},
    )


@pytest.fixture
def calls():
    """Lista compartilhada onde os Steps de teste registram cada invocação."""
    return []


@pytest.fixture
def make_step(calls):
    """
    Fixture factory de Steps de teste.

    `make_step(name, result, delay=0.0, merge_input=False, sync=False)`
    retorna um Step que:
        - registra `(name, dict(input.data))` em `calls` ao ser invocado
        - aguarda `delay` segundos (apenas na versão assíncrona)
        - retorna `result`; se `merge_input` e `result` for Props,
          retorna o input mesclado com `result`

    Returns:
        callable: fábrica de Steps.
    """

    def factory(name, result, *, delay=0.0, merge_input=False, sync=False):
        def _outcome(input):
            if merge_input and isinstance(result, Props):
                return input.merged(result.data)
            return result

        if sync:
            def step(context, input):
                calls.append((name, input.to_dict()))
                return _outcome(input)
        else:
            async def step(context, input):
                calls.append((name, input.to_dict()))
                if delay:
                    await asyncio.sleep(delay)
                return _outcome(input)

        step.__name__ = name
        return step

    return factory


@pytest.fixture
def failing_step(calls):
    """Fixture factory de Steps que levantam `exc` ao serem invocados."""

    def factory(name, exc, *, delay=0.0):
        async def step(context, input):
            calls.append((name, input.to_dict()))
            if delay:
                await asyncio.sleep(delay)
            raise exc

        step.__name__ = name
        return step

    return factory


@pytest.fixture
def config_defaults_yaml() -> str:
    """YAML de defaults semelhante a `config/pipeline.defaults.yaml`."""
    return """\
pipeline:
  id: index
  trace: false
  layout:
    - with_auth
    - parallel: [with_subscription, with_albums]
steps:
  with_auth:
    enabled: true
backend:
  delay_ms: 500
  authenticated: true
"""


@pytest.fixture
def config_local_yaml() -> str:
    """YAML de override local: liga trace, zera atraso, desliga álbuns."""
    return """\
pipeline:
  trace: true
steps:
  with_albums:
    enabled: false
backend:
  delay_ms: 0
"""
