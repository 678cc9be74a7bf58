# src/ssr_pipeline/__init__.py
"""
ssr-pipeline — composição de loaders para carregamento de dados por requisição.

Uma página declara seu carregamento como uma sequência de Steps
independentes. Cada Step pode buscar dados, interromper o pipeline
(NotFound / Redirect) ou repassar o estado acumulado ao próximo Step.

Princípios centrais:
    - `pipe` executa Steps em ordem e para no primeiro resultado terminal
    - `pipes_exec_parallel` executa um grupo concorrentemente e consolida
      os resultados de forma determinística (NotFound > Redirect > Props)
    - Grupos paralelos são Steps: podem ser aninhados livremente
    - Falhas de Steps são propagadas sem recuperação nem retry

Arquitetura em alto nível:
    - core.pipeline     → formas de resultado, protocolo de Step, contexto, registry
    - core.engine       → sequencer, combinador paralelo e montagem por layout
    - core.config       → carregamento, merge, hashing e settings
    - core.traceability → PipelineTrace (Event Log por invocação)
    - steps             → Steps de exemplo (usuário, assinatura, álbuns)
    - pages             → consumidor: página inicial

Limites explícitos:
    - Não realiza I/O de rede real
    - Não renderiza páginas
    - Não mantém cache nem persistência de dados carregados
"""

from .core.engine import ParallelStep, Pipeline, pipe, pipes_exec_parallel
from .core.pipeline import NotFound, Props, Redirect, RequestContext, Result, ResultKind

__all__ = [
    "ParallelStep",
    "Pipeline",
    "pipe",
    "pipes_exec_parallel",
    "NotFound",
    "Props",
    "Redirect",
    "RequestContext",
    "Result",
    "ResultKind",
]
