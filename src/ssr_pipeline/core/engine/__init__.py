"""
Engine do ssr-pipeline.

Este pacote contém os dois operadores de composição do pipeline de
carregamento e a montagem de pipelines a partir de configuração.

Componentes principais:
    - sequencer → `pipe`: execução sequencial com curto-circuito
    - parallel  → `pipes_exec_parallel`: fan-out/fan-in com precedência
                  NotFound > Redirect > Props
    - builder   → `build_pipeline`: layout declarativo → Pipeline
    - invoke    → invocação de Steps com registro opcional em trace

Invariantes:
    - A ordem de execução sequencial é a ordem de declaração
    - A consolidação paralela independe da ordem de conclusão
    - Exceções de Steps são sempre propagadas ao chamador

Limites explícitos:
    - Não define Steps de domínio
    - Não faz retry, cache ou timeout
"""

from .builder import InvalidLayoutError, build_pipeline, validate_layout
from .parallel import ParallelStep, pipes_exec_parallel, resolve_parallel_results
from .sequencer import Pipeline, pipe

__all__ = [
    "InvalidLayoutError",
    "build_pipeline",
    "validate_layout",
    "ParallelStep",
    "pipes_exec_parallel",
    "resolve_parallel_results",
    "Pipeline",
    "pipe",
]
