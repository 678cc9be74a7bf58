# src/ssr_pipeline/core/__init__.py
"""
Core do ssr-pipeline.

Reúne o motor de composição do pipeline de carregamento e seus
contratos, independente de Steps concretos ou do framework que hospeda
as páginas.

Componentes principais:
    - pipeline     → formas de resultado, protocolo de Step, contexto, registry
    - engine       → `pipe`, `pipes_exec_parallel` e montagem por layout
    - config       → carregamento, merge, hashing e settings
    - traceability → PipelineTrace (Event Log por invocação)
    - errors / exceptions → erros tipados e payload serializável

Limites explícitos:
    - Não realiza I/O de rede
    - Não renderiza páginas
    - Não mantém cache nem estado entre invocações
"""
