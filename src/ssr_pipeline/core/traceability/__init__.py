"""
Pacote de rastreabilidade do ssr-pipeline (PipelineTrace v1).

API pública exposta:
    - PipelineTrace     → estrutura canônica do trace
    - create_trace      → criação explícita do trace de uma invocação
    - add_event         → registro explícito de eventos no Event Log
    - step_started      → marca início de execução de um Step
    - step_finished     → registra conclusão de um Step e seu desfecho
    - step_failed       → registra falha de um Step
    - pipeline_finished → fecha a invocação
    - save_trace        → persistência do trace em JSON
    - load_trace        → restauração determinística do trace

O registro é opt-in: sem um trace, o Sequencer não produz eventos.
"""

from .trace import (
    PipelineTrace,
    create_trace,
    add_event,
    step_started,
    step_finished,
    step_failed,
    pipeline_finished,
    save_trace,
    load_trace,
)

__all__ = [
    "PipelineTrace",
    "create_trace",
    "add_event",
    "step_started",
    "step_finished",
    "step_failed",
    "pipeline_finished",
    "save_trace",
    "load_trace",
]
