"""
PipelineTrace v1 — rastreabilidade de uma invocação do pipeline.

Este módulo define a estrutura e as operações canônicas do trace, o
registro estruturado de uma invocação do pipeline de carregamento.

O trace consolida, de forma determinística e auditável:
    - metadados da invocação (pipeline_id, início, fim, desfecho)
    - hash da configuração efetiva (quando houver)
    - estado incremental de cada Step invocado
    - Event Log ordenado de eventos explícitos

Princípios fundamentais:
    - Nenhum evento é emitido implicitamente
    - Toda mutação ocorre por chamadas explícitas da API
    - A ordem do Event Log reflete a ordem real de chamada, inclusive
      quando Steps paralelos se intercalam
    - O trace é serializável e reconstruível (round-trip)

Decisões arquiteturais:
    - UTC é o timezone canônico para todos os timestamps
    - O formato de persistência é JSON determinístico
    - Steps são indexados pelo caminho posicional no pipeline
      (ex.: "1:parallel/0:with_subscription"), que é único mesmo quando
      o mesmo Step aparece mais de uma vez

Limites explícitos:
    - Não executa pipeline
    - Não altera resultados nem captura exceções
    - Não realiza migração de versões de schema
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional


def _ensure_tzaware_utc(dt: datetime) -> datetime:
    """Normaliza um timestamp para timezone-aware em UTC (naive é assumido UTC)."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def _iso(dt: datetime) -> str:
    return _ensure_tzaware_utc(dt).isoformat()


def _ms_between(start: datetime, end: datetime) -> int:
    """Duração em milissegundos inteiros, nunca negativa."""
    s = _ensure_tzaware_utc(start)
    e = _ensure_tzaware_utc(end)
    return max(0, int((e - s).total_seconds() * 1000))


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class PipelineTrace:
    """
    Trace v1: registro estruturado de uma invocação de pipeline.

    Campos principais:
        - run: metadados da invocação (pipeline_id, started_at, finished_at, outcome)
        - inputs: identidade das entradas (config_hash)
        - steps: estado incremental de cada Step, por caminho posicional
        - events: Event Log ordenado

    Invariantes:
        - `steps` é sempre um dicionário indexado por caminho de Step
        - `events` é sempre uma lista ordenada
        - A estrutura completa é serializável em JSON
    """
    run: Dict[str, Any]
    inputs: Dict[str, Any]
    steps: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    events: List[Dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Cópia serializável e independente do estado interno."""
        return {
            "run": dict(self.run),
            "inputs": dict(self.inputs),
            "steps": {k: dict(v) for k, v in self.steps.items()},
            "events": [dict(e) for e in self.events],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PipelineTrace":
        """Reconstrução permissiva: campos ausentes viram estruturas vazias."""
        return cls(
            run=dict(data.get("run", {})),
            inputs=dict(data.get("inputs", {})),
            steps={k: dict(v) for k, v in (data.get("steps", {}) or {}).items()},
            events=[dict(e) for e in (data.get("events", []) or [])],
        )

    def event_types(self) -> List[str]:
        return [e["event_type"] for e in self.events]


def create_trace(
    *,
    pipeline_id: str,
    started_at: datetime,
    config_hash: Optional[str] = None,
) -> PipelineTrace:
    """
    Cria o trace inicial de uma invocação.

    ⚠️ Esta função **não emite eventos implicitamente**: o Event Log
    inicia vazio e só é preenchido pelo Sequencer (ou por chamadas
    explícitas a `add_event`).

    Args:
        pipeline_id (str): Identificador do pipeline (ex.: "index").
        started_at (datetime): Timestamp de início da invocação.
        config_hash (Optional[str]): Hash da configuração efetiva, se houver.

    Returns:
        PipelineTrace: Trace vazio pronto para registro.
    """
    return PipelineTrace(
        run={
            "pipeline_id": pipeline_id,
            "started_at": _iso(started_at),
        },
        inputs={"config_hash": config_hash},
        steps={},
        events=[],
    )


def add_event(
    trace: PipelineTrace,
    *,
    event_type: str,
    ts: datetime,
    step_id: Optional[str] = None,
    payload: Optional[Dict[str, Any]] = None,
) -> None:
    """
    Adiciona um evento explícito ao Event Log.

    Cada chamada adiciona exatamente um evento; eventos não são
    reordenados nem deduplicados.
    """
    ev: Dict[str, Any] = {"event_type": event_type, "timestamp": _iso(ts)}
    if step_id is not None:
        ev["step_id"] = step_id
    if payload is not None:
        ev["payload"] = payload
    trace.events.append(ev)


def step_started(trace: PipelineTrace, *, step_id: str, name: str, ts: datetime) -> None:
    """Marca o Step como `running` e registra `step_started`."""
    trace.steps.setdefault(step_id, {})
    trace.steps[step_id].update(
        {
            "step_id": step_id,
            "name": name,
            "status": "running",
            "started_at": _iso(ts),
        }
    )
    add_event(trace, event_type="step_started", ts=ts, step_id=step_id, payload={"name": name})


def _started_dt(state: Dict[str, Any], fallback: datetime) -> datetime:
    started_iso = state.get("started_at")
    if not started_iso:
        return fallback
    try:
        return datetime.fromisoformat(started_iso)
    except ValueError:
        return fallback


def step_finished(
    trace: PipelineTrace,
    *,
    step_id: str,
    ts: datetime,
    outcome: Dict[str, Any],
) -> None:
    """
    Registra a conclusão de um Step e seu desfecho.

    `outcome` é a descrição serializável do resultado (ver
    `describe_result`), por exemplo `{"kind": "props", "keys": [...]}`.
    """
    s = trace.steps.setdefault(step_id, {"step_id": step_id})
    duration = _ms_between(_started_dt(s, ts), ts)
    s.update(
        {
            "status": "success",
            "finished_at": _iso(ts),
            "duration_ms": duration,
            "outcome": dict(outcome),
        }
    )
    add_event(
        trace,
        event_type="step_finished",
        ts=ts,
        step_id=step_id,
        payload={"outcome": outcome.get("kind"), "duration_ms": duration},
    )


def step_failed(
    trace: PipelineTrace,
    *,
    step_id: str,
    ts: datetime,
    error: Dict[str, Any],
) -> None:
    """Marca o Step como `failed` com o ErrorPayload serializado."""
    s = trace.steps.setdefault(step_id, {"step_id": step_id})
    s.update(
        {
            "status": "failed",
            "finished_at": _iso(ts),
            "duration_ms": _ms_between(_started_dt(s, ts), ts),
            "error": dict(error),
        }
    )
    add_event(trace, event_type="step_failed", ts=ts, step_id=step_id, payload={"error": error})


def pipeline_finished(
    trace: PipelineTrace,
    *,
    ts: datetime,
    outcome: Optional[Dict[str, Any]] = None,
    error: Optional[Dict[str, Any]] = None,
) -> None:
    """Fecha a invocação com o desfecho final ou com o erro propagado."""
    trace.run["finished_at"] = _iso(ts)
    started_iso = trace.run.get("started_at")
    started = datetime.fromisoformat(started_iso) if started_iso else ts
    trace.run["duration_ms"] = _ms_between(started, ts)

    payload: Dict[str, Any] = {}
    if error is not None:
        trace.run["status"] = "failed"
        trace.run["error"] = dict(error)
        payload["error"] = error
    else:
        trace.run["status"] = "success"
        trace.run["outcome"] = dict(outcome or {})
        payload["outcome"] = (outcome or {}).get("kind")
    add_event(trace, event_type="pipeline_finished", ts=ts, payload=payload)


def save_trace(trace: PipelineTrace, path: Path) -> None:
    """
    Persiste o trace em JSON determinístico (chaves ordenadas).

    Diretórios intermediários são criados automaticamente.

    Raises:
        OSError: Falha ao criar diretórios ou escrever o arquivo.
        TypeError: Conteúdo não serializável em JSON.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(trace.to_dict(), f, ensure_ascii=False, sort_keys=True, indent=2)


def load_trace(path: Path) -> PipelineTrace:
    """Restaura um trace salvo por `save_trace`."""
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    return PipelineTrace.from_dict(data)
