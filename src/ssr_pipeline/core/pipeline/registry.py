# src/ssr_pipeline/core/pipeline/registry.py
"""
Registro de fábricas de Steps por nome.

Este módulo define o `StepRegistry`, que associa nomes estáveis
(ex.: "with_auth") a fábricas de Steps, permitindo montar pipelines a
partir de configuração declarativa.

Responsabilidades do módulo:
    - Validar unicidade dos nomes registrados
    - Preservar a ordem de registro
    - Criar Steps sob demanda a partir do nome

Decisões arquiteturais:
    - Registra fábricas (chamáveis sem argumentos), não instâncias:
      cada pipeline montado recebe Steps próprios
    - Erros estruturais são tratados como falhas fatais

Limites explícitos:
    - Não monta pipelines (ver core.engine.builder)
    - Não executa Steps
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List

from .step import Step


StepFactory = Callable[[], Step]


class DuplicateStepIdError(ValueError):
    """
    Exceção levantada quando um nome de Step é registrado duas vezes.

    A duplicidade é tratada como erro fatal de configuração e é
    detectada no momento do registro, antes de qualquer execução.
    """


class UnknownStepError(KeyError):
    """Exceção levantada quando um nome de Step não está registrado."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else "unknown step"


@dataclass
class StepRegistry:
    """
    Registro canônico de fábricas de Steps.

    Invariantes:
        - Cada nome é único no registry
        - `names()` reflete exatamente a ordem de registro
        - Apenas nomes não vazios são aceitos
    """

    _factories: Dict[str, StepFactory] = field(default_factory=dict, init=False, repr=False)
    _order: List[str] = field(default_factory=list, init=False, repr=False)

    def add(self, name: str, factory: StepFactory) -> None:
        if not isinstance(name, str) or not name.strip():
            raise ValueError("step name must be a non-empty string")

        if name in self._factories:
            raise DuplicateStepIdError(f"Duplicate step id: {name}")

        if not callable(factory):
            raise TypeError(f"factory for step '{name}' must be callable")

        self._factories[name] = factory
        self._order.append(name)

    def has(self, name: str) -> bool:
        return name in self._factories

    def create(self, name: str) -> Step:
        if name not in self._factories:
            raise UnknownStepError(f"Unknown step: {name}")
        return self._factories[name]()

    def names(self) -> List[str]:
        return list(self._order)
