# src/ssr_pipeline/steps/models.py
"""Entidades carregadas pelos Steps de exemplo da página inicial."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class User:
    id: int
    username: str
    age: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Subscription:
    id: int
    user_id: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Album:
    id: int
    user_id: int
    name: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
