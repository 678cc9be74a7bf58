# src/ssr_pipeline/steps/backend.py
"""
Backend simulado usado pelos Steps de exemplo.

Cada chamada aguarda `delay_seconds` (via `asyncio.sleep`) para emular
uma requisição de rede, permitindo observar a diferença de latência
entre composição sequencial e paralela.

Decisões arquiteturais:
    - A autenticação é controlada por `authenticated`, sem aleatoriedade:
      testes e demos escolhem explicitamente o cenário
    - `calls` registra a ordem das chamadas para inspeção

Limites explícitos:
    - Não realiza I/O real
    - Não mantém dados entre instâncias
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import List, Optional

from .models import Album, Subscription, User


@dataclass
class SimulatedBackend:
    delay_seconds: float = 0.5
    authenticated: bool = True
    calls: List[str] = field(default_factory=list, init=False, repr=False)

    async def _delay(self) -> None:
        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)

    async def fetch_user(self) -> Optional[User]:
        self.calls.append("fetch_user")
        await self._delay()
        if not self.authenticated:
            return None
        return User(id=1, username="myUser", age=18)

    async def fetch_subscription(self, user_id: int) -> Optional[Subscription]:
        self.calls.append("fetch_subscription")
        await self._delay()
        return Subscription(id=1, user_id=user_id)

    async def fetch_albums(self, user_id: int) -> List[Album]:
        self.calls.append("fetch_albums")
        await self._delay()
        return [
            Album(id=1, user_id=user_id, name="Album 1"),
            Album(id=2, user_id=user_id, name="Album 2"),
        ]
