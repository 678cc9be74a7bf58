# src/ssr_pipeline/steps/auth.py
"""
Step `with_auth`: carrega o usuário autenticado.

Sem usuário, retorna NotFound e interrompe o pipeline. Com usuário,
repassa o input acrescido da prop `user`.
"""

from __future__ import annotations

from typing import Any

from ssr_pipeline.core.pipeline.step import Step
from ssr_pipeline.core.pipeline.types import NotFound, Props, Result

from .backend import SimulatedBackend


def with_auth(backend: SimulatedBackend) -> Step:
    async def with_auth(context: Any, input: Props) -> Result:
        user = await backend.fetch_user()

        if user is None:
            return NotFound()

        return input.merged({"user": user})

    return with_auth
