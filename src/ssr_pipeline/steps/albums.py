# src/ssr_pipeline/steps/albums.py
"""Step `with_albums`: carrega os álbuns do usuário."""

from __future__ import annotations

from typing import Any

from ssr_pipeline.core.pipeline.step import Step
from ssr_pipeline.core.pipeline.types import Props, Result

from .backend import SimulatedBackend
from .common import require_prop


def with_albums(backend: SimulatedBackend) -> Step:
    async def with_albums(context: Any, input: Props) -> Result:
        user = require_prop(input, "user", step="with_albums")
        albums = await backend.fetch_albums(user.id)
        return input.merged({"albums": albums})

    return with_albums
