# src/ssr_pipeline/steps/subscription.py
"""Step `with_subscription`: carrega a assinatura do usuário (pode ser None)."""

from __future__ import annotations

from typing import Any

from ssr_pipeline.core.pipeline.step import Step
from ssr_pipeline.core.pipeline.types import Props, Result

from .backend import SimulatedBackend
from .common import require_prop


def with_subscription(backend: SimulatedBackend) -> Step:
    async def with_subscription(context: Any, input: Props) -> Result:
        user = require_prop(input, "user", step="with_subscription")
        subscription = await backend.fetch_subscription(user.id)
        return input.merged({"subscription": subscription})

    return with_subscription
