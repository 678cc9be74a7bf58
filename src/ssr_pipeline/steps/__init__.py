# src/ssr_pipeline/steps/__init__.py
"""
Steps de carregamento da página inicial.

Cada fábrica recebe o backend e retorna um Step pronto para `pipe` ou
`pipes_exec_parallel`:

    - with_auth          → user (ou NotFound)
    - with_subscription  → subscription (requer user)
    - with_albums        → albums (requer user)

`default_registry(backend)` registra as três fábricas pelo nome, para
montagem via layout declarativo.
"""

from ssr_pipeline.core.pipeline.registry import StepRegistry

from .albums import with_albums
from .auth import with_auth
from .backend import SimulatedBackend
from .common import MissingPropError, require_prop
from .models import Album, Subscription, User
from .subscription import with_subscription


def default_registry(backend: SimulatedBackend) -> StepRegistry:
    registry = StepRegistry()
    registry.add("with_auth", lambda: with_auth(backend))
    registry.add("with_subscription", lambda: with_subscription(backend))
    registry.add("with_albums", lambda: with_albums(backend))
    return registry


__all__ = [
    "default_registry",
    "with_albums",
    "with_auth",
    "with_subscription",
    "SimulatedBackend",
    "MissingPropError",
    "require_prop",
    "Album",
    "Subscription",
    "User",
]
