# tests/steps/test_loader_steps.py
"""
Testes dos Steps de carregamento da página inicial.

Os testes asseguram que:
- with_auth retorna NotFound sem usuário autenticado
- with_auth repassa o input acrescido de `user`
- with_subscription e with_albums exigem `user` no input
- o registro padrão expõe os três Steps pelo nome
"""

import pytest

from ssr_pipeline.core.pipeline.types import NotFound, Props
from ssr_pipeline.steps import (
    SimulatedBackend,
    default_registry,
    with_albums,
    with_auth,
    with_subscription,
)
from ssr_pipeline.steps.common import MissingPropError
from ssr_pipeline.steps.models import Album, Subscription, User


@pytest.fixture
def backend():
    return SimulatedBackend(delay_seconds=0)


@pytest.mark.asyncio
async def test_with_auth_adds_user_and_keeps_input(backend, request_ctx):
    result = await with_auth(backend)(request_ctx, Props({"locale": "pt-BR"}))

    assert result == Props({"locale": "pt-BR", "user": User(id=1, username="myUser", age=18)})
    assert backend.calls == ["fetch_user"]


@pytest.mark.asyncio
async def test_with_auth_returns_not_found_when_unauthenticated(request_ctx):
    backend = SimulatedBackend(delay_seconds=0, authenticated=False)
    assert await with_auth(backend)(request_ctx, Props()) == NotFound()


@pytest.mark.asyncio
async def test_with_subscription_uses_user_id(backend, request_ctx):
    user = User(id=7, username="other", age=30)

    result = await with_subscription(backend)(request_ctx, Props({"user": user}))

    assert result["subscription"] == Subscription(id=1, user_id=7)
    assert result["user"] is user


@pytest.mark.asyncio
async def test_with_albums_returns_two_albums(backend, request_ctx):
    user = User(id=1, username="myUser", age=18)

    result = await with_albums(backend)(request_ctx, Props({"user": user}))

    assert result["albums"] == [
        Album(id=1, user_id=1, name="Album 1"),
        Album(id=2, user_id=1, name="Album 2"),
    ]


@pytest.mark.asyncio
@pytest.mark.parametrize("factory", [with_subscription, with_albums])
async def test_steps_require_user(backend, request_ctx, factory):
    with pytest.raises(MissingPropError) as exc_info:
        await factory(backend)(request_ctx, Props({"locale": "pt-BR"}))

    err = exc_info.value
    assert err.details["missing"] == "user"
    assert err.details["available"] == ["locale"]
    assert backend.calls == []


def test_step_names_follow_factories(backend):
    assert with_auth(backend).__name__ == "with_auth"
    assert with_albums(backend).__name__ == "with_albums"


def test_default_registry(backend):
    registry = default_registry(backend)
    assert registry.names() == ["with_auth", "with_subscription", "with_albums"]
    assert callable(registry.create("with_albums"))


def test_models_to_dict():
    assert User(id=1, username="myUser", age=18).to_dict() == {
        "id": 1,
        "username": "myUser",
        "age": 18,
    }
    assert Album(id=2, user_id=1, name="Album 2").to_dict()["name"] == "Album 2"
