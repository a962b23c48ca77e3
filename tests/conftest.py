"""Shared fixtures: a scripted fake API behind httpx.MockTransport."""

from __future__ import annotations

import base64
import datetime
import inspect
import json
from typing import Any, Callable

import httpx
import pytest
from jose import jwt

from authstate.core.config import Settings
from authstate.flows.factory import create_auth_flows
from authstate.state.store import AuthStore
from authstate.storage.token_store import MemoryTokenStore
from authstate.utils.navigation import HistoryNavigator

BASE_URL = "http://api.test"
TOKEN_NAME = "test.token"

USER: dict[str, Any] = {
    "id": "u-1",
    "email": "a@b.com",
    "strategies": {"local": {"isVerified": False}},
}


class FakeApi:
    """Routes requests by URL path to scripted handlers and records them."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.routes: dict[str, Any] = {}

    def on(self, path: str, response: httpx.Response | Callable[[httpx.Request], Any]) -> None:
        self.routes[path] = response

    def graphql_bodies(self) -> list[dict[str, Any]]:
        return [json.loads(r.content) for r in self.requests if r.url.path == "/graphql"]

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"error": {"_error": "Not found"}})
        if callable(route):
            response = route(request)
            if inspect.isawaitable(response):
                response = await response
            return response
        return route


def graphql_ok(payload: Any) -> httpx.Response:
    return httpx.Response(200, json={"data": {"payload": payload}})


def graphql_error(message: str) -> httpx.Response:
    return httpx.Response(200, json={"data": None, "errors": [{"message": message}]})


def mint_reset_token(*, expires_in: datetime.timedelta = datetime.timedelta(hours=1)) -> str:
    exp = datetime.datetime.now(datetime.timezone.utc) + expires_in
    return jwt.encode({"id": "u-1", "exp": int(exp.timestamp())}, "test-secret", algorithm="HS256")


def mint_legacy_secret_token(claims: dict[str, Any]) -> str:
    return base64.urlsafe_b64encode(json.dumps(claims).encode("utf-8")).decode("ascii")


@pytest.fixture
def user() -> dict[str, Any]:
    return json.loads(json.dumps(USER))


@pytest.fixture
def fake_api() -> FakeApi:
    return FakeApi()


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        API_BASE_URL=BASE_URL,
        AUTH_TOKEN_NAME=TOKEN_NAME,
        TOKEN_STORE_PATH=str(tmp_path / "session.json"),
    )


@pytest.fixture
def token_store() -> MemoryTokenStore:
    return MemoryTokenStore(TOKEN_NAME)


@pytest.fixture
def navigator() -> HistoryNavigator:
    return HistoryNavigator(start="/login")


@pytest.fixture
def store() -> AuthStore:
    return AuthStore()


@pytest.fixture
def flows(settings, token_store, navigator, fake_api):
    return create_auth_flows(
        settings,
        token_store=token_store,
        navigator=navigator,
        transport=httpx.MockTransport(fake_api),
    )


@pytest.fixture
def responses():
    """Response builders, exposed as a fixture for test modules."""

    class _Responses:
        ok = staticmethod(graphql_ok)
        error = staticmethod(graphql_error)
        reset_token = staticmethod(mint_reset_token)
        legacy_token = staticmethod(mint_legacy_secret_token)

    return _Responses
