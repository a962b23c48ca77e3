"""Concurrent flows: the final state reflects whichever response resolves last."""

import asyncio
import json

import httpx
import pytest

from authstate.core.enums import ActionType


@pytest.mark.asyncio
async def test_last_resolved_response_wins(flows, fake_api, store, token_store):
    first_may_answer = asyncio.Event()

    async def handler(request):
        email = json.loads(request.content)["variables"]["email"]
        if email == "first@b.com":
            await first_may_answer.wait()
        user = {"id": email, "email": email, "strategies": {}}
        return httpx.Response(200, json={"data": {"payload": {"user": user, "authToken": email}}})

    fake_api.on("/graphql", handler)
    terminal = []

    def dispatch(action):
        if action.type == ActionType.LOGIN_USER_SUCCESS:
            terminal.append(action.payload.auth_token)
        return store.dispatch(action)

    first = asyncio.create_task(
        flows.login_user({"email": "first@b.com", "password": "pw"}, dispatch, "/")
    )
    second = asyncio.create_task(
        flows.login_user({"email": "second@b.com", "password": "pw"}, dispatch, "/")
    )

    await second
    assert store.state.auth_token == "second@b.com"

    first_may_answer.set()
    await first

    assert terminal == ["second@b.com", "first@b.com"]
    assert store.state.auth_token == "first@b.com"
    assert store.state.user.email == "first@b.com"
    assert token_store.get() == "first@b.com"


@pytest.mark.asyncio
async def test_state_stays_authenticating_while_request_pending(flows, fake_api, store):
    release = asyncio.Event()

    async def handler(request):
        await release.wait()
        return httpx.Response(200, json={"data": None, "errors": [{"message": "x"}]})

    fake_api.on("/graphql", handler)
    task = asyncio.create_task(flows.login_user({"email": "a@b.com", "password": "pw"}, store.dispatch, "/"))
    await asyncio.sleep(0)

    assert store.state.is_authenticating is True
    release.set()
    await task
    assert store.state.is_authenticating is False
