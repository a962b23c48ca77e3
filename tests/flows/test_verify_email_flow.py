"""verify_email flow."""

import json

import httpx
import pytest

from authstate.core.enums import ActionType
from authstate.schemas.auth import AuthPayload, User
from authstate.state import actions


@pytest.fixture
def logged_in(store):
    store.dispatch(actions.login_user_success(
        AuthPayload(authToken="T", user=User(id=1, email="a@b.com", strategies={}))
    ))
    return store


@pytest.mark.asyncio
async def test_status_200_marks_local_strategy_verified(flows, fake_api, logged_in, navigator):
    fake_api.on("/auth/verify-email", httpx.Response(200, content=b"not even json"))

    action = await flows.verify_email("verify-token", logged_in.dispatch)

    assert action.type == ActionType.VERIFY_EMAIL_SUCCESS
    assert logged_in.state.user.strategies["local"]["isVerified"] is True
    assert logged_in.state.user.email == "a@b.com"
    assert logged_in.state.auth_token == "T"
    assert json.loads(fake_api.requests[0].content) == {"verifiedEmailToken": "verify-token"}
    assert fake_api.requests[0].method == "POST"
    assert navigator.transitions == []


@pytest.mark.asyncio
async def test_other_status_dispatches_parsed_error(flows, fake_api, logged_in):
    fake_api.on("/auth/verify-email", httpx.Response(401, json={"error": {"_error": "Token expired"}}))

    action = await flows.verify_email("verify-token", logged_in.dispatch)

    assert action.type == ActionType.VERIFY_EMAIL_ERROR
    assert logged_in.state.error == {"_error": "Token expired"}
    assert logged_in.state.is_authenticated is True
    assert logged_in.state.auth_token == "T"


@pytest.mark.asyncio
async def test_string_error_is_wrapped(flows, fake_api, store):
    fake_api.on("/auth/verify-email", httpx.Response(400, json={"error": "bad token"}))
    await flows.verify_email("x", store.dispatch)
    assert store.state.error == {"_error": "bad token"}


@pytest.mark.asyncio
async def test_body_without_error_field(flows, fake_api, store):
    fake_api.on("/auth/verify-email", httpx.Response(500, json={}))
    await flows.verify_email("x", store.dispatch)
    assert store.state.error["kind"] == "api"
    assert store.state.error["status_code"] == 500


@pytest.mark.asyncio
async def test_unparseable_body(flows, fake_api, store):
    fake_api.on("/auth/verify-email", httpx.Response(502, content=b"<html>Bad gateway</html>"))
    await flows.verify_email("x", store.dispatch)
    assert store.state.error["kind"] == "protocol"
