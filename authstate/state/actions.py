"""Action creators for the auth reducer."""

from __future__ import annotations

from typing import Any, Mapping

from authstate.core.enums import ActionType
from authstate.core.errors import AuthError
from authstate.schemas.auth import AuthPayload
from authstate.schemas.state import Action

ErrorLike = AuthError | Mapping[str, Any] | None


def _error_payload(error: ErrorLike) -> dict[str, Any]:
    if isinstance(error, AuthError):
        return error.to_payload()
    return dict(error or {})


def login_user_request() -> Action:
    return Action(ActionType.LOGIN_USER_REQUEST)


def login_user_success(payload: AuthPayload) -> Action:
    return Action(ActionType.LOGIN_USER_SUCCESS, payload=payload)


def login_user_error(error: ErrorLike) -> Action:
    return Action(ActionType.LOGIN_USER_ERROR, error=_error_payload(error))


def signup_user_request() -> Action:
    return Action(ActionType.SIGNUP_USER_REQUEST)


def signup_user_success(payload: AuthPayload) -> Action:
    return Action(ActionType.SIGNUP_USER_SUCCESS, payload=payload)


def signup_user_error(error: ErrorLike) -> Action:
    return Action(ActionType.SIGNUP_USER_ERROR, error=_error_payload(error))


def logout_user() -> Action:
    return Action(ActionType.LOGOUT_USER)


def verify_email_success() -> Action:
    return Action(ActionType.VERIFY_EMAIL_SUCCESS)


def verify_email_error(error: ErrorLike) -> Action:
    return Action(ActionType.VERIFY_EMAIL_ERROR, error=_error_payload(error))
