"""Auth state transition rules."""

from __future__ import annotations

from authstate.core.enums import ActionType
from authstate.schemas.auth import User
from authstate.schemas.state import INITIAL_STATE, Action, AuthState

_REQUEST_TYPES: set[ActionType] = {
    ActionType.LOGIN_USER_REQUEST,
    ActionType.SIGNUP_USER_REQUEST,
}
_SUCCESS_TYPES: set[ActionType] = {
    ActionType.LOGIN_USER_SUCCESS,
    ActionType.SIGNUP_USER_SUCCESS,
}
_ERROR_TYPES: set[ActionType] = {
    ActionType.LOGIN_USER_ERROR,
    ActionType.SIGNUP_USER_ERROR,
}


def _mark_local_verified(user: User) -> User:
    """Return ``user`` with ``strategies.local.isVerified`` set, siblings kept."""
    local = {**(user.strategies.get("local") or {}), "isVerified": True}
    return user.model_copy(update={"strategies": {**user.strategies, "local": local}})


def reducer(state: AuthState = INITIAL_STATE, action: Action | None = None) -> AuthState:
    """Return the state that follows ``state`` after ``action``.

    Pure and total: unknown actions, and success actions without a payload,
    return ``state`` itself.
    """
    if action is None:
        return state
    try:
        action_type = ActionType(action.type)
    except ValueError:
        return state

    if action_type in _REQUEST_TYPES:
        return state.model_copy(update={"error": {}, "is_authenticating": True})

    if action_type in _SUCCESS_TYPES:
        if action.payload is None:
            return state
        return state.model_copy(
            update={
                "error": {},
                "is_authenticating": False,
                "is_authenticated": True,
                "auth_token": action.payload.auth_token,
                "user": action.payload.user,
            }
        )

    if action_type in _ERROR_TYPES:
        return state.model_copy(
            update={
                "error": dict(action.error or {}),
                "is_authenticating": False,
                "is_authenticated": False,
                "auth_token": None,
                "user": User(),
            }
        )

    if action_type == ActionType.LOGOUT_USER:
        return INITIAL_STATE

    if action_type == ActionType.VERIFY_EMAIL_ERROR:
        return state.model_copy(update={"error": dict(action.error or {})})

    if action_type == ActionType.VERIFY_EMAIL_SUCCESS:
        return state.model_copy(update={"user": _mark_local_verified(state.user)})

    return state
