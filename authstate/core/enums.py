"""Core enums for the authstate package."""

from __future__ import annotations

from enum import Enum


class ActionType(str, Enum):
    """Stable identifiers of the actions understood by the auth reducer."""

    LOGIN_USER_REQUEST = "LOGIN_USER_REQUEST"
    LOGIN_USER_ERROR = "LOGIN_USER_ERROR"
    LOGIN_USER_SUCCESS = "LOGIN_USER_SUCCESS"
    SIGNUP_USER_REQUEST = "SIGNUP_USER_REQUEST"
    SIGNUP_USER_ERROR = "SIGNUP_USER_ERROR"
    SIGNUP_USER_SUCCESS = "SIGNUP_USER_SUCCESS"
    LOGOUT_USER = "LOGOUT_USER"
    VERIFY_EMAIL_ERROR = "VERIFY_EMAIL_ERROR"
    VERIFY_EMAIL_SUCCESS = "VERIFY_EMAIL_SUCCESS"

    def __str__(self) -> str:
        return self.value
