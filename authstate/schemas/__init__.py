"""Pydantic schemas for auth payloads and state."""

from .auth import (
    AuthPayload,
    LoginRequest,
    PasswordResetEmailRequest,
    ResetPasswordRequest,
    SignupRequest,
    User,
)
from .state import INITIAL_STATE, Action, AuthState

__all__ = [
    "Action",
    "AuthPayload",
    "AuthState",
    "INITIAL_STATE",
    "LoginRequest",
    "PasswordResetEmailRequest",
    "ResetPasswordRequest",
    "SignupRequest",
    "User",
]
