"""User and auth payload schemas exchanged with the remote API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class User(BaseModel):
    """Authenticated user profile as returned by the API."""

    id: str | int | None = None
    email: str | None = None
    strategies: dict[str, dict[str, Any] | None] = Field(
        default_factory=dict,
        description="Provider name -> provider specific status, e.g. {'local': {'isVerified': True}}",
    )

    model_config = ConfigDict(frozen=True)

    @property
    def is_verified(self) -> bool:
        return bool((self.strategies.get("local") or {}).get("isVerified"))


class AuthPayload(BaseModel):
    """Success payload of login, signup, reset and OAuth flows."""

    auth_token: str | None = Field(None, alias="authToken")
    user: User = Field(default_factory=User)

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class LoginRequest(BaseModel):
    """Login payload with user credentials."""

    email: EmailStr = Field(..., description="User email")
    password: str = Field(..., min_length=1, description="User password (plain)")

    @field_validator("email", mode="before")
    def strip_email(cls, v: Any) -> Any:
        """Trim the email only; the password is sent exactly as typed."""
        return v.strip() if isinstance(v, str) else v


class SignupRequest(LoginRequest):
    """Signup payload; the API creates the user and logs it in."""
    pass


class PasswordResetEmailRequest(BaseModel):
    """Request a password reset email."""

    email: EmailStr = Field(..., description="Account email")

    model_config = ConfigDict(str_strip_whitespace=True)


class ResetPasswordRequest(BaseModel):
    """Set a new password using the emailed reset token."""

    reset_token: str = Field(..., alias="resetToken", min_length=1)
    password: str = Field(..., min_length=1)

    model_config = ConfigDict(populate_by_name=True)
