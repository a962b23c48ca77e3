"""Authentication state snapshot and the actions that transform it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from authstate.core.enums import ActionType
from authstate.schemas.auth import AuthPayload, User


class AuthState(BaseModel):
    """Immutable snapshot of the client's authentication status.

    Instances are never mutated; the reducer returns a new snapshot for every
    transition that changes something.
    """

    error: dict[str, Any] = Field(default_factory=dict)
    is_authenticated: bool = False
    is_authenticating: bool = False
    auth_token: str | None = None
    user: User = Field(default_factory=User)

    model_config = ConfigDict(frozen=True)


INITIAL_STATE = AuthState()


@dataclass(frozen=True)
class Action:
    """Tagged record dispatched to the reducer."""

    type: ActionType | str
    payload: AuthPayload | None = None
    error: dict[str, Any] | None = None


__all__ = ["AuthState", "Action", "INITIAL_STATE"]
