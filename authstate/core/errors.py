"""Error types raised or returned by auth flows."""

from __future__ import annotations

from typing import Any


class AuthError(Exception):
    """Base class of every failure an auth flow can report.

    Attributes:
        message: Human readable summary, suitable for a form-level error.
        fields: Optional field-level detail, e.g. ``{"password": "Too short"}``.
    """

    kind = "auth"

    def __init__(self, message: str, fields: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.fields = dict(fields or {})

    def to_payload(self) -> dict[str, Any]:
        """Return the plain mapping stored in ``AuthState.error``."""
        payload: dict[str, Any] = {"kind": self.kind, "_error": self.message}
        payload.update(self.fields)
        return payload

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, fields={self.fields!r})"


class ValidationError(AuthError):
    """Input rejected locally, before any network call."""

    kind = "validation"


class ApiError(AuthError):
    """Error payload returned by the remote API."""

    kind = "api"

    def __init__(
            self,
            message: str,
            fields: dict[str, Any] | None = None,
            status_code: int | None = None,
    ) -> None:
        super().__init__(message, fields)
        self.status_code = status_code

    def to_payload(self) -> dict[str, Any]:
        payload = super().to_payload()
        if self.status_code is not None:
            payload["status_code"] = self.status_code
        return payload


class TransportError(ApiError):
    """The request never produced a usable response (network failure, bad body)."""

    kind = "transport"


class ProtocolError(AuthError):
    """A response arrived but lacked the fields the flow needs."""

    kind = "protocol"


__all__ = [
    "AuthError",
    "ValidationError",
    "ApiError",
    "TransportError",
    "ProtocolError",
]
