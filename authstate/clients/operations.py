"""Transport-agnostic descriptions of remote calls and their responses."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Literal, Protocol, Union, runtime_checkable

from authstate.core.errors import ProtocolError, TransportError
from authstate.core.result import Result

Credentials = Literal["omit", "include"]


@dataclass(frozen=True)
class GraphQLOperation:
    """A single GraphQL document plus variables.

    ``auth_override`` replaces the stored session token as bearer credential,
    e.g. with a password-reset capability token.
    """

    query: str
    variables: dict[str, Any] | None = None
    auth_override: str | None = None


@dataclass(frozen=True)
class HttpOperation:
    """A plain HTTP request against the API host or an absolute URL."""

    method: str
    url: str
    json_body: Any = None
    headers: dict[str, str] = field(default_factory=dict)
    credentials: Credentials = "omit"


Operation = Union[GraphQLOperation, HttpOperation]


@dataclass(frozen=True)
class TransportResponse:
    """Status and raw body of a completed HTTP exchange."""

    status_code: int
    content: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        """Parse the body as JSON.

        Raises:
            ProtocolError: If the body is empty or not JSON.
        """
        if not self.content:
            raise ProtocolError("Response body is empty")
        try:
            return json.loads(self.content)
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise ProtocolError(f"Response body is not valid JSON (HTTP {self.status_code})") from exc


@runtime_checkable
class Transport(Protocol):
    """Capability shared by every client adapter."""

    async def call(self, operation: Operation) -> Result[TransportResponse, TransportError]:
        ...


__all__ = [
    "Credentials",
    "GraphQLOperation",
    "HttpOperation",
    "Operation",
    "Transport",
    "TransportResponse",
]
