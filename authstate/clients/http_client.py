"""Plain HTTP client for the non-GraphQL auth endpoints."""

from __future__ import annotations

from typing import Any

from authstate.clients.base import BaseClient
from authstate.clients.operations import Credentials, HttpOperation, TransportResponse
from authstate.core.errors import TransportError
from authstate.core.result import Result

_JSON_HEADERS = {"Accept": "application/json", "Content-Type": "application/json"}


class HttpClient(BaseClient):
    """REST-style calls: email verification and OAuth callbacks."""

    async def call(self, operation: HttpOperation) -> Result[TransportResponse, TransportError]:
        """Send ``operation`` and return the raw response."""
        return await self._send(
            operation.method.upper(),
            operation.url,
            json_data=operation.json_body,
            headers=operation.headers or None,
            credentials=operation.credentials,
        )

    async def post_json(self, path: str, body: dict[str, Any]) -> Result[TransportResponse, TransportError]:
        return await self.call(
            HttpOperation("POST", path, json_body=body, headers=dict(_JSON_HEADERS), credentials="include")
        )

    async def get_json(self, path: str) -> Result[TransportResponse, TransportError]:
        return await self.call(HttpOperation("GET", path, headers={"Accept": "application/json"}))

    async def fetch(
            self,
            url: str,
            *,
            method: str = "GET",
            headers: dict[str, str] | None = None,
            credentials: Credentials = "omit",
    ) -> Result[TransportResponse, TransportError]:
        return await self.call(HttpOperation(method, url, headers=dict(headers or {}), credentials=credentials))
