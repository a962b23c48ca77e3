"""Base async HTTP client for the auth API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from authstate.clients.operations import Credentials, TransportResponse
from authstate.core.errors import TransportError
from authstate.core.result import Result
from authstate.storage.token_store import TokenStore

logger = logging.getLogger(__name__)


class BaseClient:
    """Base HTTP client with optional bearer handling from a token store.

    Usage:
        client = GraphQLClient(base_url, token_store=store)
        result = await client.call(operation)
    """

    def __init__(
            self,
            base_url: str = "http://localhost:3000",
            token_store: TokenStore | None = None,
            *,
            timeout: float | None = None,
            transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.token_store = token_store
        self.timeout = timeout
        self.cookies = httpx.Cookies()
        self._transport = transport

    # ------------------------- helpers ---------------------------------- #
    def _url(self, path_or_url: str) -> str:
        if path_or_url.startswith(("http://", "https://")):
            return path_or_url
        return f"{self.base_url}{path_or_url}"

    def _headers(
            self,
            extra: dict[str, str] | None = None,
            *,
            bearer: str | None = None,
    ) -> dict[str, str]:
        headers: dict[str, str] = {"Content-Type": "application/json"}
        if bearer:
            headers["Authorization"] = f"Bearer {bearer}"
        if extra:
            headers.update(extra)
        return headers

    def _stored_token(self) -> str | None:
        if self.token_store is None:
            return None
        return self.token_store.get()

    # ------------------------- core http -------------------------------- #
    async def _send(
            self,
            method: str,
            path_or_url: str,
            *,
            json_data: Any = None,
            headers: dict[str, str] | None = None,
            credentials: Credentials = "omit",
    ) -> Result[TransportResponse, TransportError]:
        url = self._url(path_or_url)
        include_cookies = credentials == "include"
        try:
            async with httpx.AsyncClient(
                    timeout=self.timeout,
                    transport=self._transport,
                    cookies=self.cookies if include_cookies else None,
            ) as client:
                resp = await client.request(
                    method,
                    url,
                    headers=headers,
                    json=json_data,
                )
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            return Result.failure(TransportError(f"Request to {url} failed: {exc}"))

        if include_cookies:
            self.cookies.update(resp.cookies)

        logger.debug("%s %s -> %s", method, url, resp.status_code)
        return Result.success(
            TransportResponse(
                status_code=resp.status_code,
                content=resp.content,
                headers=dict(resp.headers),
            )
        )
