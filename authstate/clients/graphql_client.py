"""GraphQL RPC client used by the auth flows."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

from authstate.clients.base import BaseClient
from authstate.clients.operations import GraphQLOperation, TransportResponse
from authstate.core.errors import ApiError, AuthError, ProtocolError, TransportError
from authstate.core.result import Result

logger = logging.getLogger(__name__)

GENERIC_QUERY_ERROR = "Server query error"


@dataclass(frozen=True)
class GraphQLResult:
    """Outcome of one GraphQL operation: ``error`` or ``data``, never both."""

    error: AuthError | None = None
    data: dict[str, Any] | None = None


def parse_graphql_error(errors: list[Any], status_code: int | None = None) -> ApiError:
    """Convert a GraphQL ``errors`` list into an :class:`ApiError`.

    Only the first error is used. The API encodes form errors as a JSON
    object in the message, e.g. ``{"_error": "Bad login", "password": "..."}``;
    any other message is replaced by a generic one.
    """
    first = errors[0] if errors else {}
    raw = first.get("message") if isinstance(first, dict) else str(first)
    if isinstance(raw, str) and '{"_error"' in raw:
        try:
            decoded = json.loads(raw)
        except json.JSONDecodeError:
            decoded = None
        if isinstance(decoded, dict):
            message = str(decoded.pop("_error", GENERIC_QUERY_ERROR))
            return ApiError(message, fields=decoded, status_code=status_code)

    logger.info("GraphQL error replaced by generic message: %s", raw)
    return ApiError(GENERIC_QUERY_ERROR, status_code=status_code)


class GraphQLClient(BaseClient):
    """Executes single GraphQL operations against ``GRAPHQL_PATH``."""

    GRAPHQL_PATH = "/graphql"

    def __init__(self, *args: Any, graphql_path: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        if graphql_path is not None:
            self.GRAPHQL_PATH = graphql_path

    async def call(self, operation: GraphQLOperation) -> Result[TransportResponse, TransportError]:
        """Send ``operation`` and return the raw response."""
        bearer = operation.auth_override or self._stored_token()
        body: dict[str, Any] = {"query": operation.query}
        if operation.variables is not None:
            body["variables"] = operation.variables
        return await self._send(
            "POST",
            self.GRAPHQL_PATH,
            json_data=body,
            headers=self._headers({"Accept": "application/json"}, bearer=bearer),
        )

    async def execute(
            self,
            query: str,
            variables: dict[str, Any] | None = None,
            auth_override: str | None = None,
    ) -> GraphQLResult:
        """Run ``query`` and decode the ``{data, errors}`` envelope."""
        result = await self.call(GraphQLOperation(query, variables, auth_override))
        if not result.ok:
            return GraphQLResult(error=result.error)

        response = result.value
        try:
            envelope = response.json()
        except ProtocolError as exc:
            return GraphQLResult(error=exc)
        if not isinstance(envelope, dict):
            return GraphQLResult(error=ProtocolError("GraphQL response is not an object"))

        errors = envelope.get("errors")
        if errors:
            return GraphQLResult(error=parse_graphql_error(errors, response.status_code))
        if not response.ok:
            return GraphQLResult(
                error=ApiError(f"HTTP {response.status_code}", status_code=response.status_code)
            )

        data = envelope.get("data")
        if not isinstance(data, dict):
            return GraphQLResult(error=ProtocolError("GraphQL response has no data"))
        return GraphQLResult(data=data)
