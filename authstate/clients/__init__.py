"""Transport adapters for the auth API."""

from .base import BaseClient
from .graphql_client import GraphQLClient, GraphQLResult
from .http_client import HttpClient
from .operations import GraphQLOperation, HttpOperation, Transport, TransportResponse

__all__ = [
    "BaseClient",
    "GraphQLClient",
    "GraphQLOperation",
    "GraphQLResult",
    "HttpClient",
    "HttpOperation",
    "Transport",
    "TransportResponse",
]
