"""HTTP runtime: aiohttp client and GraphQL-over-HTTP transport."""

from .http_client import HTTPClient, HTTPResponse
from .transport import GraphQLTransport, is_legacy_response

__all__ = [
    "HTTPClient",
    "HTTPResponse",
    "GraphQLTransport",
    "is_legacy_response",
]
