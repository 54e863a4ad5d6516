"""Shared constants and client configuration.

This module centralizes the GraphQL-over-HTTP media types, the well-known
subgraph documents and the HTTP settings used by the transport so the
query and client modules can stay small and focused.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# GraphQL-over-HTTP media types
# - Requests are always sent as application/json
# - Responses may use the current or the legacy (application/json) media type
GRAPHQL_REQUEST_MEDIA_TYPE = "application/json"
GRAPHQL_RESPONSE_MEDIA_TYPE = "application/graphql-response+json"
GRAPHQL_LEGACY_RESPONSE_MEDIA_TYPE = "application/json"

ACCEPT_HEADER = (
    f"{GRAPHQL_RESPONSE_MEDIA_TYPE}; charset=utf-8, "
    f"{GRAPHQL_LEGACY_RESPONSE_MEDIA_TYPE}; charset=utf-8"
)

# Error message returned by graph-node when the block a query is pinned to is
# no longer part of the chain.
SUBGRAPH_REORG_ERROR = "no block with that hash found"

SUBGRAPH_META_QUERY_DOCUMENT = "{ meta: _meta { block { number hash } } }"

DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class ClientConfig:
    """HTTP settings for the GraphQL transport.

    Attributes:
        timeout: Total timeout of a single HTTP round trip, in seconds
        headers: Extra headers sent with every request
        user_agent: Optional User-Agent header value
    """

    timeout: float = DEFAULT_TIMEOUT
    headers: dict[str, str] = field(default_factory=dict)
    user_agent: str | None = None

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            raise ValueError("ClientConfig timeout must be greater than 0")

    def default_headers(self) -> dict[str, str]:
        """Headers applied to every request before the per-request ones."""
        headers = dict(self.headers)
        if self.user_agent:
            headers["User-Agent"] = self.user_agent
        return headers
