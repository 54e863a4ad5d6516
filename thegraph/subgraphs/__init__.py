"""thegraph-subgraphs - Paginated subgraph query client."""

from .client import ClientBuilder, SubgraphClient, Watermark
from .config import ClientConfig
from .core import (
    BootstrapMetaQueryError,
    DeserializationError,
    EmptyResponseError,
    GraphQLEmptyResponse,
    GraphQLFailure,
    GraphQLRequestError,
    GraphQLResponseError,
    PaginatedQueryError,
    QueryError,
    ReorgDetectedError,
    RequestError,
    ResponseError,
    SubgraphError,
)
from .graphql import Document, RequestParameters
from .models import BlockHeight, BlockPointer
from .queries import PaginatedResult, is_reorg_error, send_paginated_query
from .runtime import GraphQLTransport

__version__ = "0.1.0"

__all__ = [
    # Client
    "SubgraphClient",
    "ClientBuilder",
    "Watermark",
    "ClientConfig",
    "GraphQLTransport",
    # Queries
    "send_paginated_query",
    "is_reorg_error",
    "PaginatedResult",
    # Models
    "BlockHeight",
    "BlockPointer",
    "Document",
    "RequestParameters",
    # Exceptions
    "SubgraphError",
    "QueryError",
    "GraphQLRequestError",
    "GraphQLResponseError",
    "GraphQLEmptyResponse",
    "GraphQLFailure",
    "PaginatedQueryError",
    "BootstrapMetaQueryError",
    "EmptyResponseError",
    "ReorgDetectedError",
    "RequestError",
    "ResponseError",
    "DeserializationError",
]
