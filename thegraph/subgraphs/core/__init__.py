"""Core components."""

from .exceptions import (
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
    RequestSendError,
    RequestSerializationError,
    ResponseDeserializationError,
    ResponseError,
    ResponseRecvError,
    SubgraphError,
)

__all__ = [
    "SubgraphError",
    "QueryError",
    "GraphQLRequestError",
    "RequestSerializationError",
    "RequestSendError",
    "ResponseRecvError",
    "ResponseDeserializationError",
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
