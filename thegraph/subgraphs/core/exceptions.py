"""Custom exception hierarchy.

Architecture:
    Three families of errors share the ``SubgraphError`` root:

    - ``GraphQLRequestError``: the HTTP round trip itself failed (serialization,
      connection, unexpected status, non-JSON body). Always carries text.
    - ``GraphQLResponseError``: the server answered with a well-formed GraphQL
      response that is not a success (empty, or carrying ``errors``).
    - ``PaginatedQueryError``: the closed set of outcomes a paginated query can
      fail with. Callers can branch on the subclass to pick a recovery strategy
      (e.g. ``ReorgDetectedError`` versus a generic ``ResponseError``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..graphql.response import Error


class SubgraphError(Exception):
    """Base exception for all library errors."""

    pass


class QueryError(SubgraphError):
    """A single (non-paginated) subgraph query failed."""

    pass


# Transport errors


class GraphQLRequestError(SubgraphError):
    """Error while sending a GraphQL request or receiving its response."""

    pass


class RequestSerializationError(GraphQLRequestError):
    """The GraphQL request parameters could not be serialized."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Error serializing GraphQL request parameters: {message}")


class RequestSendError(GraphQLRequestError):
    """The HTTP request could not be sent."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Error making HTTP request: {message}")


class ResponseRecvError(GraphQLRequestError):
    """The HTTP response could not be received."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(f"Error receiving HTTP response ({status_code}): {message}")
        self.status_code = status_code


class ResponseDeserializationError(GraphQLRequestError):
    """The response body is not a valid GraphQL response."""

    def __init__(self, error: str, response: str) -> None:
        super().__init__(
            "Error deserializing GraphQL response. "
            f"Unexpected response: {response}. Error: {error}"
        )
        self.error = error
        self.response = response


# GraphQL response errors


class GraphQLResponseError(SubgraphError):
    """The GraphQL response is not a successful one."""

    pass


class GraphQLEmptyResponse(GraphQLResponseError):
    """The response has neither ``data`` nor ``errors``."""

    def __init__(self) -> None:
        super().__init__("Empty response")


class GraphQLFailure(GraphQLResponseError):
    """The server reported one or more errors.

    Responses carrying both ``data`` and ``errors`` are failures too: partial
    responses are never treated as a success.
    """

    def __init__(self, errors: list[Error]) -> None:
        super().__init__(f"GraphQL request failed: {[e.message for e in errors]!r}")
        self.errors = errors

    @property
    def messages(self) -> list[str]:
        return [error.message for error in self.errors]


# Paginated query errors


class PaginatedQueryError(SubgraphError):
    """Base class of the paginated query error taxonomy."""

    pass


class BootstrapMetaQueryError(PaginatedQueryError):
    """The bootstrap meta query failed."""

    def __init__(self, message: str) -> None:
        super().__init__(f"bootstrap meta query failed: {message}")
        self.message = message


class EmptyResponseError(PaginatedQueryError):
    """The first page of a paginated query came back empty.

    A page query response should always contain at least the meta query
    response. An empty first page means the subgraph is not returning any data.
    """

    def __init__(self) -> None:
        super().__init__("empty response")


class ReorgDetectedError(PaginatedQueryError):
    """The indexer no longer knows the block the query was pinned to."""

    def __init__(self) -> None:
        super().__init__("reorg detected")


class RequestError(PaginatedQueryError):
    """Sending one of the page requests failed."""

    def __init__(self, message: str) -> None:
        super().__init__(f"request error: {message}")
        self.message = message


class ResponseError(PaginatedQueryError):
    """The indexer returned errors while processing one of the page requests."""

    def __init__(self, messages: list[str]) -> None:
        super().__init__(f"response error: {messages!r}")
        self.messages = messages


class DeserializationError(PaginatedQueryError):
    """A page entity could not be deserialized."""

    def __init__(self, message: str) -> None:
        super().__init__(f"deserialization error: {message}")
        self.message = message
