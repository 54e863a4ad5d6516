"""Single subgraph query helpers."""

from __future__ import annotations

from typing import Any, Protocol, TypeVar

from pydantic import TypeAdapter, ValidationError

from ..core.exceptions import GraphQLRequestError, GraphQLResponseError, QueryError

T = TypeVar("T")


class Transport(Protocol):
    """What the query functions need from a GraphQL-over-HTTP transport."""

    async def send_graphql(self, url: str, request: Any, *, auth: str | None = None) -> Any: ...


def validate_as(model: Any, data: Any) -> Any:
    """Validate raw JSON data against ``model``.

    ``model`` can be anything pydantic's ``TypeAdapter`` accepts (a model
    class, a dataclass, ``list[int]``...). ``None`` returns the data as is.
    """
    if model is None:
        return data
    return TypeAdapter(model).validate_python(data)


async def send_query(
    transport: Transport,
    url: str,
    auth: str | None,
    query: Any,
) -> Any:
    """Send an authenticated GraphQL query to a subgraph.

    Returns:
        The ``data`` payload of the response

    Raises:
        GraphQLRequestError: On transport failure
        GraphQLResponseError: On an empty or failed GraphQL response
    """
    return await transport.send_graphql(url, query, auth=auth)


async def send_subgraph_query(
    transport: Transport,
    url: str,
    auth: str | None,
    query: Any,
    model: type[T] | Any = None,
) -> T:
    """Send a subgraph query and validate its data against ``model``.

    Raises:
        QueryError: If the request, the GraphQL response or the validation
            failed. The message can be logged verbatim.
    """
    try:
        data = await send_query(transport, url, auth, query)
    except GraphQLRequestError as e:
        raise QueryError(f"Error sending subgraph graphql query: {e}") from e
    except GraphQLResponseError as e:
        raise QueryError(str(e)) from e

    try:
        return validate_as(model, data)
    except ValidationError as e:
        raise QueryError(f"Error deserializing subgraph query response: {e}") from e
