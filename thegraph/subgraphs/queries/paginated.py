"""Paginated subgraph query engine.

Turns a single "fetch everything matching this query" request into a sequence
of page requests.

Architecture:
    The first page is executed at the block height supplied by the caller
    (typically ``number_gte(watermark)``). Every following page is pinned to
    the hash of the block the previous page was executed at, so the whole run
    reads a consistent snapshot even as the chain advances. Pages are
    requested sequentially: each one depends on the previous page's cursor
    (the ``id`` of its last entity) and block hash.

    The run terminates on the first empty page. Any failure terminates the
    run immediately with one of the ``PaginatedQueryError`` subclasses; no
    partial results are returned and no page is retried.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter, ValidationError

from ..config import SUBGRAPH_REORG_ERROR
from ..core.exceptions import (
    DeserializationError,
    EmptyResponseError,
    GraphQLEmptyResponse,
    GraphQLFailure,
    GraphQLRequestError,
    PaginatedQueryError,
    ReorgDetectedError,
    RequestError,
    ResponseError,
)
from ..graphql.document import into_document
from ..models import BlockHeight, BlockPointer
from .common import Transport
from .page import SubgraphPageQueryResponseOpaqueEntry, send_subgraph_page_query
from .telemetry import (
    log_page_received,
    log_page_request,
    log_pagination_complete,
    log_pagination_error,
    log_reorg_detected,
)

T = TypeVar("T")

ReorgPredicate = Callable[[list[str]], bool]


def is_reorg_error(messages: Iterable[str]) -> bool:
    """Whether the server errors indicate the pinned block was reorged out.

    graph-node answers queries pinned to a block hash it no longer knows with
    a "no block with that hash found" error.
    """
    return any(SUBGRAPH_REORG_ERROR in message for message in messages)


@dataclass
class PaginatedResult(Generic[T]):
    """Result of a pagination run.

    Attributes:
        entities: Entities of all pages, in server order
        block: Block the last non-empty page was executed at (None if no page
            had results)
        pages: Number of page requests sent
    """

    entities: list[T] = field(default_factory=list)
    block: BlockPointer | None = None
    pages: int = 0


def _extract_last_id(results: list[Any]) -> str:
    try:
        return SubgraphPageQueryResponseOpaqueEntry.model_validate(results[-1]).id
    except ValidationError as e:
        raise DeserializationError("failed to extract id for last entry") from e


async def send_paginated_query(
    transport: Transport,
    url: str,
    query: Any,
    auth: str | None,
    page_size: int,
    block_height: BlockHeight,
    *,
    model: type[T] | Any = None,
    last: str | None = None,
    is_reorg: ReorgPredicate = is_reorg_error,
) -> PaginatedResult[T]:
    """Fetch all the pages of a query.

    Args:
        transport: GraphQL transport
        url: Subgraph URL
        query: Query fragment referencing ``$block``, ``$first`` and ``$last``
        auth: Optional bearer token
        page_size: Maximum number of entities per page, must be > 0
        block_height: Block constraint of the first page
        model: Type every entity is validated against (None keeps raw JSON)
        last: Optional initial cursor
        is_reorg: Predicate deciding whether server errors signal a reorg

    Returns:
        The accumulated entities and the last observed block pointer

    Raises:
        ValueError: If page_size is not greater than 0
        EmptyResponseError: If the first page is empty
        ReorgDetectedError: If the server no longer knows the pinned block
        RequestError: If a page request could not be sent or received
        ResponseError: If the server reported errors for a page
        DeserializationError: If the cursor or an entity could not be read
    """
    if page_size <= 0:
        raise ValueError("page size must be greater than 0")

    document = into_document(query)
    adapter: TypeAdapter[Any] | None = TypeAdapter(model) if model is not None else None

    result: PaginatedResult[T] = PaginatedResult()
    last_id = last
    page_index = 0

    try:
        while True:
            log_page_request(url=url, page_index=page_index, last_id=last_id)
            result.pages += 1

            try:
                page = await send_subgraph_page_query(
                    transport, url, auth, document, block_height, page_size, last_id
                )
            except GraphQLRequestError as e:
                raise RequestError(str(e)) from e
            except GraphQLEmptyResponse as e:
                if page_index == 0:
                    raise EmptyResponseError() from e
                break
            except GraphQLFailure as e:
                messages = e.messages
                if is_reorg(messages):
                    log_reorg_detected(url=url, page_index=page_index, messages=messages)
                    raise ReorgDetectedError() from e
                raise ResponseError(messages) from e

            if not page.results:
                if page_index == 0:
                    raise EmptyResponseError()
                break

            last_id = _extract_last_id(page.results)
            log_page_received(
                url=url,
                page_index=page_index,
                block=page.meta.block,
                items_count=len(page.results),
                last_id=last_id,
            )

            block_height = BlockHeight.of_block(page.meta.block)
            result.block = page.meta.block

            for entity in page.results:
                if adapter is None:
                    result.entities.append(entity)
                    continue
                try:
                    result.entities.append(adapter.validate_python(entity))
                except ValidationError as e:
                    raise DeserializationError(str(e)) from e

            page_index += 1
    except PaginatedQueryError as e:
        log_pagination_error(
            url=url,
            page_index=page_index,
            error_type=type(e).__name__,
            error_message=str(e),
        )
        raise

    log_pagination_complete(
        url=url,
        pages=result.pages,
        total_items=len(result.entities),
        block=result.block,
    )
    return result
