"""Subgraph page query construction and sending.

A page query wraps the caller's query fragment in a document that also
selects the ``_meta`` block the page was executed at:

    query ($block: Block_height!, $first: Int!, $last: String!) {
        meta: _meta(block: $block) { block { number hash } }
        results: <caller query>
    }

The caller's fragment is embedded verbatim and must itself reference
``$block``, ``$first`` and ``$last`` wherever pagination filtering and
ordering is needed, e.g.::

    subgraphs(
        block: $block
        orderBy: id, orderDirection: asc
        first: $first
        where: { id_gt: $last }
    ) { id }
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, StrictStr, ValidationError

from ..core.exceptions import ResponseDeserializationError
from ..graphql.document import Document, into_document
from ..models import BlockHeight, Meta
from .common import Transport, send_query

PAGE_QUERY_TEMPLATE = """query ($block: Block_height!, $first: Int!, $last: String!) {{
    meta: _meta(block: $block) {{ block {{ number hash }} }}
    results: {query}
}}"""


@dataclass(frozen=True)
class SubgraphPageQueryVars:
    """The arguments of the page query.

    Attributes:
        block: The block at which the query should be executed
        first: The maximum number of entities to fetch
        last: The id of the last entity fetched ("" for the first page)
    """

    block: BlockHeight
    first: int
    last: str = ""

    def to_variables(self) -> dict[str, Any]:
        return {
            "block": self.block.to_variables(),
            "first": self.first,
            "last": self.last,
        }


class SubgraphPageQuery:
    """A single page request of a paginated query."""

    def __init__(
        self,
        query: Any,
        block: BlockHeight,
        first: int,
        last: str | None = None,
    ) -> None:
        self.query = into_document(query)
        self.vars = SubgraphPageQueryVars(block=block, first=first, last=last or "")

    def into_document_with_variables(self) -> tuple[Document, dict[str, Any]]:
        document = Document(PAGE_QUERY_TEMPLATE.format(query=self.query.as_str()))
        return document, self.vars.to_variables()


class SubgraphPageQueryResponse(BaseModel):
    """Response of a page query.

    ``results`` entries are kept as raw JSON values; they are only validated
    against the caller's type once the page cursor has been extracted.
    """

    meta: Meta
    results: list[Any]

    model_config = ConfigDict(frozen=True)


class SubgraphPageQueryResponseOpaqueEntry(BaseModel):
    """An opaque page entry, only used to read the id of the last entity."""

    id: StrictStr


async def send_subgraph_page_query(
    transport: Transport,
    url: str,
    auth: str | None,
    query: Any,
    block_height: BlockHeight,
    page_size: int,
    last: str | None = None,
) -> SubgraphPageQueryResponse:
    """Send a single page query.

    Raises:
        GraphQLRequestError: On transport failure, including a ``data``
            payload that is not a page response
        GraphQLResponseError: On an empty or failed GraphQL response
    """
    page = SubgraphPageQuery(query, block_height, page_size, last)
    data = await send_query(transport, url, auth, page)
    try:
        return SubgraphPageQueryResponse.model_validate(data)
    except ValidationError as e:
        raise ResponseDeserializationError(str(e), json.dumps(data, default=str)) from e
