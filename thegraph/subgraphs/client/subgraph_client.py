"""High-level subgraph client.

Architecture:
    ``SubgraphClient`` hides the bootstrap sequencing from callers of
    ``paginated_query``. It owns a ``Watermark``: the highest block number
    observed by any query of this client (and of its copies). Paginated
    queries are executed at ``number_gte(watermark)`` and raise the watermark
    with the block of their last page.

    graph-node rejects ``number_gte: 0`` on subgraphs whose start block is
    greater than zero, so the first paginated query of a client (watermark at
    0) is preceded by a ``_meta`` bootstrap query.

Example:
    >>> async with SubgraphClient.builder(url).with_auth_token(key).build() as client:
    ...     subgraphs = await client.paginated_query(SUBGRAPHS_QUERY, 200, model=Subgraph)
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from ..config import ClientConfig
from ..models import BlockHeight
from ..queries import (
    ReorgPredicate,
    Transport,
    is_reorg_error,
    send_bootstrap_meta_query,
    send_paginated_query,
    send_subgraph_query,
)
from ..runtime import GraphQLTransport
from .watermark import Watermark

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SubgraphClient:
    """A client for querying a subgraph."""

    def __init__(
        self,
        subgraph_url: str,
        transport: Transport | None = None,
        *,
        auth_token: str | None = None,
        latest_block: int = 0,
        is_reorg: ReorgPredicate = is_reorg_error,
        config: ClientConfig | None = None,
        watermark: Watermark | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            subgraph_url: Subgraph GraphQL endpoint
            transport: GraphQL transport; a ``GraphQLTransport`` built from
                ``config`` is created (and owned) when omitted
            auth_token: Bearer token sent in the ``Authorization`` header
            latest_block: Initial watermark value
            is_reorg: Predicate deciding whether server errors signal a reorg
            config: HTTP settings of the owned transport
            watermark: Shared watermark (overrides ``latest_block``)
        """
        self.subgraph_url = subgraph_url
        self.auth_token = auth_token
        self.is_reorg = is_reorg
        self._owns_transport = transport is None
        self._transport: Transport = (
            transport if transport is not None else GraphQLTransport(config)
        )
        self._watermark = watermark if watermark is not None else Watermark(latest_block)

    @classmethod
    def builder(cls, subgraph_url: str, transport: Transport | None = None) -> ClientBuilder:
        """Create a client builder."""
        return ClientBuilder(subgraph_url, transport)

    @property
    def transport(self) -> Transport:
        return self._transport

    @property
    def latest_block(self) -> int:
        """The latest block number the subgraph is known to have progressed to."""
        return self._watermark.get()

    def update_latest_block(self, block_number: int) -> int:
        """Raise the watermark, never lowering it.

        Returns:
            The watermark after the update
        """
        return self._watermark.fetch_max(block_number)

    def with_auth_token(self, auth_token: str | None) -> SubgraphClient:
        """Copy of this client using another token.

        The copy shares the transport and the watermark of this client; it
        does not close the transport.
        """
        return SubgraphClient(
            self.subgraph_url,
            self._transport,
            auth_token=auth_token,
            is_reorg=self.is_reorg,
            watermark=self._watermark,
        )

    async def query(self, query: Any, model: type[T] | Any = None) -> T:
        """Send a single query to the subgraph.

        Args:
            query: Anything ``into_request_parameters`` accepts
            model: Type the response data is validated against (None keeps
                the raw JSON data)

        Raises:
            QueryError: If the query failed
        """
        return await send_subgraph_query(
            self._transport, self.subgraph_url, self.auth_token, query, model
        )

    async def paginated_query(
        self,
        query: Any,
        page_size: int,
        model: type[T] | Any = None,
    ) -> list[T]:
        """Send a paginated query to the subgraph.

        The query is executed at the latest block the subgraph is known to
        have progressed to, and pinned to the first page's block afterwards.

        Args:
            query: Query fragment referencing ``$block``, ``$first`` and
                ``$last``
            page_size: Maximum number of entities per page, must be > 0
            model: Type every entity is validated against

        Returns:
            All the entities, in server order

        Raises:
            ValueError: If page_size is not greater than 0
            PaginatedQueryError: If the bootstrap or one of the pages failed
        """
        if page_size <= 0:
            raise ValueError("page size must be greater than 0")

        latest_block = self.latest_block
        if latest_block == 0:
            logger.debug("Sending bootstrap meta query", extra={"url": self.subgraph_url})
            bootstrap = await send_bootstrap_meta_query(
                self._transport, self.subgraph_url, self.auth_token
            )
            logger.debug(
                "Received bootstrap meta query response",
                extra={
                    "block_number": bootstrap.meta.block.number,
                    "block_hash": bootstrap.meta.block.hash,
                },
            )
            latest_block = self.update_latest_block(bootstrap.meta.block.number)

        logger.debug(
            "Sending paginated query",
            extra={
                "url": self.subgraph_url,
                "page_size": page_size,
                "block_number": latest_block,
            },
        )
        result = await send_paginated_query(
            self._transport,
            self.subgraph_url,
            query,
            self.auth_token,
            page_size,
            BlockHeight.number_gte(latest_block),
            model=model,
            is_reorg=self.is_reorg,
        )

        if result.block is not None:
            self.update_latest_block(result.block.number)

        logger.debug(
            "Received paginated query response",
            extra={"total_items_count": len(result.entities)},
        )
        return result.entities

    async def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport and isinstance(self._transport, GraphQLTransport):
            await self._transport.close()

    async def __aenter__(self) -> SubgraphClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


class ClientBuilder:
    """Builder for ``SubgraphClient``.

    Example:
        >>> client = (SubgraphClient.builder(subgraph_url)
        ...     .with_auth_token(ticket)
        ...     .with_subgraph_latest_block(18627000)
        ...     .build())
    """

    def __init__(self, subgraph_url: str, transport: Transport | None = None) -> None:
        self._subgraph_url = subgraph_url
        self._transport = transport
        self._auth_token: str | None = None
        self._latest_block = 0
        self._is_reorg: ReorgPredicate = is_reorg_error
        self._config: ClientConfig | None = None

    def with_auth_token(self, auth_token: str | None) -> ClientBuilder:
        """Set the request bearer token. Requests are unauthenticated by default."""
        self._auth_token = auth_token
        return self

    def with_subgraph_latest_block(self, latest_block: int) -> ClientBuilder:
        """Set the initial watermark. The default is 0 (bootstrap on first use)."""
        if latest_block < 0:
            raise ValueError("latest block must be >= 0")
        self._latest_block = latest_block
        return self

    def with_reorg_predicate(self, is_reorg: ReorgPredicate) -> ClientBuilder:
        """Use a backend-specific reorg error predicate."""
        self._is_reorg = is_reorg
        return self

    def with_config(self, config: ClientConfig) -> ClientBuilder:
        """Set the HTTP settings of the transport created by the client."""
        self._config = config
        return self

    def build(self) -> SubgraphClient:
        return SubgraphClient(
            self._subgraph_url,
            self._transport,
            auth_token=self._auth_token,
            latest_block=self._latest_block,
            is_reorg=self._is_reorg,
            config=self._config,
        )
