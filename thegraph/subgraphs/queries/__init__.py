"""Subgraph queries.

Architecture:
    - common.py: single query helpers and the ``Transport`` protocol
    - bootstrap.py: ``_meta`` query used to initialize the block watermark
    - page.py: page query construction and the single-page sender
    - paginated.py: the pagination engine
    - telemetry.py: structured logging of pagination runs
"""

from __future__ import annotations

from .bootstrap import SubgraphMetaQueryResponse, send_bootstrap_meta_query
from .common import Transport, send_query, send_subgraph_query, validate_as
from .page import (
    SubgraphPageQuery,
    SubgraphPageQueryResponse,
    SubgraphPageQueryVars,
    send_subgraph_page_query,
)
from .paginated import PaginatedResult, ReorgPredicate, is_reorg_error, send_paginated_query

__all__ = [
    "Transport",
    "send_query",
    "send_subgraph_query",
    "validate_as",
    "SubgraphMetaQueryResponse",
    "send_bootstrap_meta_query",
    "SubgraphPageQuery",
    "SubgraphPageQueryVars",
    "SubgraphPageQueryResponse",
    "send_subgraph_page_query",
    "PaginatedResult",
    "ReorgPredicate",
    "is_reorg_error",
    "send_paginated_query",
]
