"""Structured logging for paginated queries.

This module provides telemetry hooks for the pagination engine, emitting
structured logs with the cursor and block of every page.
"""

from __future__ import annotations

import logging

from ..models import BlockPointer

logger = logging.getLogger(__name__)


def log_page_request(*, url: str, page_index: int, last_id: str | None) -> None:
    """Log a page request about to be sent.

    Args:
        url: Subgraph URL
        page_index: Zero-based index of the page in the run
        last_id: Cursor of the page (None for the first page)
    """
    logger.debug(
        "page_query_request",
        extra={
            "url": url,
            "page_index": page_index,
            "last_id": last_id or "none",
        },
    )


def log_page_received(
    *,
    url: str,
    page_index: int,
    block: BlockPointer,
    items_count: int,
    last_id: str,
) -> None:
    """Log a non-empty page response.

    Args:
        url: Subgraph URL
        page_index: Zero-based index of the page in the run
        block: Block the page was executed at
        items_count: Number of entities in the page
        last_id: Id of the last entity of the page
    """
    logger.debug(
        "page_query_response",
        extra={
            "url": url,
            "page_index": page_index,
            "block_number": block.number,
            "block_hash": block.hash,
            "page_items_count": items_count,
            "last_item_id": last_id,
        },
    )


def log_reorg_detected(*, url: str, page_index: int, messages: list[str]) -> None:
    logger.debug(
        "reorg_detected",
        extra={"url": url, "page_index": page_index, "errors": messages},
    )


def log_pagination_complete(
    *,
    url: str,
    pages: int,
    total_items: int,
    block: BlockPointer | None,
) -> None:
    """Log the successful end of a pagination run."""
    logger.debug(
        "paginated_query_complete",
        extra={
            "url": url,
            "pages": pages,
            "total_items_count": total_items,
            "block_number": block.number if block else None,
            "block_hash": block.hash if block else None,
        },
    )


def log_pagination_error(
    *,
    url: str,
    page_index: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a pagination run that terminated with an error.

    Args:
        url: Subgraph URL
        page_index: Zero-based index of the page that failed
        error_type: Error class name (e.g. "ReorgDetectedError")
        error_message: Error message
    """
    logger.warning(
        "paginated_query_error",
        extra={
            "url": url,
            "page_index": page_index,
            "error_type": error_type,
            "error_message": error_message,
        },
    )
