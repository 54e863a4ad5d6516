"""The bootstrap query is used to determine the latest synced block of a subgraph.

Subgraphs sometimes fall behind, be it due to failing or the Graph Node having
issues. The ``_meta`` field can be added to any query so that it is possible
to determine against which block the query was effectively executed.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, ValidationError

from ..config import SUBGRAPH_META_QUERY_DOCUMENT
from ..core.exceptions import BootstrapMetaQueryError, GraphQLRequestError, GraphQLResponseError
from ..models import Meta
from .common import Transport, send_query


class SubgraphMetaQueryResponse(BaseModel):
    meta: Meta

    model_config = ConfigDict(frozen=True)


async def send_bootstrap_meta_query(
    transport: Transport,
    url: str,
    auth: str | None,
) -> SubgraphMetaQueryResponse:
    """Fetch the block the subgraph is currently synced to.

    Raises:
        BootstrapMetaQueryError: If the query could not be sent, the server
            answered with an empty or failed response, or the ``_meta`` block
            is malformed
    """
    try:
        data = await send_query(transport, url, auth, SUBGRAPH_META_QUERY_DOCUMENT)
    except GraphQLRequestError as e:
        raise BootstrapMetaQueryError(f"Error sending subgraph meta query: {e}") from e
    except GraphQLResponseError as e:
        raise BootstrapMetaQueryError(str(e)) from e

    try:
        return SubgraphMetaQueryResponse.model_validate(data)
    except ValidationError as e:
        raise BootstrapMetaQueryError(f"Error deserializing subgraph meta query: {e}") from e
