"""GraphQL-over-HTTP transport.

Sends GraphQL requests as ``application/json`` POST bodies and classifies the
responses. Transport failures are raised as ``GraphQLRequestError``
subclasses, GraphQL-level outcomes as ``GraphQLResponseError`` subclasses.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

import aiohttp
from pydantic import ValidationError

from ..config import (
    ACCEPT_HEADER,
    GRAPHQL_LEGACY_RESPONSE_MEDIA_TYPE,
    GRAPHQL_REQUEST_MEDIA_TYPE,
    ClientConfig,
)
from ..core.exceptions import (
    RequestSendError,
    RequestSerializationError,
    ResponseDeserializationError,
    ResponseRecvError,
)
from ..graphql.request import into_request_parameters
from ..graphql.response import ResponseBody, process_response_body
from .http_client import HTTPClient, HTTPResponse

logger = logging.getLogger(__name__)


def is_legacy_response(response: HTTPResponse) -> bool:
    """Whether the response uses the legacy ``application/json`` media type.

    A response without ``Content-Type`` is interpreted as legacy.
    """
    if response.content_type is None:
        return True
    return response.content_type.lower() == GRAPHQL_LEGACY_RESPONSE_MEDIA_TYPE


def _is_acceptable_status(status: int) -> bool:
    # Legacy servers may use 4xx/5xx for failed but well-formed requests
    return 200 <= status < 300 or 400 <= status < 600


def process_legacy_graphql_response(response: HTTPResponse) -> Any:
    """Process an ``application/json`` GraphQL-over-HTTP response.

    Args:
        response: The raw HTTP response

    Returns:
        The ``data`` payload of a successful GraphQL response

    Raises:
        ResponseRecvError: On an unexpected status code or an empty body
        ResponseDeserializationError: If the body is not a GraphQL response
        GraphQLEmptyResponse: If the response has neither data nor errors
        GraphQLFailure: If the response carries errors
    """
    if not _is_acceptable_status(response.status):
        raise ResponseRecvError(response.status, response.text() or "Empty response body")

    if not response.body:
        raise ResponseRecvError(response.status, "Empty response body")

    try:
        body = ResponseBody.model_validate(json.loads(response.body))
    except (ValueError, ValidationError) as e:
        raise ResponseDeserializationError(str(e), response.text()) from e

    return process_response_body(body)


def process_graphql_response(response: HTTPResponse) -> Any:
    """Process an ``application/graphql-response+json`` response.

    The status code semantics of this media type are not enforced yet; the
    body is processed as a legacy response.
    """
    return process_legacy_graphql_response(response)


class GraphQLTransport:
    """GraphQL-over-HTTP transport on top of ``HTTPClient``."""

    def __init__(
        self,
        config: ClientConfig | None = None,
        http: HTTPClient | None = None,
    ) -> None:
        self.config = config or ClientConfig()
        self._http = http or HTTPClient(
            timeout=self.config.timeout,
            headers=self.config.default_headers(),
        )

    def build_headers(self, auth: str | None = None) -> dict[str, str]:
        headers = {
            "Content-Type": GRAPHQL_REQUEST_MEDIA_TYPE,
            "Accept": ACCEPT_HEADER,
        }
        if auth:
            headers["Authorization"] = f"Bearer {auth}"
        return headers

    async def send_graphql(self, url: str, request: Any, *, auth: str | None = None) -> Any:
        """Send a GraphQL request and classify its response.

        Args:
            url: GraphQL endpoint URL
            request: Anything ``into_request_parameters`` accepts
            auth: Optional bearer token

        Returns:
            The ``data`` payload of a successful response

        Raises:
            GraphQLRequestError: If the request could not be sent or the
                response could not be received or decoded
            GraphQLResponseError: If the server answered with an empty or
                failed GraphQL response
        """
        try:
            params = into_request_parameters(request)
            data = json.dumps(params.to_payload()).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise RequestSerializationError(str(e)) from e

        try:
            response = await self._http.post(url, data=data, headers=self.build_headers(auth))
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise RequestSendError(str(e) or type(e).__name__) from e

        logger.debug(
            "GraphQL response received",
            extra={
                "url": url,
                "status": response.status,
                "content_type": response.content_type,
                "body_size": len(response.body),
            },
        )

        if is_legacy_response(response):
            return process_legacy_graphql_response(response)
        return process_graphql_response(response)

    async def close(self) -> None:
        await self._http.close()

    async def __aenter__(self) -> GraphQLTransport:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
