"""Precise unit tests for GraphQLTransport.

Tests focus on headers, media type handling and error classification.
"""

from __future__ import annotations

import asyncio
import json
from unittest.mock import AsyncMock

import aiohttp
import pytest
from pydantic import BaseModel

from thegraph.subgraphs.config import ClientConfig
from thegraph.subgraphs.core import (
    GraphQLEmptyResponse,
    GraphQLFailure,
    RequestSendError,
    RequestSerializationError,
    ResponseDeserializationError,
    ResponseRecvError,
)
from thegraph.subgraphs.graphql import Document, RequestParameters
from thegraph.subgraphs.runtime import GraphQLTransport, HTTPResponse, is_legacy_response

URL = "https://example.com/graphql"


def _response(
    body: bytes | dict,
    status: int = 200,
    content_type: str | None = "application/json",
) -> HTTPResponse:
    if isinstance(body, dict):
        body = json.dumps(body).encode()
    return HTTPResponse(status=status, content_type=content_type, body=body)


def _transport(response: HTTPResponse | None = None, side_effect=None) -> GraphQLTransport:
    transport = GraphQLTransport()
    transport._http.post = AsyncMock(return_value=response, side_effect=side_effect)
    return transport


class TestSendGraphQL:
    """Test request construction."""

    @pytest.mark.asyncio
    async def test_posts_json_body_with_graphql_headers(self):
        transport = _transport(_response({"data": {"a": 1}}))

        result = await transport.send_graphql(URL, "{ a }")

        assert result == {"a": 1}
        transport._http.post.assert_called_once()
        args, kwargs = transport._http.post.call_args
        assert args == (URL,)
        assert json.loads(kwargs["data"]) == {"query": "{ a }"}
        assert kwargs["headers"] == {
            "Content-Type": "application/json",
            "Accept": (
                "application/graphql-response+json; charset=utf-8, "
                "application/json; charset=utf-8"
            ),
        }

    @pytest.mark.asyncio
    async def test_bearer_auth(self):
        transport = _transport(_response({"data": {}}))

        await transport.send_graphql(URL, "{ a }", auth="secret")

        headers = transport._http.post.call_args.kwargs["headers"]
        assert headers["Authorization"] == "Bearer secret"

    @pytest.mark.asyncio
    async def test_unserializable_variables(self):
        transport = _transport(_response({"data": {}}))
        params = RequestParameters(query="{ a }", variables={"x": object()})

        with pytest.raises(RequestSerializationError):
            await transport.send_graphql(URL, params)

        transport._http.post.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error", [aiohttp.ClientConnectionError("refused"), asyncio.TimeoutError()]
    )
    async def test_send_errors(self, error):
        transport = _transport(side_effect=error)

        with pytest.raises(RequestSendError):
            await transport.send_graphql(URL, "{ a }")

    @pytest.mark.asyncio
    async def test_body_read_error_is_receive_error(self):
        error = ResponseRecvError(502, "Error reading response body: reset")
        transport = _transport(side_effect=error)

        with pytest.raises(ResponseRecvError) as exc_info:
            await transport.send_graphql(URL, "{ a }")

        assert exc_info.value.status_code == 502
        assert not isinstance(exc_info.value, RequestSendError)

    @pytest.mark.asyncio
    async def test_mapping_variables_with_nested_models(self):
        class Filter(BaseModel):
            id_gt: str

        class Query:
            def into_document_with_variables(self):
                return Document("{ a }"), {"where": Filter(id_gt="x"), "block": {"number": 5}}

        transport = _transport(_response({"data": {"a": 1}}))

        assert await transport.send_graphql(URL, Query()) == {"a": 1}
        sent = json.loads(transport._http.post.call_args.kwargs["data"])
        assert sent["variables"] == {"where": {"id_gt": "x"}, "block": {"number": 5}}

    def test_config_headers_applied_to_session(self):
        transport = GraphQLTransport(ClientConfig(timeout=3.0, user_agent="indexer/1.0"))

        assert transport._http.timeout.total == 3.0
        assert transport._http.headers == {"User-Agent": "indexer/1.0"}


class TestResponseProcessing:
    """Test response classification."""

    @pytest.mark.asyncio
    async def test_graphql_errors_on_4xx(self):
        transport = _transport(_response({"errors": [{"message": "bad"}]}, status=400))

        with pytest.raises(GraphQLFailure) as exc_info:
            await transport.send_graphql(URL, "{ a }")

        assert exc_info.value.messages == ["bad"]

    @pytest.mark.asyncio
    async def test_empty_graphql_response(self):
        transport = _transport(_response({}))

        with pytest.raises(GraphQLEmptyResponse):
            await transport.send_graphql(URL, "{ a }")

    @pytest.mark.asyncio
    async def test_unexpected_status(self):
        transport = _transport(_response(b"moved", status=301))

        with pytest.raises(ResponseRecvError) as exc_info:
            await transport.send_graphql(URL, "{ a }")

        assert exc_info.value.status_code == 301

    @pytest.mark.asyncio
    async def test_empty_body(self):
        transport = _transport(_response(b"", status=502))

        with pytest.raises(ResponseRecvError, match="Empty response body"):
            await transport.send_graphql(URL, "{ a }")

    @pytest.mark.asyncio
    async def test_non_json_body(self):
        transport = _transport(_response(b"<html>Bad Gateway</html>", status=502))

        with pytest.raises(ResponseDeserializationError) as exc_info:
            await transport.send_graphql(URL, "{ a }")

        assert exc_info.value.response == "<html>Bad Gateway</html>"

    @pytest.mark.asyncio
    async def test_json_that_is_not_a_graphql_response(self):
        transport = _transport(_response(b"[1, 2]"))

        with pytest.raises(ResponseDeserializationError):
            await transport.send_graphql(URL, "{ a }")

    @pytest.mark.asyncio
    async def test_graphql_response_media_type(self):
        transport = _transport(
            _response({"data": {"a": 1}}, content_type="application/graphql-response+json")
        )

        assert await transport.send_graphql(URL, "{ a }") == {"a": 1}


class TestLegacyDetection:
    """Test media type detection."""

    def test_missing_content_type_is_legacy(self):
        assert is_legacy_response(_response(b"{}", content_type=None))

    def test_application_json_is_legacy(self):
        assert is_legacy_response(_response(b"{}", content_type="Application/JSON"))

    def test_graphql_response_is_not_legacy(self):
        assert not is_legacy_response(
            _response(b"{}", content_type="application/graphql-response+json")
        )


class TestLifecycle:
    @pytest.mark.asyncio
    async def test_context_manager_closes_http_client(self):
        transport = GraphQLTransport()
        transport._http.close = AsyncMock()

        async with transport:
            pass

        transport._http.close.assert_called_once()
