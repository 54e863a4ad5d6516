"""Shared fixtures for unit tests."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import pytest

from thegraph.subgraphs.graphql import (
    RequestParameters,
    ResponseBody,
    into_request_parameters,
    process_response_body,
)


@dataclass
class SentRequest:
    url: str
    params: RequestParameters
    auth: str | None


class FakeTransport:
    """Scripted transport.

    Each response is either a raw ``data`` payload, a ``ResponseBody`` that is
    classified like a real server response, or an exception to raise.
    """

    def __init__(self, responses: list[Any]) -> None:
        self.responses = list(responses)
        self.requests: list[SentRequest] = []

    async def send_graphql(self, url: str, request: Any, *, auth: str | None = None) -> Any:
        params = into_request_parameters(request)
        self.requests.append(SentRequest(url=url, params=params, auth=auth))
        if not self.responses:
            raise AssertionError(f"unexpected request #{len(self.requests)}")
        response = self.responses.pop(0)
        if isinstance(response, BaseException):
            raise response
        if isinstance(response, ResponseBody):
            return process_response_body(response)
        return response


def block_hash(n: int) -> str:
    return "0x" + f"{n:064x}"


@pytest.fixture
def fake_transport() -> Callable[..., FakeTransport]:
    """Factory building a FakeTransport from scripted responses."""

    def _make(*responses: Any) -> FakeTransport:
        return FakeTransport(list(responses))

    return _make


@pytest.fixture
def meta_data() -> Callable[..., dict[str, Any]]:
    """Factory for the ``data`` payload of a bootstrap meta query."""

    def _make(number: int, hash_seed: int | None = None) -> dict[str, Any]:
        return {
            "meta": {
                "block": {"number": number, "hash": block_hash(hash_seed or number)},
            }
        }

    return _make


@pytest.fixture
def page_data() -> Callable[..., dict[str, Any]]:
    """Factory for the ``data`` payload of a page query."""

    def _make(
        ids: list[str],
        number: int = 100,
        hash_seed: int | None = None,
        **extra: Any,
    ) -> dict[str, Any]:
        return {
            "meta": {
                "block": {"number": number, "hash": block_hash(hash_seed or number)},
            },
            "results": [{"id": id_, **extra} for id_ in ids],
        }

    return _make
