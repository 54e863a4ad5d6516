"""Shared fixtures for integration tests."""

import os

import pytest

# Skip all integration tests unless RUN_THEGRAPH_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_THEGRAPH_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_THEGRAPH_NETWORK_TESTS=1 to run",
)


@pytest.fixture
def subgraph_url() -> str:
    url = os.environ.get("IT_TEST_SUBGRAPH_URL")
    if not url:
        pytest.skip("IT_TEST_SUBGRAPH_URL is not set")
    return url


@pytest.fixture
def auth_token() -> str | None:
    return os.environ.get("IT_TEST_SUBGRAPH_AUTH")
