"""HTTP client helper."""

from __future__ import annotations

from dataclasses import dataclass

import aiohttp

from ..config import DEFAULT_TIMEOUT
from ..core.exceptions import ResponseRecvError


@dataclass(frozen=True)
class HTTPResponse:
    """Raw HTTP response, fully read.

    Attributes:
        status: HTTP status code
        content_type: Media type of the ``Content-Type`` header, without
            parameters, or None if the header is missing
        body: Raw response body
    """

    status: int
    content_type: str | None
    body: bytes

    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class HTTPClient:
    """Async HTTP client wrapper."""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.headers = dict(headers or {})
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout, headers=self.headers)
        return self._session

    async def post(
        self,
        url: str,
        *,
        data: bytes,
        headers: dict[str, str] | None = None,
    ) -> HTTPResponse:
        """POST request.

        The response status is not checked: GraphQL servers may answer failed
        requests with 4xx/5xx and a regular GraphQL body.

        Raises:
            aiohttp.ClientError: If the request could not be sent
            ResponseRecvError: If the response body could not be read
        """
        async with self.session.post(url, data=data, headers=headers) as response:
            content_type = response.headers.get("Content-Type")
            try:
                body = await response.read()
            except aiohttp.ClientError as e:
                raise ResponseRecvError(
                    response.status, f"Error reading response body: {e}"
                ) from e
            return HTTPResponse(
                status=response.status,
                content_type=content_type.split(";")[0].strip() if content_type else None,
                body=body,
            )

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
