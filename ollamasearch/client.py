"""HTTP client for the model library search endpoint."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from loguru import logger

from ollamasearch.config import SearchConfig
from ollamasearch.errors import HTTPStatusError, NetworkError
from ollamasearch.query import Query

USER_AGENT = "OllamaSearch/0.1"


class SearchClient:
    """Issue a single search request and hand back the results fragment."""

    def __init__(
        self,
        config: SearchConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = config or SearchConfig()
        self._transport = transport

    @property
    def search_url(self) -> str:
        return self.config.search_url

    @property
    def headers(self) -> dict[str, str]:
        return {
            "User-Agent": USER_AGENT,
            # only the result list, not the full page layout
            "HX-Request": "true",
        }

    @staticmethod
    def build_params(query: Query) -> list[tuple[str, str]]:
        """Query string pairs: one ``q``, then one ``c`` per capability."""
        params = [("q", query.text)]
        params.extend(("c", capability) for capability in query.capabilities)
        return params

    @asynccontextmanager
    async def open(self, query: Query) -> AsyncIterator[httpx.Response]:
        """
        Send the search request and yield the streamed response.

        The response is only yielded for a 200 status. It is closed on every
        exit path, including when the status check fails.
        """
        async with httpx.AsyncClient(
            transport=self._transport,
            timeout=self.config.timeout,
        ) as client:
            try:
                request = client.build_request(
                    "GET",
                    self.search_url,
                    params=self.build_params(query),
                    headers=self.headers,
                )
                logger.debug("GET {}", request.url)
                response = await client.send(request, stream=True)
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                raise NetworkError(f"search request failed: {e}") from e

            try:
                if response.status_code != httpx.codes.OK:
                    raise HTTPStatusError(response.status_code, response.reason_phrase)
                yield response
            finally:
                await response.aclose()

    async def fetch(self, query: Query) -> bytes:
        """Return the full response body, bounded by ``config.timeout`` seconds."""
        timeout = self.config.timeout
        try:
            return await asyncio.wait_for(self._read(query), timeout=timeout)
        except asyncio.TimeoutError as e:
            raise NetworkError(f"search request timed out after {timeout:g}s") from e

    async def _read(self, query: Query) -> bytes:
        async with self.open(query) as response:
            try:
                body = await response.aread()
            except httpx.HTTPError as e:
                raise NetworkError(f"failed to read search response: {e}") from e
        logger.debug("Received {} bytes", len(body))
        return body
