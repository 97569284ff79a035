"""
OneSearch API Client - single GET per call against the OneSearch REST API.

Owns the transport configuration (base URL, auth headers, timeout) and turns
responses into QueryEnvelope objects. Failures are converted into the
exception taxonomy from ``onesearch_mcp.core.exceptions``:

- non-2xx response          -> UpstreamHttpError
- connect/DNS/timeout error -> UpstreamTransportError
- body that is not a JSON object -> UnknownError

There is no retry, rate limiting or caching: a failed attempt is surfaced
immediately.

Usage:
    async with OneSearchClient(base_url, api_key, api_user) as client:
        envelope = await client.simple_query("NEJM", "diabetes")
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

import httpx
from typing_extensions import Self

from onesearch_mcp.core.error_classifier import transport_reason
from onesearch_mcp.core.exceptions import (
    UnknownError,
    UpstreamHttpError,
    UpstreamTransportError,
)

from .mappers import envelope_from_api
from .requests import (
    OneSearchRequest,
    build_browse_article_type,
    build_fetch_by_doi,
    build_more_like_this,
    build_simple_query,
)

if TYPE_CHECKING:
    from onesearch_mcp.config import ApiSettings
    from onesearch_mcp.domain.entities import QueryEnvelope

DEFAULT_TIMEOUT = 10.0


class OneSearchClient:
    """
    Async client for the OneSearch API.

    The configuration is fixed at construction and never mutated, so one
    instance can serve any number of concurrent tool calls.

    Args:
        base_url: API root, e.g. ``https://onesearch.example.org/api/v1``
        api_key: Sent as the ``apikey`` header
        api_user: Sent as the ``apiuser`` header
        timeout: Hard per-request deadline in seconds, covering the whole GET
        transport: Optional httpx transport (tests pass ``httpx.MockTransport``)
        logger: Optional logger; defaults to this module's logger
    """

    _service_name = "OneSearch"

    def __init__(
        self,
        base_url: str,
        api_key: str,
        api_user: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._logger = logger or logging.getLogger(__name__)
        self._headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "apikey": api_key,
            "apiuser": api_user,
        }
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @classmethod
    def from_settings(
        cls,
        settings: ApiSettings,
        transport: httpx.AsyncBaseTransport | None = None,
        logger: logging.Logger | None = None,
    ) -> Self:
        """Build a client from validated startup settings."""
        return cls(
            base_url=settings.base_url,
            api_key=settings.api_key,
            api_user=settings.api_user,
            timeout=settings.timeout,
            transport=transport,
            logger=logger,
        )

    def _get_client(self) -> httpx.AsyncClient:
        """Shared httpx client, reopened if a previous session closed it."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                headers=self._headers,
                transport=self._transport,
            )
        return self._client

    @property
    def base_url(self) -> str:
        return self._base_url

    async def call(self, path: str, params: dict[str, str]) -> QueryEnvelope:
        """
        Perform exactly one GET and coerce the body into a QueryEnvelope.

        Raises:
            UpstreamHttpError: Non-2xx response
            UpstreamTransportError: No response (connection, DNS, timeout)
            UnknownError: Response body is not a JSON object
        """
        self._logger.info(f"{self._service_name} GET {path} params={params}")

        try:
            async with asyncio.timeout(self._timeout):
                response = await self._get_client().get(path, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            error = UpstreamHttpError(e.response.status_code, self._error_body(e.response))
            self._logger.error(f"{self._service_name} {path} failed: {error.message}")
            raise error from e
        except httpx.RequestError as e:
            error = UpstreamTransportError(transport_reason(e))
            self._logger.error(f"{self._service_name} {path} failed: {error.message}")
            raise error from e
        except TimeoutError as e:
            error = UpstreamTransportError(f"no response within {self._timeout:g}s")
            self._logger.error(f"{self._service_name} {path} failed: {error.message}")
            raise error from e

        data = self._parse_response(response, path)
        envelope = envelope_from_api(data)
        self._logger.info(f"{self._service_name} {path} returned {len(envelope.results)} results")
        return envelope

    async def execute(self, request: OneSearchRequest) -> QueryEnvelope:
        """Run a request produced by the request builder."""
        return await self.call(request.path, request.params)

    # ------------------------------------------------------------------
    # One method per operation
    # ------------------------------------------------------------------

    async def fetch_by_doi(self, doi: str) -> QueryEnvelope:
        return await self.execute(build_fetch_by_doi(doi))

    async def simple_query(self, context: str, query: str) -> QueryEnvelope:
        return await self.execute(build_simple_query(context, query))

    async def more_like_this(self, doi: str, context: str | None = None) -> QueryEnvelope:
        return await self.execute(build_more_like_this(doi, context))

    async def browse_article_type(self, context: str, article_type: str) -> QueryEnvelope:
        return await self.execute(build_browse_article_type(context, article_type))

    # ------------------------------------------------------------------

    @staticmethod
    def _error_body(response: httpx.Response) -> Any:
        """JSON body when there is one, else the raw text."""
        try:
            return response.json()
        except ValueError:
            return response.text

    def _parse_response(self, response: httpx.Response, path: str) -> dict[str, Any]:
        try:
            data = response.json()
        except ValueError as e:
            self._logger.error(f"{self._service_name} {path} returned invalid JSON")
            raise UnknownError(f"Invalid JSON response from {path}") from e
        if not isinstance(data, dict):
            self._logger.error(f"{self._service_name} {path} returned {type(data).__name__}, expected object")
            raise UnknownError(f"Unexpected response from {path}: expected a JSON object")
        return data

    async def close(self) -> None:
        """Close the underlying HTTP client; the next call opens a new one."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()


__all__ = ["DEFAULT_TIMEOUT", "OneSearchClient"]
