"""Tests for OneSearchClient - outbound requests and failure mapping."""

import asyncio

import httpx
import pytest

from onesearch_mcp.config import ApiSettings
from onesearch_mcp.core.exceptions import (
    ErrorKind,
    InvalidContextError,
    UnknownError,
    UpstreamHttpError,
    UpstreamTransportError,
)
from onesearch_mcp.infrastructure.onesearch import OneSearchClient
from onesearch_mcp.infrastructure.onesearch.requests import build_simple_query


class TestOutboundRequest:
    """Tests for URL, headers and query string of the single GET."""

    async def test_simple_query_url_and_params(self, make_client, recorded_requests, sample_results):
        client = make_client(sample_results)
        await client.simple_query("NEJM Catalyst", "diabetes")

        assert len(recorded_requests) == 1
        request = recorded_requests[0]
        assert request.method == "GET"
        assert request.url.path == "/api/v1/simple"
        assert request.url.params["context"] == "catalyst"
        assert request.url.params["objectType"] == "catalyst-article"
        assert request.url.params["showResults"] == "full"
        assert request.url.params["query"] == "diabetes"

    async def test_auth_headers(self, make_client, recorded_requests):
        client = make_client()
        await client.fetch_by_doi("10.1056/NEJMoa2502866")

        headers = recorded_requests[0].headers
        assert headers["apikey"] == "test-key"
        assert headers["apiuser"] == "test-user"
        assert headers["accept"] == "application/json"

    async def test_fetch_by_doi_path(self, make_client, recorded_requests):
        client = make_client()
        await client.fetch_by_doi("10.1056/CLINraNA59612")

        url = recorded_requests[0].url
        assert url.path == "/api/v1/content"
        assert url.params["context"] == "clinician"
        assert url.params["format"] == "json"

    async def test_more_like_this_path(self, make_client, recorded_requests):
        client = make_client()
        await client.more_like_this("10.1056/NEJMoa2502866")
        assert recorded_requests[0].url.path == "/api/v1/morelikethis"

    async def test_browse_sort_order(self, make_client, recorded_requests):
        client = make_client()
        await client.browse_article_type("nejm", "Review Article")
        assert recorded_requests[0].url.params["sortBy"] == "pubdate-descending"

    async def test_execute_prebuilt_request(self, make_client, recorded_requests):
        client = make_client()
        await client.execute(build_simple_query("All", "sepsis"))
        assert recorded_requests[0].url.params["context"] == "federated"

    async def test_validation_happens_before_io(self, make_client, recorded_requests):
        client = make_client()
        with pytest.raises(InvalidContextError):
            await client.simple_query("Not a journal", "diabetes")
        assert recorded_requests == []


class TestResponseParsing:
    """Tests for envelope coercion."""

    async def test_results(self, make_client, sample_results):
        client = make_client(sample_results)
        envelope = await client.simple_query("NEJM Catalyst", "diabetes")
        assert envelope.total == 3
        assert len(envelope.results) == 3
        assert [ref.doi for ref in envelope.displayable_results] == ["10.1056/CAT1"]

    async def test_null_results(self, make_client):
        client = make_client({"total": 0, "results": None})
        envelope = await client.simple_query("NEJM", "nothing")
        assert envelope.results == []
        assert envelope.total == 0

    async def test_odd_article_type_keeps_results(self, make_client):
        client = make_client(
            {
                "results": [
                    {"doi": "10.1056/CAT1", "title": "Good"},
                    {"doi": "10.1056/CAT2", "title": "Numeric type", "articleType": 5},
                ]
            }
        )
        envelope = await client.simple_query("NEJM Catalyst", "diabetes")
        assert [ref.article_type for ref in envelope.results] == [[], ["5"]]

    async def test_document(self, make_client, sample_document):
        client = make_client(sample_document)
        envelope = await client.fetch_by_doi("10.1056/NEJMoa2502866")
        assert envelope.document == "<article><front/></article>"

    async def test_invalid_json(self, make_client):
        client = make_client(httpx.Response(200, text="<html>oops</html>"))
        with pytest.raises(UnknownError) as exc_info:
            await client.simple_query("NEJM", "diabetes")
        assert "Invalid JSON" in exc_info.value.message

    async def test_non_object_body(self, make_client):
        client = make_client(["not", "an", "object"])
        with pytest.raises(UnknownError):
            await client.simple_query("NEJM", "diabetes")


class TestFailures:
    """Tests for HTTP and transport failures."""

    async def test_http_404(self, make_client):
        client = make_client({"message": "Not Found"}, status_code=404)
        with pytest.raises(UpstreamHttpError) as exc_info:
            await client.fetch_by_doi("10.1056/NEJMoa0000000")

        error = exc_info.value
        assert error.status == 404
        assert error.kind is ErrorKind.UPSTREAM_HTTP
        assert "404" in error.message
        assert "Not Found" in error.message

    async def test_http_500_text_body(self, make_client):
        client = make_client(httpx.Response(500, text="Internal Server Error"))
        with pytest.raises(UpstreamHttpError) as exc_info:
            await client.simple_query("NEJM", "diabetes")
        assert exc_info.value.message == "OneSearch API error 500: Internal Server Error"

    async def test_connect_error(self, make_client):
        client = make_client(httpx.ConnectError("Connection refused"))
        with pytest.raises(UpstreamTransportError) as exc_info:
            await client.simple_query("NEJM", "diabetes")
        assert exc_info.value.kind is ErrorKind.UPSTREAM_TRANSPORT
        assert "Connection refused" in exc_info.value.message

    async def test_timeout(self, make_client):
        client = make_client(httpx.ReadTimeout("timed out"))
        with pytest.raises(UpstreamTransportError):
            await client.more_like_this("10.1056/NEJMoa2502866")

    async def test_total_deadline(self, recorded_requests):
        """A server that never answers is cut off at the configured timeout."""

        async def stall(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            await asyncio.sleep(5)
            return httpx.Response(200, json={"results": []})

        client = OneSearchClient(
            base_url="https://onesearch.test/api/v1",
            api_key="k",
            api_user="u",
            timeout=0.05,
            transport=httpx.MockTransport(stall),
        )
        with pytest.raises(UpstreamTransportError) as exc_info:
            await client.simple_query("NEJM", "diabetes")
        assert "no response within 0.05s" in exc_info.value.message
        assert len(recorded_requests) == 1

    async def test_single_attempt(self, make_client, recorded_requests):
        """Failures are not retried."""
        client = make_client({"message": "busy"}, status_code=503)
        with pytest.raises(UpstreamHttpError):
            await client.simple_query("NEJM", "diabetes")
        assert len(recorded_requests) == 1


class TestLifecycle:
    """Tests for construction and closing."""

    def test_from_settings(self):
        settings = ApiSettings(host="api.example.org", api_key="k", api_user="u", timeout=5.0)
        client = OneSearchClient.from_settings(settings)
        assert client.base_url == "https://api.example.org/api/v1"

    async def test_reopens_after_close(self, make_client, recorded_requests):
        client = make_client()
        await client.simple_query("NEJM", "a")
        await client.close()
        await client.simple_query("NEJM", "b")
        assert len(recorded_requests) == 2

    async def test_async_context_manager(self, make_client):
        async with make_client() as client:
            envelope = await client.simple_query("NEJM", "diabetes")
        assert envelope.results == []
