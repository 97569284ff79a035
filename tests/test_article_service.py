"""Tests for ArticleService - tool operations and the error boundary."""

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from onesearch_mcp.application import ERROR_PREFIXES, ArticleService
from onesearch_mcp.core.exceptions import UpstreamHttpError
from onesearch_mcp.domain.entities import ArticleReference, QueryEnvelope, ResourceLinkItem
from onesearch_mcp.infrastructure.onesearch.requests import Operation


@pytest.fixture
def envelope():
    return QueryEnvelope(
        total=2,
        results=[
            ArticleReference(doi="10.1056/A", title="Alpha"),
            ArticleReference(doi="10.1056/B", title="Beta"),
        ],
    )


class TestSuccess:
    """Tests for successful operations (mocked client)."""

    async def test_simple_query(self, envelope):
        client = MagicMock()
        client.simple_query = AsyncMock(return_value=envelope)
        service = ArticleService(client)

        result = await service.simple_query("NEJM", "diabetes")

        client.simple_query.assert_awaited_once_with("NEJM", "diabetes")
        assert len(result.content) == 2
        assert not result.is_error

    async def test_odd_article_type_from_api(self, make_client):
        client = make_client(
            {
                "results": [
                    {"doi": "10.1056/CAT1", "title": "Good"},
                    {"doi": "10.1056/CAT2", "title": "Numeric type", "articleType": 5},
                ]
            }
        )
        result = await ArticleService(client).simple_query("NEJM Catalyst", "diabetes")

        assert not result.is_error
        assert len(result.content) == 2
        assert "10.1056/CAT2" in result.texts[1]

    async def test_more_like_this_links(self, envelope):
        client = MagicMock()
        client.more_like_this = AsyncMock(return_value=envelope)
        service = ArticleService(client)

        result = await service.more_like_this("10.1056/X", style="links")

        client.more_like_this.assert_awaited_once_with("10.1056/X", None)
        assert all(isinstance(item, ResourceLinkItem) for item in result.content)

    async def test_browse(self, envelope):
        client = MagicMock()
        client.browse_article_type = AsyncMock(return_value=envelope)
        service = ArticleService(client)

        result = await service.browse_article_type("nejm", "Editorial")

        client.browse_article_type.assert_awaited_once_with("nejm", "Editorial")
        assert len(result.texts) == 2

    async def test_fetch_by_doi(self):
        client = MagicMock()
        client.fetch_by_doi = AsyncMock(return_value=QueryEnvelope(document="<xml/>"))
        service = ArticleService(client)

        result = await service.fetch_by_doi("10.1056/NEJMoa1")

        assert result.texts == ["<xml/>"]

    async def test_read_doi_document(self):
        client = MagicMock()
        client.fetch_by_doi = AsyncMock(return_value=QueryEnvelope(document="<xml/>"))
        assert await ArticleService(client).read_doi_document("10.1056/NEJMoa1") == "<xml/>"


class TestErrorBoundary:
    """Failures come back as isError results, never as exceptions."""

    async def test_invalid_context(self, make_client, recorded_requests):
        service = ArticleService(make_client())

        result = await service.simple_query("Lancet", "diabetes")

        assert result.is_error is True
        assert result.texts == ["Error querying articles: Invalid context: Lancet"]
        assert recorded_requests == []

    async def test_missing_parameter(self, make_client):
        service = ArticleService(make_client())
        result = await service.fetch_by_doi("")
        assert result.texts == ["Error fetching article: Missing required parameter: doi"]

    async def test_upstream_http(self, make_client):
        service = ArticleService(make_client({"message": "Not Found"}, status_code=404))

        result = await service.more_like_this("10.1056/NEJMoa0")

        assert result.is_error is True
        assert result.texts[0].startswith("Error finding similar articles: OneSearch API error 404")

    async def test_transport(self, make_client):
        service = ArticleService(make_client(httpx.ConnectError("Connection refused")))
        result = await service.browse_article_type("nejm", "Editorial")
        assert result.texts == ["Error browsing articles: OneSearch request failed: Connection refused"]

    async def test_unexpected_exception(self):
        client = MagicMock()
        client.simple_query = AsyncMock(side_effect=RuntimeError("kaboom"))
        result = await ArticleService(client).simple_query("NEJM", "x")
        assert result.texts == ["Error querying articles: kaboom"]
        assert len(result.content) == 1

    async def test_read_doi_document_raises(self):
        client = MagicMock()
        client.fetch_by_doi = AsyncMock(side_effect=UpstreamHttpError(404))
        with pytest.raises(UpstreamHttpError):
            await ArticleService(client).read_doi_document("10.1056/missing")

    async def test_error_logged(self):
        client = MagicMock()
        client.simple_query = AsyncMock(side_effect=RuntimeError("kaboom"))
        logger = MagicMock()

        await ArticleService(client, logger=logger).simple_query("NEJM", "x")

        logger.error.assert_called_once()
        assert "UnknownError" in logger.error.call_args[0][0]


class TestErrorPrefixes:
    def test_every_operation_has_prefix(self):
        assert set(ERROR_PREFIXES) == set(Operation)
