"""
Pytest configuration and shared fixtures.
"""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from onesearch_mcp.config import ApiSettings, LoggingSettings, ServerSettings, Settings
from onesearch_mcp.infrastructure.onesearch import OneSearchClient

BASE_URL = "https://onesearch.test/api/v1"

# ============================================================
# Settings Fixtures
# ============================================================


@pytest.fixture
def env():
    """Minimal valid environment."""
    return {"APIHOST": "onesearch.test", "APIKEY": "test-key", "APIUSER": "test-user"}


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a fake host, file logging off."""
    return Settings(
        api=ApiSettings(host="onesearch.test", api_key="test-key", api_user="test-user"),
        server=ServerSettings(host="127.0.0.1", port=1337),
        logging=LoggingSettings(log_directory=str(tmp_path / "logs")),
    )


# ============================================================
# Mock OneSearch API
# ============================================================


@pytest.fixture
def sample_results():
    """Search response with one displayable and two filtered results."""
    return {
        "total": 3,
        "results": [
            {
                "doi": "10.1056/CAT1",
                "title": "Diabetes Study",
                "pubdate": "2024-01-01",
                "journal": "NEJM Catalyst",
                "text": "A study of diabetes care delivery.",
                "articleType": ["Case Study"],
            },
            {"doi": "10.1056/CAT2", "title": None},
            {"title": "No DOI here"},
        ],
    }


@pytest.fixture
def sample_document():
    """/content response carrying a JATS document."""
    return {"total": 1, "results": [], "document": "<article><front/></article>"}


@pytest.fixture
def recorded_requests():
    """List collecting every request the mock transport receives."""
    return []


@pytest.fixture
def make_client(recorded_requests) -> Callable[..., OneSearchClient]:
    """
    Factory for a OneSearchClient backed by httpx.MockTransport.

    ``response`` may be a JSON-able object, an httpx.Response, an exception
    to raise, or a callable taking the request.
    """

    def _make(response=None, status_code: int = 200) -> OneSearchClient:
        def handler(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            if callable(response):
                return response(request)
            if isinstance(response, Exception):
                raise response
            if isinstance(response, httpx.Response):
                return response
            return httpx.Response(status_code, json=response if response is not None else {"results": []})

        return OneSearchClient(
            base_url=BASE_URL,
            api_key="test-key",
            api_user="test-user",
            transport=httpx.MockTransport(handler),
        )

    return _make

