"""
Application DI Container (dependency-injector).

Centralizes service creation and lifecycle management.

Usage::

    from onesearch_mcp.config import load_settings
    from onesearch_mcp.container import ApplicationContainer

    container = ApplicationContainer()
    container.config.from_dict(load_settings().to_dict())

    client = container.client()
    service = container.article_service()

    # In tests - override any provider:
    container.client.override(providers.Object(mock_client))
"""

from __future__ import annotations

from dependency_injector import containers, providers


def _create_client(base_url: str, api_key: str, api_user: str, timeout: float) -> object:
    """Lazy factory for OneSearchClient (avoids top-level import)."""
    from onesearch_mcp.infrastructure.onesearch import OneSearchClient

    return OneSearchClient(
        base_url=base_url,
        api_key=api_key,
        api_user=api_user,
        timeout=timeout,
    )


def _create_article_service(client: object) -> object:
    """Lazy factory for ArticleService."""
    from onesearch_mcp.application import ArticleService

    return ArticleService(client=client)  # type: ignore[arg-type]


class ApplicationContainer(containers.DeclarativeContainer):
    """Central DI container for the OneSearch MCP application.

    - ``client``: shared OneSearch HTTP client (one per process)
    - ``article_service``: tool-facing operations
    """

    config = providers.Configuration()

    client = providers.Singleton(
        _create_client,
        base_url=config.api.base_url,
        api_key=config.api.api_key,
        api_user=config.api.api_user,
        timeout=config.api.timeout,
    )

    article_service = providers.Singleton(
        _create_article_service,
        client=client,
    )


__all__ = ["ApplicationContainer"]
