"""
OneSearch MCP Server

Model Context Protocol server exposing NEJM Group journal search through the
OneSearch API.

Architecture:
- instructions.py: SERVER_INSTRUCTIONS for AI agents
- tool_registry.py: Centralized tool registration
- tools/: Individual tool implementations by category
- resources.py: doi:// documents and reference data
- container: DI container (dependency-injector) for service lifecycle
"""

from __future__ import annotations

import argparse
import logging
import sys
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from dataclasses import replace
from typing import TYPE_CHECKING, Any, cast

from dependency_injector import providers
from mcp.server.fastmcp import FastMCP
from starlette.responses import JSONResponse

from onesearch_mcp.config import load_settings
from onesearch_mcp.container import ApplicationContainer
from onesearch_mcp.core.exceptions import ConfigurationError
from onesearch_mcp.shared.logging_setup import configure_logging

from .instructions import SERVER_INSTRUCTIONS
from .tool_registry import check_tool_registration, register_all_mcp_tools

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Callable, Sequence

    from starlette.requests import Request

    from onesearch_mcp.application import ArticleService
    from onesearch_mcp.config import Settings
    from onesearch_mcp.infrastructure.onesearch import OneSearchClient

logger = logging.getLogger(__name__)

DEFAULT_SERVER_NAME = "onesearch"
HEALTH_SERVICE_NAME = "onesearch-mcp"
TRANSPORTS = ("stdio", "sse", "streamable-http")


def _make_lifespan(
    container: ApplicationContainer,
) -> Callable[[FastMCP[Any]], AbstractAsyncContextManager[ApplicationContainer]]:
    """Create a FastMCP lifespan handler bound to *container*."""

    @asynccontextmanager
    async def _lifespan(server: FastMCP[Any]) -> AsyncIterator[ApplicationContainer]:
        logger.info("Lifecycle: startup")
        try:
            yield container
        finally:
            client = cast("OneSearchClient", container.client())
            await client.close()
            logger.info("Lifecycle: shutdown, OneSearch HTTP client closed")

    return _lifespan


def create_server(
    settings: Settings,
    name: str = DEFAULT_SERVER_NAME,
    client: OneSearchClient | None = None,
) -> FastMCP:
    """
    Create and configure the OneSearch MCP server.

    Args:
        settings: Validated startup settings
        name: Server name
        client: Optional pre-built client (tests inject one backed by
            ``httpx.MockTransport``)

    Returns:
        Configured FastMCP server instance.
    """
    logger.info("Initializing OneSearch MCP Server...")

    container = ApplicationContainer()
    container.config.from_dict(settings.to_dict())
    if client is not None:
        container.client.override(providers.Object(client))

    service = cast("ArticleService", container.article_service())
    logger.info(f"OneSearch API: {settings.api.base_url}")

    mcp = FastMCP(
        name,
        instructions=SERVER_INSTRUCTIONS,
        host=settings.server.host,
        port=settings.server.port,
        lifespan=_make_lifespan(container),
    )

    stats = register_all_mcp_tools(mcp, service)
    logger.info(f"Tool registration complete: {stats}")
    check_tool_registration(mcp, raise_on_error=True)

    @mcp.custom_route("/health", methods=["GET"])
    async def health(request: Request) -> JSONResponse:
        return JSONResponse({"status": "ok", "service": HEALTH_SERVICE_NAME})

    logger.info("OneSearch MCP Server initialized successfully")
    return mcp


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="onesearch-mcp",
        description="MCP server for NEJM Group journal search (OneSearch API)",
    )
    parser.add_argument("--transport", choices=TRANSPORTS, default="stdio", help="MCP transport (default: stdio)")
    parser.add_argument("--host", help="Bind host for HTTP transports (overrides MCP_HOST)")
    parser.add_argument("--port", type=int, help="Port for HTTP transports (overrides PORT)")
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """Run the MCP server."""
    args = _build_parser().parse_args(argv)

    try:
        settings = load_settings()
    except ConfigurationError as e:
        logging.basicConfig(level=logging.ERROR, stream=sys.stderr)
        logger.error(e.message)
        sys.exit(1)

    configure_logging(settings.logging)

    if args.host or args.port:
        server_settings = replace(
            settings.server,
            host=args.host or settings.server.host,
            port=args.port or settings.server.port,
        )
        settings = replace(settings, server=server_settings)

    server = create_server(settings)

    if args.transport == "stdio":
        logger.info("Starting OneSearch MCP server on stdio")
    else:
        logger.info(
            f"Starting OneSearch MCP server ({args.transport}) on "
            f"http://{settings.server.host}:{settings.server.port}"
        )
    server.run(transport=args.transport)


if __name__ == "__main__":
    main()
