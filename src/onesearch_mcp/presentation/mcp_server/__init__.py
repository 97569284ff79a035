"""
OneSearch MCP Server

Usage as standalone server:
    python -m onesearch_mcp.presentation.mcp_server

Or in mcp.json:
    {
        "servers": {
            "onesearch": {
                "type": "stdio",
                "command": "onesearch-mcp",
                "env": {"APIHOST": "...", "APIKEY": "...", "APIUSER": "..."}
            }
        }
    }

Usage for integration:
    from onesearch_mcp.presentation.mcp_server import create_server, register_all_tools

    # Option 1: Create standalone server
    server = create_server(load_settings())
    server.run()

    # Option 2: Register tools on an existing server
    register_all_tools(your_mcp_server, article_service)
"""

from __future__ import annotations

from .server import create_server, main
from .tools import register_all_tools

__all__ = ["create_server", "main", "register_all_tools"]
