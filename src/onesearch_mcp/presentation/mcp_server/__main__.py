"""
Allow running the MCP server as a module: python -m onesearch_mcp.presentation.mcp_server
"""

from __future__ import annotations

from .server import main

if __name__ == "__main__":
    main()
