"""Presentation layer: the MCP server surface."""
