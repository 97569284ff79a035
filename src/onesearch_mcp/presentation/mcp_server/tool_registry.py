"""
Tool Registry - central place for MCP tool registration

Usage:
    from .tool_registry import check_tool_registration, register_all_mcp_tools

    register_all_mcp_tools(mcp, service)
    check_tool_registration(mcp)
"""

import logging
from typing import Any, Dict

from mcp.server.fastmcp import FastMCP

from onesearch_mcp.application import ArticleService

logger = logging.getLogger(__name__)


# ============================================================================
# Tool Categories
# ============================================================================

TOOL_CATEGORIES = {
    "search": {
        "name": "Search",
        "description": "Keyword query and browse by article type",
        "tools": ["simple_query", "browse_article_type"],
    },
    "articles": {
        "name": "Articles",
        "description": "Start from a known DOI",
        "tools": ["fetch_by_doi", "more_like_this"],
    },
}


# ============================================================================
# Registration Functions
# ============================================================================


def register_all_mcp_tools(mcp: FastMCP, service: ArticleService) -> Dict[str, int]:
    """
    Register all MCP tools and resources.

    Args:
        mcp: FastMCP server instance
        service: ArticleService shared by every tool

    Returns:
        Dict with category names and tool/resource counts
    """
    from .resources import register_resources
    from .tools import register_article_tools, register_search_tools

    stats = {}

    logger.info("Registering search tools...")
    register_search_tools(mcp, service)
    stats["search"] = len(TOOL_CATEGORIES["search"]["tools"])

    logger.info("Registering article tools...")
    register_article_tools(mcp, service)
    stats["articles"] = len(TOOL_CATEGORIES["articles"]["tools"])

    logger.info("Registering resources...")
    register_resources(mcp, service)
    stats["resources"] = 3

    total = sum(stats.values())
    logger.info(f"Total registered: {total} tools/resources")

    return stats


# ============================================================================
# Validation
# ============================================================================


def validate_tool_registry(mcp: FastMCP) -> Dict[str, Any]:
    """
    Check that TOOL_CATEGORIES and the tools actually registered agree.

    Returns:
        Dict with defined, registered, missing, extra and valid
    """
    defined_tools = set()
    for cat_info in TOOL_CATEGORIES.values():
        defined_tools.update(cat_info["tools"])

    try:
        registered_tools = set(mcp._tool_manager._tools.keys())
    except AttributeError:
        logger.warning("Cannot access registered tools from FastMCP instance")
        return {
            "defined": sorted(defined_tools),
            "registered": [],
            "missing": [],
            "extra": [],
            "valid": False,
            "error": "Cannot access FastMCP tools registry",
        }

    missing = defined_tools - registered_tools
    extra = registered_tools - defined_tools

    result = {
        "defined": sorted(defined_tools),
        "registered": sorted(registered_tools),
        "missing": sorted(missing),
        "extra": sorted(extra),
        "valid": not missing and not extra,
    }

    if missing:
        logger.warning(f"Tools defined but not registered: {missing}")
    if extra:
        logger.info(f"Tools registered but not in TOOL_CATEGORIES: {extra}")

    return result


def check_tool_registration(mcp: FastMCP, raise_on_error: bool = False) -> bool:
    """
    Verify at startup that every catalogued tool is registered.

    Raises:
        RuntimeError: If validation fails and ``raise_on_error`` is set
    """
    result = validate_tool_registry(mcp)

    if not result["valid"]:
        msg = f"Tool registry validation failed. Missing: {result['missing']}, Extra: {result['extra']}"
        if raise_on_error:
            raise RuntimeError(msg)
        logger.error(msg)
        return False

    logger.info(f"Tool registry validated: {len(result['registered'])} tools registered")
    return True


__all__ = [
    "TOOL_CATEGORIES",
    "register_all_mcp_tools",
    "validate_tool_registry",
    "check_tool_registration",
]
