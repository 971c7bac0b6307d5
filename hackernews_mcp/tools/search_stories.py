"""
MCP Tool - search_stories

Keyword search across Hacker News stories.
"""

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from hackernews_mcp.exceptions import HackerNewsError
from hackernews_mcp.services import SearchService

router = FastMCP("search_stories")


@router.tool()
async def search_stories(
    query: str,
    limit: int = 10,
) -> dict:
    """
    Search Hacker News stories by keyword.

    Args:
        query: Search query
        limit: Maximum results (1-50, default 10)

    Returns:
        Matching stories with title, URL, author, points and comment count
    """
    service = SearchService()

    try:
        return await service.search(query=query, limit=max(1, min(limit, 50)))
    except (HackerNewsError, ValueError) as e:
        raise ToolError(str(e)) from e
