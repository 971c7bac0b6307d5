"""
MCP Tool - get_top_stories

Fetch the current front-page (or other listing) stories.
"""

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from typing import Literal

from hackernews_mcp.exceptions import HackerNewsError
from hackernews_mcp.services import StoryService

router = FastMCP("get_top_stories")


@router.tool()
async def get_top_stories(
    limit: int = 10,
    listing: Literal["top", "new", "best", "ask", "show", "job"] = "top",
) -> dict:
    """
    Get the top stories from Hacker News.

    Args:
        limit: Number of stories to fetch (default 10)
        listing: Which listing to read: top, new, best, ask, show or job

    Returns:
        Stories in ranking order with title, URL, author and points
    """
    async with StoryService() as service:
        limit = max(1, min(limit, service.settings.hn.max_stories))
        try:
            return await service.get_stories(listing=listing, limit=limit)
        except (HackerNewsError, ValueError) as e:
            raise ToolError(str(e)) from e
