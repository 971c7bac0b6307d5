"""
MCP Tool - get_story

Retrieve a single story (or any item) by ID.
"""

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from hackernews_mcp.exceptions import HackerNewsError
from hackernews_mcp.services import StoryService

router = FastMCP("get_story")


@router.tool()
async def get_story(story_id: int) -> dict:
    """
    Get a Hacker News story by ID.

    Args:
        story_id: Hacker News story ID

    Returns:
        Story with title, URL, author, points and comment count
    """
    async with StoryService() as service:
        try:
            story = await service.get_item(story_id)
        except (HackerNewsError, ValueError) as e:
            raise ToolError(str(e)) from e

    if not story:
        return {"error": f"Story {story_id} not found"}

    return story
