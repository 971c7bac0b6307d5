"""
MCP Tool - get_user

Retrieve a user profile by username.
"""

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from hackernews_mcp.exceptions import HackerNewsError
from hackernews_mcp.services import StoryService

router = FastMCP("get_user")


@router.tool()
async def get_user(username: str) -> dict:
    """
    Get a Hacker News user profile.

    Args:
        username: The Hacker News username (case-sensitive)

    Returns:
        Profile with karma, creation time, about text and recent submissions
    """
    async with StoryService() as service:
        try:
            user = await service.get_user(username)
        except (HackerNewsError, ValueError) as e:
            raise ToolError(str(e)) from e

    if not user:
        return {"error": f"User {username} not found"}

    return user
