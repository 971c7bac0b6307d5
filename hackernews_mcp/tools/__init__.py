"""
Tools Module - MCP Tool Implementations

All 5 MCP tools for Hacker News access.
"""

from hackernews_mcp.tools import get_top_stories
from hackernews_mcp.tools import get_story
from hackernews_mcp.tools import get_story_comments
from hackernews_mcp.tools import get_user
from hackernews_mcp.tools import search_stories

__all__ = [
    "get_top_stories",
    "get_story",
    "get_story_comments",
    "get_user",
    "search_stories",
]
