"""
MCP Tool - get_story_comments

Fetch a story's comment tree, bounded by depth and breadth.
"""

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from typing import Literal, Optional

from hackernews_mcp.config import get_settings
from hackernews_mcp.exceptions import RootFetchError
from hackernews_mcp.pipeline import ItemGateway
from hackernews_mcp.services import ResultAssembler, TreeBuilder

router = FastMCP("get_story_comments")


@router.tool()
async def get_story_comments(
    story_id: int,
    max_depth: Optional[int] = None,
    max_breadth: Optional[int] = None,
    text_format: Literal["html", "markdown", "plain"] = "html",
    include_skipped: bool = False,
) -> dict:
    """
    Get the comment tree of a Hacker News story.

    Replies beyond the breadth limit or below the depth limit are never
    fetched. Comments that fail to load are left out of the tree.

    Args:
        story_id: Hacker News story ID
        max_depth: Maximum reply depth below the story (default 3)
        max_breadth: Maximum replies kept per comment (default 20)
        text_format: Comment text as raw HTML, Markdown or plain text
        include_skipped: Also list child ids left out of the tree and why

    Returns:
        Story fields plus nested comments with author, text and replies
    """
    settings = get_settings()
    if max_depth is None:
        max_depth = settings.tree.max_depth
    if max_breadth is None:
        max_breadth = settings.tree.max_breadth
    max_depth = max(0, min(max_depth, settings.tree.depth_limit))
    max_breadth = max(0, min(max_breadth, settings.tree.breadth_limit))

    async with ItemGateway(settings) as gateway:
        builder = TreeBuilder(gateway)
        try:
            tree = await builder.build(
                root_id=story_id,
                max_depth=max_depth,
                max_breadth=max_breadth,
            )
        except (RootFetchError, ValueError) as e:
            raise ToolError(str(e)) from e

    if tree.root is None:
        return {"error": f"Story {story_id} not found"}

    assembler = ResultAssembler(
        text_format=text_format,
        web_base_url=settings.hn.web_base_url,
    )
    return assembler.assemble_tree(tree, include_skipped=include_skipped)
