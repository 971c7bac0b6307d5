"""
Hacker News MCP Server - Main Entry Point

FastMCP server with STDIO, SSE and HTTP transport support.
"""

import argparse
import logging
from fastmcp import FastMCP

from hackernews_mcp.config import get_settings

# Import tools (will be registered with decorators)
from hackernews_mcp.tools import (
    get_top_stories,
    get_story,
    get_story_comments,
    get_user,
    search_stories,
)

logger = logging.getLogger(__name__)


def create_app() -> FastMCP:
    """Create and configure the MCP application."""
    mcp = FastMCP(
        name="hackernews-mcp",
        instructions="Read Hacker News stories, comment trees and user profiles",
    )

    # Register all tools
    mcp.mount(get_top_stories.router)
    mcp.mount(get_story.router)
    mcp.mount(get_story_comments.router)
    mcp.mount(get_user.router)
    mcp.mount(search_stories.router)

    return mcp


def configure_logging(level: str) -> None:
    """Log to stderr; stdout carries the stdio transport."""
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Hacker News MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse", "http"],
        default=None,
        help="Transport protocol (default: from env)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port for SSE/HTTP transport (default: from env)"
    )
    args = parser.parse_args()

    settings = get_settings()
    configure_logging(settings.log.level)
    transport = args.transport or settings.mcp.transport
    port = args.port or settings.mcp.port

    mcp = create_app()
    logger.info(f"Starting Hacker News MCP server on {transport}")

    if transport == "stdio":
        mcp.run(transport="stdio")
    else:
        mcp.run(transport=transport, host=settings.mcp.host, port=port)


if __name__ == "__main__":
    main()
