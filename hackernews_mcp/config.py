"""
Hacker News MCP Server - Configuration

Pydantic Settings for all configuration via environment variables.
"""

from pydantic_settings import BaseSettings
from pydantic import Field
from typing import Literal


class HackerNewsSettings(BaseSettings):
    """Hacker News API configuration."""
    api_base_url: str = Field(
        "https://hacker-news.firebaseio.com/v0", alias="HN_API_BASE_URL"
    )
    search_base_url: str = Field(
        "https://hn.algolia.com/api/v1", alias="HN_SEARCH_BASE_URL"
    )
    web_base_url: str = Field(
        "https://news.ycombinator.com", alias="HN_WEB_BASE_URL"
    )
    timeout_seconds: float = Field(15.0, alias="HN_TIMEOUT_SECONDS")
    max_connections: int = Field(20, alias="HN_MAX_CONNECTIONS")
    max_stories: int = Field(30, alias="HN_MAX_STORIES")

    model_config = {"env_prefix": "", "extra": "ignore"}


class TreeSettings(BaseSettings):
    """Comment tree bounds."""
    max_depth: int = Field(3, ge=0, alias="COMMENT_TREE_MAX_DEPTH")
    max_breadth: int = Field(20, ge=0, alias="COMMENT_TREE_MAX_BREADTH")
    depth_limit: int = Field(10, ge=0, alias="COMMENT_TREE_DEPTH_LIMIT")
    breadth_limit: int = Field(100, ge=0, alias="COMMENT_TREE_BREADTH_LIMIT")

    model_config = {"env_prefix": "", "extra": "ignore"}


class MCPSettings(BaseSettings):
    """MCP server configuration."""
    transport: Literal["stdio", "sse", "http"] = Field(
        "stdio", alias="MCP_TRANSPORT"
    )
    port: int = Field(8080, alias="MCP_PORT")
    host: str = Field("0.0.0.0", alias="MCP_HOST")

    model_config = {"env_prefix": "", "extra": "ignore"}


class LogSettings(BaseSettings):
    """Logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "INFO", alias="LOG_LEVEL"
    )

    model_config = {"env_prefix": "", "extra": "ignore"}


class Settings(BaseSettings):
    """Main settings aggregating all configuration."""
    hn: HackerNewsSettings = Field(default_factory=HackerNewsSettings)
    tree: TreeSettings = Field(default_factory=TreeSettings)
    mcp: MCPSettings = Field(default_factory=MCPSettings)
    log: LogSettings = Field(default_factory=LogSettings)

    model_config = {"env_prefix": "", "extra": "ignore"}


def get_settings() -> Settings:
    """Load settings from environment variables."""
    from dotenv import load_dotenv
    load_dotenv()
    return Settings()
