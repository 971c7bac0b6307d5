"""
Services Module - Business Logic Layer

Provides the comment tree builder, result assembly, story lookups and search.
"""

from hackernews_mcp.services.tree_builder import TreeBuilder
from hackernews_mcp.services.result_assembler import ResultAssembler
from hackernews_mcp.services.story_service import StoryService
from hackernews_mcp.services.search_service import SearchService

__all__ = [
    "TreeBuilder",
    "ResultAssembler",
    "StoryService",
    "SearchService",
]
