"""
Schemas Module - Data Models

Models for items, users, comment trees and search results.
"""

from hackernews_mcp.schemas.item import Item, User
from hackernews_mcp.schemas.tree import (
    TreeBounds,
    CommentNode,
    CommentTree,
    ChildOutcome,
    SkippedChild,
    SkipReason,
)
from hackernews_mcp.schemas.search import SearchHit, SearchResponse

__all__ = [
    "Item",
    "User",
    "TreeBounds",
    "CommentNode",
    "CommentTree",
    "ChildOutcome",
    "SkippedChild",
    "SkipReason",
    "SearchHit",
    "SearchResponse",
]
