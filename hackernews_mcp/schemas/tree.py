"""
Schemas - Comment Tree Models

In-memory comment tree produced by TreeBuilder.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from hackernews_mcp.schemas.item import Item


@dataclass(frozen=True)
class TreeBounds:
    """Depth and breadth limits for one tree build."""
    max_depth: int
    max_breadth: int

    def __post_init__(self):
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")
        if self.max_breadth < 0:
            raise ValueError(f"max_breadth must be >= 0, got {self.max_breadth}")


@dataclass
class CommentNode:
    """Display node for one comment. item_id is kept for diagnostics only."""
    author: str = ""
    text: str = ""
    replies: List["CommentNode"] = field(default_factory=list)
    item_id: Optional[int] = None

    @classmethod
    def from_item(cls, item: Item) -> "CommentNode":
        if not item.has_content:
            return cls(item_id=item.id)
        return cls(
            author=item.author or "",
            text=item.text or "",
            item_id=item.id,
        )


class SkipReason(str, Enum):
    """Why a child id contributed no node to the tree."""
    FETCH_FAILED = "fetch_failed"
    MALFORMED = "malformed"
    ABSENT = "absent"
    NOT_COMMENT = "not_comment"
    CYCLE = "cycle"


@dataclass(frozen=True)
class SkippedChild:
    item_id: int
    parent_id: int
    reason: SkipReason
    detail: str = ""


@dataclass
class ChildOutcome:
    """Result of expanding one child id: either a node or a skip."""
    node: Optional[CommentNode] = None
    skipped: Optional[SkippedChild] = None
    # skips found further down this child's subtree
    nested_skips: List[SkippedChild] = field(default_factory=list)

    @property
    def is_skipped(self) -> bool:
        return self.node is None


@dataclass
class CommentTree:
    """Fetched root plus its bounded comment forest."""
    root: Optional[Item]
    comments: List[CommentNode] = field(default_factory=list)
    skipped: List[SkippedChild] = field(default_factory=list)

    def node_count(self) -> int:
        count = 0
        stack = list(self.comments)
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.replies)
        return count
