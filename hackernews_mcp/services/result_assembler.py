"""
Services - Result Assembler

Maps fetched items and comment trees into the nested dicts returned by
the MCP tools. Pure mapping, no I/O.
"""

from typing import Any, Dict, List, Optional

from hackernews_mcp.pipeline.parser import TextFormat, TextParser
from hackernews_mcp.schemas.item import Item, User
from hackernews_mcp.schemas.tree import CommentNode, CommentTree

ITEM_FIELDS = (
    "id",
    "type",
    "author",
    "title",
    "url",
    "points",
    "text",
    "time",
    "descendants",
)


class ResultAssembler:
    """Builds caller-facing records; internal bookkeeping is dropped."""

    def __init__(
        self,
        text_format: TextFormat = "html",
        web_base_url: str = "https://news.ycombinator.com",
    ):
        self.text_format = text_format
        self.web_base_url = web_base_url.rstrip("/")
        self.parser = TextParser()

    def assemble_item(self, item: Item) -> Dict[str, Any]:
        """Root/story record with only the fields that are present."""
        result: Dict[str, Any] = {}
        for name in ITEM_FIELDS:
            value = getattr(item, name)
            if value is None:
                continue
            if name == "text":
                value = self._format_text(value)
            result[name] = value

        if item.deleted:
            result["deleted"] = True
        if item.dead:
            result["dead"] = True
        result["hn_url"] = f"{self.web_base_url}/item?id={item.id}"
        return result

    def assemble_comment(self, node: CommentNode) -> Dict[str, Any]:
        return {
            "author": node.author or "",
            "text": self._format_text(node.text),
            "replies": self.assemble_comments(node.replies),
        }

    def assemble_comments(self, nodes: List[CommentNode]) -> List[Dict[str, Any]]:
        return [self.assemble_comment(node) for node in nodes]

    def assemble_tree(
        self,
        tree: CommentTree,
        include_skipped: bool = False,
    ) -> Dict[str, Any]:
        """
        Nested record for a comment tree.

        Args:
            tree: Result of TreeBuilder.build
            include_skipped: Also report which child ids were skipped and why

        Returns:
            {"root": {...}, "comments": [{"author", "text", "replies"}, ...]}
        """
        result: Dict[str, Any] = {
            "root": self.assemble_item(tree.root) if tree.root else None,
            "comments": self.assemble_comments(tree.comments),
        }
        if include_skipped:
            result["skipped"] = [
                {"id": s.item_id, "parent": s.parent_id, "reason": s.reason.value}
                for s in tree.skipped
            ]
        return result

    def assemble_user(self, user: User) -> Dict[str, Any]:
        return {
            "id": user.id,
            "created": user.created,
            "karma": user.karma,
            "about": self._format_text(user.about),
            "submitted_count": len(user.submitted),
            "recent_submissions": user.submitted[:20],
        }

    def _format_text(self, text: Optional[str]) -> str:
        if not isinstance(text, str) or not text:
            return ""
        return self.parser.convert(text, self.text_format)
