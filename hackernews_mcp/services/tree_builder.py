"""
Services - Tree Builder

Bounded recursive comment-tree fetch. Children at one level are fetched
concurrently and reassembled in source `kids` order; per-child failures
become explicit skip outcomes instead of aborting the traversal.
"""

import asyncio
import logging
from typing import FrozenSet, List, Sequence, Tuple

from hackernews_mcp.exceptions import (
    ItemFetchError,
    MalformedItemError,
    RootFetchError,
)
from hackernews_mcp.pipeline.fetcher import ItemGateway
from hackernews_mcp.schemas.tree import (
    ChildOutcome,
    CommentNode,
    CommentTree,
    SkippedChild,
    SkipReason,
    TreeBounds,
)

logger = logging.getLogger(__name__)


class TreeBuilder:
    """
    Expands a root item into a comment tree bounded by depth and breadth.

    Depth convention: the root is depth 0 and its direct comments are
    depth 1. Children of a node at `depth` are only fetched while
    `depth < max_depth`, so no path exceeds `max_depth` edges. Only the
    first `max_breadth` kids of each node are ever fetched.
    """

    def __init__(self, gateway: ItemGateway):
        self.gateway = gateway

    async def build(
        self,
        root_id: int,
        max_depth: int = 3,
        max_breadth: int = 20,
    ) -> CommentTree:
        """
        Fetch a root item and its bounded comment tree.

        Args:
            root_id: Story (or any item) id to start from
            max_depth: Maximum parent-to-child edges from the root
            max_breadth: Maximum children fetched per expanded node

        Returns:
            CommentTree with the fetched root, comments and skip records

        Raises:
            RootFetchError: the root item could not be fetched
        """
        bounds = TreeBounds(max_depth=max_depth, max_breadth=max_breadth)

        try:
            root = await self.gateway.fetch_item(root_id)
        except ItemFetchError as e:
            logger.error(f"Root item {root_id} unavailable: {e}")
            raise RootFetchError(root_id, e.cause or e) from e

        if root is None:
            logger.info(f"Root item {root_id} does not exist")
            return CommentTree(root=None)
        if root.deleted or not root.kids:
            return CommentTree(root=root)

        comments, skipped = await self._expand(
            parent_id=root.id,
            kid_ids=root.kids,
            depth=0,
            path=frozenset({root.id}),
            bounds=bounds,
        )
        return CommentTree(root=root, comments=comments, skipped=skipped)

    async def _expand(
        self,
        parent_id: int,
        kid_ids: Sequence[int],
        depth: int,
        path: FrozenSet[int],
        bounds: TreeBounds,
    ) -> Tuple[List[CommentNode], List[SkippedChild]]:
        """Expand the retained kids of a node sitting at `depth`."""
        if depth >= bounds.max_depth:
            return [], []

        retained = list(kid_ids[:bounds.max_breadth])
        if len(kid_ids) > len(retained):
            logger.debug(
                f"Item {parent_id}: keeping {len(retained)} of {len(kid_ids)} kids"
            )

        # gather preserves argument order, so results line up with `kids`
        outcomes = await asyncio.gather(*[
            self._expand_child(parent_id, kid_id, depth + 1, path, bounds)
            for kid_id in retained
        ])

        nodes: List[CommentNode] = []
        skipped: List[SkippedChild] = []
        for outcome in outcomes:
            if outcome.is_skipped:
                skipped.append(outcome.skipped)
            else:
                nodes.append(outcome.node)
            skipped.extend(outcome.nested_skips)
        return nodes, skipped

    async def _expand_child(
        self,
        parent_id: int,
        item_id: int,
        depth: int,
        path: FrozenSet[int],
        bounds: TreeBounds,
    ) -> ChildOutcome:
        """Fetch one child at `depth` and, within bounds, its own replies."""
        if item_id in path:
            return self._skip(parent_id, item_id, SkipReason.CYCLE,
                              "already on the current path")

        try:
            item = await self.gateway.fetch_item(item_id)
        except (MalformedItemError, ValueError) as e:
            # invalid ids in a kids list (e.g. negative) count as malformed
            return self._skip(parent_id, item_id, SkipReason.MALFORMED, str(e))
        except ItemFetchError as e:
            return self._skip(parent_id, item_id, SkipReason.FETCH_FAILED, str(e))

        if item is None:
            return self._skip(parent_id, item_id, SkipReason.ABSENT,
                              "item does not exist")
        if not item.is_comment:
            return self._skip(parent_id, item_id, SkipReason.NOT_COMMENT,
                              f"type is {item.type!r}")

        node = CommentNode.from_item(item)
        nested: List[SkippedChild] = []
        if depth < bounds.max_depth and item.kids:
            node.replies, nested = await self._expand(
                parent_id=item.id,
                kid_ids=item.kids,
                depth=depth,
                path=path | {item.id},
                bounds=bounds,
            )
        return ChildOutcome(node=node, nested_skips=nested)

    def _skip(
        self,
        parent_id: int,
        item_id: int,
        reason: SkipReason,
        detail: str,
    ) -> ChildOutcome:
        logger.warning(
            f"Skipping item {item_id} under {parent_id} ({reason.value}): {detail}"
        )
        return ChildOutcome(
            skipped=SkippedChild(
                item_id=item_id,
                parent_id=parent_id,
                reason=reason,
                detail=detail,
            )
        )
