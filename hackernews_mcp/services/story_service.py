"""
Services - Story Service

Single-lookup operations: story listings, one item, one user.
"""

import asyncio
import logging
from typing import Any, Dict, Optional

from hackernews_mcp.config import get_settings
from hackernews_mcp.exceptions import ItemFetchError
from hackernews_mcp.pipeline.fetcher import ItemGateway
from hackernews_mcp.services.result_assembler import ResultAssembler

logger = logging.getLogger(__name__)


class StoryService:
    """Fetches and formats stories and users."""

    def __init__(self, settings=None, gateway: Optional[ItemGateway] = None):
        self.settings = settings or get_settings()
        self.gateway = gateway or ItemGateway(self.settings)
        self.assembler = ResultAssembler(web_base_url=self.settings.hn.web_base_url)

    async def __aenter__(self) -> "StoryService":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.gateway.aclose()

    async def get_stories(
        self,
        listing: str = "top",
        limit: int = 10,
    ) -> Dict[str, Any]:
        """
        Get the first `limit` stories of a listing, in listing order.

        Stories that are absent or fail to fetch are dropped; a failure to
        fetch the listing itself propagates.

        Args:
            listing: top, new, best, ask, show or job
            limit: Maximum number of stories

        Returns:
            Dict with listing name, count and story records
        """
        story_ids = await self.gateway.fetch_story_ids(listing)
        story_ids = story_ids[:max(limit, 0)]

        results = await asyncio.gather(
            *[self.gateway.fetch_item(sid) for sid in story_ids],
            return_exceptions=True,
        )

        stories = []
        for story_id, result in zip(story_ids, results):
            if isinstance(result, ItemFetchError):
                logger.warning(f"Dropping story {story_id}: {result}")
            elif isinstance(result, BaseException):
                raise result
            elif result is None:
                logger.warning(f"Dropping story {story_id}: item does not exist")
            else:
                stories.append(self.assembler.assemble_item(result))

        return {
            "listing": listing,
            "count": len(stories),
            "stories": stories,
        }

    async def get_item(self, item_id: int) -> Optional[Dict[str, Any]]:
        """
        Get one item by id.

        Returns:
            Item record, or None if the item does not exist
        """
        item = await self.gateway.fetch_item(item_id)
        if item is None:
            return None

        result = self.assembler.assemble_item(item)
        result["kids_count"] = len(item.kids)
        return result

    async def get_user(self, username: str) -> Optional[Dict[str, Any]]:
        """
        Get a user profile.

        Returns:
            User record, or None if the user does not exist
        """
        user = await self.gateway.fetch_user(username)
        if user is None:
            return None
        return self.assembler.assemble_user(user)
