"""
Services - Search Service

Full-text story search through the HN Algolia API.
"""

import logging
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from hackernews_mcp.config import get_settings
from hackernews_mcp.exceptions import SearchError
from hackernews_mcp.schemas.search import SearchHit, SearchResponse

logger = logging.getLogger(__name__)


class SearchService:
    """Keyword search over Hacker News stories."""

    def __init__(
        self,
        settings=None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or get_settings()
        self.base_url = self.settings.hn.search_base_url.rstrip("/")
        self._transport = transport

    async def search(
        self,
        query: str,
        limit: int = 10,
        tags: str = "story",
    ) -> Dict[str, Any]:
        """
        Search stories by keyword.

        Args:
            query: Search terms
            limit: Maximum hits to return
            tags: Algolia tag filter (story, comment, ask_hn, show_hn, ...)

        Returns:
            Dict with query, total hit count and hit records
        """
        if not query.strip():
            raise ValueError("query must not be empty")

        params = {"query": query, "tags": tags, "hitsPerPage": limit}

        async with httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.settings.hn.timeout_seconds,
            transport=self._transport,
        ) as client:
            try:
                response = await client.get("/search", params=params)
                response.raise_for_status()
                payload = response.json()
            except (httpx.HTTPError, ValueError) as e:
                raise SearchError(query, e) from e

        if not isinstance(payload, dict):
            raise SearchError(query, TypeError("expected a JSON object"))

        hits = []
        for raw in payload.get("hits", []):
            try:
                hit = SearchHit.model_validate(raw)
            except ValidationError as e:
                logger.warning(f"Ignoring malformed search hit: {e}")
                continue
            if not hit.title:
                continue
            if not hit.url:
                hit.url = f"{self.settings.hn.web_base_url}/item?id={hit.id}"
            hits.append(hit)

        result = SearchResponse(
            query=query,
            total_hits=payload.get("nbHits", 0),
            hits=hits,
        )
        return result.model_dump()
