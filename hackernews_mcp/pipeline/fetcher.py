"""
Pipeline - Item Gateway

Sole access point to the Hacker News item API. One request per call,
no retries; failures are mapped into typed errors.
"""

import logging
import re
from typing import Any, List, Optional

import httpx
from pydantic import ValidationError

from hackernews_mcp.config import get_settings
from hackernews_mcp.exceptions import (
    ItemFetchError,
    ListingFetchError,
    MalformedItemError,
    UserFetchError,
)
from hackernews_mcp.schemas.item import Item, User

logger = logging.getLogger(__name__)

LISTINGS = {
    "top": "topstories",
    "new": "newstories",
    "best": "beststories",
    "ask": "askstories",
    "show": "showstories",
    "job": "jobstories",
}

_USERNAME_RE = re.compile(r"^[A-Za-z0-9_-]{1,32}$")


class ItemGateway:
    """Fetches items, users and story listings from the Hacker News API."""

    def __init__(
        self,
        settings=None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or get_settings()
        self.base_url = self.settings.hn.api_base_url.rstrip("/")
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.settings.hn.timeout_seconds,
                limits=httpx.Limits(
                    max_connections=self.settings.hn.max_connections
                ),
                transport=self._transport,
            )
        return self._client

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "ItemGateway":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def _get_json(self, path: str) -> Any:
        """GET a JSON document; raises httpx.HTTPError or ValueError."""
        response = await self.client.get(path)
        response.raise_for_status()
        return response.json()

    async def fetch_item(self, item_id: int) -> Optional[Item]:
        """
        Fetch a single item.

        Args:
            item_id: Hacker News item ID

        Returns:
            Item, or None if the API has no item with this id

        Raises:
            ItemFetchError: transport failure, non-2xx status or bad JSON
            MalformedItemError: payload cannot be represented as an Item
        """
        if item_id < 0:
            raise ValueError(f"Invalid item_id: {item_id}. Must be non-negative.")

        logger.debug(f"Fetching item {item_id}")
        try:
            data = await self._get_json(f"/item/{item_id}.json")
        except (httpx.HTTPError, ValueError) as e:
            raise ItemFetchError(item_id, e) from e

        if data is None:
            return None
        if not isinstance(data, dict):
            raise MalformedItemError(
                item_id, TypeError(f"expected object, got {type(data).__name__}")
            )

        try:
            return Item.model_validate(data)
        except ValidationError as e:
            raise MalformedItemError(item_id, e) from e

    async def fetch_user(self, username: str) -> Optional[User]:
        """
        Fetch a user profile by username.

        Returns:
            User, or None if no such user exists
        """
        if not _USERNAME_RE.match(username):
            raise ValueError(f"Invalid username: {username!r}")

        try:
            data = await self._get_json(f"/user/{username}.json")
        except (httpx.HTTPError, ValueError) as e:
            raise UserFetchError(username, e) from e

        if data is None:
            return None

        try:
            return User.model_validate(data)
        except ValidationError as e:
            raise UserFetchError(username, e) from e

    async def fetch_story_ids(self, listing: str = "top") -> List[int]:
        """
        Fetch the ranked story ids of a listing (top, new, best, ask, show, job).
        """
        endpoint = LISTINGS.get(listing)
        if endpoint is None:
            raise ValueError(
                f"Unknown listing: {listing}. Expected one of {sorted(LISTINGS)}"
            )

        try:
            data = await self._get_json(f"/{endpoint}.json")
        except (httpx.HTTPError, ValueError) as e:
            raise ListingFetchError(listing, e) from e

        if data is None:
            return []
        if not isinstance(data, list):
            raise ListingFetchError(
                listing, TypeError(f"expected array, got {type(data).__name__}")
            )
        return [int(story_id) for story_id in data]
