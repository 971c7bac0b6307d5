"""
Exceptions - Hacker News API failures

Typed errors raised by the item gateway and the services built on it.
"""

from typing import Optional


class HackerNewsError(Exception):
    """Base class for all Hacker News API failures."""


class ItemFetchError(HackerNewsError):
    """An item could not be fetched or decoded."""

    def __init__(self, item_id: int, cause: Optional[BaseException] = None):
        self.item_id = item_id
        self.cause = cause
        super().__init__(f"Failed to fetch item {item_id}: {_describe(cause)}")


class MalformedItemError(ItemFetchError):
    """Item payload was fetched but cannot be represented as an Item."""


class RootFetchError(ItemFetchError):
    """Root item of a comment tree is unreachable."""


class UserFetchError(HackerNewsError):
    """A user profile could not be fetched or decoded."""

    def __init__(self, username: str, cause: Optional[BaseException] = None):
        self.username = username
        self.cause = cause
        super().__init__(f"Failed to fetch user {username}: {_describe(cause)}")


class ListingFetchError(HackerNewsError):
    """A story id listing could not be fetched."""

    def __init__(self, listing: str, cause: Optional[BaseException] = None):
        self.listing = listing
        self.cause = cause
        super().__init__(
            f"Failed to fetch {listing} stories: {_describe(cause)}"
        )


class SearchError(HackerNewsError):
    """Full-text search request failed."""

    def __init__(self, query: str, cause: Optional[BaseException] = None):
        self.query = query
        self.cause = cause
        super().__init__(f"Search for {query!r} failed: {_describe(cause)}")


def _describe(cause: Optional[BaseException]) -> str:
    if cause is None:
        return "unknown error"
    return str(cause) or type(cause).__name__
