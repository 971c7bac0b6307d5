"""
Schemas - Item Models

Pydantic models for Hacker News items and users.
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from typing import List, Optional


class Item(BaseModel):
    """A story, comment, job, poll or poll option from the item API."""
    model_config = ConfigDict(extra="ignore", frozen=True)

    id: int
    type: Optional[str] = None
    author: Optional[str] = Field(
        None, validation_alias=AliasChoices("by", "author")
    )
    text: Optional[str] = None
    title: Optional[str] = None
    url: Optional[str] = None
    points: Optional[int] = Field(
        None, validation_alias=AliasChoices("score", "points")
    )
    kids: List[int] = []
    parent: Optional[int] = None
    time: Optional[int] = None
    descendants: Optional[int] = None
    parts: List[int] = []
    poll: Optional[int] = None
    deleted: bool = False
    dead: bool = False

    @property
    def is_comment(self) -> bool:
        return self.type == "comment"

    @property
    def has_content(self) -> bool:
        """False for deleted or dead items, which carry no usable fields."""
        return not (self.deleted or self.dead)


class User(BaseModel):
    """Hacker News user profile."""
    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str
    created: int
    karma: int = 0
    about: Optional[str] = None
    submitted: List[int] = []
