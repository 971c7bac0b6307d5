"""
Schemas - Search Models

Pydantic models for Algolia search hits.
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from typing import List, Optional


class SearchHit(BaseModel):
    """Single story hit from the search API."""
    model_config = ConfigDict(extra="ignore")

    id: int = Field(validation_alias=AliasChoices("objectID", "id"))
    title: Optional[str] = None
    url: Optional[str] = None
    author: Optional[str] = None
    points: Optional[int] = None
    num_comments: Optional[int] = None
    created_at: Optional[str] = None


class SearchResponse(BaseModel):
    """Full search response."""
    query: str
    total_hits: int = 0
    hits: List[SearchHit] = []
