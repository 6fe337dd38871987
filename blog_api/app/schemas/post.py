"""
Pydantic schema for blog posts.

A post is created once and never modified afterwards, so the model is
frozen.  ``creation_date`` travels over the wire as ``creationDate``.
"""

from pydantic import BaseModel, ConfigDict, Field

from .common import UINT64_MAX, Timestamp


class Post(BaseModel):
    """A blog post."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(..., ge=0, le=UINT64_MAX, strict=True, description="Unique post identifier")
    title: str = Field(..., description="Post title")
    content: str = Field(..., description="Post body")
    creation_date: Timestamp = Field(..., alias="creationDate", description="When the post was written")
