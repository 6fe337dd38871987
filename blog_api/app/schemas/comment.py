"""
Pydantic schema for comments.

``post_id`` is a soft reference: nothing checks that the post exists,
so a comment may point at a post that was never created.
"""

from pydantic import BaseModel, ConfigDict, Field

from .common import UINT64_MAX, Timestamp


class Comment(BaseModel):
    """A comment attached to a post."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(..., ge=0, le=UINT64_MAX, strict=True, description="Unique comment identifier")
    post_id: int = Field(..., alias="postId", ge=0, le=UINT64_MAX, strict=True, description="Identifier of the commented post")
    comment: str = Field(..., description="Comment text")
    author: str = Field(..., description="Name of the commenter")
    creation_date: Timestamp = Field(..., alias="creationDate", description="When the comment was written")
