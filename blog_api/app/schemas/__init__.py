"""
Pydantic schema definitions for API payloads.

Entities double as request and response bodies: the JSON wire names
are camelCase aliases of the snake_case attribute names.
"""

from .comment import Comment
from .common import AckResponse
from .post import Post

__all__ = ["AckResponse", "Comment", "Post"]
