"""
Repository layer.

Each repository is an in‑memory, append‑only store for one entity kind.
Ids are unique within a repository; inserting a duplicate or looking up
a missing id raises one of the errors from :mod:`.exceptions`.  Swapping
these classes for database‑backed ones should not require changes in
the API handlers.
"""

from .comment_repository import CommentRepository
from .exceptions import (
    CommentAlreadyExistsError,
    CommentNotFoundError,
    DuplicateIdError,
    NotFoundError,
    PostAlreadyExistsError,
    PostNotFoundError,
    RepositoryError,
)
from .post_repository import PostRepository

__all__ = [
    "CommentAlreadyExistsError",
    "CommentNotFoundError",
    "CommentRepository",
    "DuplicateIdError",
    "NotFoundError",
    "PostAlreadyExistsError",
    "PostNotFoundError",
    "PostRepository",
    "RepositoryError",
]
