"""
In‑memory storage for comments.

Same contract as :mod:`.post_repository`, plus a query returning every
comment attached to a given post.
"""

from __future__ import annotations

import logging
import threading
from typing import Iterable, List

from blog_api.app.schemas.comment import Comment
from blog_api.app.repositories.exceptions import CommentAlreadyExistsError, CommentNotFoundError


logger = logging.getLogger(__name__)


class CommentRepository:
    """Append‑only collection of :class:`Comment` records with unique ids."""

    def __init__(self, comments: Iterable[Comment] = ()) -> None:
        self._comments: List[Comment] = list(comments)
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._comments)

    def insert(self, comment: Comment) -> None:
        """Store ``comment``; raise :class:`CommentAlreadyExistsError` on a duplicate id."""
        with self._lock:
            for existing in self._comments:
                if existing.id == comment.id:
                    raise CommentAlreadyExistsError(comment.id)
            self._comments.append(comment)
        logger.info("Stored comment %s for post %s", comment.id, comment.post_id)

    def get_by_id(self, comment_id: int) -> Comment:
        with self._lock:
            for comment in self._comments:
                if comment.id == comment_id:
                    return comment
        raise CommentNotFoundError(comment_id)

    def get_all_by_post_id(self, post_id: int) -> List[Comment]:
        """Return the comments of ``post_id`` in insertion order.

        An unknown post simply has no comments, so this never raises and
        returns an empty list instead.
        """
        with self._lock:
            return [comment for comment in self._comments if comment.post_id == post_id]
