"""
In‑memory storage for blog posts.

Posts are kept in a list in insertion order.  Lookups are a linear
scan, which is fine for the volumes this service handles; a dict keyed
by id would keep the same contract if that ever changes.  Every
operation holds the repository lock so concurrent requests never see a
half‑applied insert.
"""

from __future__ import annotations

import logging
import threading
from typing import Iterable, List

from blog_api.app.schemas.post import Post
from blog_api.app.repositories.exceptions import PostAlreadyExistsError, PostNotFoundError


logger = logging.getLogger(__name__)


class PostRepository:
    """Append‑only collection of :class:`Post` records with unique ids."""

    def __init__(self, posts: Iterable[Post] = ()) -> None:
        """Create a repository, optionally seeded with ``posts``.

        Seeded posts are taken as given; they are expected to have
        unique ids already.
        """
        self._posts: List[Post] = list(posts)
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._posts)

    def insert(self, post: Post) -> None:
        """Store ``post``.

        Raises
        ------
        PostAlreadyExistsError
            If a post with the same id is already stored.  The
            repository is left unchanged.
        """
        with self._lock:
            for existing in self._posts:
                if existing.id == post.id:
                    raise PostAlreadyExistsError(post.id)
            self._posts.append(post)
        logger.info("Stored post %s", post.id)

    def get_by_id(self, post_id: int) -> Post:
        """Return the post with ``post_id`` or raise :class:`PostNotFoundError`."""
        with self._lock:
            for post in self._posts:
                if post.id == post_id:
                    return post
        raise PostNotFoundError(post_id)
