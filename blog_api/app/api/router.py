"""
Top‑level API router.

Aggregates the resource routers.  The endpoint modules declare their
full paths (``/posts``, ``/posts/comments``...) so no prefix is added
here; the application mounts this router under ``/api``.
"""

from fastapi import APIRouter

from .endpoints import comments, posts

router = APIRouter()

router.include_router(posts.router, tags=["posts"])
router.include_router(comments.router, tags=["comments"])
