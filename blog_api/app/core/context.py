"""
Shared state of one API instance.

Instead of module level singletons, every application built by
:func:`blog_api.app.main.create_app` owns a single ``ApiContext``.  It
is stored on ``app.state.context`` and handed to the endpoints through
the :func:`blog_api.app.api.deps.get_context` dependency, so tests can
build an app around a fresh or pre‑seeded context.
"""

from dataclasses import dataclass, field

from blog_api.app.repositories import CommentRepository, PostRepository


@dataclass
class ApiContext:
    """Owns the post and comment repositories for the lifetime of an app."""

    posts: PostRepository = field(default_factory=PostRepository)
    comments: CommentRepository = field(default_factory=CommentRepository)
