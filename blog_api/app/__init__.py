"""
Application package initializer.

The project is split into small layers: ``schemas`` holds the entity
records, ``repositories`` the in‑memory stores, ``api`` the HTTP
handlers and ``core`` configuration, logging and the shared context
object.  Handlers never touch storage directly; they go through the
repositories owned by :class:`~blog_api.app.core.context.ApiContext`.
"""

from .main import app  # noqa: F401
