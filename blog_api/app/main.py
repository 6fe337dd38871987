"""
FastAPI application for the blog service.

``create_app`` wires one :class:`~blog_api.app.core.context.ApiContext`
into a new FastAPI instance, mounts the post and comment routes under
``/api`` and makes every HTTP error answer with the ``{message, status}``
envelope.  The module level ``app`` serves an empty context and is what
ASGI servers load::

    uvicorn blog_api.app.main:app --port 8080
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.router import router as api_router
from .core.config import settings
from .core.context import ApiContext
from .core.logging_config import setup_logging
from .schemas.common import AckResponse


def _envelope(status_code: int, message: str, headers: Optional[dict] = None) -> JSONResponse:
    body = AckResponse(message=message, status=status_code)
    return JSONResponse(status_code=status_code, content=body.model_dump(), headers=headers)


def create_app(context: Optional[ApiContext] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    context : Optional[ApiContext]
        Repositories the application serves.  A fresh, empty context is
        created when omitted, so every app starts with its own storage.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Must run before anything logs.
    setup_logging(settings.log_level, settings.log_file)
    logger = logging.getLogger(__name__)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.context = context if context is not None else ApiContext()

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        """Render every HTTP error, including unknown routes, as an envelope."""
        return _envelope(exc.status_code, str(exc.detail), getattr(exc, "headers", None))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc)
        message = str(exc) if settings.debug else "Internal Server Error"
        return _envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, message)

    app.include_router(api_router, prefix="/api")

    logger.debug("Created %s %s", settings.project_name, settings.api_version)
    return app


# Default instance for `uvicorn blog_api.app.main:app`.
app = create_app()
