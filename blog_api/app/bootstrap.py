"""
Server bootstrap.

``start`` builds the application and serves it with uvicorn until the
server stops.  It is the only place that binds a port; everything else
in the package is importable without side effects beyond building the
default app.
"""

import asyncio
import logging
import sys
from typing import Optional

from uvicorn import Config, Server

from .core.config import settings
from .core.context import ApiContext
from .main import create_app


logger = logging.getLogger(__name__)


class ServerStartupError(RuntimeError):
    """Raised when uvicorn exits without having served requests."""


async def serve(port: int, host: Optional[str] = None, context: Optional[ApiContext] = None) -> None:
    """Serve a freshly built application on ``host:port``.

    Raises
    ------
    ServerStartupError
        If uvicorn could not start, e.g. because the port is taken.
    """
    app = create_app(context)
    config = Config(
        app=app,
        host=host or settings.host,
        port=port,
        reload=False,
        # Logging is owned by setup_logging; uvicorn records propagate to the root logger.
        log_config=None,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logger.info("Starting %s on %s:%s", settings.project_name, config.host, port)
    try:
        await server.serve()
    except SystemExit as e:
        # uvicorn exits the process when binding fails.
        raise ServerStartupError(f"could not serve on port {port}") from e
    if not server.started:
        raise ServerStartupError(f"could not serve on port {port}")


def start(port: int) -> None:
    """Blocking entry point: serve the API on ``port``."""
    asyncio.run(serve(port))


def main() -> None:
    """Console script entry point using the configured port."""
    try:
        start(settings.port)
    except KeyboardInterrupt:
        pass
    except ServerStartupError as e:
        logger.critical("Service will be shut down because an error occurred: %s", e)
        sys.exit(1)
