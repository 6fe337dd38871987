"""
Logging configuration for the Blog API.

``setup_logging`` installs one console handler (and optionally a file
handler) on the root logger.  uvicorn's own loggers are made to
propagate to the root so server and application messages share one
format.  Calling it more than once is harmless.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Marks handlers installed here so repeated calls can recognise them.
_HANDLER_FLAG = "_blog_api_handler"

_UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _mark(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _HANDLER_FLAG, True)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger for the service.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file to append log records to.  Relative paths are
        resolved against the current working directory.
    """
    root = logging.getLogger()
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(numeric_level)

    if any(getattr(h, _HANDLER_FLAG, False) for h in root.handlers):
        return

    root.addHandler(_mark(logging.StreamHandler()))
    if logfile:
        root.addHandler(_mark(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")))

    for name in _UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True
