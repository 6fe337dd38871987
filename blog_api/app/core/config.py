"""
Runtime settings of the blog service.

Every field falls back to a default when its environment variable is
unset, so an empty environment yields a server on ``0.0.0.0:8080``
logging at ``INFO`` to the console.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Blog API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When unset only the console handler
    # is installed.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Interface and port the HTTP server binds to.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))


# Defaults are evaluated when this module is first imported, so PORT and
# friends have to be exported before the service starts.
settings = Settings()
