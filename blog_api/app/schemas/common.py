"""
Shared field types and response shapes.
"""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, Field


# Largest value an identifier may take (unsigned 64‑bit).
UINT64_MAX = 2 ** 64 - 1


def _require_iso_timestamp(value):
    # Epoch numbers would otherwise be coerced; only ISO‑8601 text is a timestamp here.
    if not isinstance(value, (str, datetime)):
        raise ValueError("timestamp must be an ISO-8601 string")
    return value


Timestamp = Annotated[datetime, BeforeValidator(_require_iso_timestamp)]


class AckResponse(BaseModel):
    """Acknowledgement and error envelope returned by every non‑entity response."""

    message: str = Field(..., description="Human readable outcome of the request")
    status: int = Field(..., description="HTTP status code, mirrors the response status")
