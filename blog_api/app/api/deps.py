"""
Request level helpers shared by the endpoint modules.

Path ids and request bodies are validated here, before anything reaches
a repository.  Each endpoint decides which error message a failure maps
to, so these helpers raise plain errors rather than HTTP responses,
except :func:`parse_id` whose message is the same everywhere.
"""

import re
from typing import Type, TypeVar

from fastapi import HTTPException, Request, status
from pydantic import BaseModel

from blog_api.app.core.context import ApiContext
from blog_api.app.schemas.common import UINT64_MAX


ModelT = TypeVar("ModelT", bound=BaseModel)

_DIGITS = re.compile(r"[0-9]+")


def get_context(request: Request) -> ApiContext:
    """Return the context owned by the application serving ``request``."""
    return request.app.state.context


def parse_id(raw: str) -> int:
    """Parse an unsigned 64‑bit id taken from the URL path.

    Only plain ASCII digits are accepted; signs, whitespace, underscores
    and out of range values are rejected with HTTP 400.
    """
    if _DIGITS.fullmatch(raw) is None or int(raw) > UINT64_MAX:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"wrong id path variable: {raw}",
        )
    return int(raw)


async def parse_body(request: Request, model: Type[ModelT]) -> ModelT:
    """Decode the JSON request body into ``model``.

    Raises ``pydantic.ValidationError`` when the body is not valid JSON
    or does not match the model.
    """
    body = await request.body()
    return model.model_validate_json(body)
