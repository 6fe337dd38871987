"""
Comment endpoints.

Comments are listed per post.  A post without comments, including one
that does not exist at all, simply yields an empty list.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import ValidationError

from blog_api.app.api.deps import get_context, parse_body, parse_id
from blog_api.app.core.context import ApiContext
from blog_api.app.repositories import DuplicateIdError
from blog_api.app.schemas.comment import Comment
from blog_api.app.schemas.common import AckResponse


logger = logging.getLogger(__name__)

router = APIRouter()

BAD_PAYLOAD_MESSAGE = "could not deserialize comment json payload"


@router.get("/posts/comments/{post_id}", response_model=List[Comment])
async def list_comments(post_id: str, context: ApiContext = Depends(get_context)) -> List[Comment]:
    """Return every comment of a post in the order they were added."""
    return context.comments.get_all_by_post_id(parse_id(post_id))


@router.post("/posts/comments", response_model=AckResponse)
async def add_comment(request: Request, context: ApiContext = Depends(get_context)) -> AckResponse:
    """Create a comment.

    Incomplete or malformed payloads and a zero id are rejected with
    400, as is an id that is already taken.
    """
    try:
        comment = await parse_body(request, Comment)
    except ValidationError as e:
        logger.warning("Rejected comment payload (%d errors)", e.error_count())
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=BAD_PAYLOAD_MESSAGE) from e
    if comment.id <= 0:
        logger.warning("Rejected comment payload with id %s", comment.id)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=BAD_PAYLOAD_MESSAGE)
    try:
        context.comments.insert(comment)
    except DuplicateIdError as e:
        logger.warning("%s", e)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Comment with id: {comment.id} already exists in the database",
        ) from e
    return AckResponse(message=f"comment id: {comment.id} successfully added", status=status.HTTP_200_OK)
