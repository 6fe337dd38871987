"""
Post endpoints.

``POST /api/posts`` stores a new post and ``GET /api/posts/{post_id}``
returns one.  Successful lookups return the bare post; everything else
answers with the ``{message, status}`` envelope.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import ValidationError

from blog_api.app.api.deps import get_context, parse_body, parse_id
from blog_api.app.core.context import ApiContext
from blog_api.app.repositories import DuplicateIdError, NotFoundError
from blog_api.app.schemas.common import AckResponse
from blog_api.app.schemas.post import Post


logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/posts", response_model=AckResponse)
async def add_post(request: Request, context: ApiContext = Depends(get_context)) -> AckResponse:
    """Create a post.

    An undecodable payload is a 400; a duplicate id is reported as a
    500 carrying the repository's error text.
    """
    try:
        post = await parse_body(request, Post)
    except ValidationError as e:
        logger.warning("Rejected post payload (%d errors)", e.error_count())
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="400 Bad Request") from e
    try:
        context.posts.insert(post)
    except DuplicateIdError as e:
        logger.warning("%s", e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)) from e
    return AckResponse(message=f"post id: {post.id} successfully added", status=status.HTTP_200_OK)


@router.get("/posts/{post_id}", response_model=Post)
async def get_post(post_id: str, context: ApiContext = Depends(get_context)) -> Post:
    """Return a single post, or 404 if no post has this id."""
    pid = parse_id(post_id)
    try:
        return context.posts.get_by_id(pid)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Post with id: {pid} does not exist",
        ) from e
