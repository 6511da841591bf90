"""
Comment endpoints for API v1.

Comments are read through ``/portfolioWithAuthor/{id}``; this module
only handles posting.
"""

from fastapi import APIRouter, Depends, status

from artfolio_api.app.core.security import get_current_member
from artfolio_api.app.schemas.comment import CommentCreate, CommentRead
from artfolio_api.app.services.comment_service import CommentService


router = APIRouter()


@router.post("/addComment", response_model=CommentRead, status_code=status.HTTP_201_CREATED)
async def add_comment(
    comment: CommentCreate,
    current_member: dict = Depends(get_current_member),
) -> CommentRead:
    """Post a comment on a portfolio as the authenticated member."""
    return await CommentService.create_comment(comment, current_member)
