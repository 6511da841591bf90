"""
Pydantic schemas for portfolio comments.

Field names follow Python conventions while the wire format keeps the
camelCase keys browsers already send (``portfolioID``, ``postByID``,
``postByUsername``, ``postDate``).  Comments are stored as written;
clients must escape ``text`` when rendering it.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ..core.db import MAX_ID


class CommentCreate(BaseModel):
    """Schema for posting a comment.

    ``postByID`` and ``postByUsername`` are optional: the author is the
    authenticated member.  When they are sent they must name that
    member.  ``postDate`` accepts an ISO timestamp or milliseconds since
    the epoch and defaults to the time the server receives the post.
    """

    portfolio_id: int = Field(..., alias="portfolioID", le=MAX_ID)
    content: str = Field(..., description="Text of the comment")
    post_by_id: Optional[int] = Field(None, alias="postByID", le=MAX_ID)
    post_by_username: Optional[str] = Field(None, alias="postByUsername")
    post_date: Optional[datetime] = Field(None, alias="postDate")

    model_config = {
        "populate_by_name": True,
    }

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Comment must not be blank")
        return v


class CommentRead(BaseModel):
    id: int
    portfolio_id: int = Field(..., alias="portfolioID")
    post_by_id: int = Field(..., alias="postByID")
    post_by_username: str = Field(..., alias="postByUsername")
    posted: datetime
    text: str

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }
