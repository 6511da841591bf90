"""
Pydantic models for portfolio (artwork listing) data.

``PortfolioBase`` holds the listing fields shared by requests and
responses.  ``PortfolioWithAuthor`` adds the public fields of the
owning member under ``authorInfo`` for the feed and filter views, and
``PortfolioDetail`` further adds the comments posted on the listing.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from ..core.db import MAX_ID

from .comment import CommentRead


class PortfolioBase(BaseModel):
    title: str = Field(..., max_length=200, examples=["Harbour at dusk"])
    description: str = Field(..., examples=["Oil on canvas, 60x90"])
    image: str = Field(..., examples=["https://images.example.com/harbour.jpg"])
    category: str = Field(..., examples=["painting"])
    price: float = Field(..., ge=0, allow_inf_nan=False, examples=[25])

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }

    @field_validator("title", "description", "image", "category")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


class PortfolioCreate(PortfolioBase):
    """Schema for uploading a portfolio.

    The owner is taken from the access token.  ``memberId`` may still be
    sent by older clients; it must then match the authenticated member.
    """

    member_id: Optional[int] = Field(None, alias="memberId", le=MAX_ID)


class PortfolioRead(PortfolioBase):
    """Schema for reading a portfolio from the API."""

    id: int
    member_id: int = Field(..., alias="memberId")


class AuthorInfo(BaseModel):
    """Public profile fields of the member who owns a portfolio."""

    id: int
    username: str
    location: Optional[str] = None
    website: Optional[str] = None


class PortfolioWithAuthor(PortfolioRead):
    author_info: AuthorInfo = Field(..., alias="authorInfo")


class PortfolioDetail(PortfolioWithAuthor):
    comments: List[CommentRead] = Field(default_factory=list)
