"""
Pydantic models for member data.

Defines schemas for registering members, logging in and reading
member profiles.  ``MemberRead`` is the public projection of a member
record; the stored password hash never appears in any response
schema.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class MemberBase(BaseModel):
    username: str = Field(..., max_length=50, examples=["yana"])
    email: str = Field(..., examples=["yana@example.com"])
    about: Optional[str] = Field(None, examples=["Oil painter from Wellington"])
    location: Optional[str] = Field(None, examples=["Wellington"])
    website: Optional[str] = Field(None, examples=["https://yana.art"])

    @field_validator("username", "email")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


class MemberCreate(MemberBase):
    """Schema for registering a member.

    No e‑mail format or password strength rules are applied; only
    presence of the required fields is checked.
    """

    password: str = Field(..., min_length=1, examples=["correct horse"])


class MemberLogin(BaseModel):
    """Credentials accepted by ``/loginMember``."""

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

    @field_validator("username")
    @classmethod
    def strip_username(cls, v: str) -> str:
        # Registration stores the stripped name.
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


class MemberRead(MemberBase):
    """Schema for reading a member from the API."""

    id: int

    model_config = {
        "from_attributes": True,
    }


class MemberSession(MemberRead):
    """Member profile returned on login together with its access token."""

    access_token: str
    token_type: str = "bearer"
