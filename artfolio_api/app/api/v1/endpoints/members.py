"""
Member endpoints for API v1.

Provide registration, login, the member directory and the
authenticated "my account" lookup.  Paths keep the names existing
browser clients call (``/registerMember``, ``/loginMember`` ...).
"""

from typing import List

from fastapi import APIRouter, Depends, Path, status

from artfolio_api.app.core.db import MAX_ID
from artfolio_api.app.core.errors import Unauthorized
from artfolio_api.app.core.security import create_access_token, get_current_member
from artfolio_api.app.schemas.member import MemberCreate, MemberLogin, MemberRead, MemberSession
from artfolio_api.app.services.member_service import MemberService


router = APIRouter()


@router.post("/registerMember", response_model=MemberRead, status_code=status.HTTP_201_CREATED)
async def register_member(member: MemberCreate) -> MemberRead:
    """Register a new member.

    Returns the created member without its password.  A taken username
    yields 409 ``conflict``.
    """
    return await MemberService.register(member)


@router.post("/loginMember", response_model=MemberSession)
async def login_member(credentials: MemberLogin) -> MemberSession:
    """Check credentials and return the member with an access token.

    Unknown usernames yield 404 ``not_found``; a wrong password yields
    401 ``unauthorized``.  The token must be sent as
    ``Authorization: Bearer <token>`` on uploads, comments and account
    lookups.
    """
    member = await MemberService.authenticate(credentials.username, credentials.password)
    token = create_access_token({"sub": str(member.id)})
    return MemberSession(**member.model_dump(), access_token=token)


@router.get("/allMembers", response_model=List[MemberRead])
async def list_members() -> List[MemberRead]:
    return await MemberService.list_members()


@router.get("/myAccountInfo/{account_id}", response_model=MemberRead)
async def my_account_info(
    account_id: int = Path(..., le=MAX_ID),
    current_member: dict = Depends(get_current_member),
) -> MemberRead:
    """Return the profile of the authenticated member.

    Members may only read their own account through this endpoint.
    """
    if current_member["member_id"] != account_id:
        raise Unauthorized("Cannot read another member's account")
    return await MemberService.get_member(account_id)
