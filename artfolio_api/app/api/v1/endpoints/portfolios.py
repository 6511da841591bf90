"""
Portfolio endpoints for API v1.

Upload, list, view and filter artwork listings.  Every listing
endpoint answers with a JSON array; "nothing found" is an empty array,
never a message string.
"""

from typing import List

from fastapi import APIRouter, Depends, Path, status

from artfolio_api.app.core.db import MAX_ID
from artfolio_api.app.core.security import get_current_member
from artfolio_api.app.schemas.portfolio import (
    PortfolioCreate,
    PortfolioDetail,
    PortfolioRead,
    PortfolioWithAuthor,
)
from artfolio_api.app.services.portfolio_service import PortfolioService


router = APIRouter()


@router.post("/addPortfolio", response_model=PortfolioRead, status_code=status.HTTP_201_CREATED)
async def add_portfolio(
    portfolio: PortfolioCreate,
    current_member: dict = Depends(get_current_member),
) -> PortfolioRead:
    """Upload a portfolio owned by the authenticated member.

    A title that is already used yields 409 ``conflict``.
    """
    return await PortfolioService.create_portfolio(portfolio, current_member)


@router.get("/allPortfolios", response_model=List[PortfolioRead])
async def list_portfolios() -> List[PortfolioRead]:
    return await PortfolioService.list_portfolios()


@router.get("/myPortfolios/{account_id}", response_model=List[PortfolioRead])
async def list_member_portfolios(account_id: int = Path(..., le=MAX_ID)) -> List[PortfolioRead]:
    """List the portfolios owned by a member (empty list if none)."""
    return await PortfolioService.list_member_portfolios(account_id)


@router.get("/portfoliosAndAuthors", response_model=List[PortfolioWithAuthor])
async def list_portfolios_with_authors() -> List[PortfolioWithAuthor]:
    """Public feed: every portfolio with its author's profile under ``authorInfo``."""
    return await PortfolioService.list_with_authors()


@router.get("/portfolioWithAuthor/{portfolio_id}", response_model=List[PortfolioDetail])
async def get_portfolio_with_author(portfolio_id: int = Path(..., le=MAX_ID)) -> List[PortfolioDetail]:
    """Detail view of one portfolio with author info and comments.

    The result is a single‑element array, the shape existing clients
    index into.  Unknown IDs yield 404 ``not_found``.
    """
    return [await PortfolioService.get_with_author(portfolio_id)]


@router.get(
    "/filterPortfolios/{min_price}/{max_price}/{category}",
    response_model=List[PortfolioWithAuthor],
)
async def filter_portfolios(min_price: float, max_price: float, category: str) -> List[PortfolioWithAuthor]:
    """Filter portfolios by price and category.

    - **min_price**, **max_price** — exclusive price bounds.
    - **category** — exact category, or ``all`` for any category.
    """
    return await PortfolioService.filter_portfolios(min_price, max_price, category)
