"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers (members, portfolios,
comments, info).  The endpoint paths are flat (``/registerMember``,
``/addPortfolio`` ...) because deployed clients call them by those
exact names, so no per‑domain prefix is applied.
"""

from fastapi import APIRouter

from .endpoints import comments, info, members, portfolios

router = APIRouter()

router.include_router(members.router, tags=["members"])
router.include_router(portfolios.router, tags=["portfolios"])
router.include_router(comments.router, tags=["comments"])
router.include_router(info.router, tags=["info"])
